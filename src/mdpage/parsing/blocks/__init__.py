"""Block handlers for mdpage.

Each handler is a pure function ``(lines, index) -> (node, next_index)``:
- code: fenced code blocks, kept verbatim
- table: pipe tables with per-column alignment
- quote: block quotes with nested fenced code extracted

"""

from mdpage.parsing.blocks.code import parse_code_block
from mdpage.parsing.blocks.quote import parse_quote
from mdpage.parsing.blocks.table import parse_table, starts_table

__all__ = [
    "parse_code_block",
    "parse_quote",
    "parse_table",
    "starts_table",
]
