"""Block dispatcher: the single forward pass over document lines.

At each index the dispatcher decides which handler owns the upcoming lines,
hands them over, and resumes at the index the handler returns. Decision order:

1. Fence               -> code handler
2. Table row followed
   by an alignment row -> table handler (one-line lookahead)
3. Stray alignment row -> skipped
4. Quote marker        -> quote handler
5. Blank line          -> BlankLine
6. Anything else       -> PlainLine for the generic renderer

A blank line is empty or whitespace-only. That includes a lone ``\\r`` left
by CRLF input: such lines render as an empty paragraph instead of going to
the generic renderer.

Thread Safety:
The cursor is a local variable of each call; nothing is shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from mdpage.nodes import BlankLine, Block, PlainLine
from mdpage.parsing.blocks import parse_code_block, parse_quote, parse_table, starts_table
from mdpage.parsing.lines import is_alignment_row, is_fence, is_quote_line
from mdpage.utils.logger import get_logger

logger = get_logger(__name__)


def split_lines(source: str) -> list[str]:
    """Split a document into lines on ``\\n`` only."""
    return source.split("\n")


def scan_blocks(lines: Sequence[str], start: int = 0) -> Iterator[Block]:
    """Yield block nodes for ``lines`` in document order.

    Args:
        lines: Document lines
        start: Index to start scanning from

    Yields:
        One node per recognized block
    """
    index = start
    total = len(lines)

    while index < total:
        line = lines[index]

        if is_fence(line):
            block, index = parse_code_block(lines, index)
            yield block
        elif starts_table(lines, index):
            block, index = parse_table(lines, index)
            yield block
        elif is_alignment_row(line):
            # No header above it: drop the line
            logger.debug("Skipping alignment row without header at line %d", index + 1)
            index += 1
        elif is_quote_line(line):
            block, index = parse_quote(lines, index)
            yield block
        elif not line.strip():
            yield BlankLine()
            index += 1
        else:
            yield PlainLine(text=line)
            index += 1
