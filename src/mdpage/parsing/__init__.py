"""Block-structure parsing for mdpage.

Turns document lines into typed block nodes:
- dispatch: the forward scan and handler routing
- blocks: code, table and quote handlers
- lines: row, alignment, fence and quote predicates

"""

from mdpage.parsing.dispatch import scan_blocks, split_lines

__all__ = [
    "scan_blocks",
    "split_lines",
]
