"""Table handler for GFM-style pipe tables.

Table structure:
| Header 1 | Header 2 |   <- header row
|:---------|---------:|   <- alignment row (required)
| Cell 1   | Cell 2   |   <- body rows

The dispatcher only calls in here after its one-line lookahead has seen the
alignment row, so the header and alignment row are known to be valid.
"""

from __future__ import annotations

from collections.abc import Sequence

from mdpage.nodes import Table, TableRow
from mdpage.parsing.lines import (
    is_alignment_row,
    is_table_row,
    parse_alignment_row,
    split_row,
)
from mdpage.utils.logger import get_logger

logger = get_logger(__name__)


def starts_table(lines: Sequence[str], index: int) -> bool:
    """Return True if a table header sits at ``index``.

    The line must be a table row (and not itself an alignment row) and the
    next line must be an alignment row. A lone pipe-containing line is not a
    table.
    """
    if index + 1 >= len(lines):
        return False
    line = lines[index]
    if not is_table_row(line) or is_alignment_row(line):
        return False
    return is_alignment_row(lines[index + 1])


def parse_table(lines: Sequence[str], start: int) -> tuple[Table, int]:
    """Consume a table whose header is at ``lines[start]``.

    Body rows are taken while they have the header's cell count. The first row
    with a different count, or the first line that is not a table row, ends
    the table and is left for the dispatcher to process again.

    A table carries exactly one alignment row. Separator rows after the first
    are consumed and ignored: they never re-align the rows below them.

    Args:
        lines: Document lines
        start: Index of the header row

    Returns:
        The table and the index of the first line after it
    """
    header = TableRow(cells=tuple(split_row(lines[start])))
    alignments = parse_alignment_row(lines[start + 1])
    columns = len(header.cells)

    body: list[TableRow] = []
    index = start + 2
    while index < len(lines):
        line = lines[index]
        if is_alignment_row(line):
            index += 1
            continue
        if not is_table_row(line):
            break

        cells = split_row(line)
        if len(cells) != columns:
            logger.debug(
                "Row at line %d has %d cells, header has %d; closing table",
                index + 1,
                len(cells),
                columns,
            )
            break

        body.append(TableRow(cells=tuple(cells)))
        index += 1

    return Table(header=header, alignments=alignments, body=tuple(body)), index
