"""Line classification helpers shared by the block handlers.

Every predicate here looks at a single raw line. Nothing is escaped and
nothing is consumed; the handlers decide what to do with the answers.

Table rows:
    | a | b |       leading/trailing pipes optional
    a | b
Alignment rows:
    |:---|:---:|---:|
Fences:
    ```python
Quotes:
    > quoted text
"""

from __future__ import annotations

from mdpage.nodes import Alignment, AlignmentRow

FENCE = "```"
QUOTE_MARKER = ">"


# =============================================================================
# Fences
# =============================================================================


def is_fence(line: str) -> bool:
    """Return True if the trimmed line opens or closes a code fence."""
    return line.strip().startswith(FENCE)


def fence_language(line: str) -> str:
    """Extract the language tag from an opening fence.

    The whole info string after the backticks, trimmed.

    Examples:
        >>> fence_language("```python")
        'python'
        >>> fence_language("  ```` js title=demo")
        'js title=demo'
        >>> fence_language("```")
        ''
    """
    return line.strip().lstrip("`").strip()


# =============================================================================
# Quotes
# =============================================================================


def is_quote_line(line: str) -> bool:
    """Return True if the trimmed line starts with the quote marker."""
    return line.strip().startswith(QUOTE_MARKER)


def dequote(line: str) -> str:
    """Strip the quote marker and at most one following space.

    Further leading spaces are kept so indented code inside a quote keeps its
    indentation.

    Examples:
        >>> dequote("> text")
        'text'
        >>> dequote(">     code")
        '    code'
        >>> dequote(">")
        ''
    """
    text = line.lstrip()
    if text.startswith(QUOTE_MARKER):
        text = text[1:]
    if text.startswith(" "):
        text = text[1:]
    return text


# =============================================================================
# Table rows
# =============================================================================


def split_row(line: str) -> list[str]:
    """Split a pipe-delimited line into trimmed cells.

    One leading and one trailing pipe are removed before splitting.

    Examples:
        >>> split_row("| a | b |")
        ['a', 'b']
        >>> split_row("a|b")
        ['a', 'b']
        >>> split_row("| a | |")
        ['a', '']
    """
    line = line.strip()

    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|"):
        line = line[:-1]

    return [cell.strip() for cell in line.split("|")]


def is_table_row(line: str) -> bool:
    """Return True for a line with a pipe and at least one non-empty cell."""
    if "|" not in line:
        return False
    return any(split_row(line))


def is_alignment_cell(cell: str) -> bool:
    """Return True if a cell is dashes with optional colons at either end.

    Examples:
        >>> is_alignment_cell(":---:")
        True
        >>> is_alignment_cell("-")
        True
        >>> is_alignment_cell(":")
        False
        >>> is_alignment_cell("-x-")
        False
    """
    inner = cell.strip().strip(":").strip()
    if not inner:
        return False
    return all(ch == "-" for ch in inner)


def is_alignment_row(line: str) -> bool:
    """Return True if every non-empty cell of the line is an alignment cell.

    The line must contain at least one pipe and one dash.
    """
    line = line.strip()
    if "|" not in line or "-" not in line:
        return False

    for cell in split_row(line):
        if not cell:
            continue
        if not is_alignment_cell(cell):
            return False

    return True


def cell_alignment(cell: str) -> Alignment:
    """Map one alignment cell to its column alignment.

    ``:---`` is left, ``:---:`` is center, ``---:`` is right and a cell with no
    colon (or an empty cell) defaults to left.

    Examples:
        >>> cell_alignment(":---:")
        'center'
        >>> cell_alignment("---:")
        'right'
        >>> cell_alignment(":---")
        'left'
        >>> cell_alignment("")
        'left'
    """
    cell = cell.strip()
    has_left = cell.startswith(":")
    has_right = cell.endswith(":") and len(cell) > 1

    if has_left and has_right:
        return "center"
    if has_right:
        return "right"
    return "left"


def parse_alignment_row(line: str) -> AlignmentRow:
    """Derive per-column alignments from a separator line."""
    return AlignmentRow(alignments=tuple(cell_alignment(cell) for cell in split_row(line)))
