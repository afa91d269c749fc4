"""Typed block nodes produced by the block dispatcher.

All nodes are frozen dataclasses with slots, so a scanned document can be
shared across threads and matched with ``match`` statements in the renderer.

Node Hierarchy:
Block
├── CodeBlock     fenced code, body kept verbatim
├── Table         header row, alignment row, body rows
├── QuoteBlock    dequoted lines with nested code blocks extracted
├── PlainLine     single line handed to the generic renderer
└── BlankLine     empty line, rendered as an empty paragraph

Cell text and code bodies are stored unescaped; escaping happens once, in the
renderer.
"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

Alignment: TypeAlias = Literal["left", "center", "right"]


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block.

    Markdown:
        ```python
            indented = True
        ```

    HTML: <pre><code class="language-python">    indented = True</code></pre>

    """

    language: str
    body: tuple[str, ...]

    @property
    def code(self) -> str:
        """Interior text with the original line breaks."""
        return "\n".join(self.body)


@dataclass(frozen=True, slots=True)
class TableRow:
    """Pipe-delimited row, cells trimmed."""

    cells: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AlignmentRow:
    """Separator row under a table header.

    Markdown: |:---|:---:|---:|
    """

    alignments: tuple[Alignment, ...]


@dataclass(frozen=True, slots=True)
class Table:
    """GFM-style table.

    Markdown:
        | A | B |
        |:--|--:|
        | 1 | 2 |

    Every body row has exactly ``len(header.cells)`` cells.

    """

    header: TableRow
    alignments: AlignmentRow
    body: tuple[TableRow, ...]

    @property
    def column_count(self) -> int:
        return len(self.header.cells)


@dataclass(frozen=True, slots=True)
class QuoteBlock:
    """Run of ``>``-prefixed lines.

    ``lines`` holds the dequoted text; fenced code inside the quote has already
    been pulled out into CodeBlock entries, in document order.

    """

    lines: tuple[str | CodeBlock, ...]


@dataclass(frozen=True, slots=True)
class PlainLine:
    """A line with no special block structure."""

    text: str


@dataclass(frozen=True, slots=True)
class BlankLine:
    """An empty or whitespace-only line."""


Block: TypeAlias = CodeBlock | Table | QuoteBlock | PlainLine | BlankLine
