"""HTML fragment renderer.

Turns the block nodes yielded by the dispatcher into HTML fragments, one
fragment per block, joined with newlines in document order.

Escaping:
Literal text (code interiors and table cells) is escaped here exactly once.
Text handed to the generic renderer is escaped by that renderer.

Thread Safety:
The renderer holds only its configuration and the generic renderer. All
per-render state is local to render_blocks(), so one instance can be shared
across threads.
"""

from __future__ import annotations

from collections.abc import Iterable

from mdpage.config import ConvertConfig
from mdpage.nodes import (
    AlignmentRow,
    BlankLine,
    Block,
    CodeBlock,
    PlainLine,
    QuoteBlock,
    Table,
    TableRow,
)
from mdpage.parsing.dispatch import scan_blocks
from mdpage.renderers.protocol import TextRenderer
from mdpage.utils.text import escape_html

EMPTY_PARAGRAPH = "<p></p>"


def render_code_block(code: CodeBlock) -> str:
    """Render a fenced code block, interior whitespace untouched.

    Example:
        >>> render_code_block(CodeBlock(language="py", body=("  a < b",)))
        '<pre><code class="language-py">  a &lt; b</code></pre>'
    """
    lang_class = f' class="language-{escape_html(code.language)}"' if code.language else ""
    return f"<pre><code{lang_class}>{escape_html(code.code)}</code></pre>"


def render_table_row(row: TableRow, alignments: AlignmentRow, *, is_header: bool) -> str:
    """Render one table row on a single line.

    Cells past the end of the alignment row get no ``align`` attribute.
    """
    tag = "th" if is_header else "td"
    aligns = alignments.alignments

    parts = ["<tr>"]
    for i, cell in enumerate(row.cells):
        align = f' align="{aligns[i]}"' if i < len(aligns) else ""
        parts.append(f"<{tag}{align}>{escape_html(cell)}</{tag}>")
    parts.append("</tr>")
    return "".join(parts)


def render_table(table: Table) -> str:
    """Render a table with exactly one header row in ``<thead>``."""
    parts = [
        "<table>",
        "<thead>",
        render_table_row(table.header, table.alignments, is_header=True),
        "</thead>",
        "<tbody>",
    ]
    parts.extend(
        render_table_row(row, table.alignments, is_header=False) for row in table.body
    )
    parts.append("</tbody>")
    parts.append("</table>")
    return "\n".join(parts)


class HtmlRenderer:
    """Render block nodes to HTML fragments.

    Usage:
        >>> from mdpage.renderers.generic import MistuneRenderer
        >>> renderer = HtmlRenderer(MistuneRenderer())
        >>> print(renderer.render_lines(["| a |", "|:-:|", "| 1 |"]))
        <table>
        <thead>
        <tr><th align="center">a</th></tr>
        </thead>
        <tbody>
        <tr><td align="center">1</td></tr>
        </tbody>
        </table>

    """

    __slots__ = ("_config", "_generic")

    def __init__(self, generic: TextRenderer, config: ConvertConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            generic: Renderer for everything without special block handling
            config: Conversion flags (only ``recursive_quotes`` is read here)
        """
        self._generic = generic
        self._config = config or ConvertConfig()

    def render_lines(self, lines: list[str]) -> str:
        """Scan and render a list of lines."""
        return self.render_blocks(scan_blocks(lines))

    def render_blocks(self, blocks: Iterable[Block]) -> str:
        """Render blocks and join their fragments with newlines."""
        return "\n".join(self.render_block(block) for block in blocks)

    def render_block(self, block: Block) -> str:
        """Render a single block node to its fragment."""
        match block:
            case CodeBlock():
                return render_code_block(block)
            case Table():
                return render_table(block)
            case QuoteBlock():
                return self._render_quote(block)
            case BlankLine():
                return EMPTY_PARAGRAPH
            case PlainLine():
                return self._render_generic(block.text)
        raise TypeError(f"Unknown block node: {type(block).__name__}")

    def _render_generic(self, text: str) -> str:
        return self._generic.render(text).rstrip("\n")

    def _render_quote(self, quote: QuoteBlock) -> str:
        """Render a block quote.

        By default the dequoted text, with code blocks spliced in as literal
        ``<pre>`` HTML, goes to the generic renderer in one piece. With
        ``recursive_quotes`` the plain runs go back through the dispatcher.
        """
        if self._config.recursive_quotes:
            inner = self._render_quote_recursive(quote)
        else:
            text = "\n".join(
                render_code_block(item) if isinstance(item, CodeBlock) else item
                for item in quote.lines
            )
            inner = self._render_generic(text)
        return f"<blockquote>\n{inner}\n</blockquote>"

    def _render_quote_recursive(self, quote: QuoteBlock) -> str:
        fragments: list[str] = []
        run: list[str] = []
        for item in quote.lines:
            if isinstance(item, CodeBlock):
                if run:
                    fragments.append(self.render_lines(run))
                    run = []
                fragments.append(render_code_block(item))
            else:
                run.append(item)
        if run:
            fragments.append(self.render_lines(run))
        return "\n".join(fragments)
