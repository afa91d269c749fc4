"""mdpage: Markdown to standalone HTML pages.

A single forward pass over the document's lines recognizes three block
constructs itself and hands everything else to mistune:

- fenced code blocks, interior whitespace kept exactly
- pipe tables with per-column alignment
- block quotes, including fenced code and tables nested inside them

Quick Start:
    >>> from mdpage import convert_body
    >>> print(convert_body("| a | b |\\n|:---|---:|\\n| 1 | 2 |"))
    <table>
    <thead>
    <tr><th align="left">a</th><th align="right">b</th></tr>
    </thead>
    <tbody>
    <tr><td align="left">1</td><td align="right">2</td></tr>
    </tbody>
    </table>

    >>> # Whole page, ready to write to disk
    >>> from mdpage import convert
    >>> page = convert("# Notes", title="Notes")

    >>> # Reusable converter with explicit configuration
    >>> from mdpage import Converter, ConvertConfig
    >>> converter = Converter(ConvertConfig(recursive_quotes=True))
    >>> html = converter("> ```sh\\n> make\\n> ```")

Command line:
    mdpage notes.md --output site/
"""

from collections.abc import Iterable
from pathlib import Path

from mdpage.config import AppConfig, ConvertConfig, load_config
from mdpage.errors import ConfigError, MdpageError, OutputError
from mdpage.nodes import (
    Alignment,
    AlignmentRow,
    BlankLine,
    Block,
    CodeBlock,
    PlainLine,
    QuoteBlock,
    Table,
    TableRow,
)
from mdpage.page import wrap_page
from mdpage.parsing import scan_blocks, split_lines
from mdpage.renderers.generic import MistuneRenderer
from mdpage.renderers.html import HtmlRenderer
from mdpage.renderers.protocol import TextRenderer
from mdpage.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


class Converter:
    """Markdown to HTML converter.

    Usage:
        >>> converter = Converter()
        >>> page = converter("Hello **World**")
        >>> converter.render_body("Hello **World**")
        '<p>Hello <strong>World</strong></p>'

        >>> # Inject another generic renderer
        >>> converter = Converter(renderer=my_commonmark_renderer)

    Thread Safety:
        Holds only immutable configuration and a thread-safe generic
        renderer. Each call scans with its own local cursor, so one instance
        may convert documents from several threads at once.

    """

    __slots__ = ("_config", "_html")

    def __init__(
        self,
        config: ConvertConfig | None = None,
        *,
        renderer: TextRenderer | None = None,
    ) -> None:
        """Initialize converter.

        Args:
            config: Conversion flags (defaults to ConvertConfig())
            renderer: Generic renderer; a MistuneRenderer built from config
                when omitted
        """
        self._config = config or ConvertConfig()
        generic = renderer if renderer is not None else MistuneRenderer(self._config)
        self._html = HtmlRenderer(generic, self._config)

    @property
    def config(self) -> ConvertConfig:
        return self._config

    def __call__(self, source: str, *, title: str | None = None) -> str:
        """Convert Markdown source to a complete HTML page.

        Args:
            source: Markdown source text
            title: Optional page title

        Returns:
            ``<!DOCTYPE html>`` document
        """
        return wrap_page(
            self.render_body(source),
            title=title,
            highlight=self._config.highlight,
        )

    def render_body(self, source: str) -> str:
        """Convert Markdown source to the HTML body only."""
        return self.render_blocks(scan_blocks(split_lines(source)))

    def render_blocks(self, blocks: Iterable[Block]) -> str:
        """Render already-scanned blocks to the HTML body."""
        return self._html.render_blocks(blocks)

    def convert_file(self, path: str | Path, output_dir: str | Path) -> Path:
        """Convert a Markdown file and write ``<stem>.html`` to output_dir.

        The output directory is created if needed.

        Args:
            path: Markdown file to read (UTF-8)
            output_dir: Directory for the HTML page

        Returns:
            Path of the written HTML file

        Raises:
            OutputError: If the input cannot be read or the output cannot be
                written
        """
        path = Path(path)
        output_dir = Path(output_dir)

        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise OutputError(f"cannot read input: {e}", path) from e

        page = self(source, title=path.stem)
        target = output_dir / f"{path.stem}.html"

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(page, encoding="utf-8")
        except OSError as e:
            raise OutputError(f"cannot write output: {e.strerror or e}", target) from e

        logger.debug("Wrote %s (%d bytes)", target, len(page))
        return target


def convert(
    source: str,
    config: ConvertConfig | None = None,
    *,
    title: str | None = None,
) -> str:
    """Convert Markdown source to a complete HTML page.

    Args:
        source: Markdown source text
        config: Conversion flags (defaults to ConvertConfig())
        title: Optional page title

    Returns:
        ``<!DOCTYPE html>`` document

    Thread Safety:
        Builds its own Converter per call. Safe for concurrent use.
    """
    return Converter(config)(source, title=title)


def convert_body(source: str, config: ConvertConfig | None = None) -> str:
    """Convert Markdown source to the HTML body (fragments joined by newlines).

    Example:
        >>> convert_body("```\\n  x\\n```")
        '<pre><code>  x</code></pre>'
    """
    return Converter(config).render_body(source)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "convert",
    "convert_body",
    "Converter",
    "scan_blocks",
    "split_lines",
    # Block nodes
    "Alignment",
    "AlignmentRow",
    "BlankLine",
    "Block",
    "CodeBlock",
    "PlainLine",
    "QuoteBlock",
    "Table",
    "TableRow",
    # Renderers
    "HtmlRenderer",
    "MistuneRenderer",
    "TextRenderer",
    "wrap_page",
    # Configuration
    "AppConfig",
    "ConvertConfig",
    "load_config",
    # Errors
    "ConfigError",
    "MdpageError",
    "OutputError",
]
