"""Renderers for mdpage.

- html: block nodes to HTML fragments
- generic: mistune adapter for everything else
- protocol: the TextRenderer interface the adapter satisfies
"""

from mdpage.renderers.generic import MistuneRenderer
from mdpage.renderers.html import HtmlRenderer, render_code_block, render_table
from mdpage.renderers.protocol import TextRenderer

__all__ = [
    "HtmlRenderer",
    "MistuneRenderer",
    "TextRenderer",
    "render_code_block",
    "render_table",
]
