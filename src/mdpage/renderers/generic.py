"""mistune adapter for the generic Markdown renderer.

Everything the block dispatcher does not handle itself (headings, emphasis,
links, lists, paragraphs, and the interior of quotes) goes through here.
"""

from __future__ import annotations

import mistune

from mdpage.config import ConvertConfig


class MistuneRenderer:
    """Render Markdown fragments with mistune.

    Usage:
        >>> renderer = MistuneRenderer()
        >>> renderer.render("Hello **World**")
        '<p>Hello <strong>World</strong></p>\\n'

    Thread Safety:
        mistune keeps per-parse state in a fresh BlockState for every call,
        so one instance may be shared across threads.
    """

    __slots__ = ("_markdown",)

    def __init__(self, config: ConvertConfig | None = None) -> None:
        """Initialize the adapter.

        Args:
            config: Conversion flags (plugins, escape, hard_wrap)
        """
        config = config or ConvertConfig()
        self._markdown = mistune.create_markdown(
            escape=config.escape,
            hard_wrap=config.hard_wrap,
            plugins=list(config.plugins),
        )

    def render(self, text: str) -> str:
        """Render a Markdown fragment to HTML."""
        return self._markdown(text)
