"""TextRenderer protocol: the interface of the generic Markdown renderer.

Anything with ``render(text) -> str`` can stand in for the default mistune
adapter, e.g. in tests or to swap in another CommonMark implementation.

Example:
    from mdpage import Converter

    class Upper:
        def render(self, text: str) -> str:
            return f"<p>{text.upper()}</p>"

    Converter(renderer=Upper())("hello")

"""

from typing import Protocol


class TextRenderer(Protocol):
    """Protocol for generic Markdown renderers.

    Contract:
        - Input is a fragment of Markdown text (one line, or a dequoted quote
          interior that may contain raw HTML blocks).
        - Output is an HTML string.
        - Implementations must be safe to call from several threads.

    """

    def render(self, text: str) -> str:
        """Render a Markdown fragment to HTML.

        Args:
            text: Markdown source fragment

        Returns:
            HTML string
        """
        ...
