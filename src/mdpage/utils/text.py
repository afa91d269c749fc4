"""Text escaping for literal values embedded in HTML."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts ``&``, ``<``, ``>``, ``"`` and ``'`` to entities. Whitespace,
    including newlines and runs of spaces, is left untouched so code block
    interiors keep their layout.

    Examples:
        >>> escape_html("<b>'x' & \\"y\\"</b>")
        '&lt;b&gt;&#x27;x&#x27; &amp; &quot;y&quot;&lt;/b&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
