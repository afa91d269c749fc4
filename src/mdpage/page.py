"""Static page shell wrapped around a rendered body.

The shell is fixed: a UTF-8 head, an optional title, highlight.js (loaded from
cdnjs, highlighting runs in the browser) and an embedded style sheet for
tables, quotes and code blocks.
"""

from __future__ import annotations

from mdpage.utils.text import escape_html

HIGHLIGHT_JS_VERSION = "11.9.0"
_HIGHLIGHT_JS_BASE = f"https://cdnjs.cloudflare.com/ajax/libs/highlight.js/{HIGHLIGHT_JS_VERSION}"

STYLE_SHEET = """\
body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
    line-height: 1.6;
    padding: 20px;
    max-width: 800px;
    margin: 0 auto;
}
table {
    border-collapse: separate;
    border-spacing: 0;
    width: 100%;
    margin: 1em 0;
    border: 1px solid #ddd;
}
th, td {
    border: 1px solid #ddd;
    padding: 8px;
    white-space: normal;
    overflow-wrap: break-word;
}
th {
    background-color: #f8f9fa;
    font-weight: bold;
    border-bottom: 2px solid #ddd;
}
tr:nth-child(even) {
    background-color: #f8f9fa;
}
[align="center"] {
    text-align: center;
}
[align="right"] {
    text-align: right;
}
[align="left"] {
    text-align: left;
}
blockquote {
    margin: 1em 0;
    padding: 0.5em 1em;
    border-left: 4px solid #ddd;
    background-color: #f9f9f9;
}
blockquote > :first-child {
    margin-top: 0;
}
blockquote > :last-child {
    margin-bottom: 0;
}
blockquote pre {
    background-color: #f0f0f0;
    margin: 0.5em 0;
}
blockquote table {
    margin: 0.5em 0;
    background-color: #fff;
}
pre {
    background-color: #f5f5f5;
    border: 1px solid #ddd;
    border-radius: 4px;
    padding: 1em;
    margin: 1em 0;
    overflow-x: auto;
    white-space: pre;
}
pre code {
    background: none;
    padding: 0;
    font-family: "SFMono-Regular", Consolas, "Liberation Mono", Menlo, Courier, monospace;
    font-size: 0.9em;
    line-height: 1.4;
    tab-size: 4;
}
img {
    max-width: 100%;
    height: auto;
    display: block;
    margin: 1em auto;
    border-radius: 4px;
}
"""


def _head(title: str | None, highlight: bool) -> list[str]:
    parts = ['<meta charset="UTF-8">']
    if title:
        parts.append(f"<title>{escape_html(title)}</title>")
    if highlight:
        parts.append(f'<link rel="stylesheet" href="{_HIGHLIGHT_JS_BASE}/styles/default.min.css">')
        parts.append(f'<script src="{_HIGHLIGHT_JS_BASE}/highlight.min.js"></script>')
        parts.append("<script>hljs.highlightAll();</script>")
    parts.append(f"<style>\n{STYLE_SHEET}</style>")
    return parts


def wrap_page(body: str, *, title: str | None = None, highlight: bool = True) -> str:
    """Wrap an HTML body in the page shell.

    Args:
        body: Rendered HTML body (fragments joined by newlines)
        title: Optional page title, escaped
        highlight: Include the highlight.js stylesheet and script

    Returns:
        A complete ``<!DOCTYPE html>`` document
    """
    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            *_head(title, highlight),
            "</head>",
            "<body>",
            body,
            "</body>",
            "</html>",
        ]
    )
