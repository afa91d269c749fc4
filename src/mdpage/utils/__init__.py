"""Utility modules for mdpage.

Provides:
- text: escape_html for literal text embedded in HTML
- logger: get_logger for namespaced logging
"""

from mdpage.utils.logger import get_logger
from mdpage.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
