"""Logging helpers for mdpage.

Example:
    >>> from mdpage.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %d lines", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``mdpage``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("cli").name
        'mdpage.cli'
    """
    if not (name == "mdpage" or name.startswith("mdpage.")):
        name = f"mdpage.{name}"
    return logging.getLogger(name)
