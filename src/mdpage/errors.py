"""Exception classes for mdpage.

The block parser itself never raises for malformed Markdown; these errors
belong to the collaborators around it (configuration and file I/O).
"""

from __future__ import annotations

from pathlib import Path


class MdpageError(Exception):
    """Base exception for all mdpage errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MdpageError):
    """Configuration file could not be read or understood.

    Raised for unreadable files, invalid JSON and JSON that is not an object.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            path: Path of the offending config file (optional)
        """
        self.message = message
        self.path = str(path) if path is not None else None

        location = f"{self.path}: " if self.path else ""
        super().__init__(f"{location}{message}")


class OutputError(MdpageError):
    """Reading a source document or writing its HTML page failed."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        """Initialize output error.

        Args:
            message: Description of the I/O failure
            path: File the failure relates to (optional)
        """
        self.message = message
        self.path = str(path) if path is not None else None

        location = f"{self.path}: " if self.path else ""
        super().__init__(f"{location}{message}")
