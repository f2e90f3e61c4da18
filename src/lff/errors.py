"""Errors raised while finding files.

Every error carries the offending path or pattern in its message.  The
underlying ``OSError`` (if any) is chained as ``__cause__`` and is shown to
the user as the "Caused by" line.
"""

from __future__ import annotations


class LffError(Exception):
    """Base class for all fatal lff errors."""


class StartDirectoryError(LffError):
    """Raised when the directory to start searching in cannot be opened."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Invalid supplied start directory: '{directory}'")
        self.directory = directory


class EntryError(LffError):
    """Raised when a single directory entry cannot be inspected."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class InvalidPatternError(LffError):
    """Raised when the name pattern is not a valid glob."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Invalid glob from name pattern flag: '{pattern}'")
        self.pattern = pattern
