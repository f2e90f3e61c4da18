"""File record dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Single regular file found during a walk.

    ``name`` is the path exactly as the filesystem returned it (or its
    canonical absolute form).  Bytes that are not valid UTF-8 are kept as
    surrogate escapes, so ``os.fsencode(name)`` always gives back the
    original bytes.
    """

    name: str
    extension: str | None
    size_bytes: int
    hidden: bool
