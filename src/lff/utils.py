"""Shared utility functions."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from lff.models.file_record import FileRecord

log = logging.getLogger(__name__)

NO_FILES_FOUND = "No files found for the specified arguments!"

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
_DECIMAL_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")

_BYTE_ESCAPES = (
    (b"\\", b"\\\\"),
    (b'"', b'\\"'),
    (b"\n", b"\\n"),
    (b"\r", b"\\r"),
    (b"\t", b"\\t"),
)


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def format_size(size_bytes: int, *, pretty: bool = False, base_ten: bool = False) -> str:
    """Format a byte count for display.

    Without ``pretty`` this is just the integer.  Otherwise the size is
    abbreviated, e.g. ``544 B``, ``1.16 KiB`` or, with ``base_ten``,
    ``1.18 KB``.  Precision drops as the leading number grows: two decimals
    below 10, one below 100, none above.
    """
    if not pretty:
        return str(size_bytes)

    step = 1000 if base_ten else 1024
    units = _DECIMAL_UNITS if base_ten else _BINARY_UNITS
    if size_bytes < step:
        return f"{size_bytes} B"

    value = float(size_bytes)
    unit = units[0]
    for unit in units[1:]:
        value /= step
        if value < step:
            break

    if value < 10:
        return f"{value:.2f} {unit}"
    if value < 100:
        return f"{value:.1f} {unit}"
    return f"{value:.0f} {unit}"


def quote_name(name: str) -> str:
    """Return *name* double-quoted with quotes, backslashes and control
    characters escaped.

    Bytes that do not form valid UTF-8 are shown as ``\\xNN`` escapes
    instead of failing on output.
    """
    raw = os.fsencode(name)
    for plain, escaped in _BYTE_ESCAPES:
        raw = raw.replace(plain, escaped)
    return '"' + raw.decode("utf-8", "backslashreplace") + '"'


def format_listing(
    records: Iterable[FileRecord],
    *,
    pretty: bool = False,
    base_ten: bool = False,
) -> list[str]:
    """Render records as ``<size>  <name>`` lines with sizes left-aligned.

    Returns the single "no files found" line when there is nothing to show.
    """
    rows = [(format_size(r.size_bytes, pretty=pretty, base_ten=base_ten), r.name) for r in records]
    if not rows:
        return [NO_FILES_FOUND]

    width = max(len(size) for size, _ in rows)
    return [f"{size:<{width}}  {quote_name(name)}" for size, name in rows]


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
