"""Turn a single file path into a FileRecord."""

from __future__ import annotations

import logging
import os

from lff.errors import EntryError
from lff.models.file_record import FileRecord
from lff.models.traversal_config import TraversalConfig
from lff.utils import quote_name

log = logging.getLogger(__name__)


def path_is_hidden(path: str) -> bool:
    """Return whether the final segment of *path* starts with a '.'.

    A name that is not valid text is never hidden, since its first
    character cannot be inspected.  Paths without a final segment (such as
    ``..`` or ``/``) are not hidden either.
    """
    name = os.path.basename(path)
    if name in ("", ".", ".."):
        return False
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return name.startswith(".")


def path_extension(path: str) -> str | None:
    """Return the text after the last '.' in the final segment of *path*.

    A leading dot does not start an extension, so ``.hidden`` has none
    while ``archive.tar.gz`` has ``gz`` and ``notes.`` has ``""``.
    """
    name = os.path.basename(path)
    if name == "..":
        return None
    idx = name.rfind(".")
    if idx <= 0:
        return None
    return name[idx + 1:]


def inspect_entry(path: str, config: TraversalConfig) -> FileRecord:
    """Build a FileRecord for the regular file at *path*.

    Only reads metadata; symlinks are never followed for the size.

    Raises:
        EntryError: If the absolute path or the metadata cannot be
            retrieved, e.g. because the file vanished mid-walk.
    """
    if config.absolute:
        try:
            name = os.path.realpath(path, strict=True)
        except OSError as exc:
            raise EntryError(f"Could not generate absolute path for {quote_name(path)}", path) from exc
    else:
        name = path

    try:
        size = os.lstat(path).st_size
    except OSError as exc:
        raise EntryError(f"Could not retrieve metadata for {quote_name(path)}", path) from exc

    return FileRecord(
        name=name,
        extension=path_extension(path),
        size_bytes=size,
        hidden=path_is_hidden(path),
    )
