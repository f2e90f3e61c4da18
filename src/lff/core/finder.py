"""Find, sort and limit files under a directory."""

from __future__ import annotations

import logging
import os
import time

from lff.core.walker import TreeWalker
from lff.models.file_record import FileRecord
from lff.models.traversal_config import SortMethod, TraversalConfig
from lff.utils import format_elapsed

log = logging.getLogger(__name__)


def sort_records(records: list[FileRecord], sort_method: SortMethod | None) -> list[FileRecord]:
    """Return *records* ordered by *sort_method*.

    Sizes sort largest first.  Names sort by their filesystem bytes, so
    undecodable names order the same way the OS would list them.
    """
    match sort_method:
        case SortMethod.SIZE:
            return sorted(records, key=lambda r: r.size_bytes, reverse=True)
        case SortMethod.NAME:
            return sorted(records, key=lambda r: os.fsencode(r.name))
        case _:
            return list(records)


def find_files(
    directory: str,
    config: TraversalConfig,
    max_workers: int | None = None,
) -> list[FileRecord]:
    """Walk *directory* and return the matching files, sorted and limited.

    The limit is applied after sorting, so a sorted result holds the true
    top ``limit`` files.  Unsorted results hold any ``limit`` matches.

    Raises:
        LffError: If the walk fails; see TreeWalker.walk.
    """
    start = time.monotonic()
    records = TreeWalker(config, max_workers=max_workers).walk(directory)
    log.debug(
        "Walked %s in %s: %d matching file(s)",
        directory,
        format_elapsed(time.monotonic() - start),
        len(records),
    )

    records = sort_records(records, config.sort_method)
    if config.limit is not None:
        records = records[: config.limit]
    return records
