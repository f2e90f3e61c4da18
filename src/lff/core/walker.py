"""Parallel recursive directory walker."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field

from lff.core.inspector import inspect_entry, path_is_hidden
from lff.core.pattern import NameMatcher, compile_name_pattern
from lff.errors import EntryError, LffError, StartDirectoryError
from lff.models.file_record import FileRecord
from lff.models.traversal_config import TraversalConfig
from lff.utils import quote_name

log = logging.getLogger(__name__)


@dataclass(slots=True)
class _Fragment:
    """What one directory task contributes to the walk."""

    records: list[FileRecord] = field(default_factory=list)
    subdirectories: list[str] = field(default_factory=list)


class TreeWalker:
    """Recursively collects the files under a directory that pass the
    configured filters.

    Each directory is enumerated by its own task on a thread pool, so
    sibling subtrees are walked concurrently.  A task returns its matches
    and the subdirectories it found; only the calling thread merges those
    fragments and schedules further descent, so no result list is shared
    between workers.

    Errors follow "first observed wins": once a task fails, no new
    directories are scheduled, already running tasks finish, and their
    results are dropped.

    With a limit and no sort order the walk stops early once ``limit``
    matches exist.  This is best effort: concurrent tasks may still add a
    few more records, so callers must truncate the merged result.

    A walker keeps per-walk state and must not run two walks at once.
    """

    def __init__(self, config: TraversalConfig, max_workers: int | None = None) -> None:
        self.config = config
        self._max_workers = max_workers
        self._matches_name: NameMatcher | None = None
        if config.name_pattern is not None:
            self._matches_name = compile_name_pattern(config.name_pattern)
        self._lock = threading.Lock()
        self._found = 0

    def walk(self, directory: str) -> list[FileRecord]:
        """Walk *directory* and return every matching file, unordered.

        Subdirectories that cannot be opened are skipped silently.

        Raises:
            StartDirectoryError: If *directory* itself cannot be opened.
            EntryError: If any file's metadata cannot be read.
        """
        try:
            root = os.scandir(directory)
        except OSError as exc:
            raise StartDirectoryError(directory) from exc

        self._found = 0
        records: list[FileRecord] = []
        error: LffError | None = None

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            pending: set[Future[_Fragment]] = {executor.submit(self._scan_directory, directory, root)}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    try:
                        fragment = future.result()
                    except LffError as exc:
                        if error is None:
                            log.debug("Walk failed, waiting for %d running task(s)", len(pending))
                            error = exc
                        continue
                    if error is not None:
                        continue
                    records.extend(fragment.records)
                    for subdirectory in fragment.subdirectories:
                        if self._limit_reached():
                            break
                        pending.add(executor.submit(self._scan_directory, subdirectory))

        if error is not None:
            raise error
        return records

    def _scan_directory(self, path: str, entries: os.ScandirIterator | None = None) -> _Fragment:
        """Enumerate one directory, filtering its files."""
        fragment = _Fragment()
        if entries is None:
            try:
                entries = os.scandir(path)
            except OSError as exc:
                log.debug("Skipping unreadable directory %s: %s", path, exc)
                return fragment

        with entries:
            try:
                for entry in entries:
                    if self._limit_reached():
                        break
                    self._handle_entry(entry, fragment)
            except OSError as exc:
                raise EntryError(f"Could not read entries of {quote_name(path)}", path) from exc
        return fragment

    def _handle_entry(self, entry: os.DirEntry, fragment: _Fragment) -> None:
        try:
            is_file = entry.is_file(follow_symlinks=False)
            is_dir = not is_file and entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise EntryError(f"Could not determine file type for {quote_name(entry.path)}", entry.path) from exc

        if is_file:
            record = inspect_entry(entry.path, self.config)
            if self._accepts(record):
                fragment.records.append(record)
                with self._lock:
                    self._found += 1
        elif is_dir:
            if self.config.exclude_hidden and path_is_hidden(entry.path):
                log.debug("Skipping hidden directory %s", entry.path)
            else:
                fragment.subdirectories.append(entry.path)
        # Sockets, devices, FIFOs and symlinks contribute nothing.

    def _accepts(self, record: FileRecord) -> bool:
        """Return whether *record* passes every active filter."""
        config = self.config
        if record.size_bytes < config.min_size_bytes:
            return False
        if config.extension is not None and record.extension != config.extension:
            return False
        if self._matches_name is not None and not self._matches_name(record.name):
            return False
        if config.exclude_hidden and record.hidden:
            return False
        return True

    def _limit_reached(self) -> bool:
        return self.config.early_exit and self._found >= self.config.limit


def walk(directory: str, config: TraversalConfig, max_workers: int | None = None) -> list[FileRecord]:
    """Walk *directory* with a fresh TreeWalker; see TreeWalker.walk."""
    return TreeWalker(config, max_workers=max_workers).walk(directory)
