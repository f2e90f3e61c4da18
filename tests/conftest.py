"""Shared test fixtures."""

from __future__ import annotations

import os
import stat

import pytest

# Mirrors the layout the walker tests were written against:
#   .hidden                   0 bytes
#   .hidden_dir/spider.txt 1183 bytes
#   LICENCE                  27 bytes
#   snow.txt                544 bytes
#   visible/mud.md          329 bytes
SAMPLE_FILES = {
    ".hidden": 0,
    ".hidden_dir/spider.txt": 1183,
    "LICENCE": 27,
    "snow.txt": 544,
    "visible/mud.md": 329,
}


def _make_tree(root, files: dict[str, int]) -> None:
    """Create *files* (relative path -> size in bytes) under *root*."""
    for rel, size in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)


@pytest.fixture
def sample_tree(tmp_path, monkeypatch):
    """Create ``test_resources`` in a temp dir and chdir next to it.

    Returns the relative root name so paths in results stay relative.
    """
    _make_tree(tmp_path / "test_resources", SAMPLE_FILES)
    monkeypatch.chdir(tmp_path)
    return "test_resources"


@pytest.fixture
def locked_dir(tmp_path):
    """Factory for a directory with no permissions, restored on teardown."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks do not apply to root")

    created = []

    def _lock(path):
        path.mkdir(parents=True, exist_ok=True)
        (path / "secret.bin").write_bytes(b"s" * 4096)
        path.chmod(0)
        created.append(path)
        return path

    yield _lock

    for path in created:
        path.chmod(stat.S_IRWXU)


@pytest.fixture
def make_tree():
    """Return a helper that creates files (relative path -> size) under a root."""
    return _make_tree
