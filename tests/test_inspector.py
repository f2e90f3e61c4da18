"""Tests for the entry inspector."""

from __future__ import annotations

import os
import sys

import pytest

from lff.core.inspector import inspect_entry, path_extension, path_is_hidden
from lff.errors import EntryError
from lff.models.traversal_config import TraversalConfig

BASE = TraversalConfig()
ABSOLUTE = TraversalConfig(absolute=True)


class TestPathIsHidden:
    def test_visible(self):
        assert not path_is_hidden("test_resources/snow.txt")
        assert not path_is_hidden("test_resources/visible")

    def test_hidden(self):
        assert path_is_hidden("test_resources/.hidden")
        assert path_is_hidden("test_resources/.hidden_dir")
        assert path_is_hidden(".profile")

    def test_only_final_segment_counts(self):
        assert not path_is_hidden("test_resources/.hidden_dir/spider.txt")

    def test_non_utf8_name_is_not_hidden(self):
        name = os.fsdecode(b".\x9f\x91\xa0")
        assert not path_is_hidden(f"test_resources/{name}")

    def test_no_final_segment(self):
        assert not path_is_hidden("test_resources/..")
        assert not path_is_hidden("test_resources/.")
        assert not path_is_hidden("/")


class TestPathExtension:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("test_resources/snow.txt", "txt"),
            ("test_resources/LICENCE", None),
            ("test_resources/.hidden", None),
            ("archive.tar.gz", "gz"),
            ("notes.", ""),
            ("..bashrc", "bashrc"),
            ("..", None),
            ("dir.d/README", None),
            ("Photo.JPG", "JPG"),
        ],
    )
    def test_extension(self, path, expected):
        assert path_extension(path) == expected


class TestInspectEntry:
    def test_relative(self, sample_tree):
        record = inspect_entry("test_resources/snow.txt", BASE)
        assert record.name == "test_resources/snow.txt"
        assert record.extension == "txt"
        assert record.size_bytes == 544
        assert not record.hidden

    def test_absolute(self, sample_tree, tmp_path):
        record = inspect_entry("test_resources/snow.txt", ABSOLUTE)
        assert os.path.isabs(record.name)
        assert record.name == os.path.realpath(tmp_path / "test_resources" / "snow.txt")
        assert record.name.endswith(os.path.join("test_resources", "snow.txt"))

    def test_absolute_invalid_path(self, sample_tree):
        with pytest.raises(EntryError) as excinfo:
            inspect_entry("test_resources/snow2.txt", ABSOLUTE)
        assert str(excinfo.value) == 'Could not generate absolute path for "test_resources/snow2.txt"'
        assert excinfo.value.path == "test_resources/snow2.txt"
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_metadata_invalid_path(self, sample_tree):
        with pytest.raises(EntryError) as excinfo:
            inspect_entry("test_resources/snow2.txt", BASE)
        assert str(excinfo.value) == 'Could not retrieve metadata for "test_resources/snow2.txt"'
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_no_extension(self, sample_tree):
        assert inspect_entry("test_resources/LICENCE", BASE).extension is None
        assert inspect_entry("test_resources/.hidden", BASE).extension is None

    def test_hidden(self, sample_tree):
        record = inspect_entry("test_resources/.hidden", BASE)
        assert record.hidden
        assert record.size_bytes == 0

    @pytest.mark.skipif(not hasattr(os, "symlink") or sys.platform == "win32", reason="needs symlinks")
    def test_symlink_size_is_not_followed(self, tmp_path):
        target = tmp_path / "big.bin"
        target.write_bytes(b"b" * 10_000)
        link = tmp_path / "link.bin"
        link.symlink_to(target)

        record = inspect_entry(str(link), BASE)
        assert record.size_bytes == os.lstat(link).st_size
        assert record.size_bytes != 10_000
