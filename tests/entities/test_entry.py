"""
Tests for the Entry entity.
"""

import os

import pytest

from custom_terminal.entities.entry import Entry
from custom_terminal.exceptions import EntryNotFoundError, FileRepositoryError


class TestEntry:
    """Test cases for the Entry entity."""

    def test_file_entry(self, temp_directory: str):
        test_file = os.path.join(temp_directory, "test1.txt")
        entry = Entry(test_file)

        assert entry.path == os.path.abspath(test_file)
        assert entry.name == "test1.txt"
        assert entry.is_dir is False
        assert entry.is_link is False

    def test_directory_entry(self, temp_directory: str):
        entry = Entry(os.path.join(temp_directory, "subdir"))

        assert entry.is_dir is True
        assert entry.is_real_directory() is True

    def test_link_to_directory_is_not_real_directory(self, temp_directory: str):
        link = os.path.join(temp_directory, "link")
        os.symlink(os.path.join(temp_directory, "subdir"), link)
        entry = Entry(link)

        assert entry.is_link is True
        assert entry.is_dir is True
        assert entry.is_real_directory() is False

    def test_nonexistent_entry(self):
        with pytest.raises(EntryNotFoundError, match="Entry does not exist"):
            Entry("/nonexistent/path/file.txt")

    def test_empty_path(self):
        with pytest.raises(FileRepositoryError, match="Path must be a non-empty string"):
            Entry("")

    def test_repr(self, temp_directory: str):
        entry = Entry(os.path.join(temp_directory, "test2.py"))

        assert repr(entry) == f"Entry(path='{entry.path}')"
