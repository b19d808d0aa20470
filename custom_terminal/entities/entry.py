"""
Filesystem entry domain entity.
"""

import os
import stat

from custom_terminal.exceptions import EntryNotFoundError, FileRepositoryError


class Entry:
    """
    File system entry entity (file, directory or link) captured at a point in time.
    """

    def __init__(self, path: str):
        """
        Initialize the Entry entity.

        Args:
            path: Path to the entry

        Raises:
            FileRepositoryError: If path is empty
            EntryNotFoundError: If nothing exists at the path
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        try:
            st = os.lstat(path)
        except FileNotFoundError:
            raise EntryNotFoundError(f"Entry does not exist: {path}", subject=path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot stat {path}: {e.strerror or e}", subject=path)

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_link = stat.S_ISLNK(st.st_mode)
        self.is_dir = os.path.isdir(self.path)

    def is_real_directory(self) -> bool:
        """True for a directory that is not reached through a symbolic link."""
        return self.is_dir and not self.is_link

    def __repr__(self) -> str:
        return f"Entry(path='{self.path}')"
