"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from custom_terminal.entities.entry import Entry
from custom_terminal.exceptions import (
    EntryNotFoundError,
    FileRepositoryError,
    NotADirectoryFailure,
)
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


def translate_os_error(error: OSError, path: str) -> FileRepositoryError:
    """Map an OSError raised for a path onto the repository error hierarchy."""
    if isinstance(error, FileExistsError):
        return FileRepositoryError(f"File already exists: {path}", subject=path)
    if isinstance(error, FileNotFoundError):
        return EntryNotFoundError(f"No such file or directory: {path}", subject=path)
    if isinstance(error, NotADirectoryError):
        return NotADirectoryFailure(f"Not a directory: {path}", subject=path)
    if isinstance(error, IsADirectoryError):
        return FileRepositoryError(f"Is a directory: {path}", subject=path)
    if isinstance(error, PermissionError):
        return FileRepositoryError(f"Permission denied: {path}", subject=path)
    return FileRepositoryError(f"{error.strerror or error}: {path}", subject=path)


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            EntryNotFoundError: If directory does not exist
            NotADirectoryFailure: If the path is not a directory
        """
        if not os.path.exists(directory):
            raise EntryNotFoundError(
                f"Directory does not exist: {directory}", subject=directory
            )

        if not os.path.isdir(directory):
            raise NotADirectoryFailure(
                f"Path is not a directory: {directory}", subject=directory
            )

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def get_entry(self, path: str) -> Entry:
        return Entry(path)

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List all entries in a directory, in the order the OS enumerates them.

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            entries: list[Entry] = []
            with os.scandir(directory) as it:
                for item in it:
                    try:
                        entries.append(Entry(item.path))
                    except FileRepositoryError as e:
                        # Entry vanished or became unreadable mid-listing
                        self._logger.warning(f"Could not process entry {item.path}: {e}")
                        continue
            return entries

        except FileRepositoryError:
            raise
        except OSError as e:
            raise translate_os_error(e, directory)
        except Exception as e:
            raise FileRepositoryError(
                f"Failed to list entries in {directory}: {str(e)}", subject=directory
            )

    @override
    def has_entries(self, directory: str) -> bool:
        try:
            with os.scandir(directory) as it:
                return any(True for _ in it)
        except OSError as e:
            raise translate_os_error(e, directory)

    @override
    def create_file(self, path: str) -> Entry:
        try:
            # "x" mode fails when the file already exists
            with open(path, "x", encoding="utf-8"):
                pass
        except OSError as e:
            raise translate_os_error(e, path)
        self._logger.debug(f"Created file {path}")
        return Entry(path)

    @override
    def create_directory(self, path: str) -> Entry:
        try:
            os.mkdir(path)
        except OSError as e:
            raise translate_os_error(e, path)
        self._logger.debug(f"Created directory {path}")
        return Entry(path)

    @override
    def read_text(self, path: str) -> str:
        try:
            # newline="" keeps line endings verbatim
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError:
            raise FileRepositoryError(f"File is not valid UTF-8 text: {path}", subject=path)
        except OSError as e:
            raise translate_os_error(e, path)

    @override
    def write_text(self, path: str, content: str) -> Entry:
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise translate_os_error(e, path)
        self._logger.debug(f"Wrote {len(content)} characters to {path}")
        return Entry(path)

    @override
    def walk(self, directory: str) -> tuple[list[str], list[tuple[str, str]]]:
        self._validate_directory(directory)

        paths: list[str] = [directory]
        unreadable: list[tuple[str, str]] = []

        def _on_error(error: OSError) -> None:
            failed = error.filename or directory
            self._logger.warning(f"Could not read directory {failed}: {error}")
            unreadable.append((str(failed), error.strerror or str(error)))

        for root, dirnames, filenames in os.walk(
            directory, onerror=_on_error, followlinks=False
        ):
            # os.walk lists links to directories in dirnames without descending
            for name in dirnames + filenames:
                paths.append(os.path.join(root, name))
        return paths, unreadable

    @override
    def delete(self, path: str) -> None:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.unlink(path)
        except OSError as e:
            raise translate_os_error(e, path)
        self._logger.debug(f"Deleted {path}")
