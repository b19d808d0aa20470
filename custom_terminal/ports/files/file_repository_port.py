"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from custom_terminal.entities.entry import Entry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether anything (including a dangling link) exists at a path.

        Args:
            path: Path to check

        Returns:
            True if an entry exists, False otherwise
        """
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """
        Check whether a path is an existing directory (links are followed).

        Args:
            path: Path to check

        Returns:
            True if the path is a directory, False otherwise
        """
        pass

    @abstractmethod
    def get_entry(self, path: str) -> Entry:
        """
        Snapshot the entry at a path.

        Raises:
            EntryNotFoundError: If nothing exists at the path
        """
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the immediate entries of a directory in enumeration order.

        Args:
            directory: Path to the directory

        Returns:
            List of Entry entities (files and directories)

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def has_entries(self, directory: str) -> bool:
        """
        Check whether a directory contains at least one entry.

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> Entry:
        """
        Create a new empty file.

        Raises:
            FileRepositoryError: If the file already exists or cannot be created
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> Entry:
        """
        Create a single directory; its parent must exist.

        Raises:
            FileRepositoryError: If the directory already exists or cannot be created
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a whole file as UTF-8 text.

        Raises:
            EntryNotFoundError: If the file does not exist
            FileRepositoryError: If reading fails
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> Entry:
        """
        Create or overwrite a text file with UTF-8 content.

        Args:
            path: Path to the file to write
            content: Text content to write verbatim

        Returns:
            An Entry representing the written file
        """
        pass

    @abstractmethod
    def walk(self, directory: str) -> tuple[list[str], list[tuple[str, str]]]:
        """
        Enumerate a directory tree without following symbolic links.

        Args:
            directory: Root of the tree

        Returns:
            All paths in the tree including the root itself, and a list of
            (path, reason) pairs for subdirectories that could not be read
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """
        Delete a file, a link or an empty directory.

        Raises:
            FileRepositoryError: If deletion fails
        """
        pass
