"""
Use case for reading a text file.
"""

import logging
from typing import Optional

from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import (
    EntryNotFoundError,
    FileRepositoryError,
    MissingArgumentError,
)
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class ReadFileUseCase:
    """Use case for reading a whole file as text."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: SessionState, name: str) -> str:
        """
        Read a file.

        Args:
            session: Session whose working directory the name is resolved against
            name: File name or path

        Returns:
            The file contents

        Raises:
            MissingArgumentError: If no name was given
            EntryNotFoundError: If the file does not exist
            FileRepositoryError: If reading fails
        """
        if not name:
            raise MissingArgumentError("Missing filename.")
        path = str(session.resolve(name))
        try:
            self._logger.info(f"Reading file: {path}")
            if not self._file_repository.exists(path):
                raise EntryNotFoundError(f"File not found: {path}", subject=name)
            content = self._file_repository.read_text(path)
            self._logger.info(f"Read {len(content)} characters from {path}")
            return content
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read file {path}: {str(e)}", subject=name)
