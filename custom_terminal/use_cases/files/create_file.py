"""
Use case for creating an empty file.
"""

import logging
from typing import Optional

from custom_terminal.entities.entry import Entry
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import FileRepositoryError, MissingArgumentError
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating a new empty file relative to the working directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: SessionState, name: str) -> Entry:
        """
        Create a new empty file.

        Args:
            session: Session whose working directory the name is resolved against
            name: File name or path

        Returns:
            Entry for the created file

        Raises:
            MissingArgumentError: If no name was given
            FileRepositoryError: If the file exists or cannot be created
        """
        if not name:
            raise MissingArgumentError("Missing filename.")
        path = str(session.resolve(name))
        try:
            self._logger.info(f"Creating file: {path}")
            entry = self._file_repository.create_file(path)
            self._logger.info(f"Created file: {entry.path}")
            return entry
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating file: {e}")
            raise FileRepositoryError(f"Failed to create file {path}: {str(e)}", subject=name)
