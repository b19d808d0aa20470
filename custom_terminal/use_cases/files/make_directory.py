"""
Use case for creating a directory.
"""

import logging
from typing import Optional

from custom_terminal.entities.entry import Entry
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import FileRepositoryError, MissingArgumentError
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class MakeDirectoryUseCase:
    """Use case for creating a single directory relative to the working directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: SessionState, name: str) -> Entry:
        """
        Create a directory. Parent directories are not created.

        Raises:
            MissingArgumentError: If no name was given
            FileRepositoryError: If the directory exists or cannot be created
        """
        if not name:
            raise MissingArgumentError("Missing directory name.")
        path = str(session.resolve(name))
        try:
            self._logger.info(f"Creating directory: {path}")
            entry = self._file_repository.create_directory(path)
            self._logger.info(f"Created directory: {entry.path}")
            return entry
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise FileRepositoryError(
                f"Failed to create directory {path}: {str(e)}", subject=name
            )
