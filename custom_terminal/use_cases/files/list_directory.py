"""
Use case for listing the working directory.
"""

import logging
from typing import Optional

from custom_terminal.entities.entry import Entry
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import FileRepositoryError
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class ListDirectoryUseCase:
    """Use case for listing the immediate entries of the working directory."""

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

    def execute(self, session: SessionState) -> list[Entry]:
        """
        List files and directories in the working directory.

        Entries keep the order the filesystem returns them in.

        Raises:
            FileRepositoryError: If listing fails
        """
        directory = str(session.current_directory)
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            entries = self._file_repository.list_entries(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")
