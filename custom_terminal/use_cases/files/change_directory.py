"""
Use case for changing the working directory.
"""

import logging
from pathlib import Path
from typing import Optional

from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import MissingArgumentError, NotADirectoryFailure
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class ChangeDirectoryUseCase:
    """Use case for moving a session to another directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: SessionState, target: str) -> Path:
        """
        Change the session's working directory.

        The target is resolved and normalized first. The session is left
        untouched unless the result is an existing directory.

        Returns:
            The new working directory

        Raises:
            MissingArgumentError: If no target was given
            NotADirectoryFailure: If the target is missing or not a directory
        """
        if not target:
            raise MissingArgumentError("Missing directory.")
        new_directory = session.resolve_normalized(target)
        if not self._file_repository.is_dir(str(new_directory)):
            self._logger.info(f"Directory not found: {new_directory}")
            raise NotADirectoryFailure(
                f"Directory not found: {new_directory}", subject=target
            )
        current = session.change_to(new_directory)
        self._logger.info(f"Current directory: {current}")
        return current
