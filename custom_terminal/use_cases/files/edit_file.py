"""
Use case for loading a file into an editor buffer and saving it back.
"""

import logging
from typing import Optional

from custom_terminal.entities.entry import Entry
from custom_terminal.entities.result import EditorSession
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import FileRepositoryError, MissingArgumentError
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class EditFileUseCase:
    """Use case backing the nano command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def open(self, session: SessionState, name: str) -> EditorSession:
        """
        Build an editor buffer for a file.

        The buffer holds the file contents when the file exists and is empty
        otherwise. A file that exists but cannot be read also yields an empty
        buffer, with the reason in load_error.

        Raises:
            MissingArgumentError: If no name was given
        """
        if not name:
            raise MissingArgumentError("Missing filename.")
        path = str(session.resolve(name))
        content = ""
        load_error: Optional[str] = None
        if self._file_repository.exists(path):
            try:
                content = self._file_repository.read_text(path)
            except FileRepositoryError as e:
                self._logger.warning(f"Error loading file {path}: {e}")
                load_error = str(e)
        self._logger.info(f"Opening editor for {path}")
        return EditorSession(
            path=path,
            name=name,
            initial_content=content,
            save=lambda text: self.save(path, text),
            load_error=load_error,
        )

    def save(self, path: str, content: str) -> Entry:
        """
        Overwrite a file with the full buffer.

        Raises:
            FileRepositoryError: If writing fails
        """
        try:
            self._logger.info(f"Saving {len(content)} characters to {path}")
            return self._file_repository.write_text(path, content)
        except FileRepositoryError as e:
            self._logger.error(f"Error saving file: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Error saving file: {e}")
            raise FileRepositoryError(f"Failed to save {path}: {str(e)}")
