"""
Use case for deleting a directory and everything below it.
"""

import logging
from pathlib import Path
from typing import Optional

from custom_terminal.entities.result import DeleteFailure, DeleteReport
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import MissingArgumentError, NotADirectoryFailure
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort


class RemoveTreeUseCase:
    """Use case for best-effort recursive deletion of a directory."""

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

    def execute(self, session: SessionState, name: str) -> DeleteReport:
        """
        Delete a directory and its contents without asking.

        Args:
            session: Session whose working directory the name is resolved against
            name: Directory name or path

        Returns:
            DeleteReport listing deleted paths and per-entry failures

        Raises:
            MissingArgumentError: If no name was given
            NotADirectoryFailure: If the target is not a directory
        """
        if not name:
            raise MissingArgumentError("Missing directory name.")
        path = str(session.resolve(name))
        if not self._file_repository.is_dir(path):
            raise NotADirectoryFailure(f"{name} is not a directory.", subject=name)
        if self._file_repository.get_entry(path).is_link:
            # Only the link goes; its target is left alone
            self._logger.info(f"Deleting link to directory: {path}")
            self._file_repository.delete(path)
            return DeleteReport(root=path, deleted=[path])
        return self.delete_tree(path)

    def delete_tree(self, directory: str) -> DeleteReport:
        """
        Delete every entry under a directory, deepest paths first.

        Ordering by segment count guarantees each directory is empty by the
        time it is removed. A failing entry is recorded and the remaining
        entries are still attempted.
        """
        self._logger.info(f"Recursively deleting directory: {directory}")
        paths, unreadable = self._file_repository.walk(directory)
        report = DeleteReport(root=directory)
        report.failures.extend(DeleteFailure(p, reason) for p, reason in unreadable)

        for path in sorted(paths, key=lambda p: len(Path(p).parts), reverse=True):
            try:
                self._file_repository.delete(path)
                report.deleted.append(path)
            except Exception as e:
                self._logger.warning(f"Could not delete {path}: {e}")
                report.failures.append(DeleteFailure(path, str(e)))

        self._logger.info(
            f"Deleted {len(report.deleted)} entries, {len(report.failures)} failures"
        )
        return report
