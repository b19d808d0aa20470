"""
Use case for removing a file or directory, asking before non-empty directories.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from custom_terminal.entities.result import DeleteReport
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import FileRepositoryError, MissingArgumentError
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort
from custom_terminal.use_cases.files.remove_tree import RemoveTreeUseCase

CONFIRM_TITLE = "Confirm Delete"


class RemovalKind(str, Enum):
    FILE = "file"
    EMPTY_DIRECTORY = "empty_directory"
    NON_EMPTY_DIRECTORY = "non_empty_directory"


@dataclass(frozen=True)
class RemovalPlan:
    """What a bare rm is about to delete, computed before anything is touched."""

    name: str
    path: str
    kind: RemovalKind

    @property
    def needs_confirmation(self) -> bool:
        return self.kind is RemovalKind.NON_EMPTY_DIRECTORY

    @property
    def question(self) -> str:
        return f"The directory {self.name} is not empty. Delete contents?"


@dataclass(frozen=True)
class RemovalOutcome:
    plan: RemovalPlan
    deleted: bool
    report: Optional[DeleteReport] = None

    @property
    def is_directory(self) -> bool:
        return self.plan.kind is not RemovalKind.FILE


class RemoveEntryUseCase:
    """
    Use case behind a bare rm.

    Files and empty directories are deleted right away. A non-empty directory
    is only deleted once the caller confirms; the flow is split into plan()
    and apply() so the confirmation can come from anywhere.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        tree_remover: RemoveTreeUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._tree_remover = tree_remover
        self._logger = logger or logging.getLogger(__name__)

    def plan(self, session: SessionState, name: str) -> RemovalPlan:
        """
        Inspect the target without modifying anything.

        Raises:
            MissingArgumentError: If no name was given
            EntryNotFoundError: If the target does not exist
            FileRepositoryError: If the target cannot be inspected
        """
        if not name:
            raise MissingArgumentError("Missing file or directory name.")
        path = str(session.resolve(name))
        entry = self._file_repository.get_entry(path)
        if not entry.is_real_directory():
            kind = RemovalKind.FILE
        elif self._file_repository.has_entries(path):
            kind = RemovalKind.NON_EMPTY_DIRECTORY
        else:
            kind = RemovalKind.EMPTY_DIRECTORY
        return RemovalPlan(name=name, path=path, kind=kind)

    def apply(self, plan: RemovalPlan, confirmed: bool = False) -> RemovalOutcome:
        """
        Carry out a plan.

        Args:
            plan: Plan returned by plan()
            confirmed: Answer to the confirmation question, if one was needed

        Raises:
            FileRepositoryError: If a single-entry deletion fails
        """
        if plan.needs_confirmation:
            if not confirmed:
                self._logger.info(f"Deletion of {plan.path} cancelled")
                return RemovalOutcome(plan=plan, deleted=False)
            report = self._tree_remover.delete_tree(plan.path)
            return RemovalOutcome(plan=plan, deleted=True, report=report)

        try:
            self._logger.info(f"Deleting {plan.kind.value}: {plan.path}")
            self._file_repository.delete(plan.path)
            return RemovalOutcome(plan=plan, deleted=True)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting entry: {e}")
            raise FileRepositoryError(
                f"Failed to delete {plan.path}: {str(e)}", subject=plan.name
            )

    def execute(
        self,
        session: SessionState,
        name: str,
        confirm: Callable[[str, str], bool],
    ) -> RemovalOutcome:
        """
        Plan, ask through confirm(title, question) when needed, then apply.
        """
        plan = self.plan(session, name)
        confirmed = confirm(CONFIRM_TITLE, plan.question) if plan.needs_confirmation else False
        return self.apply(plan, confirmed)
