"""
Result types returned by shell commands.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from custom_terminal.entities.command import Command
from custom_terminal.exceptions import ErrorKind


class OutcomeKind(str, Enum):
    """Successful outcomes a shell command can produce."""

    HELP = "help"
    CLEARED = "cleared"
    EXITED = "exited"
    FILE_CREATED = "file_created"
    DIRECTORY_CREATED = "directory_created"
    FILE_CONTENT = "file_content"
    LISTING = "listing"
    DIRECTORY_CHANGED = "directory_changed"
    FILE_DELETED = "file_deleted"
    DIRECTORY_DELETED = "directory_deleted"
    TREE_DELETED = "tree_deleted"
    DELETION_CANCELLED = "deletion_cancelled"
    EDITOR_OPENED = "editor_opened"


@dataclass(frozen=True)
class DeleteFailure:
    path: str
    reason: str


@dataclass
class DeleteReport:
    """Outcome of a best-effort recursive delete."""

    root: str
    deleted: list[str] = field(default_factory=list)
    failures: list[DeleteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class EditorSession:
    """
    Buffer handed to an editor view.

    The view shows initial_content and calls save() with the full buffer when
    the user saves.
    """

    path: str
    name: str
    initial_content: str
    save: Callable[[str], None]
    load_error: Optional[str] = None


@dataclass(frozen=True)
class CommandResult:
    """Tagged outcome of one dispatched command: either a success kind or an error kind."""

    command: Command
    kind: Optional[OutcomeKind] = None
    error: Optional[ErrorKind] = None
    subject: str = ""
    text: str = ""
    report: Optional[DeleteReport] = None
    editor: Optional[EditorSession] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, command: Command, kind: OutcomeKind, **kwargs) -> "CommandResult":
        return cls(command=command, kind=kind, **kwargs)

    @classmethod
    def failure(
        cls, command: Command, error: ErrorKind, subject: str = "", text: str = ""
    ) -> "CommandResult":
        return cls(command=command, error=error, subject=subject, text=text)
