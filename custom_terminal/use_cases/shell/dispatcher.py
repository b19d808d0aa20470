"""
Command dispatcher: maps a typed line onto the file use cases.
"""

import logging
from typing import Callable, Optional, TypedDict

from custom_terminal.entities.command import Command
from custom_terminal.entities.result import CommandResult, OutcomeKind
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import ErrorKind, ShellError
from custom_terminal.ports.ui.interaction_port import InteractionPort
from custom_terminal.use_cases.files.change_directory import ChangeDirectoryUseCase
from custom_terminal.use_cases.files.create_file import CreateFileUseCase
from custom_terminal.use_cases.files.edit_file import EditFileUseCase
from custom_terminal.use_cases.files.list_directory import ListDirectoryUseCase
from custom_terminal.use_cases.files.make_directory import MakeDirectoryUseCase
from custom_terminal.use_cases.files.read_file import ReadFileUseCase
from custom_terminal.use_cases.files.remove_entry import RemoveEntryUseCase
from custom_terminal.use_cases.files.remove_tree import RemoveTreeUseCase


class CommandSpec(TypedDict):
    """Specification of a shell command, used to build the help text."""

    name: str
    usage: str
    description: str


COMMAND_SPECS: list[CommandSpec] = [
    {"name": "help", "usage": "help", "description": "Show this help message"},
    {"name": "clear", "usage": "clear", "description": "Clear the terminal"},
    {"name": "exit", "usage": "exit", "description": "Close the terminal"},
    {"name": "touch", "usage": "touch <filename>", "description": "Create a new file"},
    {
        "name": "cat",
        "usage": "cat <filename>",
        "description": "Show the contents of a file",
    },
    {
        "name": "nano",
        "usage": "nano <filename>",
        "description": "Open a new terminal to edit a file",
    },
    {"name": "cd", "usage": "cd <directory>", "description": "Change directory"},
    {
        "name": "ls",
        "usage": "ls",
        "description": "List contents of the current directory",
    },
    {
        "name": "mkdir",
        "usage": "mkdir <directory>",
        "description": "Create a new directory",
    },
    {"name": "rm", "usage": "rm <filename>", "description": "Remove a file"},
    {
        "name": "rm",
        "usage": "rm -r <directory>",
        "description": "Remove a directory and its contents without confirmation",
    },
]

Handler = Callable[[Command, SessionState], CommandResult]


class CommandDispatcher:
    """
    Runs one line of input against a session.

    Handlers are looked up by command name and return a tagged CommandResult.
    Every ShellError raised by a use case is turned into a failed result here,
    so no command can take the shell down.
    """

    def __init__(
        self,
        create_file_uc: CreateFileUseCase,
        make_directory_uc: MakeDirectoryUseCase,
        read_file_uc: ReadFileUseCase,
        list_directory_uc: ListDirectoryUseCase,
        change_directory_uc: ChangeDirectoryUseCase,
        remove_entry_uc: RemoveEntryUseCase,
        remove_tree_uc: RemoveTreeUseCase,
        edit_file_uc: EditFileUseCase,
        interaction: Optional[InteractionPort] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._create_file_uc = create_file_uc
        self._make_directory_uc = make_directory_uc
        self._read_file_uc = read_file_uc
        self._list_directory_uc = list_directory_uc
        self._change_directory_uc = change_directory_uc
        self._remove_entry_uc = remove_entry_uc
        self._remove_tree_uc = remove_tree_uc
        self._edit_file_uc = edit_file_uc
        self.interaction = interaction
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Handler] = {
            "help": self._handle_help,
            "clear": self._handle_clear,
            "exit": self._handle_exit,
            "touch": self._handle_touch,
            "mkdir": self._handle_mkdir,
            "cat": self._handle_cat,
            "ls": self._handle_ls,
            "cd": self._handle_cd,
            "rm": self._handle_rm,
            "nano": self._handle_nano,
        }

    def execute(self, raw_line: str, session: SessionState) -> Optional[CommandResult]:
        """
        Parse and run one line.

        Args:
            raw_line: Line as typed by the user
            session: Session the command runs against; cd mutates it

        Returns:
            The command's result, or None for a blank line
        """
        command = Command.parse(raw_line)
        if command is None:
            return None

        handler = self._handlers.get(command.name)
        if handler is None:
            self._logger.info(f"Unknown command: {command.raw}")
            return CommandResult.failure(
                command, ErrorKind.UNKNOWN_COMMAND, text=command.raw
            )

        try:
            return handler(command, session)
        except ShellError as e:
            self._logger.info(f"Command '{command.name}' failed ({e.kind.value}): {e}")
            return CommandResult.failure(
                command, e.kind, subject=e.subject or command.target(), text=str(e)
            )
        except Exception as e:
            self._logger.exception(f"Unexpected error running '{command.raw}'")
            return CommandResult.failure(
                command, ErrorKind.IO_FAILURE, subject=command.target(), text=str(e)
            )

    # ------------------------- handlers -------------------------
    def _handle_help(self, command: Command, session: SessionState) -> CommandResult:
        return CommandResult.success(command, OutcomeKind.HELP)

    def _handle_clear(self, command: Command, session: SessionState) -> CommandResult:
        return CommandResult.success(command, OutcomeKind.CLEARED)

    def _handle_exit(self, command: Command, session: SessionState) -> CommandResult:
        return CommandResult.success(command, OutcomeKind.EXITED)

    def _handle_touch(self, command: Command, session: SessionState) -> CommandResult:
        entry = self._create_file_uc.execute(session, command.argument)
        return CommandResult.success(
            command, OutcomeKind.FILE_CREATED, subject=command.argument, text=entry.path
        )

    def _handle_mkdir(self, command: Command, session: SessionState) -> CommandResult:
        entry = self._make_directory_uc.execute(session, command.argument)
        return CommandResult.success(
            command,
            OutcomeKind.DIRECTORY_CREATED,
            subject=command.argument,
            text=entry.path,
        )

    def _handle_cat(self, command: Command, session: SessionState) -> CommandResult:
        content = self._read_file_uc.execute(session, command.argument)
        return CommandResult.success(
            command, OutcomeKind.FILE_CONTENT, subject=command.argument, text=content
        )

    def _handle_ls(self, command: Command, session: SessionState) -> CommandResult:
        entries = self._list_directory_uc.execute(session)
        return CommandResult.success(
            command,
            OutcomeKind.LISTING,
            subject=str(session.current_directory),
            text="\n".join(entry.name for entry in entries),
        )

    def _handle_cd(self, command: Command, session: SessionState) -> CommandResult:
        directory = self._change_directory_uc.execute(session, command.argument)
        return CommandResult.success(
            command,
            OutcomeKind.DIRECTORY_CHANGED,
            subject=command.argument,
            text=str(directory),
        )

    def _handle_rm(self, command: Command, session: SessionState) -> CommandResult:
        if command.is_recursive():
            target = command.target()
            report = self._remove_tree_uc.execute(session, target)
            return CommandResult.success(
                command, OutcomeKind.TREE_DELETED, subject=target, report=report
            )

        outcome = self._remove_entry_uc.execute(session, command.argument, self._confirm)
        if not outcome.deleted:
            kind = OutcomeKind.DELETION_CANCELLED
        elif outcome.is_directory:
            kind = OutcomeKind.DIRECTORY_DELETED
        else:
            kind = OutcomeKind.FILE_DELETED
        return CommandResult.success(
            command, kind, subject=command.argument, report=outcome.report
        )

    def _handle_nano(self, command: Command, session: SessionState) -> CommandResult:
        editor = self._edit_file_uc.open(session, command.argument)
        if self.interaction is None:
            self._logger.warning("No editor available, nano buffer not shown")
        else:
            self.interaction.open_editor(editor)
        return CommandResult.success(
            command,
            OutcomeKind.EDITOR_OPENED,
            subject=command.argument,
            text=editor.load_error or "",
            editor=editor,
        )

    def _confirm(self, title: str, message: str) -> bool:
        if self.interaction is None:
            # Nobody to ask: never delete a non-empty directory unasked
            self._logger.warning(f"No interaction available, declining: {message}")
            return False
        return self.interaction.confirm(title, message)
