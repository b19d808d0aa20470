"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from custom_terminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from custom_terminal.entities.session import SessionState
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort
from custom_terminal.ports.ui.interaction_port import InteractionPort
from custom_terminal.use_cases.files.change_directory import ChangeDirectoryUseCase
from custom_terminal.use_cases.files.create_file import CreateFileUseCase
from custom_terminal.use_cases.files.edit_file import EditFileUseCase
from custom_terminal.use_cases.files.list_directory import ListDirectoryUseCase
from custom_terminal.use_cases.files.make_directory import MakeDirectoryUseCase
from custom_terminal.use_cases.files.read_file import ReadFileUseCase
from custom_terminal.use_cases.files.remove_entry import RemoveEntryUseCase
from custom_terminal.use_cases.files.remove_tree import RemoveTreeUseCase
from custom_terminal.use_cases.shell.dispatcher import CommandDispatcher


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, start_directory: Optional[str] = None):
        self._instances = {}
        self._start_directory = start_directory
        self._logger = logging.getLogger(__name__)

    def get_session(self) -> SessionState:
        """
        Get the shell session, created in the configured start directory.

        Returns:
            SessionState shared by every front-end of this container
        """
        if "session" not in self._instances:
            start = self._start_directory
            if start is None:
                from custom_terminal.config.settings import settings

                start = settings.start_directory
            self._instances["session"] = SessionState(start)
        return self._instances["session"]

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_create_file_use_case(self) -> CreateFileUseCase:
        if "create_file_use_case" not in self._instances:
            self._instances["create_file_use_case"] = CreateFileUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["create_file_use_case"]

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        if "make_directory_use_case" not in self._instances:
            self._instances["make_directory_use_case"] = MakeDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["make_directory_use_case"]

    def get_read_file_use_case(self) -> ReadFileUseCase:
        if "read_file_use_case" not in self._instances:
            self._instances["read_file_use_case"] = ReadFileUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["read_file_use_case"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        if "change_directory_use_case" not in self._instances:
            self._instances["change_directory_use_case"] = ChangeDirectoryUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["change_directory_use_case"]

    def get_remove_tree_use_case(self) -> RemoveTreeUseCase:
        if "remove_tree_use_case" not in self._instances:
            self._instances["remove_tree_use_case"] = RemoveTreeUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["remove_tree_use_case"]

    def get_remove_entry_use_case(self) -> RemoveEntryUseCase:
        """
        Get remove entry use case with injected dependencies.

        Returns:
            Configured RemoveEntryUseCase sharing the tree remover
        """
        if "remove_entry_use_case" not in self._instances:
            self._instances["remove_entry_use_case"] = RemoveEntryUseCase(
                self.get_file_repository(),
                self.get_remove_tree_use_case(),
                self._logger,
            )
        return self._instances["remove_entry_use_case"]

    def get_edit_file_use_case(self) -> EditFileUseCase:
        if "edit_file_use_case" not in self._instances:
            self._instances["edit_file_use_case"] = EditFileUseCase(
                self.get_file_repository(), self._logger
            )
        return self._instances["edit_file_use_case"]

    def get_command_dispatcher(
        self, interaction: Optional[InteractionPort] = None
    ) -> CommandDispatcher:
        """
        Get the command dispatcher.

        Args:
            interaction: Front-end that answers confirmations and opens editors.
                Replaces the one set on a previously built dispatcher.

        Returns:
            Configured CommandDispatcher
        """
        if "command_dispatcher" not in self._instances:
            self._instances["command_dispatcher"] = CommandDispatcher(
                create_file_uc=self.get_create_file_use_case(),
                make_directory_uc=self.get_make_directory_use_case(),
                read_file_uc=self.get_read_file_use_case(),
                list_directory_uc=self.get_list_directory_use_case(),
                change_directory_uc=self.get_change_directory_use_case(),
                remove_entry_uc=self.get_remove_entry_use_case(),
                remove_tree_uc=self.get_remove_tree_use_case(),
                edit_file_uc=self.get_edit_file_use_case(),
                logger=self._logger,
            )
        dispatcher: CommandDispatcher = self._instances["command_dispatcher"]
        if interaction is not None:
            dispatcher.interaction = interaction
        return dispatcher


# Global container instance
container = DependencyContainer()
