"""
Interaction port: what the shell core needs from whoever presents it.
"""

from abc import ABC, abstractmethod

from custom_terminal.entities.result import EditorSession


class InteractionPort(ABC):
    """Port interface for user interactions that a command may trigger."""

    @abstractmethod
    def confirm(self, title: str, message: str) -> bool:
        """
        Ask a yes/no question and block until it is answered.

        Args:
            title: Short title for the question
            message: Question shown to the user

        Returns:
            True if the user answered yes
        """
        pass

    @abstractmethod
    def open_editor(self, session: EditorSession) -> None:
        """
        Open an editor view for a buffer.

        The view calls session.save() with the full buffer when the user saves.
        """
        pass
