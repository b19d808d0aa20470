from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QMessageBox, QWidget
from typing_extensions import override

from custom_terminal.entities.result import EditorSession
from custom_terminal.ports.ui.interaction_port import InteractionPort

from .editor_window import EditorWindow


class QtInteraction(InteractionPort):
    """Confirmation dialogs and editor windows for the Qt front-end."""

    def __init__(self, parent: QWidget, stylesheet: Callable[[], str]) -> None:
        self._parent = parent
        self._stylesheet = stylesheet
        # Editors have no Qt parent; hold references so they are not collected
        self._editors: list[EditorWindow] = []

    @override
    def confirm(self, title: str, message: str) -> bool:
        answer = QMessageBox.question(
            self._parent,
            title,
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    @override
    def open_editor(self, session: EditorSession) -> None:
        editor = EditorWindow(session, self._stylesheet())
        self._editors.append(editor)
        editor.destroyed.connect(lambda *_: self._forget(editor))
        editor.show()

    def _forget(self, editor: EditorWindow) -> None:
        if editor in self._editors:
            self._editors.remove(editor)
