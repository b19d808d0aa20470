from __future__ import annotations

from typing import cast

from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QTextCursor
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from custom_terminal.entities.result import OutcomeKind
from custom_terminal.entities.session import SessionState
from custom_terminal.use_cases.shell.dispatcher import CommandDispatcher
from custom_terminal.use_cases.shell.messages import PROMPT, WELCOME_BANNER, render_result

from .qt_interaction import QtInteraction
from .theme import ThemeName, apply_theme, next_theme, text_area_stylesheet

WINDOW_TITLE = "Custom Terminal"


class TerminalWindow(QMainWindow):
    def __init__(
        self,
        dispatcher: CommandDispatcher,
        session: SessionState,
        theme: ThemeName = "classic",
        font_size: int = 16,
    ) -> None:
        super().__init__()
        self._dispatcher = dispatcher
        self._session = session
        self._theme: ThemeName = theme
        self._font_size = font_size
        self._dispatcher.interaction = QtInteraction(self, self._stylesheet)

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(800, 600)

        self._build_actions()
        self._build_toolbar()
        self._build_layout()
        self._apply_text_style()
        self._append(WELCOME_BANNER)
        self.input_edit.setFocus()

    # UI building
    def _build_actions(self) -> None:
        self.action_clear = QAction("Clear", self)
        self.action_clear.triggered.connect(self._on_clear_clicked)

        self.action_toggle_theme = QAction("Toggle Theme", self)
        self.action_toggle_theme.triggered.connect(self._on_toggle_theme)

    def _build_toolbar(self) -> None:
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.action_clear)
        tb.addAction(self.action_toggle_theme)
        self.addToolBar(tb)

    def _build_layout(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        self.transcript = QPlainTextEdit(central)
        self.transcript.setReadOnly(True)
        self.transcript.setUndoRedoEnabled(False)

        self.prompt_label = QLabel(PROMPT.strip(), central)
        self.prompt_label.setObjectName("prompt")
        self.input_edit = QLineEdit(central)
        self.input_edit.returnPressed.connect(self._on_command_entered)

        input_row = QHBoxLayout()
        input_row.setContentsMargins(0, 0, 0, 0)
        input_row.addWidget(self.prompt_label)
        input_row.addWidget(self.input_edit)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.transcript)
        layout.addLayout(input_row)

    def _stylesheet(self) -> str:
        return text_area_stylesheet(self._theme, self._font_size)

    def _apply_text_style(self) -> None:
        sheet = self._stylesheet()
        for widget in (self.transcript, self.input_edit, self.prompt_label):
            widget.setStyleSheet(sheet)

    def _append(self, text: str) -> None:
        self.transcript.appendPlainText(text)
        self.transcript.moveCursor(QTextCursor.MoveOperation.End)

    # Slots
    @Slot()
    def _on_command_entered(self) -> None:
        line = self.input_edit.text()
        self.input_edit.clear()
        if not line.strip():
            return

        self._append(f"{PROMPT}{line.strip()}")
        result = self._dispatcher.execute(line, self._session)
        if result is None:
            return
        if result.kind is OutcomeKind.CLEARED:
            self.transcript.clear()
        text = render_result(result)
        if text is not None:
            self._append(text)
        if result.kind is OutcomeKind.DIRECTORY_CHANGED:
            self.setWindowTitle(f"{WINDOW_TITLE} - {self._session.current_directory}")
        if result.kind is OutcomeKind.EXITED:
            QApplication.exit(0)

    @Slot()
    def _on_clear_clicked(self) -> None:
        self.transcript.clear()
        self._append(WELCOME_BANNER)

    @Slot()
    def _on_toggle_theme(self) -> None:
        app = QApplication.instance()
        if app is None:
            return
        self._theme = apply_theme(cast(QApplication, app), next_theme(self._theme))
        self._apply_text_style()
