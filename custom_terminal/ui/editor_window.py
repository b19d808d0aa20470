from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from custom_terminal.entities.result import EditorSession
from custom_terminal.exceptions import FileRepositoryError

logger = logging.getLogger(__name__)

# QTextDocument separators for paragraphs and soft line breaks
_LINE_SEPARATORS = str.maketrans({"\u2029": "\n", "\u2028": "\n"})


def plain_text(raw: str) -> str:
    """Map a document's raw text back to newline-separated plain text."""
    return raw.translate(_LINE_SEPARATORS)


class EditorWindow(QWidget):
    """Secondary window editing one file buffer."""

    def __init__(self, session: EditorSession, stylesheet: str = "") -> None:
        super().__init__(None)
        self._session = session
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.setWindowTitle(f"nano - {session.name}")
        self.resize(600, 400)

        self.buffer = QPlainTextEdit(self)
        self.buffer.setPlainText(session.initial_content)
        self.buffer.document().setModified(False)
        if stylesheet:
            self.buffer.setStyleSheet(stylesheet)

        self.save_btn = QPushButton("Save and Exit", self)
        self.save_btn.clicked.connect(self._on_save_clicked)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.buffer)
        layout.addWidget(self.save_btn)

    def buffer_content(self) -> str:
        """
        Text to write back to the file.

        An untouched buffer saves the loaded text as is, since the widget
        normalizes line endings and non-breaking spaces.
        """
        document = self.buffer.document()
        if not document.isModified():
            return self._session.initial_content
        return plain_text(document.toRawText())

    @Slot()
    def _on_save_clicked(self) -> None:
        try:
            self._session.save(self.buffer_content())
        except FileRepositoryError as e:
            # Window stays open so the buffer is not lost
            logger.error(f"Could not save {self._session.path}: {e}")
            QMessageBox.critical(self, "Save failed", str(e))
            return
        self.close()
