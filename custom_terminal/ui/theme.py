from __future__ import annotations

from typing import Literal

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

ThemeName = Literal["classic", "dark", "light"]

# window, base (text areas), text, button, highlight
_COLORS: dict[str, dict[str, tuple[int, int, int]]] = {
    "classic": {
        "window": (0, 0, 0),
        "base": (0, 0, 0),
        "text": (0, 255, 0),
        "button": (20, 20, 20),
        "highlight": (0, 128, 0),
    },
    "dark": {
        "window": (17, 18, 23),
        "base": (22, 24, 31),
        "text": (235, 238, 246),
        "button": (39, 43, 56),
        "highlight": (108, 156, 255),
    },
    "light": {
        "window": (248, 249, 251),
        "base": (255, 255, 255),
        "text": (24, 28, 37),
        "button": (255, 255, 255),
        "highlight": (62, 121, 247),
    },
}


def available_themes() -> list[ThemeName]:
    return ["classic", "dark", "light"]


def _color(theme: ThemeName, role: str) -> QColor:
    return QColor(*_COLORS[theme][role])


def _apply_palette(app: QApplication, theme: ThemeName) -> None:
    # Start from Fusion for consistent cross‑platform rendering
    app.setStyle("Fusion")
    pal = QPalette()
    cr = QPalette.ColorRole
    text = _color(theme, "text")
    pal.setColor(cr.Window, _color(theme, "window"))
    pal.setColor(cr.WindowText, text)
    pal.setColor(cr.Base, _color(theme, "base"))
    pal.setColor(cr.AlternateBase, _color(theme, "button"))
    pal.setColor(cr.Text, text)
    pal.setColor(cr.Button, _color(theme, "button"))
    pal.setColor(cr.ButtonText, text)
    pal.setColor(cr.Highlight, _color(theme, "highlight"))
    pal.setColor(cr.HighlightedText, _color(theme, "base"))
    app.setPalette(pal)


def text_area_stylesheet(theme: ThemeName, font_size: int) -> str:
    """Stylesheet for the transcript, input line and editor buffers."""
    base = _color(theme, "base").name()
    text = _color(theme, "text").name()
    return (
        "QPlainTextEdit, QLineEdit, QLabel#prompt {"
        f" background: {base}; color: {text}; border: none;"
        f" font-family: Monospace; font-size: {font_size}pt;"
        " }"
    )


def apply_theme(app: QApplication, theme: str) -> ThemeName:
    """Apply a theme and return the active theme name."""
    name = theme.lower()
    if name not in available_themes():
        name = "classic"

    _apply_palette(app, name)  # type: ignore[arg-type]
    app.setProperty("activeTheme", name)
    return name  # type: ignore[return-value]


def next_theme(current: ThemeName) -> ThemeName:
    themes = available_themes()
    return themes[(themes.index(current) + 1) % len(themes)]
