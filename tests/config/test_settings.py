import os

import pytest

from custom_terminal.config.settings import Settings
from custom_terminal.exceptions import ConfigurationError

ENV_KEYS = (
    "TERMINAL_START_DIR",
    "TERMINAL_LOG_LEVEL",
    "TERMINAL_UI_THEME",
    "TERMINAL_FONT_SIZE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.start_directory == os.path.abspath(os.getcwd())
    assert settings.log_level == "WARNING"
    assert settings.ui_theme == "classic"
    assert settings.font_size == 16


def test_values_from_environment(monkeypatch, temp_directory):
    monkeypatch.setenv("TERMINAL_START_DIR", temp_directory)
    monkeypatch.setenv("TERMINAL_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMINAL_UI_THEME", "Light")
    monkeypatch.setenv("TERMINAL_FONT_SIZE", "12")

    settings = Settings()

    assert settings.start_directory == temp_directory
    assert settings.log_level == "DEBUG"
    assert settings.ui_theme == "light"
    assert settings.font_size == 12


def test_blank_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("TERMINAL_UI_THEME", "  ")

    assert Settings().ui_theme == "classic"


@pytest.mark.parametrize(
    "key, value, message",
    [
        ("TERMINAL_START_DIR", "/nonexistent/start", "not an existing directory"),
        ("TERMINAL_LOG_LEVEL", "chatty", "not a valid log level"),
        ("TERMINAL_UI_THEME", "neon", "must be one of"),
        ("TERMINAL_FONT_SIZE", "big", "must be an integer"),
        ("TERMINAL_FONT_SIZE", "0", "must be positive"),
    ],
)
def test_invalid_values(monkeypatch, key, value, message):
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigurationError, match=message):
        Settings()
