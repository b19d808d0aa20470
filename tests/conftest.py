"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from custom_terminal.container import DependencyContainer
from custom_terminal.entities.result import EditorSession
from custom_terminal.entities.session import SessionState
from custom_terminal.ports.ui.interaction_port import InteractionPort


class FakeInteraction(InteractionPort):
    """Interaction double answering confirmations from a preset list."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.questions: list[tuple[str, str]] = []
        self.editors: list[EditorSession] = []

    def confirm(self, title: str, message: str) -> bool:
        self.questions.append((title, message))
        return self.answers.pop(0) if self.answers else False

    def open_editor(self, session: EditorSession) -> None:
        self.editors.append(session)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield os.path.realpath(temp_dir)


@pytest.fixture
def session(temp_directory):
    """Session whose working directory is the temporary directory."""
    return SessionState(temp_directory)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def interaction():
    return FakeInteraction()


@pytest.fixture
def dependency_container(temp_directory, mock_logger):
    """
    Create a dependency container rooted in the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(start_directory=temp_directory)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
