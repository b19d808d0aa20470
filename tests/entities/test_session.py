import os
from pathlib import Path

import pytest

from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import NotADirectoryFailure


def test_defaults_to_process_cwd():
    assert SessionState().current_directory == Path(os.getcwd())


def test_resolve_relative_and_absolute(temp_directory):
    session = SessionState(temp_directory)

    assert session.resolve("a.txt") == Path(temp_directory) / "a.txt"
    assert session.resolve("/etc/hosts") == Path("/etc/hosts")


def test_resolve_normalized_collapses_dots(temp_directory):
    session = SessionState(os.path.join(temp_directory, "subdir"))

    assert session.resolve_normalized("../subdir/./x/..") == Path(temp_directory) / "subdir"
    assert session.resolve_normalized("..") == Path(temp_directory)


def test_change_to_directory(temp_directory):
    session = SessionState(temp_directory)

    new_dir = session.change_to(os.path.join(temp_directory, "subdir"))

    assert new_dir == Path(temp_directory) / "subdir"
    assert session.current_directory == new_dir


def test_change_to_file_leaves_state_unchanged(temp_directory):
    session = SessionState(temp_directory)

    with pytest.raises(NotADirectoryFailure):
        session.change_to(os.path.join(temp_directory, "test1.txt"))

    assert session.current_directory == Path(temp_directory)


def test_missing_start_directory():
    with pytest.raises(NotADirectoryFailure):
        SessionState("/nonexistent/start")
