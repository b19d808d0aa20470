"""
Tests for the console front-end.
"""

import io
import os

import pytest
from rich.console import Console

from custom_terminal.cli_shell import (
    ConsoleInteraction,
    ConsoleShell,
    edited_content,
    main,
)
from custom_terminal.container import DependencyContainer


def _run_shell(start_directory, script):
    output = io.StringIO()
    console = Console(file=output, width=200, color_system=None)
    interaction = ConsoleInteraction(console, stream=io.StringIO(script))
    container = DependencyContainer(start_directory=start_directory)
    shell = ConsoleShell(
        container.get_command_dispatcher(interaction),
        container.get_session(),
        console,
        interaction,
    )
    return shell.run(), output.getvalue()


def test_commands_are_run_until_exit(tmp_path):
    code, output = _run_shell(str(tmp_path), "touch a\nls\nexit\nls\n")

    assert code == 0
    assert "Welcome to the Custom Terminal!" in output
    assert "File created: a" in output
    assert output.rstrip().endswith("Goodbye!")
    assert (tmp_path / "a").exists()


def test_end_of_input_exits_cleanly(tmp_path):
    code, output = _run_shell(str(tmp_path), "mkdir d\n")

    assert code == 0
    assert "Directory created: d" in output
    assert "Goodbye!" in output


def test_errors_do_not_stop_the_loop(tmp_path):
    code, output = _run_shell(str(tmp_path), "frobnicate\ncat\ntouch ok\nexit\n")

    assert code == 0
    assert "Unknown command: frobnicate" in output
    assert "Error: Missing filename." in output
    assert "File created: ok" in output


def test_confirmation_declined(tmp_path):
    code, output = _run_shell(str(tmp_path), "mkdir d\ntouch d/x\nrm d\nn\nexit\n")

    assert "Confirm Delete" in output
    assert "Deletion cancelled." in output
    assert (tmp_path / "d" / "x").exists()


def test_confirmation_accepted(tmp_path):
    code, output = _run_shell(str(tmp_path), "mkdir d\ntouch d/x\nrm d\ny\nexit\n")

    assert "Directory deleted: d" in output
    assert not (tmp_path / "d").exists()


def test_nano_saves_typed_lines(tmp_path):
    code, output = _run_shell(
        str(tmp_path), "nano notes.txt\nfirst\nsecond\n.save\ncat notes.txt\nexit\n"
    )

    assert (tmp_path / "notes.txt").read_text() == "first\nsecond\n"
    assert "Saved: notes.txt" in output


def test_nano_cancel_leaves_file_alone(tmp_path):
    (tmp_path / "keep.txt").write_text("original")

    _run_shell(str(tmp_path), "nano keep.txt\nreplaced\n.cancel\nexit\n")

    assert (tmp_path / "keep.txt").read_text() == "original"


def test_nano_save_without_typing_keeps_contents(tmp_path):
    (tmp_path / "keep.txt").write_bytes(b"original content")

    code, output = _run_shell(str(tmp_path), "nano keep.txt\n.save\nexit\n")

    assert code == 0
    assert "Saved: keep.txt" in output
    assert (tmp_path / "keep.txt").read_bytes() == b"original content"


def test_nano_append_mode_adds_lines(tmp_path):
    (tmp_path / "log.txt").write_text("one")

    _run_shell(str(tmp_path), "nano log.txt\n.append\ntwo\n.save\nexit\n")

    assert (tmp_path / "log.txt").read_text() == "one\ntwo\n"


def test_edited_content():
    assert edited_content("a\r\nb", []) == "a\r\nb"
    assert edited_content("old\n", ["new"]) == "new\n"
    assert edited_content("old\n", ["new"], append=True) == "old\nnew\n"
    assert edited_content("", ["x"], append=True) == "x\n"


def test_main_runs_in_start_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("touch from_main\nexit\n"))

    code = main(["--start-dir", str(tmp_path)])

    assert code == 0
    assert (tmp_path / "from_main").exists()
    assert "Goodbye!" in capsys.readouterr().out


def test_main_rejects_missing_start_directory(capsys):
    code = main(["--start-dir", os.path.join("/nonexistent", "start")])

    assert code == 2
    assert "Error:" in capsys.readouterr().err
