"""
Tests for the RemoveTreeUseCase.
"""

import os
from unittest.mock import MagicMock, call

import pytest

from custom_terminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from custom_terminal.entities.result import DeleteFailure
from custom_terminal.exceptions import (
    FileRepositoryError,
    MissingArgumentError,
    NotADirectoryFailure,
)
from custom_terminal.ports.files.file_repository_port import FileRepositoryPort
from custom_terminal.use_cases.files.remove_tree import RemoveTreeUseCase


class TestRemoveTreeUseCase:
    """Test cases for the RemoveTreeUseCase."""

    def test_deletes_deepest_paths_first(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.walk.return_value = (
            ["/r", "/r/a", "/r/a/b.txt", "/r/c.txt"],
            [],
        )

        report = RemoveTreeUseCase(mock_repository, mock_logger).delete_tree("/r")

        assert mock_repository.delete.call_args_list == [
            call("/r/a/b.txt"),
            call("/r/a"),
            call("/r/c.txt"),
            call("/r"),
        ]
        assert report.ok is True
        assert report.deleted == ["/r/a/b.txt", "/r/a", "/r/c.txt", "/r"]

    def test_failure_does_not_abort_remaining_deletions(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.walk.return_value = (
            ["/r", "/r/a", "/r/a/b.txt", "/r/c.txt"],
            [],
        )

        def _delete(path):
            if path == "/r/a/b.txt":
                raise FileRepositoryError("Permission denied: /r/a/b.txt")

        mock_repository.delete.side_effect = _delete

        report = RemoveTreeUseCase(mock_repository, mock_logger).delete_tree("/r")

        assert mock_repository.delete.call_count == 4
        assert report.ok is False
        assert report.failures == [
            DeleteFailure("/r/a/b.txt", "Permission denied: /r/a/b.txt")
        ]
        assert "/r/c.txt" in report.deleted
        mock_logger.warning.assert_called_once_with(
            "Could not delete /r/a/b.txt: Permission denied: /r/a/b.txt"
        )

    def test_unreadable_directories_are_reported(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.walk.return_value = (["/r"], [("/r/locked", "Permission denied")])

        report = RemoveTreeUseCase(mock_repository, mock_logger).delete_tree("/r")

        assert report.failures == [DeleteFailure("/r/locked", "Permission denied")]

    def test_execute_removes_nested_tree(self, session, mock_logger):
        root = session.current_directory / "d"
        (root / "x" / "y").mkdir(parents=True)
        (root / "x" / "y" / "deep.txt").write_text("deep")
        (root / "top.txt").write_text("top")
        use_case = RemoveTreeUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        report = use_case.execute(session, "d")

        assert report.ok is True
        assert report.root == str(root)
        assert not os.path.exists(root)
        assert len(report.deleted) == 5

    def test_execute_on_link_keeps_target(self, session, mock_logger, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        link = session.current_directory / "link"
        os.symlink(str(outside), str(link))
        use_case = RemoveTreeUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        report = use_case.execute(session, "link")

        assert report.deleted == [str(link)]
        assert not os.path.lexists(link)
        assert (outside / "keep.txt").exists()

    def test_execute_on_file(self, session, mock_logger):
        use_case = RemoveTreeUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        with pytest.raises(NotADirectoryFailure, match="test1.txt is not a directory."):
            use_case.execute(session, "test1.txt")

        assert (session.current_directory / "test1.txt").exists()

    def test_execute_on_missing_target(self, session, mock_logger):
        use_case = RemoveTreeUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        with pytest.raises(NotADirectoryFailure):
            use_case.execute(session, "missing")

    def test_execute_without_name(self, session, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)

        with pytest.raises(MissingArgumentError):
            RemoveTreeUseCase(mock_repository, mock_logger).execute(session, "")

        mock_repository.walk.assert_not_called()
