"""
Session state domain entity.
"""

import os
from pathlib import Path
from typing import Optional, Union

from custom_terminal.exceptions import NotADirectoryFailure

PathLike = Union[str, os.PathLike]


class SessionState:
    """
    Working directory of one running shell.

    The directory is always absolute and normalized. It only changes through
    change_to(), which refuses anything that is not an existing directory.
    """

    def __init__(self, current_directory: Optional[PathLike] = None):
        """
        Initialize the session.

        Args:
            current_directory: Initial working directory. Defaults to the process cwd.

        Raises:
            NotADirectoryFailure: If the directory does not exist
        """
        self._current_directory: Path = Path(os.getcwd())
        self.change_to(current_directory if current_directory is not None else os.getcwd())

    @property
    def current_directory(self) -> Path:
        return self._current_directory

    def resolve(self, argument: str) -> Path:
        """
        Join an argument onto the working directory.

        Absolute arguments replace the working directory, following normal
        path-joining rules.
        """
        return self._current_directory / argument

    def resolve_normalized(self, argument: str) -> Path:
        """Resolve an argument and lexically collapse '.' and '..' segments."""
        return Path(os.path.normpath(self.resolve(argument)))

    def change_to(self, directory: PathLike) -> Path:
        """
        Replace the working directory.

        Raises:
            NotADirectoryFailure: If the target is not an existing directory
        """
        target = Path(os.path.normpath(os.path.abspath(directory)))
        if not target.is_dir():
            raise NotADirectoryFailure(
                f"Path is not a directory: {target}", subject=str(directory)
            )
        self._current_directory = target
        return target

    def __repr__(self) -> str:
        return f"SessionState(current_directory='{self._current_directory}')"
