"""
Custom exceptions for the application.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error categories a shell command can fail with."""

    MISSING_ARGUMENT = "missing_argument"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IO_FAILURE = "io_failure"
    UNKNOWN_COMMAND = "unknown_command"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ShellError(BaseAppError):
    """
    Base exception for errors raised while running a shell command.

    Attributes:
        kind: Category of the failure, used to pick the rendered message
        subject: Argument or path the failure refers to
    """

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, subject: str = ""):
        super().__init__(message)
        self.subject = subject


class MissingArgumentError(ShellError):
    """Exception raised when a command requires an argument and none was given."""

    kind = ErrorKind.MISSING_ARGUMENT


class UnknownCommandError(ShellError):
    """Exception raised for a command name that is not in the dispatch table."""

    kind = ErrorKind.UNKNOWN_COMMAND


class FileRepositoryError(ShellError):
    """Exception raised for file repository errors."""

    kind = ErrorKind.IO_FAILURE


class EntryNotFoundError(FileRepositoryError):
    """Exception raised when a file or directory does not exist."""

    kind = ErrorKind.NOT_FOUND


class NotADirectoryFailure(FileRepositoryError):
    """Exception raised when a directory was expected but something else was found."""

    kind = ErrorKind.NOT_A_DIRECTORY
