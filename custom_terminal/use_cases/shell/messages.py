"""
Text rendering of command results.

All user-facing wording lives here; handlers only return tagged results.
"""

from custom_terminal.entities.result import CommandResult, DeleteReport, OutcomeKind
from custom_terminal.exceptions import ErrorKind
from custom_terminal.use_cases.shell.dispatcher import COMMAND_SPECS

WELCOME_BANNER = "Welcome to the Custom Terminal!\nType 'help' for a list of commands."
FAREWELL = "Goodbye!"
PROMPT = "> "

MISSING_ARGUMENT_MESSAGES: dict[str, str] = {
    "touch": "Error: Missing filename.",
    "cat": "Error: Missing filename.",
    "nano": "Error: Missing filename.",
    "mkdir": "Error: Missing directory name.",
    "cd": "Error: Missing directory.",
    "rm": "Error: Missing file or directory name.",
}

NOT_FOUND_MESSAGES: dict[str, str] = {
    "cat": "Error: File not found.",
    "cd": "Error: Directory not found.",
    "rm": "Error: File or directory not found.",
}


def format_help() -> str:
    lines = ["Available commands:"]
    for spec in COMMAND_SPECS:
        lines.append(f" - {spec['usage']}: {spec['description']}")
    return "\n".join(lines)


def format_delete_failures(report: DeleteReport | None) -> list[str]:
    if report is None:
        return []
    return [f"Warning: could not delete {f.path}: {f.reason}" for f in report.failures]


def _render_error(result: CommandResult) -> str:
    name = result.command.name
    if result.error is ErrorKind.UNKNOWN_COMMAND:
        return f"Unknown command: {result.command.raw}"
    if result.error is ErrorKind.MISSING_ARGUMENT and name in MISSING_ARGUMENT_MESSAGES:
        return MISSING_ARGUMENT_MESSAGES[name]
    if result.error is ErrorKind.NOT_A_DIRECTORY:
        if name == "cd":
            return NOT_FOUND_MESSAGES["cd"]
        if name == "rm" and result.command.is_recursive():
            return f"Error: {result.subject} is not a directory."
    if result.error is ErrorKind.NOT_FOUND and name in NOT_FOUND_MESSAGES:
        return NOT_FOUND_MESSAGES[name]
    return f"Error: {result.text}"


def render_result(result: CommandResult) -> str | None:
    """
    Turn a command result into the text appended to the terminal.

    Returns None for results that print nothing. Empty file content or an
    empty listing still renders as a blank line.
    """
    if not result.ok:
        return _render_error(result)

    kind = result.kind
    subject = result.subject
    if kind is OutcomeKind.HELP:
        return format_help()
    if kind is OutcomeKind.CLEARED:
        return WELCOME_BANNER
    if kind is OutcomeKind.EXITED:
        return FAREWELL
    if kind is OutcomeKind.FILE_CREATED:
        return f"File created: {subject}"
    if kind is OutcomeKind.DIRECTORY_CREATED:
        return f"Directory created: {subject}"
    if kind in (OutcomeKind.FILE_CONTENT, OutcomeKind.LISTING):
        return result.text
    if kind is OutcomeKind.DIRECTORY_CHANGED:
        return f"Current directory: {result.text}"
    if kind is OutcomeKind.FILE_DELETED:
        return f"File deleted: {subject}"
    if kind is OutcomeKind.DELETION_CANCELLED:
        return "Deletion cancelled."
    if kind is OutcomeKind.EDITOR_OPENED:
        return f"Error loading file: {result.text}" if result.text else None

    if kind is OutcomeKind.DIRECTORY_DELETED:
        lines = [f"Directory deleted: {subject}"]
    elif kind is OutcomeKind.TREE_DELETED:
        lines = [f"Directory and contents deleted: {subject}"]
    else:
        raise ValueError(f"Unhandled result kind: {kind}")
    lines.extend(format_delete_failures(result.report))
    return "\n".join(lines)
