import argparse
import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.text import Text
from typing_extensions import override

from custom_terminal.container import DependencyContainer
from custom_terminal.entities.result import EditorSession, OutcomeKind
from custom_terminal.entities.session import SessionState
from custom_terminal.exceptions import BaseAppError, FileRepositoryError
from custom_terminal.ports.ui.interaction_port import InteractionPort
from custom_terminal.use_cases.shell.dispatcher import CommandDispatcher
from custom_terminal.use_cases.shell.messages import (
    FAREWELL,
    PROMPT,
    WELCOME_BANNER,
    render_result,
)

SAVE_MARKER = ".save"
CANCEL_MARKER = ".cancel"
APPEND_MARKER = ".append"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def edited_content(initial: str, lines: list[str], append: bool = False) -> str:
    """
    Build the text saved by the console editor.

    With no typed lines the buffer is saved exactly as it was loaded. Otherwise
    the typed lines replace it, or follow it on a new line in append mode.
    """
    if not lines:
        return initial
    typed = "".join(f"{line}\n" for line in lines)
    if not append:
        return typed
    if initial and not initial.endswith("\n"):
        initial += "\n"
    return initial + typed


class ConsoleInteraction(InteractionPort):
    """Answers confirmations and edits buffers on a rich console."""

    def __init__(self, console: Console, stream: Optional[TextIO] = None):
        """
        Args:
            console: Console to print to
            stream: Where to read answers from. Defaults to stdin.
        """
        self._console = console
        self._stream = stream

    def read_line(self, prompt: str = "") -> str:
        """Read one line; raises EOFError when input is exhausted."""
        if self._stream is None:
            return self._console.input(prompt)
        line = self._console.input(prompt, stream=self._stream)
        if line == "":
            raise EOFError
        return line.rstrip("\n")

    @override
    def confirm(self, title: str, message: str) -> bool:
        return Confirm.ask(
            f"[bold]{title}[/bold]: {message}",
            console=self._console,
            default=False,
            stream=self._stream,
        )

    @override
    def open_editor(self, session: EditorSession) -> None:
        self._console.print(
            Panel(
                Text(session.initial_content),
                title=f"nano - {session.name}",
                border_style="green",
            )
        )
        self._console.print(
            f"Typed lines replace the contents; start with '{APPEND_MARKER}' to add "
            f"to them instead. End with '{SAVE_MARKER}' to save or "
            f"'{CANCEL_MARKER}' to discard.",
            markup=False,
        )
        lines: list[str] = []
        append = False
        while True:
            try:
                line = self.read_line()
            except EOFError:
                self._console.print("Edit cancelled.")
                return
            if line == CANCEL_MARKER:
                self._console.print("Edit cancelled.")
                return
            if line == APPEND_MARKER and not lines:
                append = True
                continue
            if line != SAVE_MARKER:
                lines.append(line)
                continue
            try:
                session.save(edited_content(session.initial_content, lines, append))
            except FileRepositoryError as e:
                # Keep the buffer so the user can retry or cancel
                self._console.print(f"Error: {e}", style="red", markup=False)
                continue
            self._console.print(f"Saved: {session.name}", markup=False)
            return


class ConsoleShell:
    """Read-dispatch-print loop on a console."""

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        session: SessionState,
        console: Console,
        interaction: ConsoleInteraction,
    ):
        self._dispatcher = dispatcher
        self._session = session
        self._console = console
        self._interaction = interaction

    def _print(self, text: str, error: bool = False) -> None:
        self._console.print(
            text, style="red" if error else None, markup=False, highlight=False
        )

    def run(self) -> int:
        self._print(WELCOME_BANNER)
        while True:
            try:
                line = self._interaction.read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._print(FAREWELL)
                return 0

            result = self._dispatcher.execute(line, self._session)
            if result is None:
                continue
            if result.kind is OutcomeKind.CLEARED:
                self._console.clear()
            text = render_result(result)
            if text is not None:
                self._print(text, error=not result.ok)
            if result.kind is OutcomeKind.EXITED:
                return 0


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Small shell for creating, reading, listing and removing files.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Initial working directory (default: TERMINAL_START_DIR or cwd)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: TERMINAL_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser("custom-terminal-cli")
    args = parser.parse_args(argv)
    console = Console(highlight=False)

    try:
        from custom_terminal.config.settings import settings

        logging.basicConfig(
            level=(args.log_level or settings.log_level).upper(), format=LOG_FORMAT
        )
        container = DependencyContainer(start_directory=args.start_dir)
        session = container.get_session()
    except (BaseAppError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    interaction = ConsoleInteraction(console)
    dispatcher = container.get_command_dispatcher(interaction)
    return ConsoleShell(dispatcher, session, console, interaction).run()


if __name__ == "__main__":
    raise SystemExit(main())
