from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from custom_terminal.cli_shell import LOG_FORMAT, build_parser
from custom_terminal.container import DependencyContainer
from custom_terminal.exceptions import BaseAppError

from .main_window import TerminalWindow
from .theme import apply_theme


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv

    # Qt consumes its own options; ours are parsed from what is left
    args, _ = build_parser("custom-terminal").parse_known_args(argv[1:])
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

    app = QApplication(argv)
    theme = apply_theme(app, settings.ui_theme)

    win = TerminalWindow(
        container.get_command_dispatcher(),
        session,
        theme=theme,
        font_size=settings.font_size,
    )
    win.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
