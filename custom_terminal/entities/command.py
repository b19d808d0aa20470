from dataclasses import dataclass
from typing import Optional

RECURSIVE_FLAG = "-r"


@dataclass(frozen=True)
class Command:
    """Command parsed from one line typed into the shell."""

    name: str
    argument: str
    raw: str

    @classmethod
    def parse(cls, raw_line: str) -> Optional["Command"]:
        """Split a line on its first space; return None for blank input."""
        raw = raw_line.strip()
        if not raw:
            return None
        parts = raw.split(" ", 1)
        argument = parts[1].strip() if len(parts) > 1 else ""
        return cls(name=parts[0], argument=argument, raw=raw)

    def has_argument(self) -> bool:
        return bool(self.argument)

    def is_recursive(self) -> bool:
        # '-r' is a literal prefix token, not a parsed flag
        return self.argument == RECURSIVE_FLAG or self.argument.startswith(
            RECURSIVE_FLAG + " "
        )

    def target(self) -> str:
        """Argument with the recursive prefix removed, if any."""
        if self.is_recursive():
            return self.argument[len(RECURSIVE_FLAG) :].strip()
        return self.argument
