from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from connect4.core.board import SIZE, WIDTH


class CommandType(Enum):
    QUIT = "quit"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, index, column) is set on success.
    """
    command: Optional[Command] = None
    index: Optional[int] = None
    column: Optional[int] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (
            self.command is not None or self.index is not None or self.column is not None
        )


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /quit)
      - cell index (e.g. '17')
      - column shorthand (e.g. 'c3' = lowest open cell of column 3)

    This class does NOT check the board. Callers decide whether the move is playable.
    """

    @property
    def help_cmds(self) -> str:
        return ", ".join(["/help", "/quit"])

    def help_text(self) -> str:
        return (
            f"Input: a cell index 0-{SIZE - 1} (shown on the board) "
            f"or a column as c0-c{WIDTH - 1}.\n"
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: Optional[str]) -> ParseResult:
        """Parse a raw input line. Empty input is a no-op (not ok, no error)."""
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")

        if raw.startswith("/"):
            cmd = raw[1:].strip().lower()
            if cmd in ("quit", "q", "exit"):
                return ParseResult(command=Command(CommandType.QUIT, raw))
            if cmd in ("help", "h", "?"):
                return ParseResult(command=Command(CommandType.HELP, raw))
            return ParseResult(error=f"Unknown command: {raw}")

        # move: "17"
        if raw.isdigit():
            index = int(raw)
            if not 0 <= index < SIZE:
                return ParseResult(error=f"Out of bounds: {index} (must be 0..{SIZE - 1})")
            return ParseResult(index=index)

        # move: "c3"
        if raw[0] in "cC" and raw[1:].strip().isdigit():
            column = int(raw[1:].strip())
            if not 0 <= column < WIDTH:
                return ParseResult(error=f"No such column: {column} (must be 0..{WIDTH - 1})")
            return ParseResult(column=column)

        return ParseResult(error="Invalid input. Use a cell index, 'c<column>' or /help")
