from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from connect4.core.board import Board, Stone, HEIGHT, WIDTH
from connect4.core.game import Game


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    MOVE = "MOVE"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and state.
    Examples:
      [ERR] Cell 17 is not supported from below
      [MOVE] RED played 3
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


# =========================
# Screen utils
# =========================

def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


_GREY = "\033[37m"
_RED = "\033[1;31m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


def render_board(board: Board, *, color: bool = True) -> str:
    """
    Pretty multi-line board, top row first.
      - RED stones 'X', BLUE stones 'O'
      - playable empty cells show their index, other empty cells '.'
    """
    def paint(code: str, text: str) -> str:
        return f"{code}{text}{_RESET}" if color else text

    lines: List[str] = []
    for r in range(HEIGHT - 1, -1, -1):
        cells: List[str] = []
        for c in range(WIDTH):
            index = board.index_of(r, c)
            stone = board.get(index)
            if stone == Stone.RED:
                cells.append(paint(_RED, "X") + "  ")
            elif stone == Stone.BLUE:
                cells.append(paint(_BLUE, "O") + "  ")
            elif board.is_legal_move(index):
                cells.append(paint(_GREY, str(index)) + " " + (" " if index < 10 else ""))
            else:
                cells.append(paint(_GREY, ".") + "  ")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


# =========================
# View (board + message + state)
# =========================

class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) state line

    It does NOT:
      - read input
      - validate moves
      - execute game logic
    """

    def __init__(
        self,
        *,
        red_name: str = "RED",
        blue_name: str = "BLUE",
        color: bool = True,
        clear: bool = False,
        out: Callable[[str], None] = print,
    ) -> None:
        self.names = {Stone.RED: red_name, Stone.BLUE: blue_name}
        self.color = color
        self.clear = clear
        self.out = out

        self._message: Optional[Message] = None

    # ---------- Message API ----------

    def set_move(self, stone: Stone, index: int) -> None:
        self._message = Message(
            MessageType.MOVE, f"{self.names[stone]} ({stone.symbol()}) played {index}"
        )

    def show(self, msg: Message) -> None:
        """Print a message immediately, without redrawing the board."""
        self.out(msg.render())

    # ---------- Render ----------

    def render(self, game: Game) -> None:
        """
        Render:
          - board
          - message
          - state
        """
        if self.clear:
            clear_screen()

        # 1) board
        self.out(render_board(game.board, color=self.color))
        self.out("")

        # 2) message
        if self._message is not None:
            self.out(self._message.render())
            self._message = None

        # 3) state
        self.out(self._build_state_line(game))

    def _build_state_line(self, game: Game) -> str:
        if game.winner is not None:
            return (
                f"...and the winner is: {self.names[game.winner]} ({game.winner.symbol()}) "
                f"@ {game.board.to_debug_string()}"
            )
        if game.is_draw:
            return f"...it's a DRAW @ {game.board.to_debug_string()}"
        stone = game.current_player
        return f"{self.names[stone]} ({stone.symbol()}) to play next..."
