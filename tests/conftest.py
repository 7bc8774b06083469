from typing import List, Optional

import pytest

from connect4.ai.player import Strategy
from connect4.core.board import Board, Stone


class ScriptedStrategy(Strategy):
    """Plays a fixed list of moves, one per call."""

    def __init__(self, moves: List[int]) -> None:
        self.moves = list(moves)

    def choose_move(self, board: Board, stone: Stone) -> Optional[int]:
        return self.moves.pop(0) if self.moves else None


# A full board without any four in a row, and an alternating move order that builds it.
DRAW_BOARD = "xxooxxo ooxxoox xxooxxo ooxxoox"
DRAW_RED_MOVES = [0, 1, 4, 5, 9, 10, 13, 14, 15, 18, 19, 23, 24, 27]
DRAW_BLUE_MOVES = [2, 3, 6, 7, 8, 11, 12, 16, 17, 20, 21, 22, 25, 26]


@pytest.fixture
def board_from():
    """Build a Board from the literal 28-cell notation (row 0 first)."""
    return Board.from_string
