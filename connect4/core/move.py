from __future__ import annotations
from dataclasses import dataclass
from connect4.core.board import Board, Stone

@dataclass(frozen=True)
class Move:
    """A stone dropped at a board index."""
    index: int
    stone: Stone

    @property
    def column(self) -> int:
        return Board.column_of(self.index)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.stone} at {self.index} (column {self.column})"

@dataclass
class MoveResult:
    """Result of executing a move."""
    success: bool
    is_winning_move: bool = False
    is_draw: bool = False
    error_message: str = ""

    @staticmethod
    def ok(*, is_winning_move: bool = False, is_draw: bool = False) -> "MoveResult":
        return MoveResult(
            success=True,
            is_winning_move=is_winning_move,
            is_draw=is_draw,
            error_message="",
        )

    @staticmethod
    def fail(msg: str) -> "MoveResult":
        return MoveResult(
            success=False,
            is_winning_move=False,
            is_draw=False,
            error_message=msg,
        )
