from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from connect4.core.board import Board, Stone, NO_MOVE
from connect4.core.windetector import is_winning


class GameOverError(RuntimeError):
    """A player was asked to move when no move can be made."""


class Strategy(ABC):
    """Picks a move for `stone` on a board the caller owns."""

    @abstractmethod
    def choose_move(self, board: Board, stone: Stone) -> Optional[int]:
        """
        Return the index to play, or None if no cell is playable.

        Implementations may mutate the board temporarily but must leave
        it as they found it.
        """
        raise NotImplementedError


class Connect4Player(ABC):
    """What the arena drives: set up once, then one move per turn."""

    @abstractmethod
    def initialize(self, board: Board, stone: Stone) -> None:
        """Called exactly once, before the first play()."""
        raise NotImplementedError

    @abstractmethod
    def play(self, opponent_last_move: Optional[int] = NO_MOVE) -> int:
        """Record the opponent's last move (if any) and return our move."""
        raise NotImplementedError


class StatefulPlayer(Connect4Player):
    """
    Keeps a private board in sync and delegates the actual choice to a Strategy.

    Bookkeeping per turn:
      1) apply the opponent's last move (opponent's stone)
      2) ask the strategy for a move
      3) apply our own move and return it
    """

    def __init__(self, strategy: Strategy, name: Optional[str] = None) -> None:
        self.strategy = strategy
        self.name = name or type(strategy).__name__
        self.board: Optional[Board] = None
        self.stone: Optional[Stone] = None

    def __repr__(self) -> str:
        return f"StatefulPlayer({self.name!r}, stone={self.stone})"

    def initialize(self, board: Board, stone: Stone) -> None:
        if self.board is not None:
            raise GameOverError(f"{self.name} is already initialized")
        if stone == Stone.EMPTY:
            raise ValueError("player stone must be RED or BLUE")
        self.board = board.copy()
        self.stone = stone

    def play(self, opponent_last_move: Optional[int] = NO_MOVE) -> int:
        if self.board is None or self.stone is None:
            raise GameOverError(f"{self.name}: play() called before initialize()")

        if opponent_last_move is not None:
            self.board.apply(opponent_last_move, self.stone.opponent())

        if is_winning(self.board, Stone.RED) or is_winning(self.board, Stone.BLUE) or self.board.is_full():
            raise GameOverError(
                f"{self.name}: game is already over @ {self.board.to_debug_string()}"
            )

        move = self.strategy.choose_move(self.board, self.stone)
        if move is None:
            raise GameOverError(
                f"{self.name}: no move available @ {self.board.to_debug_string()}"
            )
        self.board.apply(move, self.stone)
        return move
