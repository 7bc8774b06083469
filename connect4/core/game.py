# game.py
from __future__ import annotations

from typing import List, Optional

from connect4.core.board import Board, Stone, WIDTH
from connect4.core.move import Move, MoveResult
from connect4.core.gamestate import GameState
from connect4.core.movevalidator import MoveValidator


class Game:
    """
    Authoritative game record kept by the referee.

    Owns:
      - Board
      - MoveValidator
      - GameState (side to move, winner/draw, history, last move)
    """

    def __init__(self, starting_player: Stone = Stone.RED) -> None:
        """
        Initialize game.

        Args:
            starting_player: Stone that moves first (default: RED)
        """
        self.board = Board()
        self.validator = MoveValidator()
        self.starting_player: Stone = starting_player
        self.state = GameState(current_player=starting_player)

    # -------------------------
    # State helpers
    # -------------------------

    @property
    def current_player(self) -> Stone:
        return self.state.current_player

    @property
    def winner(self) -> Optional[Stone]:
        return self.state.winner

    @property
    def is_draw(self) -> bool:
        return self.state.draw

    @property
    def move_history(self) -> List[Move]:
        return self.state.move_history

    @property
    def last_move(self) -> Optional[int]:
        return self.state.last_move

    def is_game_over(self) -> bool:
        """True once there is a winner or the board filled up."""
        return self.state.is_game_over()

    # -------------------------
    # Move / validation
    # -------------------------

    def can_move(self, index: int) -> bool:
        """Check if current player can play at index."""
        move = Move(index=index, stone=self.current_player)
        return self.validator.validate(self.board, self.state, move).success

    def make_move(self, index: int) -> MoveResult:
        """
        Execute a move for the current player.

        Returns:
            MoveResult (success, is_winning_move, is_draw, error_message)
        """
        move = Move(index=index, stone=self.current_player)
        result = self.validator.validate(self.board, self.state, move)
        if not result.success:
            return result

        self.board.apply(index, move.stone)
        self.state.record_move(move)

        if result.is_winning_move:
            self.state.winner = move.stone
            return result
        if result.is_draw:
            self.state.draw = True
            return result

        self.state.switch_turn()
        return result

    def get_valid_moves(self) -> List[int]:
        """All playable indices, left to right."""
        moves: List[int] = []
        for column in range(WIDTH):
            index = self.board.lowest_empty(column)
            if index is not None:
                moves.append(index)
        return moves

    # -------------------------
    # Undo / reset
    # -------------------------

    def undo_last_move(self) -> bool:
        """
        Undo the last move.

        Returns:
            True if undone, False if no move to undo.
        """
        if not self.move_history:
            return False

        last = self.state.move_history.pop()
        self.board.undo(last.index)

        # the player who made the undone move is to move again
        self.state.current_player = last.stone
        self.state.winner = None
        self.state.draw = False
        self.state.last_move = self.move_history[-1].index if self.move_history else None
        return True

    def reset(self) -> None:
        """Reset game to initial state."""
        self.board = Board()
        self.state = GameState(current_player=self.starting_player)
