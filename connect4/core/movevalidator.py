from __future__ import annotations

from connect4.core.board import Board, Stone, SIZE
from connect4.core.move import Move, MoveResult
from connect4.core.gamestate import GameState
from connect4.core.windetector import is_winning


class MoveValidator:
    """
    Validates moves against the authoritative board:
      - game must still be running
      - the stone must belong to the side to move
      - index in range, cell empty, cell supported from below (gravity)
    A legal move is also classified as winning and/or board-filling.
    """

    def validate(self, board: Board, state: GameState, move: Move) -> MoveResult:
        # ---------- Common validations ----------
        if state.is_game_over():
            return MoveResult.fail("Game is already over.")

        if move.stone != state.current_player:
            return MoveResult.fail("Not your turn.")

        if not board.in_bounds(move.index):
            return MoveResult.fail(f"Move {move.index} is out of bounds.")

        if not board.is_empty(move.index):
            return MoveResult.fail(f"Cell {move.index} is already occupied.")

        if not board.is_legal_move(move.index):
            return MoveResult.fail(f"Cell {move.index} is not supported from below.")

        # ---------- Win / draw checks (virtual placement) ----------
        winning = self._is_winning_move(board, move)
        draw = not winning and board.stones + 1 == SIZE
        return MoveResult.ok(is_winning_move=winning, is_draw=draw)

    def _is_winning_move(self, board: Board, move: Move) -> bool:
        board.apply(move.index, move.stone)
        try:
            return is_winning(board, move.stone)
        finally:
            board.undo(move.index)

    @staticmethod
    def is_playable(board: Board, index: int, stone: Stone) -> bool:
        """Shortcut used by input adapters: legality without turn/state checks."""
        return stone != Stone.EMPTY and board.is_legal_move(index)
