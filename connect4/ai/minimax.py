"""Negamax with Alpha-Beta pruning to a fixed depth."""

import logging
from typing import List, Optional, Tuple

from connect4.core.board import Board, Stone
from connect4.core.windetector import is_winning
from connect4.ai.config import (
    DEFAULT_DEPTH,
    DRAW_SCORE,
    LOSE_SCORE,
    MAX_REWARD,
    MIN_REWARD,
    WIN_SCORE,
)
from connect4.ai.heuristics import Heuristic
from connect4.ai.movegen import MoveGenerator
from connect4.ai.player import Strategy

logger = logging.getLogger(__name__)


class NegamaxAI(Strategy):
    """
    Negamax search with Alpha-Beta pruning.

    value(position, me) == -value(position, opponent), so one recursion
    serves both sides. Moves are tried on the board in place and undone
    afterwards; no tree is kept between calls.
    """

    def __init__(
        self,
        max_depth: int = DEFAULT_DEPTH,
        move_generator: Optional[MoveGenerator] = None,
        heuristic: Optional[Heuristic] = None,
    ) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.max_depth = max_depth
        self.move_gen = move_generator or MoveGenerator()
        self.heuristic = heuristic or Heuristic()
        self.nodes_explored = 0
        self.last_score: Optional[int] = None
        self.last_scores: List[Tuple[int, int]] = []

    def __repr__(self) -> str:
        return f"NegamaxAI(max_depth={self.max_depth})"

    def choose_move(self, board: Board, stone: Stone) -> Optional[int]:
        """
        Best move for `stone` on `board`, or None when no cell is playable.

        The board is mutated during the search and restored before returning.
        """
        self.nodes_explored = 0
        self.last_scores = []
        self.last_score = None

        moves = self.move_gen.legal_moves(board)
        if not moves:
            logger.debug("no legal move for %s, board is full", stone)
            return None

        best_move: Optional[int] = None
        best = MIN_REWARD
        beta = MAX_REWARD
        for move in moves:
            board.apply(move, stone)
            value = -self._negamax(board, self.max_depth - 1, -beta, -best, stone.opponent())
            board.undo(move)
            self.last_scores.append((move, value))
            logger.debug("move %d has score <= %d", move, value)
            if value > best:
                best = value
                best_move = move
                if best >= beta:
                    break

        self.last_score = best
        logger.debug(
            "%s plays %s (score %d, depth %d, %d nodes)",
            stone, best_move, best, self.max_depth, self.nodes_explored,
        )
        return best_move

    def _negamax(self, board: Board, depth: int, alpha: int, beta: int, stone: Stone) -> int:
        """Score of `board` for `stone` to move, within the (alpha, beta) window."""
        self.nodes_explored += 1

        # the opponent's last stone may have completed a line
        if is_winning(board, stone.opponent()):
            return LOSE_SCORE - depth
        if is_winning(board, stone):
            return WIN_SCORE + depth
        if depth == 0:
            return self.heuristic.evaluate(board, stone)

        moves = self.move_gen.legal_moves(board)
        if not moves:
            return DRAW_SCORE

        best = alpha
        for move in moves:
            board.apply(move, stone)
            value = -self._negamax(board, depth - 1, -beta, -best, stone.opponent())
            board.undo(move)
            if value > best:
                best = value
                if best >= beta:
                    break
        return best
