from __future__ import annotations

from typing import List, Sequence

from connect4.core.board import Board, WIDTH
from connect4.ai.config import COLUMN_ORDER


class MoveGenerator:
    """
    Enumerates playable cells for search, one per non-full column.

    Ordering matters: alpha-beta prunes more when strong moves come first,
    and among equally scored moves the search keeps the first one it saw.
    The default visit order is center-out (3, 4, 2, 5, 1, 6, 0).
    """

    def __init__(self, column_order: Sequence[int] = COLUMN_ORDER) -> None:
        if sorted(column_order) != list(range(WIDTH)):
            raise ValueError(f"column_order must be a permutation of 0..{WIDTH - 1}")
        self.column_order = tuple(column_order)

    def legal_moves(self, board: Board) -> List[int]:
        """
        Return the lowest empty cell of every non-full column, in visit order.

        An empty list means the board is full.
        """
        moves: List[int] = []
        for column in self.column_order:
            index = board.lowest_empty(column)
            if index is not None:
                moves.append(index)
        return moves
