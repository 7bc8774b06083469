from typing import Optional

from connect4.core.board import Board, Stone, HEIGHT, WIDTH
from connect4.ai.player import Strategy


class GreedyStrategy(Strategy):
    """Weak baseline: first open cell scanning columns left to right, bottom to top."""

    def choose_move(self, board: Board, stone: Stone) -> Optional[int]:
        for column in range(WIDTH):
            for row in range(HEIGHT):
                index = board.index_of(row, column)
                if board.is_empty(index):
                    return index
        return None
