"""Static leaf evaluation: column control, no threat analysis."""

import numpy as np

from connect4.core.board import Board, Stone, SIZE, WIDTH
from connect4.ai.config import COLUMN_WEIGHTS


# Weight of every cell, looked up by its column.
CELL_WEIGHTS = np.array([COLUMN_WEIGHTS[i % WIDTH] for i in range(SIZE)], dtype=np.int32)


class Heuristic:
    """Scores a non-terminal board from one side's perspective."""

    def __init__(self, cell_weights: np.ndarray = CELL_WEIGHTS) -> None:
        self.cell_weights = cell_weights

    def evaluate(self, board: Board, stone: Stone) -> int:
        """
        Sum the column weights of every cell occupied by `stone`.

        The opponent's stones are not subtracted and terminal positions are
        not re-checked; the search handles wins before calling this.
        """
        return int(self.cell_weights[board.cells == stone.value].sum())
