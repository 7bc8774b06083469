"""Four-in-a-row detection over the flat board index space."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from connect4.core.board import Board, Stone, HEIGHT, WIDTH


def _windows(starts: List[int], step: int) -> np.ndarray:
    """Index windows of four cells: start, start+step, start+2*step, start+3*step."""
    return np.array([[s + k * step for k in range(4)] for s in starts], dtype=np.intp)


# Vertical: every column, rows r..r+3.
_VERTICAL = _windows(
    [r * WIDTH + c for r in range(HEIGHT - 3) for c in range(WIDTH)], WIDTH
)
# Horizontal: columns 0..3 of every row, so a run never wraps into the next row.
_HORIZONTAL = _windows(
    [r * WIDTH + c for r in range(HEIGHT) for c in range(WIDTH - 3)], 1
)
# Ascending (/): start in columns 0..3, step one row up and one column right.
_ASCENDING = _windows(
    [r * WIDTH + c for r in range(HEIGHT - 3) for c in range(WIDTH - 3)], WIDTH + 1
)
# Descending (\ seen from the left): start in columns 3..6, step one row up and one column left.
_DESCENDING = _windows(
    [r * WIDTH + c for r in range(HEIGHT - 3) for c in range(3, WIDTH)], WIDTH - 1
)

FAMILIES: Tuple[Tuple[str, np.ndarray], ...] = (
    ("vertical", _VERTICAL),
    ("horizontal", _HORIZONTAL),
    ("ascending", _ASCENDING),
    ("descending", _DESCENDING),
)


def _has_run(cells: np.ndarray, windows: np.ndarray, value: int) -> bool:
    return bool(np.any(np.all(cells[windows] == value, axis=1)))


def won_vertical(board: Board, stone: Stone) -> bool:
    return _has_run(board.cells, _VERTICAL, stone.value)


def won_horizontal(board: Board, stone: Stone) -> bool:
    return _has_run(board.cells, _HORIZONTAL, stone.value)


def won_ascending(board: Board, stone: Stone) -> bool:
    return _has_run(board.cells, _ASCENDING, stone.value)


def won_descending(board: Board, stone: Stone) -> bool:
    return _has_run(board.cells, _DESCENDING, stone.value)


def is_winning(board: Board, stone: Stone) -> bool:
    """True if `stone` has four in a row in any direction. EMPTY never wins."""
    if stone == Stone.EMPTY:
        return False
    cells = board.cells
    for _, windows in FAMILIES:
        if _has_run(cells, windows, stone.value):
            return True
    return False


def winning_line(board: Board, stone: Stone) -> List[int]:
    """Indices of the first completed run for `stone`, or [] if there is none."""
    if stone == Stone.EMPTY:
        return []
    cells = board.cells
    for _, windows in FAMILIES:
        hits = np.flatnonzero(np.all(cells[windows] == stone.value, axis=1))
        if hits.size:
            return [int(i) for i in windows[hits[0]]]
    return []
