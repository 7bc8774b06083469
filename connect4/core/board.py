from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

WIDTH = 7
HEIGHT = 4
SIZE = WIDTH * HEIGHT

# "no move yet" marker handed to the first player
NO_MOVE: Optional[int] = None


class Stone(Enum):
    """Cell contents. RED always moves first."""
    EMPTY = 0
    RED = 1
    BLUE = 2

    def symbol(self) -> str:
        return {0: ".", 1: "X", 2: "O"}[self.value]

    def opponent(self) -> "Stone":
        if self == Stone.RED:
            return Stone.BLUE
        if self == Stone.BLUE:
            return Stone.RED
        return Stone.EMPTY

    def __str__(self) -> str:
        return self.name


class IllegalMoveError(ValueError):
    """Raised when a board operation breaks the gravity/emptiness rule."""


class Board:
    """
    Connect-Four board of WIDTH x HEIGHT cells.

    - Cells are addressed by a single index 0..SIZE-1.
    - Row 0 is the bottom row; column = index % WIDTH.
    - Internally stores the Stone values in a flat numpy int8 array.

    Index layout:
        21 22 23 24 25 26 27
        14 15 16 17 18 19 20
         7  8  9 10 11 12 13
         0  1  2  3  4  5  6
    """

    def __init__(self) -> None:
        self._cells: np.ndarray = np.zeros(SIZE, dtype=np.int8)
        self._stones: int = 0

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the raw cell values."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def stones(self) -> int:
        return self._stones

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._cells = np.copy(self._cells)
        new_board._stones = self._stones
        return new_board

    # ---------- Indexing ----------

    @staticmethod
    def in_bounds(index: int) -> bool:
        return 0 <= index < SIZE

    @staticmethod
    def column_of(index: int) -> int:
        return index % WIDTH

    @staticmethod
    def row_of(index: int) -> int:
        return index // WIDTH

    @staticmethod
    def index_of(row: int, column: int) -> int:
        return row * WIDTH + column

    # ---------- Cell access ----------

    def get(self, index: int) -> Stone:
        return Stone(int(self._cells[index]))

    def is_empty(self, index: int) -> bool:
        return bool(self._cells[index] == Stone.EMPTY.value)

    def is_legal_move(self, index: int) -> bool:
        """True iff index is on the board, empty and supported from below."""
        if not self.in_bounds(index):
            return False
        if self._cells[index] != Stone.EMPTY.value:
            return False
        return index < WIDTH or bool(self._cells[index - WIDTH] != Stone.EMPTY.value)

    def lowest_empty(self, column: int) -> Optional[int]:
        """Index of the lowest empty cell in column, or None if the column is full."""
        for index in range(column, SIZE, WIDTH):
            if self._cells[index] == Stone.EMPTY.value:
                return index
        return None

    def apply(self, index: int, stone: Stone) -> None:
        """
        Put a stone at index.

        Raises:
            IllegalMoveError if the move breaks gravity/emptiness or stone is EMPTY.
        """
        if stone == Stone.EMPTY:
            raise IllegalMoveError("Cannot apply EMPTY")
        if not self.is_legal_move(index):
            raise IllegalMoveError(
                f"cannot play to position {index} @ {self.to_debug_string()}"
            )
        self._cells[index] = stone.value
        self._stones += 1

    def undo(self, index: int) -> None:
        """
        Reset the cell at index to EMPTY.

        Raises:
            IllegalMoveError if the cell is out of range or already empty.
        """
        if not self.in_bounds(index) or self._cells[index] == Stone.EMPTY.value:
            raise IllegalMoveError(
                f"cannot undo position {index} @ {self.to_debug_string()}"
            )
        self._cells[index] = Stone.EMPTY.value
        self._stones -= 1

    def is_full(self) -> bool:
        return self._stones == SIZE

    def is_empty_board(self) -> bool:
        return self._stones == 0

    # ---------- Iteration / helpers ----------

    def iter_stones(self) -> Iterator[Tuple[int, Stone]]:
        """Yield all non-empty cells as (index, Stone)."""
        for index in np.flatnonzero(self._cells):
            yield int(index), Stone(int(self._cells[index]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    # ---------- String forms ----------

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from the literal notation used in tests, e.g.
        "xxxx... ....... ....... ......." (row 0 first).
        'x' = RED, 'o' = BLUE, '.' = empty; every other character is ignored.

        The gravity rule is not enforced here so that hand-crafted
        positions can be expressed directly.
        """
        symbols = {"x": Stone.RED, "o": Stone.BLUE, ".": Stone.EMPTY}
        values: List[int] = [symbols[ch].value for ch in text.lower() if ch in symbols]
        if len(values) != SIZE:
            raise ValueError(f"board string must describe {SIZE} cells, got {len(values)}")
        board = cls()
        board._cells = np.array(values, dtype=np.int8)
        board._stones = int(np.count_nonzero(board._cells))
        return board

    def to_debug_string(self) -> str:
        """Compact one-line dump, rows bottom-up, each row terminated by '-'."""
        rows: List[str] = []
        for r in range(HEIGHT):
            row = "".join(self.get(self.index_of(r, c)).symbol() for c in range(WIDTH))
            rows.append(row + "-")
        return "".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.to_debug_string()!r})"
