"""Board representation for the playfield."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import SHAPE_COLORS, Matrix, Tetromino, TetrominoType


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]
ColorGrid = Tuple[Tuple[Optional[str], ...], ...]

# Mapping from ``TetrominoType`` to the integer stored in the grid.  The
# specific numeric values are not important as long as ``0`` represents an empty
# cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}
VALUE_COLORS = {value: SHAPE_COLORS[t] for t, value in PIECE_VALUES.items()}


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size board holding the locked cells."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def fill_row(self, row: int, value: int = 1, *, skip: Tuple[int, ...] = ()) -> None:
        """Occupy every cell of ``row`` except the columns in ``skip``."""

        for col in range(self.width):
            self.set_cell(row, col, 0 if col in skip else value)

    def collides(self, matrix: Matrix, position: Tuple[int, int]) -> bool:
        """Return ``True`` if ``matrix`` anchored at ``position`` is blocked.

        Occupied cells left or right of the board or below its last row
        collide.  Cells above the top row are only checked against the side
        walls so freshly spawned pieces may hang partly off the grid.
        """

        offsets = np.argwhere(np.asarray(matrix, dtype=np.uint8) != 0)
        if offsets.size == 0:
            return False
        rows = offsets[:, 0] + position[0]
        cols = offsets[:, 1] + position[1]
        if np.any(cols < 0) or np.any(cols >= self.width) or np.any(rows >= self.height):
            return True
        visible = rows >= 0
        return bool(np.any(self.grid[rows[visible], cols[visible]] != 0))

    def merge(self, tetromino: Tetromino) -> None:
        """Write the tetromino's blocks into the board grid.

        Blocks outside the grid are dropped.
        """

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return

        rows, cols = coordinates.T
        inside = (rows >= 0) & (rows < self.height) & (cols >= 0) & (cols < self.width)
        self.grid[rows[inside], cols[inside]] = np.uint8(PIECE_VALUES[tetromino.shape])

    def clear_lines(self) -> int:
        """Clear completed rows and return how many were removed."""

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def colors(self) -> ColorGrid:
        """Return the grid as nested tuples of colour tokens (``None`` if empty)."""

        return tuple(
            tuple(VALUE_COLORS.get(int(value)) for value in row) for row in self.grid
        )

    def copy(self) -> "Board":
        clone = Board(self.width, self.height)
        clone.grid = self.grid.copy()
        return clone
