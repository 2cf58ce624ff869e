"""Tetromino definitions and basic behaviour.

The catalog holds the spawn matrix and display colour of the seven piece
kinds.  A :class:`Tetromino` is an immutable value: moving or rotating a piece
returns a new one, which leaves validation against the board to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Protocol, Sequence, Tuple

import numpy as np

Matrix = Tuple[Tuple[int, ...], ...]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


class RandomSource(Protocol):
    """Anything able to pick an element, e.g. :class:`random.Random`."""

    def choice(self, seq: Sequence[TetrominoType]) -> TetrominoType:
        ...


# Spawn orientation for each tetromino.  Rotated states are derived on demand
# via ``rotate_matrix`` and never stored here.
BASE_SHAPES: Dict[TetrominoType, Matrix] = {
    TetrominoType.I: ((1, 1, 1, 1),),
    TetrominoType.O: ((1, 1), (1, 1)),
    TetrominoType.T: ((0, 1, 0), (1, 1, 1)),
    TetrominoType.S: ((0, 1, 1), (1, 1, 0)),
    TetrominoType.Z: ((1, 1, 0), (0, 1, 1)),
    TetrominoType.J: ((1, 0, 0), (1, 1, 1)),
    TetrominoType.L: ((0, 0, 1), (1, 1, 1)),
}

SHAPE_COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#9b87f5",
    TetrominoType.O: "#0EA5E9",
    TetrominoType.T: "#D946EF",
    TetrominoType.S: "#F97316",
    TetrominoType.Z: "#10B981",
    TetrominoType.J: "#F59E0B",
    TetrominoType.L: "#EF4444",
}

_ALL_TYPES: Tuple[TetrominoType, ...] = tuple(TetrominoType)


def rotate_matrix(matrix: Matrix) -> Matrix:
    """Return ``matrix`` rotated 90 degrees clockwise.

    Equivalent to transposing the matrix and reversing every resulting row.
    """

    rotated = np.rot90(np.asarray(matrix, dtype=np.uint8), k=-1)
    return tuple(tuple(int(v) for v in row) for row in rotated)


def random_type(rng: RandomSource) -> TetrominoType:
    """Draw a tetromino kind uniformly and independently of earlier draws."""

    return rng.choice(_ALL_TYPES)


@dataclass(frozen=True)
class Tetromino:
    """Falling piece: a kind, its current matrix and a top-left anchor."""

    shape: TetrominoType
    matrix: Matrix
    position: Tuple[int, int] = (0, 0)  # (row, col)

    @classmethod
    def spawn(cls, shape: TetrominoType, board_width: int) -> "Tetromino":
        """Create ``shape`` in its base orientation at the spawn point.

        Pieces spawn on the top row with their anchor one column left of the
        board centre.
        """

        return cls(shape, BASE_SHAPES[shape], (0, board_width // 2 - 1))

    @property
    def color(self) -> str:
        return SHAPE_COLORS[self.shape]

    @property
    def width(self) -> int:
        return len(self.matrix[0])

    @property
    def height(self) -> int:
        return len(self.matrix)

    def rotate(self) -> "Tetromino":
        """Return this piece rotated clockwise in place of its anchor."""

        return replace(self, matrix=rotate_matrix(self.matrix))

    def move(self, dy: int, dx: int) -> "Tetromino":
        """Return this piece translated by ``dy`` rows and ``dx`` columns."""

        row, col = self.position
        return replace(self, position=(row + dy, col + dx))

    def at(self, position: Tuple[int, int]) -> "Tetromino":
        return replace(self, position=position)

    def cells(self) -> List[Tuple[int, int]]:
        """Return the occupied ``(row, col)`` offsets relative to the anchor."""

        return [
            (r, c)
            for r, row in enumerate(self.matrix)
            for c, value in enumerate(row)
            if value
        ]

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the global block coordinates for this piece."""

        row, col = self.position
        return [(row + dr, col + dc) for dr, dc in self.cells()]
