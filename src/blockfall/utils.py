"""Utility helpers for hosts driving the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import ColorGrid
from .tetromino import Tetromino


BASE_GRAVITY_MS = 800
GRAVITY_STEP_MS = 60
MIN_GRAVITY_MS = 200


def gravity_interval_ms(level: int) -> int:
    """Return the delay in milliseconds between ticks at ``level``.

    The interval shrinks by a fixed step per level and bottoms out at
    ``MIN_GRAVITY_MS``.
    """

    return max(MIN_GRAVITY_MS, BASE_GRAVITY_MS - (level - 1) * GRAVITY_STEP_MS)


def render_grid(
    board: ColorGrid, active: Optional[Tetromino] = None
) -> List[List[Optional[str]]]:
    """Return a copy of a snapshot board with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw.
    Blocks of the active piece above the top row are skipped.
    """

    grid = [list(row) for row in board]
    if active is not None:
        height = len(grid)
        width = len(grid[0]) if grid else 0
        for r, c in active.blocks():
            if 0 <= r < height and 0 <= c < width:
                grid[r][c] = active.color
    return grid
