"""Line-clear scoring and level progression."""

from __future__ import annotations

# Points for clearing 0..4 rows with a single lock.
LINE_CLEAR_SCORES = (0, 100, 300, 500, 800)
LINES_PER_LEVEL = 10


def score_for(lines: int) -> int:
    """Return the points awarded for clearing ``lines`` rows at once.

    Raises:
        ValueError: If ``lines`` is outside ``0..4``.  A single lock cannot
            complete more rows than a piece is tall.
    """

    if not 0 <= lines < len(LINE_CLEAR_SCORES):
        raise ValueError(f"Cannot score {lines} cleared lines")
    return LINE_CLEAR_SCORES[lines]


def level_for(total_lines: int) -> int:
    """Return the level reached after ``total_lines`` cumulative clears."""

    return total_lines // LINES_PER_LEVEL + 1
