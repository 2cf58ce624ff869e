from __future__ import annotations

import numpy as np
import pytest

from blockfall.board import HEIGHT, PIECE_VALUES, WIDTH, Board
from blockfall.tetromino import BASE_SHAPES, Tetromino, TetrominoType


@pytest.mark.parametrize("shape", list(TetrominoType))
def test_spawned_piece_never_collides_on_empty_board(shape: TetrominoType) -> None:
    board = Board()
    piece = Tetromino.spawn(shape, board.width)
    assert not board.collides(piece.matrix, piece.position)


def test_collides_with_walls_and_floor() -> None:
    board = Board()
    i_shape = BASE_SHAPES[TetrominoType.I]
    assert board.collides(i_shape, (0, -1))
    assert board.collides(i_shape, (0, WIDTH - 3))
    assert not board.collides(i_shape, (0, WIDTH - 4))
    assert board.collides(i_shape, (HEIGHT, 0))
    assert not board.collides(i_shape, (HEIGHT - 1, 0))


def test_rows_above_top_ignore_contents_but_not_walls() -> None:
    board = Board()
    o_shape = BASE_SHAPES[TetrominoType.O]
    board.fill_row(0)
    assert not board.collides(o_shape, (-2, 3))
    assert board.collides(o_shape, (-1, 3))
    assert board.collides(o_shape, (-2, WIDTH - 1))


def test_merge_writes_piece_and_drops_off_grid_cells() -> None:
    board = Board()
    piece = Tetromino(TetrominoType.O, BASE_SHAPES[TetrominoType.O], (-1, 0))
    board.merge(piece)
    value = PIECE_VALUES[TetrominoType.O]
    assert board.get_cell(0, 0) == value
    assert board.get_cell(0, 1) == value
    assert int(np.count_nonzero(board.grid)) == 2


def test_clear_lines_removes_full_rows_and_pads_top() -> None:
    board = Board()
    board.fill_row(19)
    board.fill_row(17)
    board.set_cell(18, 2, 3)
    board.set_cell(16, 5, 4)

    assert board.clear_lines() == 2
    assert board.grid.shape == (HEIGHT, WIDTH)
    assert board.get_cell(19, 2) == 3
    assert board.get_cell(18, 5) == 4
    assert not board.grid[:18].any()


def test_clear_lines_preserves_surviving_row_order() -> None:
    board = Board()
    rng = np.random.default_rng(5)
    for row in range(HEIGHT):
        if row % 3 == 0:
            board.fill_row(row)
        else:
            board.set_cell(row, int(rng.integers(WIDTH)), row + 1)
    survivors = [row.copy() for row in board.grid if not row.all()]

    cleared = board.clear_lines()

    assert cleared == HEIGHT - len(survivors)
    assert board.grid.shape[0] == HEIGHT
    assert not board.grid[:cleared].any()
    for expected, actual in zip(survivors, board.grid[cleared:]):
        assert np.array_equal(expected, actual)


def test_clear_lines_is_idempotent() -> None:
    board = Board()
    board.fill_row(19)
    board.fill_row(18, skip=(4,))
    board.clear_lines()
    before = board.grid.copy()
    assert board.clear_lines() == 0
    assert np.array_equal(board.grid, before)


def test_cell_access_out_of_bounds_raises() -> None:
    board = Board()
    with pytest.raises(IndexError):
        board.get_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 1)


def test_colors_and_copy() -> None:
    board = Board(width=4, height=2)
    board.set_cell(1, 0, PIECE_VALUES[TetrominoType.Z])
    clone = board.copy()
    board.set_cell(0, 0, 1)

    assert clone.colors() == ((None,) * 4, ("#10B981", None, None, None))
    assert clone.width == 4 and clone.height == 2
