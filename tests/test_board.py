import numpy as np

from board import Board
from piece import Piece
from shapes import shape_by_index, SHAPE_NAMES


def make_piece(name, x, y):
    piece = Piece.spawn(shape_by_index(SHAPE_NAMES.index(name)), 10)
    return piece.moved(x - piece.x, y - piece.y)


def test_new_board_is_empty_with_fixed_size():
    board = Board()
    assert board.grid.shape == (20, 10)
    assert board.is_empty()


def test_collides_with_side_walls_and_floor():
    board = Board()
    assert not board.collides(make_piece('O', 0, 0))
    assert not board.collides(make_piece('O', 8, 18))
    assert board.collides(make_piece('O', -1, 0))
    assert board.collides(make_piece('O', 9, 0))
    assert board.collides(make_piece('O', 4, 19))


def test_rows_above_the_field_are_legal():
    board = Board()
    assert not board.collides(make_piece('I', 3, -1))
    assert not board.collides(make_piece('O', 4, -5))
    # x bounds still apply above the field
    assert board.collides(make_piece('I', 7, -1))


def test_collides_with_settled_cells_only_where_occupied():
    board = Board()
    board.grid[1][4] = 3
    # T = [[0,1,0],[1,1,1]]; the empty corner of a T anchored at (3, 0) sits at (3, 0)
    t = make_piece('T', 3, 0)
    assert board.collides(t)
    board.grid[1][4] = 0
    board.grid[0][3] = 3
    assert not board.collides(t)


def test_merge_writes_piece_id_and_drops_cells_above_top():
    board = Board()
    board.merge(make_piece('I', 0, 19))
    assert list(board.grid[19][:4]) == [1, 1, 1, 1]

    board.merge(make_piece('O', 4, -1))
    assert board.grid[0][4] == 2 and board.grid[0][5] == 2
    assert np.count_nonzero(board.grid) == 6


def test_clear_full_lines_without_full_rows_leaves_board_unchanged():
    board = Board()
    board.grid[19][:9] = 5
    board.grid[10][3] = 2
    before = board.grid.copy()
    assert board.clear_full_lines() == 0
    assert np.array_equal(board.grid, before)


def test_clear_full_lines_removes_non_contiguous_rows():
    board = Board()
    board.grid[2][:] = 1
    board.grid[5][:] = 2
    board.grid[0][0] = 3
    board.grid[3][1] = 4
    board.grid[4][2] = 5
    board.grid[6][3] = 6

    assert board.clear_full_lines() == 2

    assert not board.grid[0].any() and not board.grid[1].any()
    assert board.grid[2][0] == 3
    assert board.grid[4][1] == 4
    assert board.grid[5][2] == 5
    assert board.grid[6][3] == 6
    assert np.count_nonzero(board.grid) == 4


def test_clear_full_lines_handles_four_stacked_rows():
    board = Board()
    board.grid[16:20, :] = 7
    board.grid[15][0] = 1
    assert board.clear_full_lines() == 4
    assert board.grid[19][0] == 1
    assert np.count_nonzero(board.grid) == 1
    assert board.grid.shape == (20, 10)


def test_snapshot_is_independent_copy():
    board = Board()
    snap = board.snapshot()
    snap[0][0] = 7
    assert board.grid[0][0] == 0
