import numpy as np
import pytest

from piece import Piece, rotate_cw
from shapes import SHAPE_NAMES, SHAPES, shape_by_index


def test_rotate_cw_maps_rows_to_columns():
    grid = np.array([[1, 2, 3],
                     [4, 5, 6]])
    rotated = rotate_cw(grid)
    assert rotated.shape == (3, 2)
    h = grid.shape[0]
    for y in range(grid.shape[0]):
        for x in range(grid.shape[1]):
            assert rotated[x][h - 1 - y] == grid[y][x]


def test_rotate_cw_of_t_piece():
    t = shape_by_index(SHAPE_NAMES.index('T')).shape
    assert rotate_cw(t).tolist() == [[1, 0], [1, 1], [1, 0]]


@pytest.mark.parametrize("name", SHAPE_NAMES)
def test_four_rotations_return_original(name):
    grid = shape_by_index(SHAPE_NAMES.index(name)).shape
    out = grid
    for _ in range(4):
        out = rotate_cw(out)
    assert np.array_equal(out, grid)


def test_rotate_cw_does_not_alias_input():
    grid = np.array([[1, 0], [1, 1]])
    rotated = rotate_cw(grid)
    rotated[0][0] = 9
    assert grid.tolist() == [[1, 0], [1, 1]]


@pytest.mark.parametrize("name, x", [('I', 3), ('O', 4), ('T', 3), ('S', 3), ('J', 3)])
def test_spawn_is_centered_at_top(name, x):
    piece = Piece.spawn(shape_by_index(SHAPE_NAMES.index(name)), 10)
    assert (piece.x, piece.y) == (x, 0)
    assert piece.id == SHAPE_NAMES.index(name) + 1


def test_moved_and_rotated_return_new_pieces():
    piece = Piece.spawn(shape_by_index(SHAPE_NAMES.index('L')), 10)
    moved = piece.moved(-2, 3)
    assert (moved.x, moved.y) == (1, 3)
    assert (piece.x, piece.y) == (3, 0)

    rotated = piece.rotated()
    assert rotated.shape.shape == (3, 2)
    assert piece.shape.tolist() == SHAPES['L']


def test_tetromino_is_base_orientation():
    piece = Piece.spawn(shape_by_index(SHAPE_NAMES.index('S')), 10).rotated()
    assert piece.tetromino().shape.tolist() == SHAPES['S']


def test_cells_are_absolute_coordinates():
    piece = Piece.spawn(shape_by_index(SHAPE_NAMES.index('O')), 10).moved(0, 5)
    assert sorted(piece.cells()) == [(4, 5), (4, 6), (5, 5), (5, 6)]
