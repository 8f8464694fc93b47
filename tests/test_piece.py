import random

import numpy as np

from blockdrop.game.piece import SPAWN_X, SPAWN_Y, rotate, spawn
from blockdrop.game.shapes import SHAPES, ShapeKind, shape_for

from conftest import make_piece


def test_spawn_position_and_independent_matrix():
    piece = spawn(random.Random(0))
    template, color = shape_for(piece.kind)

    assert (piece.x, piece.y) == (SPAWN_X, SPAWN_Y) == (3, 0)
    assert piece.color == color
    np.testing.assert_array_equal(piece.shape, template)
    assert not np.shares_memory(piece.shape, template)

    piece.shape[0, 0] = 1 - piece.shape[0, 0]
    assert not np.array_equal(piece.shape, template)


def test_spawn_picks_every_kind_with_repeats_allowed():
    rng = random.Random(42)
    kinds = [spawn(rng).kind for _ in range(700)]
    assert set(kinds) == set(ShapeKind)
    assert any(a == b for a, b in zip(kinds, kinds[1:]))


def test_spawn_is_reproducible_with_seed():
    a = [spawn(random.Random(7)).kind for _ in range(5)]
    b = [spawn(random.Random(7)).kind for _ in range(5)]
    assert a == b


def test_rotate_is_clockwise():
    vertical = rotate(shape_for(ShapeKind.I)[0])
    np.testing.assert_array_equal(vertical, [[1], [1], [1], [1]])

    t_right = rotate(shape_for(ShapeKind.T)[0])
    np.testing.assert_array_equal(t_right, [[1, 0], [1, 1], [1, 0]])

    l_down = rotate(shape_for(ShapeKind.L)[0])
    np.testing.assert_array_equal(l_down, [[1, 0], [1, 0], [1, 1]])


def test_rotate_four_times_is_identity():
    for shape in SHAPES:
        m = shape.matrix
        for _ in range(4):
            m = rotate(m)
        np.testing.assert_array_equal(m, shape.matrix)


def test_rotate_leaves_input_untouched_and_returns_writable_copy():
    template = shape_for(ShapeKind.Z)[0]
    before = template.copy()
    rotated = rotate(template)
    np.testing.assert_array_equal(template, before)
    assert rotated.flags.writeable
    assert not np.shares_memory(rotated, template)


def test_rotate_accepts_nested_lists():
    np.testing.assert_array_equal(rotate([[1, 0], [1, 1]]), [[1, 1], [1, 0]])


def test_cells_are_board_coordinates():
    piece = make_piece(ShapeKind.O, x=3, y=18)
    assert sorted(piece.cells()) == [(3, 18), (3, 19), (4, 18), (4, 19)]
