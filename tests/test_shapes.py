import numpy as np
import pytest

from blockdrop.game.shapes import SHAPES, ShapeKind, shape_for


def test_catalog_has_seven_kinds_in_order():
    assert [s.kind for s in SHAPES] == list(ShapeKind)
    assert [k.name for k in ShapeKind] == ["I", "O", "T", "S", "Z", "J", "L"]


def test_matrices_are_rectangular_binary_and_have_four_cells():
    for shape in SHAPES:
        assert shape.matrix.ndim == 2
        assert set(np.unique(shape.matrix)) <= {0, 1}
        assert int(shape.matrix.sum()) == 4


def test_canonical_matrices_are_read_only():
    matrix, _ = shape_for(ShapeKind.T)
    with pytest.raises(ValueError):
        matrix[0, 0] = 1


def test_colors_are_stable_and_distinct():
    colors = [shape_for(kind)[1] for kind in ShapeKind]
    assert len(set(colors)) == 7
    assert shape_for(ShapeKind.I)[1] == "#22d3ee"
    assert colors == [shape_for(kind)[1] for kind in ShapeKind]


def test_shape_for_known_matrices():
    np.testing.assert_array_equal(shape_for(ShapeKind.I)[0], [[1, 1, 1, 1]])
    np.testing.assert_array_equal(shape_for(ShapeKind.S)[0], [[0, 1, 1], [1, 1, 0]])


def test_shape_for_unknown_kind_raises():
    with pytest.raises(KeyError):
        shape_for(99)
