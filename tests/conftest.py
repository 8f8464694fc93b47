import random

import pytest

from blockdrop.game.piece import Piece, rotate
from blockdrop.game.session import GameSession
from blockdrop.game.shapes import ShapeKind, shape_for


def make_piece(kind: ShapeKind, x: int = 3, y: int = 0, turns: int = 0) -> Piece:
    """Build a piece of a given kind, optionally rotated clockwise `turns` times."""
    matrix, color = shape_for(kind)
    shape = matrix.copy()
    for _ in range(turns):
        shape = rotate(shape)
    return Piece(kind, shape, color, x, y)


@pytest.fixture
def session():
    s = GameSession(rng=random.Random(1234))
    s.start()
    return s
