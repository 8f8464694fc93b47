"""Active piece: a shape instance with a board-relative position."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from blockdrop.game.shapes import SHAPES, ShapeKind

# Spawn position of every new piece (column, row of the bounding box's top-left).
SPAWN_X = 3
SPAWN_Y = 0


@dataclass
class Piece:
    """A falling piece.

    Attributes:
        kind: The catalog kind this piece was spawned from.
        shape: Mutable 2D int8 occupancy matrix, owned by this piece.
        color: Hex color string written into the board on lock.
        x: Column offset of the bounding box's top-left corner.
        y: Row offset of the bounding box's top-left corner.
    """
    kind: ShapeKind
    shape: np.ndarray
    color: str
    x: int = SPAWN_X
    y: int = SPAWN_Y

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (col, row) board coordinates of every occupied cell."""
        rows, cols = self.shape.shape
        for r in range(rows):
            for c in range(cols):
                if self.shape[r, c] != 0:
                    yield self.x + c, self.y + r

    def copy(self) -> Piece:
        """Return an independent copy (shape matrix included)."""
        return Piece(self.kind, self.shape.copy(), self.color, self.x, self.y)


def spawn(rng: random.Random | None = None) -> Piece:
    """Create a new piece of a uniformly random kind at the spawn position.

    Every kind is equally likely on every call; there is no bag, so the same
    kind can come up several times in a row.

    Args:
        rng: Optional random generator (for reproducible sequences).
             Falls back to the module-level ``random`` functions.

    Returns:
        A Piece at (SPAWN_X, SPAWN_Y) with its own copy of the kind's matrix.
    """
    chooser = rng if rng is not None else random
    template = chooser.choice(SHAPES)
    return Piece(
        kind=template.kind,
        shape=template.matrix.copy(),
        color=template.color,
        x=SPAWN_X,
        y=SPAWN_Y,
    )


def rotate(matrix: np.ndarray) -> np.ndarray:
    """Rotate an occupancy matrix 90 degrees clockwise.

    Output row i is input column i read bottom-to-top (transpose, then
    reverse each row). The result is a fresh, writable array. No board
    legality is checked here.

    Args:
        matrix: 2D occupancy matrix of shape (rows, cols).

    Returns:
        New matrix of shape (cols, rows).
    """
    return np.asarray(matrix).T[:, ::-1].copy()
