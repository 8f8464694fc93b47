"""
Shape catalog: the seven tetromino kinds with their occupancy matrices.

Each kind is a tagged record (kind, matrix, color). Matrices are row-major
truth tables where 1 marks an occupied cell of the piece's bounding box:
  - Row 0 is the top of the bounding box, rows increase downward.
  - Column 0 is the left edge, columns increase rightward.

The canonical matrices are read-only numpy arrays. Anything that needs to
mutate a shape (rotation of an active piece) must work on a copy.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class ShapeKind(enum.IntEnum):
    """The seven piece kinds, in catalog order."""
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


# =============================================================================
# Piece Colors (one fixed color per kind)
# =============================================================================

COLOR_CYAN   = "#22d3ee"    # I
COLOR_VIOLET = "#a78bfa"    # O
COLOR_GREEN  = "#34d399"    # T
COLOR_PINK   = "#f472b6"    # S
COLOR_RED    = "#fb7185"    # Z
COLOR_YELLOW = "#facc15"    # J
COLOR_BLUE   = "#60a5fa"    # L


@dataclass(frozen=True, eq=False)
class Shape:
    """Immutable catalog entry for one piece kind.

    Attributes:
        kind: Which of the seven kinds this is.
        matrix: Read-only 2D int8 array of 0/1 occupancy.
        color: Hex color string used for the kind's cells.
    """
    kind: ShapeKind
    matrix: np.ndarray
    color: str


def _frozen(rows: list[list[int]]) -> np.ndarray:
    """Build a read-only int8 matrix from nested lists."""
    matrix = np.array(rows, dtype=np.int8)
    matrix.flags.writeable = False
    return matrix


# =============================================================================
# Tetromino Definitions
# =============================================================================
# Matrices use the smallest bounding box that fits the piece in its spawn
# orientation.

SHAPES: tuple[Shape, ...] = (
    Shape(ShapeKind.I, _frozen([
        [1, 1, 1, 1],
    ]), COLOR_CYAN),
    Shape(ShapeKind.O, _frozen([
        [1, 1],
        [1, 1],
    ]), COLOR_VIOLET),
    Shape(ShapeKind.T, _frozen([
        [0, 1, 0],
        [1, 1, 1],
    ]), COLOR_GREEN),
    Shape(ShapeKind.S, _frozen([
        [0, 1, 1],
        [1, 1, 0],
    ]), COLOR_PINK),
    Shape(ShapeKind.Z, _frozen([
        [1, 1, 0],
        [0, 1, 1],
    ]), COLOR_RED),
    Shape(ShapeKind.J, _frozen([
        [1, 0, 0],
        [1, 1, 1],
    ]), COLOR_YELLOW),
    Shape(ShapeKind.L, _frozen([
        [0, 0, 1],
        [1, 1, 1],
    ]), COLOR_BLUE),
)

_BY_KIND: dict[ShapeKind, Shape] = {shape.kind: shape for shape in SHAPES}


def shape_for(kind: ShapeKind) -> tuple[np.ndarray, str]:
    """Return the canonical matrix and color for a piece kind.

    The returned matrix is read-only; callers that need to mutate it must
    take a copy first.

    Args:
        kind: A ShapeKind value.

    Returns:
        A (matrix, color) tuple.

    Raises:
        KeyError: If kind is not one of the seven catalog kinds.
    """
    shape = _BY_KIND[kind]
    return shape.matrix, shape.color
