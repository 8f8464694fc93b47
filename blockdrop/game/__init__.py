"""Game logic: shape catalog, pieces, board, and game session."""

from blockdrop.game.shapes import SHAPES, Shape, ShapeKind, shape_for
from blockdrop.game.piece import Piece, spawn, rotate
from blockdrop.game.board import Board, ROWS, COLS
from blockdrop.game.session import GameSession, SessionState, Direction, Intent

__all__ = [
    "SHAPES",
    "Shape",
    "ShapeKind",
    "shape_for",
    "Piece",
    "spawn",
    "rotate",
    "Board",
    "ROWS",
    "COLS",
    "GameSession",
    "SessionState",
    "Direction",
    "Intent",
]
