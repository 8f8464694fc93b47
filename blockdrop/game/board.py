"""
Board logic for a 10x20 grid of locked cells.

The board is a 2D numpy object array (rows x cols):
  - None = empty cell
  - str  = hex color of the piece that locked there

Row 0 is the top of the board. Board operations that change cells
(merge, line clear) return a new Board and leave the original untouched,
so the owner of a board decides when to swap it in.
"""

from __future__ import annotations

import numpy as np

from blockdrop.game.piece import Piece

ROWS = 20
COLS = 10


class Board:
    """Fixed-size grid with collision testing, merging and line clearing.

    Attributes:
        rows: Number of rows (default 20).
        cols: Number of columns (default 10).
        grid: 2D numpy object array of shape (rows, cols).
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS) -> None:
        """Initialize an empty board.

        Args:
            rows: Number of rows.
            cols: Number of columns.

        Raises:
            ValueError: If either dimension is not a positive integer.
        """
        if not isinstance(rows, int) or not isinstance(cols, int) or rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive integers, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.grid = np.full((self.rows, self.cols), None, dtype=object)

    @classmethod
    def _from_grid(cls, grid: np.ndarray) -> Board:
        board = cls(*grid.shape)
        board.grid = grid
        return board

    def cell(self, col: int, row: int) -> str | None:
        """Return the color at (col, row), or None if the cell is empty."""
        return self.grid[row, col]

    def filled_mask(self) -> np.ndarray:
        """Return a boolean array that is True wherever a cell holds a color."""
        return self.grid.astype(bool)

    def is_empty(self) -> bool:
        return not self.filled_mask().any()

    def collides(self, x: int, y: int, matrix: np.ndarray) -> bool:
        """Check whether a matrix placed at (x, y) hits a wall, the floor or a block.

        For every occupied cell (dx, dy) of the matrix, the board cell is
        (x + dx, y + dy). A cell collides if its column is outside
        [0, cols), its row is at or below the floor (>= rows), or it lands
        on an occupied board cell. Cells above the top edge (row < 0) never
        collide on row or content grounds, so a piece can overhang the top.

        Args:
            x: Column offset of the matrix's top-left corner.
            y: Row offset of the matrix's top-left corner.
            matrix: 2D occupancy matrix.

        Returns:
            True if the placement is blocked, False if it fits.
        """
        matrix = np.asarray(matrix)
        rows, cols = matrix.shape
        for r in range(rows):
            for c in range(cols):
                if matrix[r, c] == 0:
                    continue
                board_row = y + r
                board_col = x + c
                if board_col < 0 or board_col >= self.cols:
                    return True
                if board_row >= self.rows:
                    return True
                if board_row >= 0 and self.grid[board_row, board_col]:
                    return True
        return False

    def merge(self, piece: Piece) -> tuple[Board, int]:
        """Lock a piece into a copy of this board and clear any full rows.

        Writes the piece's color into every occupied cell that lies on the
        board. Does NOT check for collisions first; the caller must only
        merge a piece at a legal position.

        Args:
            piece: The piece to lock.

        Returns:
            A (new_board, cleared_count) tuple, line clear already applied.
        """
        grid = self.grid.copy()
        for col, row in piece.cells():
            if 0 <= row < self.rows and 0 <= col < self.cols:
                grid[row, col] = piece.color
        return Board._from_grid(grid).clear_lines()

    def clear_lines(self) -> tuple[Board, int]:
        """Remove all full rows and insert the same number of empty rows on top.

        A row is full when every one of its cells holds a color. The
        remaining rows keep their relative order and the row count is
        unchanged.

        Returns:
            A (new_board, cleared_count) tuple.
        """
        full = self.filled_mask().all(axis=1)
        cleared = int(full.sum())
        if cleared == 0:
            return Board._from_grid(self.grid.copy()), 0

        remaining = self.grid[~full]
        empty_rows = np.full((cleared, self.cols), None, dtype=object)
        return Board._from_grid(np.vstack([empty_rows, remaining])), cleared

    def to_rows(self) -> list[list[str | None]]:
        """Return the grid as nested lists (row-major), for render sinks."""
        return self.grid.tolist()

    def copy(self) -> Board:
        return Board._from_grid(self.grid.copy())
