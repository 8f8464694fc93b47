"""
Game session: spawn, gravity tick, lock, line clear, scoring and top-out.

This module ties the Board and Piece together into a playable game. The
session is the only thing that mutates its board and active piece; render
sinks read snapshots from get_state() and input sources send intents.

State machine:
  IDLE --start--> RUNNING --stop--> IDLE
  RUNNING --(top-out on tick)--> GAME_OVER --restart/start--> RUNNING
"""

from __future__ import annotations

import enum
import random
from typing import Any

from blockdrop.game.board import COLS, ROWS, Board
from blockdrop.game.piece import Piece, rotate, spawn
from blockdrop.score_store import ScoreStore

# Flat scoring: every cleared row is worth the same.
POINTS_PER_LINE = 100

# Default gravity period in milliseconds. Constant, no speed progression.
TICK_MS = 500


class SessionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Direction(enum.Enum):
    """Directions a piece can be moved in, as (dx, dy) offsets."""
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)


class Intent(enum.IntEnum):
    """Discrete intents accepted by a running session."""
    LEFT = 0
    RIGHT = 1
    DOWN = 2
    ROTATE = 3
    HARD_DROP = 4
    TICK = 5


class GameSession:
    """One game of falling blocks.

    Attributes:
        board: Locked cells.
        active_piece: The falling piece, or None before the first start.
        score: Current score (never decreases within a game).
        state: Current SessionState.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        score_store: ScoreStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Create an idle session with an empty board.

        Args:
            rows: Board height.
            cols: Board width.
            score_store: Optional best-score persistence.
            rng: Optional random generator for piece selection.
        """
        self.board = Board(rows, cols)
        self.active_piece: Piece | None = None
        self.score: int = 0
        self.state = SessionState.IDLE
        self.score_store = score_store
        self._rng = rng
        self._best_score = score_store.read() if score_store is not None else 0

    # ── State flags ───────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    @property
    def best_score(self) -> int:
        return max(self.score, self._best_score)

    # ── Control surface ───────────────────────────────────────────────────

    def start(self) -> None:
        """Start a fresh game from IDLE or GAME_OVER. No-op while running."""
        if self.running:
            return
        self._reset()

    def restart(self) -> None:
        """Start a fresh game after a game over. No-op in any other state."""
        if self.game_over:
            self._reset()

    def stop(self) -> None:
        """Halt a running game. Board and score are kept; ticks are ignored."""
        if self.running:
            self.state = SessionState.IDLE

    def _reset(self) -> None:
        self.board = Board(self.board.rows, self.board.cols)
        self.score = 0
        self.active_piece = spawn(self._rng)
        self.state = SessionState.RUNNING

    # ── Intents ───────────────────────────────────────────────────────────

    def apply(self, intent: Intent) -> None:
        """Dispatch a single intent. Everything is a no-op unless RUNNING.

        Args:
            intent: An Intent value.
        """
        if not self.running:
            return

        if intent == Intent.LEFT:
            self.move(Direction.LEFT)
        elif intent == Intent.RIGHT:
            self.move(Direction.RIGHT)
        elif intent == Intent.DOWN:
            self.move(Direction.DOWN)
        elif intent == Intent.ROTATE:
            self.rotate()
        elif intent == Intent.HARD_DROP:
            self.hard_drop()
        elif intent == Intent.TICK:
            self.tick()

    def move(self, direction: Direction) -> bool:
        """Try to shift the active piece one cell.

        Args:
            direction: LEFT, RIGHT or DOWN.

        Returns:
            True if the piece moved, False if blocked or not running.
        """
        if not self.running or self.active_piece is None:
            return False
        dx, dy = direction.value
        piece = self.active_piece
        if self.board.collides(piece.x + dx, piece.y + dy, piece.shape):
            return False
        piece.x += dx
        piece.y += dy
        return True

    def rotate(self) -> bool:
        """Try to rotate the active piece clockwise in place (no wall kicks).

        Returns:
            True if the rotation was applied, False if it would collide.
        """
        if not self.running or self.active_piece is None:
            return False
        piece = self.active_piece
        rotated = rotate(piece.shape)
        if self.board.collides(piece.x, piece.y, rotated):
            return False
        piece.shape = rotated
        return True

    def hard_drop(self) -> int:
        """Drop the active piece to the lowest free row.

        The piece is not locked here; the next tick locks it.

        Returns:
            Number of rows dropped.
        """
        if not self.running or self.active_piece is None:
            return 0
        piece = self.active_piece
        rows = 0
        while not self.board.collides(piece.x, piece.y + 1, piece.shape):
            piece.y += 1
            rows += 1
        return rows

    def tick(self) -> None:
        """Advance gravity by one row, or lock the piece if it cannot fall.

        Locking merges the piece, clears full rows, scores them and spawns
        the next piece. The game is over if the locked piece never left its
        spawn row, or if the new piece does not fit where it spawns.
        """
        if not self.running or self.active_piece is None:
            return
        piece = self.active_piece
        if not self.board.collides(piece.x, piece.y + 1, piece.shape):
            piece.y += 1
            return

        self.board, cleared = self.board.merge(piece)
        self._add_score(cleared * POINTS_PER_LINE)

        if piece.y == 0:
            self._top_out()
            return

        next_piece = spawn(self._rng)
        if self.board.collides(next_piece.x, next_piece.y, next_piece.shape):
            self._top_out()
            return
        self.active_piece = next_piece

    def _top_out(self) -> None:
        self.active_piece = None
        self.state = SessionState.GAME_OVER

    def _add_score(self, points: int) -> None:
        if points <= 0:
            return
        self.score += points
        if self.score > self._best_score:
            self._best_score = self.score
            if self.score_store is not None:
                self.score_store.write(self.score)

    # ── Render snapshot ───────────────────────────────────────────────────

    def get_state(self) -> dict[str, Any]:
        """Return a dict describing the observable game state.

        Returns:
            Dict with keys:
              - board: list of rows, each a list of color strings or None
              - active_piece: independent Piece copy, or None
              - score: int
              - best_score: int
              - running: bool
              - game_over: bool
              - state: SessionState
        """
        return {
            "board": self.board.to_rows(),
            "active_piece": self.active_piece.copy() if self.active_piece is not None else None,
            "score": self.score,
            "best_score": self.best_score,
            "running": self.running,
            "game_over": self.game_over,
            "state": self.state,
        }
