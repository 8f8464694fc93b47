"""
Pygame renderer for a game session.

Draws the board grid, locked cells, the active piece, and a sidebar with
score, high score, the control prompt for the current state, and the key
help. Two themes (dark and light) can be toggled at runtime.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockdrop.game.session import GameSession, SessionState


# ── Themes ────────────────────────────────────────────────────────────────
THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "background": "#020617",
        "grid": "#1e293b",
        "sidebar": "#020617",
        "text": "#e5e7eb",
        "muted": "#94a3b8",
    },
    "light": {
        "background": "#f8fafc",
        "grid": "#e2e8f0",
        "sidebar": "#ffffff",
        "text": "#020617",
        "muted": "#475569",
    },
}

# Prompt color per state (start / end game / restart buttons of the web version)
PROMPT_COLORS: dict[SessionState, str] = {
    SessionState.IDLE: "#22c55e",
    SessionState.RUNNING: "#f97316",
    SessionState.GAME_OVER: "#ef4444",
}

PROMPTS: dict[SessionState, str] = {
    SessionState.IDLE: "ENTER: Start",
    SessionState.RUNNING: "ESC: End Game",
    SessionState.GAME_OVER: "ENTER: Restart",
}


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' (or '#rgb') to an RGB tuple."""
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


class TetrisRenderer:
    """Pygame-based render sink for a GameSession.

    The window is divided into:
      - Left: board area (cell_size * cols) x (cell_size * rows)
      - Right: sidebar with score, high score and controls

    Attributes:
        session: The GameSession being rendered (read only).
        cell_size: Pixel size of each grid cell.
        dark: Whether the dark theme is active.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH: int = 200

    def __init__(self, session: GameSession, cell_size: int = 28, dark: bool = True) -> None:
        """Initialize the renderer.

        Does NOT create the Pygame window yet; that happens on the first
        call to render().

        Args:
            session: The GameSession to render.
            cell_size: Size of each grid cell in pixels.
            dark: Start with the dark theme.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.session = session
        self.cell_size = cell_size
        self.dark = dark

        self.board_pixel_width = cell_size * session.board.cols
        self.board_pixel_height = cell_size * session.board.rows
        self.window_width = self.board_pixel_width + self.SIDEBAR_WIDTH
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._initialized: bool = False

    @property
    def theme(self) -> dict[str, str]:
        return THEMES["dark" if self.dark else "light"]

    def toggle_theme(self) -> None:
        self.dark = not self.dark

    def render(self, fps: int = 60) -> None:
        """Draw the current session state to the screen.

        Initializes Pygame on the first call.

        Args:
            fps: Target frames per second for the display clock.
        """
        if not self._initialized:
            self._init_pygame()

        state = self.session.get_state()
        self.screen.fill(hex_to_rgb(self.theme["background"]))
        self._draw_grid_lines()
        self._draw_cells(state["board"])
        self._draw_active_piece(state["active_piece"])
        self._draw_sidebar(state)

        pygame.display.flip()
        self._clock.tick(fps)

    def _init_pygame(self) -> None:
        """Initialize Pygame display, clock, and fonts.

        Called once on the first render() invocation.
        """
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Tetris")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 20, bold=True)
        self._small_font = pygame.font.SysFont("monospace", 13)
        self._initialized = True

    def _draw_grid_lines(self) -> None:
        color = hex_to_rgb(self.theme["grid"])
        for col in range(self.session.board.cols + 1):
            x = col * self.cell_size
            pygame.draw.line(self.screen, color, (x, 0), (x, self.board_pixel_height))
        for row in range(self.session.board.rows + 1):
            y = row * self.cell_size
            pygame.draw.line(self.screen, color, (0, y), (self.board_pixel_width, y))

    def _draw_block(self, col: int, row: int, color: str) -> None:
        """Fill one cell, inset by a pixel so grid lines stay visible."""
        pygame.draw.rect(
            self.screen,
            hex_to_rgb(color),
            (col * self.cell_size + 1, row * self.cell_size + 1, self.cell_size - 2, self.cell_size - 2),
        )

    def _draw_cells(self, rows: list[list[str | None]]) -> None:
        for row, cells in enumerate(rows):
            for col, color in enumerate(cells):
                if color:
                    self._draw_block(col, row, color)

    def _draw_active_piece(self, piece) -> None:
        if piece is None:
            return
        for col, row in piece.cells():
            if 0 <= row < self.session.board.rows and 0 <= col < self.session.board.cols:
                self._draw_block(col, row, piece.color)

    def _draw_sidebar(self, state: dict) -> None:
        """Draw title, score, high score, state prompt and key help."""
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            hex_to_rgb(self.theme["sidebar"]),
            (sidebar_x, 0, self.SIDEBAR_WIDTH, self.window_height),
        )

        x = sidebar_x + 16
        self._draw_text("TETRIS", x, 16, self._font)
        self._draw_text(f"Score: {state['score']}", x, 56)
        self._draw_text(f"High Score: {state['best_score']}", x, 80)

        session_state = state["state"]
        self._draw_text(PROMPTS[session_state], x, 120, color=PROMPT_COLORS[session_state])
        if session_state is SessionState.GAME_OVER:
            self._draw_text("GAME OVER", x, 144, self._font, color=PROMPT_COLORS[session_state])

        help_lines = ["Controls:", "<- -> move", "v  soft drop", "^  rotate", "SPACE drop", "D  theme"]
        y = self.window_height - 20 * len(help_lines) - 10
        for line in help_lines:
            self._draw_text(line, x, y, color=self.theme["muted"])
            y += 20

    def _draw_text(self, text: str, x: int, y: int, font=None, color: str | None = None) -> None:
        """Render text onto the screen.

        Args:
            text: String to display.
            x: Pixel X position.
            y: Pixel Y position.
            font: Font to use (defaults to the small font).
            color: Hex color (defaults to the theme's text color).
        """
        font = font or self._small_font
        surface = font.render(text, True, hex_to_rgb(color or self.theme["text"]))
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
