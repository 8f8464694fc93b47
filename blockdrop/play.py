"""
Keyboard play mode.

Gravity ticks come from a pygame timer event, so ticks and key presses are
pulled off the same pygame event queue and handled one at a time.

Controls:
  - Left/Right arrow: move piece
  - Down arrow: soft drop
  - Up arrow: rotate clockwise
  - Space: hard drop
  - Enter / S: start (idle) or restart (game over)
  - Escape / E: end the current game
  - D: toggle dark/light theme
  - Close window: quit
"""

from __future__ import annotations

import random

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockdrop.config import GameConfig
from blockdrop.game.session import GameSession, Intent
from blockdrop.input import InputMapper
from blockdrop.renderer import TetrisRenderer
from blockdrop.score_store import FileScoreStore


# ── pygame key -> symbolic key name ──────────────────────────────────────
KEY_NAMES: dict[int, str] = {}
if pygame is not None:
    KEY_NAMES = {
        pygame.K_LEFT: "ArrowLeft",
        pygame.K_RIGHT: "ArrowRight",
        pygame.K_DOWN: "ArrowDown",
        pygame.K_UP: "ArrowUp",
        pygame.K_SPACE: " ",
    }


def handle_keydown(
    key: int,
    session: GameSession,
    mapper: InputMapper,
    renderer: TetrisRenderer,
) -> None:
    """Apply one key press: control surface, theme toggle, or a game intent.

    Args:
        key: pygame key code.
        session: The session to control.
        mapper: Input mapper forwarding arrow keys and space.
        renderer: Renderer whose theme the D key toggles.
    """
    if key in (pygame.K_RETURN, pygame.K_s):
        if session.game_over:
            session.restart()
        else:
            session.start()
    elif key in (pygame.K_ESCAPE, pygame.K_e):
        session.stop()
    elif key == pygame.K_d:
        renderer.toggle_theme()
    elif key in KEY_NAMES:
        mapper.handle(KEY_NAMES[key])


def play(config: GameConfig) -> None:
    """Run the game in a pygame window until it is closed.

    Args:
        config: Game configuration.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    store = FileScoreStore(config.score_file)
    rng = random.Random(config.seed) if config.seed is not None else None
    session = GameSession(config.rows, config.cols, score_store=store, rng=rng)
    mapper = InputMapper(session)
    renderer = TetrisRenderer(session, cell_size=config.cell_size, dark=config.dark_mode)
    # pygame must be initialized before the timer and event.get()
    renderer.render(config.fps)

    tick_event = pygame.USEREVENT + 1
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            elif event.type == tick_event:
                session.apply(Intent.TICK)
                if not session.running:
                    pygame.time.set_timer(tick_event, 0)
            elif event.type == pygame.KEYDOWN:
                was_running = session.running
                handle_keydown(event.key, session, mapper, renderer)
                if session.running != was_running:
                    pygame.time.set_timer(tick_event, config.tick_ms if session.running else 0)

        if not running:
            break
        renderer.render(config.fps)

    if session.score:
        print(f"Final score: {session.score} | High score: {session.best_score}")
    renderer.close()
