import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

pygame = pytest.importorskip("pygame")

from blockdrop.game.session import GameSession, SessionState
from blockdrop.game.shapes import ShapeKind
from blockdrop.input import InputMapper
from blockdrop.play import KEY_NAMES, handle_keydown
from blockdrop.renderer import TetrisRenderer

from conftest import make_piece


@pytest.fixture
def controls():
    session = GameSession(rng=random.Random(0))
    renderer = TetrisRenderer(session, cell_size=10)
    mapper = InputMapper(session)

    def press(key):
        handle_keydown(key, session, mapper, renderer)

    return session, renderer, press


def test_key_names_match_input_mapper():
    assert set(KEY_NAMES.values()) == {"ArrowLeft", "ArrowRight", "ArrowDown", "ArrowUp", " "}


def test_enter_starts_and_escape_stops(controls):
    session, _, press = controls
    press(pygame.K_RETURN)
    assert session.state is SessionState.RUNNING

    session.score = 300
    press(pygame.K_ESCAPE)
    assert session.state is SessionState.IDLE
    assert session.score == 300

    press(pygame.K_s)
    assert session.running
    assert session.score == 0


def test_enter_restarts_after_game_over(controls):
    session, _, press = controls
    press(pygame.K_RETURN)
    session.board.grid[2, 1:] = "#fff"
    session.active_piece = make_piece(ShapeKind.O, x=3, y=0)
    session.tick()
    assert session.game_over

    press(pygame.K_RETURN)
    assert session.running
    assert session.board.is_empty()


def test_escape_when_game_over_keeps_board(controls):
    session, _, press = controls
    press(pygame.K_RETURN)
    session.board.grid[2, 1:] = "#fff"
    session.active_piece = make_piece(ShapeKind.O, x=3, y=0)
    session.tick()

    press(pygame.K_e)
    assert session.game_over
    assert session.board.cell(1, 2) == "#fff"


def test_d_toggles_theme(controls):
    _, renderer, press = controls
    press(pygame.K_d)
    assert not renderer.dark
    press(pygame.K_d)
    assert renderer.dark


def test_arrow_keys_move_piece_only_while_running(controls):
    session, _, press = controls
    press(pygame.K_LEFT)
    assert session.active_piece is None

    press(pygame.K_RETURN)
    session.active_piece = make_piece(ShapeKind.O, x=3, y=0)
    press(pygame.K_LEFT)
    press(pygame.K_DOWN)
    assert (session.active_piece.x, session.active_piece.y) == (2, 1)

    press(pygame.K_SPACE)
    assert session.active_piece.y == 18


def test_unmapped_key_is_ignored(controls):
    session, renderer, press = controls
    press(pygame.K_RETURN)
    piece = session.active_piece
    x, y = piece.x, piece.y
    press(pygame.K_q)
    assert (piece.x, piece.y) == (x, y)
    assert session.running and renderer.dark
