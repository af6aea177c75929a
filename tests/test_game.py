from unittest import mock

import pygame
import pytest

from sfsnake.game import HEIGHT, WIDTH, Game, main
from sfsnake.screens import GameScreen, MenuScreen, PINK


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def game(headless, tmp_path):
    return Game(tmp_path)


def test_starts_on_menu(game):
    assert isinstance(game.context.screen, MenuScreen)
    assert game.context.running is True
    assert game.window.get_size() == (WIDTH, HEIGHT)


def test_missing_assets_leave_sounds_unset(game):
    assert game.context.pickup_sound is None
    assert game.context.die_sound is None


def test_quit_event_closes(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.handle_input()
    assert game.context.running is False


def test_render_clears_with_background(game):
    game.context.settings.bg_color = PINK
    game.render()
    assert tuple(game.window.get_at((0, 0)))[:3] == PINK


def test_update_drives_active_screen(game):
    game.context.screen = GameScreen(game.context)
    game.update(0.1)
    assert len(game.context.screen.fruits) <= 1
    assert isinstance(game.context.screen, GameScreen)


def test_run_stops_on_quit(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.context.running is False


def test_main_returns_zero_after_quit(headless, tmp_path):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main(["--assets", str(tmp_path)]) == 0