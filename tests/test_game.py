import random

import pygame
import pytest

from evolution.game import Game, main

TEXTURES = [
    "menu.png", "role.png", "fin.png", "mais.png", "bee.png", "huang.png", "mouse.png",
    "sade.jpg", "break.jpg", "ground.jpg", "wood.png", "stone.jpg", "fe.jpg",
    "Cloud.png", "xian.png", "tree.png", "light.png",
]


@pytest.fixture
def root(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    resources = tmp_path / "resources"
    resources.mkdir()
    for name in TEXTURES:
        size = (24, 40) if name == "role.png" else (32, 32)
        surface = pygame.Surface(size)
        surface.fill((120, 80, 40))
        pygame.image.save(surface, str(resources / name))
    yield tmp_path
    pygame.quit()


@pytest.fixture
def game(root):
    return Game(root, rng=random.Random(0))


def test_role_size_comes_from_texture(game):
    assert (game.world.role.width, game.world.role.height) == (24.0, 40.0)


def test_start_button_enters_first_level(game):
    assert game.handle_menu_click(game.start_button.center) is True
    assert game.world.level == 1
    assert game.running is True


def test_click_outside_buttons_does_nothing(game):
    assert game.handle_menu_click((1, 1)) is False
    assert game.world.level == 0


def test_end_button_stops_game(game):
    assert game.handle_menu_click(game.end_button.center) is True
    assert game.running is False


def test_menu_ignored_during_play(game):
    game.world.start()
    assert game.handle_menu_click(game.end_button.center) is False
    assert game.running is True


def test_run_returns_after_quit_event(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.running is False


def test_main_reports_missing_resources(root):
    with pytest.raises(FileNotFoundError):
        main(["--root", str(root / "missing")])