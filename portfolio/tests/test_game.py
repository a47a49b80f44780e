# portfolio/tests/test_game.py
from pathlib import Path

import pygame
import pytest

from portfolio.game.config import FPS, PUBLIC_DIR
from portfolio.game.game import handle_event, parse_args, resolve_canvas_size
from portfolio.game.world import World


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.width, args.height, args.fps, args.assets) == (None, None, FPS, PUBLIC_DIR)


def test_canvas_size():
    pygame.display.init()
    try:
        assert resolve_canvas_size(640, 480) == (640, 480)
        w, h = resolve_canvas_size(None, None)
        assert w > 0 and h > 0
        with pytest.raises(ValueError):
            resolve_canvas_size(-1, 480)
    finally:
        pygame.display.quit()


@pytest.fixture
def opened(monkeypatch):
    links = []
    monkeypatch.setattr("portfolio.game.game.webbrowser.open_new_tab", links.append)
    return links


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def test_left_click_on_linked_sign_opens_its_link(opened):
    world = World(1280, 720)
    github = world.platforms[1]
    assert handle_event(world, _click((int(github.x) + 10, int(github.y) + 10)))
    assert opened == [github.link]


def test_clicks_that_open_nothing(opened):
    world = World(1280, 720)
    sign = world.platforms[0]  # no link
    github = world.platforms[1]
    handle_event(world, _click((int(sign.x) + 10, int(sign.y) + 10)))
    handle_event(world, _click((5, 5)))
    handle_event(world, _click((int(github.x) + 10, int(github.y) + 10), button=3))
    assert opened == []


def test_keys_and_quit_events():
    pygame.init()
    try:
        world = World(1280, 720)
        assert handle_event(world, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
        assert world.keys.D
        assert handle_event(world, pygame.event.Event(pygame.KEYUP, key=pygame.K_d))
        assert not world.keys.D
        assert not handle_event(world, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert not handle_event(world, pygame.event.Event(pygame.QUIT))
    finally:
        pygame.quit()


def test_default_assets_do_not_depend_on_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assets = Path(parse_args([]).assets)
    assert assets.is_absolute()
    assert (assets / "images").is_dir()
