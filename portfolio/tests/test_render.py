# portfolio/tests/test_render.py
from __future__ import annotations

import pygame
import pytest

from portfolio.game.config import COLOR_BG, COLOR_PLAT, SPRITES, BACKGROUND_IMAGE, FONT_SIZE
from portfolio.game.level import Platform
from portfolio.game.player import Player
from portfolio.game.render import SpriteCache, draw_world
from portfolio.game.world import World

RED = (255, 0, 0)


@pytest.fixture(scope="module", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


def _save_image(root, rel_path, color, size=(8, 8)):
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    img = pygame.Surface(size)
    img.fill(color)
    pygame.image.save(img, str(path))


def test_missing_image_resolves_to_none(tmp_path, capsys):
    cache = SpriteCache(tmp_path)
    assert cache.get("images/nope.png", (10, 10)) is None
    assert cache.get("images/nope.png", (20, 20)) is None
    out = capsys.readouterr().out
    assert out.count("Warning:") == 1, "Missing image should be reported once"


def test_loaded_image_is_scaled_and_cached(tmp_path):
    _save_image(tmp_path, "images/a.png", RED)
    cache = SpriteCache(tmp_path)
    img = cache.get("images/a.png", (40, 30))
    assert img is not None
    assert img.get_size() == (40, 30)
    assert cache.get("images/a.png", (40, 30)) is img


def test_draw_world_without_assets_draws_platforms_only(tmp_path):
    world = World(200, 150, platforms=[Platform(x=10, y=10, width=50, height=20)],
                  player=Player(x=100.0, y=20.0, width=40.0, height=40.0))
    surf = pygame.Surface((200, 150))
    draw_world(surf, world, SpriteCache(tmp_path), font=None)

    assert surf.get_at((20, 15))[:3] == COLOR_PLAT
    assert surf.get_at((110, 30))[:3] == COLOR_BG  # no sprite image: nothing drawn


def test_draw_world_player_sprite_and_background(tmp_path):
    _save_image(tmp_path, BACKGROUND_IMAGE, (0, 0, 255))
    _save_image(tmp_path, SPRITES["idle"]["right"], RED)

    world = World(200, 150, platforms=[Platform(x=10, y=10, width=50, height=20)],
                  player=Player(x=100.0, y=20.0, width=40.0, height=40.0))
    surf = pygame.Surface((200, 150))
    draw_world(surf, world, SpriteCache(tmp_path), font=None)

    assert surf.get_at((110, 30))[:3] == RED
    assert surf.get_at((5, 140))[:3] == (0, 0, 255)
    assert surf.get_at((20, 15))[:3] == COLOR_PLAT


def _near_black(surf, rect) -> int:
    return sum(
        1
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
        if sum(surf.get_at((x, y))[:3]) < 3 * 64
    )


def test_labels_are_drawn_centred_on_their_platform(tmp_path):
    labelled = Platform(x=10, y=10, width=200, height=30, text="HELLO")
    blank = Platform(x=10, y=80, width=200, height=30)
    world = World(240, 160, platforms=[labelled, blank],
                  player=Player(x=220.0, y=0.0, width=10.0, height=10.0))
    surf = pygame.Surface((240, 160))
    draw_world(surf, world, SpriteCache(tmp_path), font=pygame.font.Font(None, FONT_SIZE))

    cx, cy = labelled.rect.center
    assert _near_black(surf, pygame.Rect(cx - 20, cy - 6, 40, 12)) > 0, "label missing at platform centre"
    # label stays centred: platform corners remain white
    assert surf.get_at((labelled.rect.left + 2, labelled.rect.top + 2))[:3] == COLOR_PLAT
    assert surf.get_at((labelled.rect.right - 3, labelled.rect.bottom - 3))[:3] == COLOR_PLAT
    assert _near_black(surf, blank.rect) == 0, "platform without text must stay plain"
