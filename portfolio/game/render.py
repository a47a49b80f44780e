# portfolio/game/render.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Tuple
import pygame
from .config import BACKGROUND_IMAGE, COLOR_BG
from .level import draw_platforms
from .world import World


class SpriteCache:
    """
    Loads images relative to an asset root and keeps one scaled copy per (path, size).
    Missing or unreadable files resolve to None and are reported once.
    """
    def __init__(self, root: str | Path):
        self.root = Path(root)
        self._raw: Dict[str, Optional[pygame.Surface]] = {}
        self._scaled: Dict[Tuple[str, int, int], Optional[pygame.Surface]] = {}

    def load(self, rel_path: str) -> Optional[pygame.Surface]:
        if rel_path not in self._raw:
            try:
                self._raw[rel_path] = pygame.image.load(str(self.root / rel_path))
            except (FileNotFoundError, pygame.error) as e:
                print(f"Warning: image not loaded: {rel_path} ({e})")
                self._raw[rel_path] = None
        return self._raw[rel_path]

    def get(self, rel_path: str, size: Tuple[int, int]) -> Optional[pygame.Surface]:
        w, h = max(0, int(size[0])), max(0, int(size[1]))
        key = (rel_path, w, h)
        if key not in self._scaled:
            img = self.load(rel_path)
            self._scaled[key] = pygame.transform.scale(img, (w, h)) if img is not None else None
        return self._scaled[key]


def draw_world(surf: pygame.Surface, world: World, sprites: SpriteCache,
               font: Optional[pygame.font.Font]):
    """Clear, stretched background, player sprite, then every platform with its label."""
    surf.fill(COLOR_BG)

    bg = sprites.get(BACKGROUND_IMAGE, (world.width, world.height))
    if bg is not None:
        surf.blit(bg, (0, 0))

    player = world.player
    img = sprites.get(player.sprite, (player.width, player.height))
    if img is not None:
        surf.blit(img, player.rect.topleft)

    draw_platforms(surf, world.platforms, font)
