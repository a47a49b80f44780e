# portfolio/game/level.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import pygame
from .config import (
    PLATFORM_LAYOUT, FLOOR_OFFSET, FLOOR_THICKNESS, COLOR_PLAT, COLOR_TEXT
)


@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float
    text: str = ""
    link: Optional[str] = None
    vx: float = 0.0
    vy: float = 0.0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    @property
    def moving(self) -> bool:
        return bool(self.vx or self.vy)

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        """Inclusive point test (edges count as inside)."""
        return (self.x <= px <= self.x + self.width) and (self.y <= py <= self.y + self.height)

    def update_movement(self, width: int, height: int):
        """
        Advance by the velocity vector, then bounce off the canvas walls:
        an axis whose bounding box touches an edge has its velocity sign reversed
        and is pulled back inside [0, dimension - size].
        """
        if not self.moving:
            return
        self.x += self.vx
        self.y += self.vy

        if self.x <= 0 or self.x + self.width >= width:
            self.vx *= -1
            self.x = min(max(self.x, 0.0), max(0.0, width - self.width))
        if self.y <= 0 or self.y + self.height >= height:
            self.vy *= -1
            self.y = min(max(self.y, 0.0), max(0.0, height - self.height))


def build_platforms(width: int, height: int,
                    layout: Sequence[Tuple] = PLATFORM_LAYOUT) -> List[Platform]:
    """Fresh platform list from `layout`, plus the full-width floor platform near the bottom."""
    platforms = [
        Platform(x=float(x), y=float(y), width=float(w), height=float(h),
                 text=text, link=link, vx=float(vx), vy=float(vy))
        for (x, y, w, h, text, link, vx, vy) in layout
    ]
    platforms.append(Platform(
        x=0.0,
        y=float(height - FLOOR_OFFSET),
        width=float(width),
        height=float(FLOOR_THICKNESS),
    ))
    return platforms


def update_platforms(platforms: List[Platform], width: int, height: int):
    for platform in platforms:
        platform.update_movement(width, height)


def links_at(platforms: List[Platform], px: float, py: float) -> List[str]:
    """Links of every platform containing (px, py), in list order. Unlinked platforms contribute nothing."""
    return [p.link for p in platforms if p.link and p.contains(px, py)]


def draw_platforms(surf: pygame.Surface, platforms: List[Platform], font: Optional[pygame.font.Font]):
    """White boxes with the label centred on top (labels skipped without a font)."""
    for platform in platforms:
        rect = platform.rect
        pygame.draw.rect(surf, COLOR_PLAT, rect)
        if platform.text and font is not None:
            label = font.render(platform.text, True, COLOR_TEXT)
            surf.blit(label, label.get_rect(center=rect.center))
