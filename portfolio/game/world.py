# portfolio/game/world.py
from __future__ import annotations
from typing import List, Optional
from .config import WIDTH, HEIGHT
from .input import InputState
from .level import Platform, build_platforms, update_platforms, links_at
from .player import Player


class World:
    """
    Everything the frame loop mutates: player, platforms, held keys.
    Canvas size is fixed at construction (read once at start, never on resize).
    """
    def __init__(self, width: int = WIDTH, height: int = HEIGHT,
                 platforms: Optional[List[Platform]] = None,
                 player: Optional[Player] = None):
        self.width = int(width)
        self.height = int(height)
        self.platforms: List[Platform] = platforms if platforms is not None else build_platforms(self.width, self.height)
        self.player: Player = player if player is not None else Player()
        self.keys = InputState()
        self.anim_frame = 0                 # bumped once per held direction key per frame
        self.support: Optional[int] = None  # platform index that carried the player last frame
        self.frame = 0

    @property
    def grounded(self) -> bool:
        return not self.player.airborne

    def step(self):
        """Advance one frame: input, jump, gravity, platforms, collisions, floor, idle."""
        player, keys = self.player, self.keys

        # 1) horizontal input (both keys held = both applied)
        if keys.A:
            self.anim_frame += 1
            player.walk("left", self.anim_frame)
        if keys.D:
            self.anim_frame += 1
            player.walk("right", self.anim_frame)

        # 2) jump
        if keys.W:
            player.try_jump()

        # 3) gravity
        player.update_physics()

        # 4) moving platforms
        update_platforms(self.platforms, self.width, self.height)

        # 5) collisions, last platform in list order wins
        self.support = player.resolve_collisions(self.platforms)

        # 6) canvas floor
        if player.clamp_to_floor(self.height):
            self.support = None

        # 7) idle fallback
        player.settle_idle(keys.horizontal)

        self.frame += 1

    def click(self, px: float, py: float) -> List[str]:
        """Links to open for a click at canvas coordinates (px, py)."""
        return links_at(self.platforms, px, py)

    def moving_platform(self) -> Optional[Platform]:
        return next((p for p in self.platforms if p.moving), None)
