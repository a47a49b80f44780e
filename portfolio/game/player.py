# portfolio/game/player.py
from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import pygame
from .config import (
    PLAYER_START_X, PLAYER_START_Y, PLAYER_W, PLAYER_H, PLAYER_SPEED,
    GRAVITY, JUMP_VELOCITY, WALK_TOGGLE_FRAMES, SPRITES
)
from .level import Platform


@dataclass
class Player:
    """
    Side-view player driven per frame:
    - direction is "left" or "right" and selects the sprite set
    - sprite is the path of the image currently shown
    - airborne blocks a new jump until the player lands
    """
    x: float = float(PLAYER_START_X)
    y: float = float(PLAYER_START_Y)
    width: float = float(PLAYER_W)
    height: float = float(PLAYER_H)
    vy: float = 0.0
    speed: float = float(PLAYER_SPEED)
    direction: str = "right"
    airborne: bool = False
    sprites: Dict[str, Dict[str, str]] = field(default_factory=lambda: copy.deepcopy(SPRITES))
    sprite: str = ""

    def __post_init__(self):
        if not self.sprite:
            self.sprite = self.sprite_for("idle")

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def sprite_for(self, state: str, direction: Optional[str] = None) -> str:
        return self.sprites[state][direction or self.direction]

    def show(self, state: str):
        self.sprite = self.sprite_for(state)

    def walk(self, direction: str, frame: int):
        """Step sideways and face `direction`; every WALK_TOGGLE_FRAMES animation frames swap walk/idle."""
        self.x += self.speed if direction == "right" else -self.speed
        self.direction = direction
        if frame % WALK_TOGGLE_FRAMES == 0:
            walk = self.sprite_for("walk")
            self.sprite = self.sprite_for("idle") if self.sprite == walk else walk

    def try_jump(self) -> bool:
        """Jump only from the ground. Returns True if performed."""
        if self.airborne:
            return False
        self.airborne = True
        self.vy = JUMP_VELOCITY
        self.show("jump")
        return True

    def update_physics(self):
        """Semi-implicit Euler: velocity first, then position. One call per frame."""
        self.vy += GRAVITY
        self.y += self.vy

    def _land(self, y_top: float):
        # idle only on touchdown. Resetting on every resting contact (as each frame
        # on a platform collides) would undo the 10-frame walk/idle toggle.
        if self.airborne:
            self.show("idle")
        self.y = y_top - self.height
        self.vy = 0.0
        self.airborne = False

    def resolve_collisions(self, platforms: List[Platform]) -> Optional[int]:
        """
        Snap onto any platform top the player's bottom edge crosses this frame.
        Every platform is tested in list order; a later match overrides an earlier one.
        Returns the index of the last platform matched, or None.
        """
        support = None
        for i, pr in enumerate(platforms):
            if (self.x < pr.x + pr.width and
                    self.x + self.width > pr.x and
                    self.bottom < pr.bottom and
                    self.bottom + self.vy >= pr.top):
                self._land(pr.top)
                support = i
        return support

    def clamp_to_floor(self, height: int) -> bool:
        """Keep the bottom edge on the canvas. Returns True if clamped."""
        if self.bottom > height:
            self._land(float(height))
            return True
        return False

    def settle_idle(self, moving: bool):
        if not moving and not self.airborne:
            self.show("idle")
