# portfolio/game/input.py
from __future__ import annotations
from dataclasses import dataclass, fields
import pygame


@dataclass
class InputState:
    """
    Held-key flags, toggled by key events and read once per frame:
    - W = up (jump)
    - A = left
    - S = down (tracked, unused by the physics)
    - D = right
    """
    W: bool = False
    A: bool = False
    S: bool = False
    D: bool = False

    def _set(self, name: str, value: bool) -> bool:
        key = name.upper()
        if key not in {f.name for f in fields(self)}:
            return False
        setattr(self, key, value)
        return True

    def key_down(self, name: str) -> bool:
        """Mark `name` as held (case-insensitive). Returns False for untracked keys."""
        return self._set(name, True)

    def key_up(self, name: str) -> bool:
        return self._set(name, False)

    def handle_event(self, event) -> bool:
        """Apply a pygame KEYDOWN/KEYUP event. Returns True if the key is one of W/A/S/D."""
        if event.type == pygame.KEYDOWN:
            return self.key_down(pygame.key.name(event.key))
        if event.type == pygame.KEYUP:
            return self.key_up(pygame.key.name(event.key))
        return False

    @property
    def horizontal(self) -> bool:
        return self.A or self.D
