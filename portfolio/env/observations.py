# portfolio/env/observations.py
"""
Vector observation of the platformer world.

Layout (float32, shape (8,)):
  [x_norm, y_norm, vy_norm, facing, airborne,
   moving_x_norm, moving_y_norm, drop_norm]

- x_norm / y_norm: player top-left over the free canvas span, clipped to [0, 1]
  (the player may leave the canvas sideways; the clip hides how far)
- vy_norm: vy / VY_SCALE, clipped to [-1, 1]
- facing: +1 right, -1 left
- airborne: 1.0 mid-jump, 0.0 otherwise
- moving_*: moving platform top-left, normalized like the player
- drop_norm: distance from the player's bottom edge down to the nearest platform
  top under it (or the canvas bottom), over canvas height
"""

from __future__ import annotations
import numpy as np
from portfolio.game.config import JUMP_VELOCITY

VY_SCALE = 2.0 * abs(JUMP_VELOCITY)
OBS_SIZE = 8

OBS_LOW = np.array([0.0, 0.0, -1.0, -1.0, 0.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)


def _norm(v: float, span: float) -> float:
    return float(np.clip(v / max(1.0, span), 0.0, 1.0))


def drop_distance(world) -> float:
    """Pixels from the player's bottom to the nearest platform top below it (canvas bottom if none)."""
    p = world.player
    best = max(0.0, world.height - p.bottom)
    for pr in world.platforms:
        if p.x < pr.x + pr.width and p.x + p.width > pr.x and pr.top >= p.bottom:
            best = min(best, pr.top - p.bottom)
    return best


def build_observation(world) -> np.ndarray:
    p = world.player
    obs = np.zeros(OBS_SIZE, dtype=np.float32)
    obs[0] = _norm(p.x, world.width - p.width)
    obs[1] = _norm(p.y, world.height - p.height)
    obs[2] = np.clip(p.vy / VY_SCALE, -1.0, 1.0)
    obs[3] = 1.0 if p.direction == "right" else -1.0
    obs[4] = 1.0 if p.airborne else 0.0

    mp = world.moving_platform()
    if mp is not None:
        obs[5] = _norm(mp.x, world.width - mp.width)
        obs[6] = _norm(mp.y, world.height - mp.height)

    obs[7] = _norm(drop_distance(world), world.height)
    return np.clip(obs, OBS_LOW, OBS_HIGH)
