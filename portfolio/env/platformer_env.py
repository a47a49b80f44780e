# portfolio/env/platformer_env.py
from __future__ import annotations
from typing import Optional, Tuple, Dict, Any, Set
import numpy as np
import gymnasium as gym
import pygame

from portfolio.game.config import (
    WIDTH, HEIGHT, FPS, TITLE, FONT_NAME, FONT_SIZE, PUBLIC_DIR,
    PLAYER_START_X, START_JITTER_X
)
from portfolio.game.render import SpriteCache, draw_world
from portfolio.game.world import World
from portfolio.env.observations import build_observation, OBS_LOW, OBS_HIGH

# action -> (W, A, D) held for the whole decision step
ACTION_KEYS: Tuple[Tuple[bool, bool, bool], ...] = (
    (False, False, False),  # 0 NOOP
    (False, True, False),   # 1 LEFT
    (False, False, True),   # 2 RIGHT
    (True, False, False),   # 3 JUMP
    (True, True, False),    # 4 JUMP + LEFT
    (True, False, True),    # 5 JUMP + RIGHT
)


class PlatformerEnv(gym.Env):
    """
    Portfolio platformer as a Gymnasium environment (vector observations).
    - Simulation steps once per frame (physics constants are per frame).
    - Agent acts every `frame_skip` frames, holding its keys in between.
    - Reward +1 the first time the player rests on each labelled platform.
    - Never terminates (no failure state, most signs sit above jump reach);
      episodes end by time-limit truncation.
    - reset(seed) draws the spawn x from np_random around PLAYER_START_X.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 assets: str = PUBLIC_DIR):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], f"Unknown render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.width = int(width)
        self.height = int(height)
        self.assets = assets

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(len(ACTION_KEYS))
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.world: Optional[World] = None
        self.visited: Set[int] = set()
        self.labelled: Set[int] = set()
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None
        self.sprites: Optional[SpriteCache] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        self.world = World(self.width, self.height)
        if options and "start_x" in options:
            self.world.player.x = float(options["start_x"])
        else:
            jitter = self.np_random.uniform(-START_JITTER_X, START_JITTER_X)
            self.world.player.x = float(PLAYER_START_X + jitter)

        self.labelled = {i for i, p in enumerate(self.world.platforms) if p.text}
        self.visited = set()
        self.timestep = 0

        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.world is not None, "Call reset() before step()"

        keys = self.world.keys
        keys.W, keys.A, keys.D = ACTION_KEYS[int(action)]

        reward = 0.0
        for _ in range(self.frame_skip):
            self.world.step()
            s = self.world.support
            if s is not None and s in self.labelled and s not in self.visited:
                self.visited.add(s)
                reward += 1.0

        self.timestep += 1
        terminated = False
        truncated = (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions)

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return build_observation(self.world)

    def _info(self) -> Dict[str, Any]:
        assert self.world is not None
        p = self.world.player
        return {
            "timestep": self.timestep,
            "frame": self.world.frame,
            "x": p.x,
            "bottom": p.bottom,
            "grounded": self.world.grounded,
            "support": self.world.support,
            "visited": len(self.visited),
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.width, self.height))
                pygame.display.set_caption(f"{TITLE} (env)")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((self.width, self.height))
            self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
            self.sprites = SpriteCache(self.assets)

        draw_world(self.screen, self.world, self.sprites, self.font)

        if self.render_mode == "human":
            # Pump events so the OS doesn't think we're hung
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
