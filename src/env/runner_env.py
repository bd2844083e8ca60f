# src/env/runner_env.py
from __future__ import annotations
import random
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.runner.config import WIDTH, HEIGHT, FPS
from src.runner.controller import RunController
from src.runner.state import Viewport
from src.env.observations import build_observation, OBS_SIZE

REWARD_PER_10M = 1.0
REWARD_PER_COIN = 1.0
DEATH_PENALTY = -10.0


class RunnerEnv(gym.Env):
    """
    Square Root runner as a Gymnasium environment (vector observations).
    - One simulation tick = one nominal 60 Hz frame (dt = 1).
    - Agent acts every `frame_skip` ticks (default 4) -> 15 decisions/sec.
    - Actions: 0 = NOOP, 1 = JUMP. The run starts on the first JUMP.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 width: int = WIDTH,
                 height: int = HEIGHT):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.viewport = Viewport(width, height)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(2)
        low = np.array([0.0, -1.0, 0.0, 0.0] + [0.0, 0.0, 0.0] * 3, dtype=np.float32)
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.controller: Optional[RunController] = None
        self.timestep: int = 0

        self.screen = None
        self.clock = None
        self.renderer = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random
        # derive the terrain RNG from np_random so reset(seed=s) is reproducible
        level_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.controller = RunController(viewport=self.viewport, rng=random.Random(level_seed))
        self.timestep = 0

        obs = build_observation(self.controller.state)
        info = {"distance": 0.0, "coins": 0}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.controller is not None, "call reset() first"
        state = self.controller.state

        if action == 1 and state.running:
            self.controller.jump()

        dist0 = state.distance
        coins0 = state.coins_collected
        for _ in range(self.frame_skip):
            self.controller.tick(1.0)
            if not state.running:
                break

        reward = (state.distance - dist0) / 10.0 * REWARD_PER_10M
        reward += (state.coins_collected - coins0) * REWARD_PER_COIN
        terminated = not state.running
        if terminated:
            reward += DEATH_PENALTY

        self.timestep += 1
        truncated = (self.time_limit_decisions is not None
                     and self.timestep >= self.time_limit_decisions and not terminated)

        obs = build_observation(state)
        info = {
            "distance": state.distance,
            "coins": state.coins_collected,
            "timestep": self.timestep,
            "grounded": state.player.on_ground,
            "death_cause": state.death_cause,
        }
        if self.render_mode == "human":
            self.render()
        return obs, float(reward), terminated, truncated, info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.controller is None:
            return None
        from src.runner.render import PygameRenderer

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.viewport.width, self.viewport.height))
                pygame.display.set_caption("Square Root — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((self.viewport.width, self.viewport.height))
            self.renderer = PygameRenderer(self.screen)

        self.renderer.draw(self.controller.state)

        if self.render_mode == "human":
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
            self.renderer = None
