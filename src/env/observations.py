# src/env/observations.py
"""
Compact vector observation of a SimulationState for agents.

Layout (13,) float32:
    [y_norm, vy_norm, on_ground, speed_norm,
     gap@120, bump_h@120, coin@120,
     gap@240, bump_h@240, coin@240,
     gap@360, bump_h@360, coin@360]
Probes sample the terrain at fixed offsets ahead of the player's centre.
"""
from __future__ import annotations
import numpy as np
from src.runner.config import BUMP_MAX_H, JUMP_POWER, BASE_SCROLL_SPEED, SPEED_STEP
from src.runner.level import HOLE, BUMP
from src.runner.player import segment_under
from src.runner.state import SimulationState

PROBE_OFFSETS = (120, 240, 360)     # px ahead of the player centre
MAX_VY = abs(JUMP_POWER) * 1.5
MAX_SPEED = BASE_SCROLL_SPEED + SPEED_STEP * 20
COIN_PROBE_HALF_W = 30              # a coin counts for a probe within +-30 px
OBS_SIZE = 4 + 3 * len(PROBE_OFFSETS)


def _clip01(v: float) -> float:
    return max(0.0, min(1.0, v))


def build_observation(state: SimulationState) -> np.ndarray:
    player = state.player
    vp = state.viewport
    cx = player.x + player.w / 2

    y_norm = _clip01(player.y / max(1.0, vp.height - player.h))
    vy_norm = max(-1.0, min(1.0, player.vy / MAX_VY))
    speed_norm = _clip01(state.scroll_speed / MAX_SPEED)
    obs = [y_norm, vy_norm, 1.0 if player.on_ground else 0.0, speed_norm]

    for dx in PROBE_OFFSETS:
        px = cx + dx
        seg = segment_under(state.segments, px)
        gap = 1.0 if (seg is None or seg.seg_type == HOLE) else 0.0
        bump_h = _clip01(seg.h / BUMP_MAX_H) if (seg is not None and seg.seg_type == BUMP) else 0.0
        coin = 1.0 if any(abs(c.x - px) <= COIN_PROBE_HALF_W for c in state.coins) else 0.0
        obs.extend((gap, bump_h, coin))

    return np.asarray(obs, dtype=np.float32)
