# src/runner/level.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple
from .config import (
    GEN_START_X, HORIZON_FACTOR, SAFE_ZONE_DISTANCE,
    SOLID_MIN_W, SOLID_MAX_W, HOLE_CHANCE, HOLE_MIN_W, HOLE_MAX_W,
    BUMP_CHANCE, BUMP_MIN_W, BUMP_MAX_W, BUMP_MIN_H, BUMP_MAX_H,
    BUMP_COIN_CHANCE, BUMP_COIN_OFFSET, SOLID_COIN_CHANCE, SOLID_COIN_HEIGHT,
    SOLID_COIN_EDGE, SAFE_SOLID_CHANCE, SAFE_SOLID_MIN_W, SAFE_SOLID_MAX_W,
    SEGMENT_TRIM_X, COIN_TRIM_X, COIN_TRIM_SLACK, COIN_R,
)
from .difficulty import appearance_distance
from .geometry import rand_int

if TYPE_CHECKING:
    from .state import SimulationState

logger = logging.getLogger(__name__)

SOLID = "solid"
BUMP = "bump"
HOLE = "hole"


@dataclass
class Segment:
    x: float
    w: float
    seg_type: str = SOLID   # "solid", "bump" or "hole"
    h: float = 0.0          # extra height above the ground line (bumps only)

    @property
    def right(self) -> float:
        return self.x + self.w

    def top(self, ground_y: float) -> float:
        return ground_y - self.h

    def obstacle_box(self, ground_y: float) -> Tuple[float, float, float, float]:
        """Bump body as (x, y, w, h): from its top down to the ground line."""
        return (self.x, self.top(ground_y), self.w, self.h)


@dataclass
class Coin:
    x: float
    y: float
    r: float = COIN_R


def frontier(segments: List[Segment]) -> float:
    """Rightmost generated x, or the generator start when empty."""
    return segments[-1].right if segments else GEN_START_X


class LevelGen:
    """
    Generates an endless ribbon of ground segments scrolling left.
    Owns only the RNG: every piece of world data lives on the SimulationState.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def _rand_w(self, lo: int, hi: int) -> int:
        return rand_int(self.rng, lo, hi)

    def _push(self, state: "SimulationState", seg: Segment) -> float:
        state.segments.append(seg)
        state.last_segment_type = seg.seg_type
        return seg.right

    def _generate_hole(self, state: "SimulationState", x: float) -> float:
        return self._push(state, Segment(x, self._rand_w(HOLE_MIN_W, HOLE_MAX_W), HOLE))

    def _generate_bump(self, state: "SimulationState", x: float) -> float:
        w = self._rand_w(BUMP_MIN_W, BUMP_MAX_W)
        h = self._rand_w(BUMP_MIN_H, BUMP_MAX_H)
        if self.rng.random() < BUMP_COIN_CHANCE:
            state.coins.append(Coin(x + w // 2, state.ground_y - h - BUMP_COIN_OFFSET))
        return self._push(state, Segment(x, w, BUMP, h))

    def _generate_solid(self, state: "SimulationState", x: float, with_coin: bool) -> float:
        w = self._rand_w(SOLID_MIN_W, SOLID_MAX_W)
        if with_coin and self.rng.random() < SOLID_COIN_CHANCE:
            # keep the coin away from the platform edges
            offset = self._rand_w(SOLID_COIN_EDGE, max(SOLID_COIN_EDGE, w - SOLID_COIN_EDGE))
            state.coins.append(Coin(x + offset, state.ground_y - SOLID_COIN_HEIGHT))
        return self._push(state, Segment(x, w, SOLID))

    def generate(self, state: "SimulationState", initial: bool = False):
        """
        Append segments (and coins) until the frontier reaches
        HORIZON_FACTOR x viewport width.
        """
        x = GEN_START_X if initial else frontier(state.segments)
        target = state.viewport.width * HORIZON_FACTOR
        if initial:
            state.last_segment_type = SOLID
        added = 0

        while x < target:
            added += 1
            # Would this segment reach the player while still inside the safe zone?
            if appearance_distance(state.distance, x, state.scroll_speed) < SAFE_ZONE_DISTANCE:
                x = self._generate_solid(state, x, with_coin=False)
                continue

            r = self.rng.random()
            if r < HOLE_CHANCE and state.last_segment_type != HOLE:
                x = self._generate_hole(state, x)
            elif r < BUMP_CHANCE and state.last_segment_type != BUMP:
                x = self._generate_bump(state, x)
            else:
                x = self._generate_solid(state, x, with_coin=True)

            # Bound hole/bump density with a guaranteed runway
            if state.last_segment_type != SOLID and self.rng.random() < SAFE_SOLID_CHANCE:
                w = self._rand_w(SAFE_SOLID_MIN_W, SAFE_SOLID_MAX_W)
                x = self._push(state, Segment(x, w, SOLID))
                added += 1

        if added:
            logger.debug("generated %d segments, frontier=%.1f", added, x)

    def update_and_generate(self, state: "SimulationState", dt: float):
        """Scroll the world left, refill the right side, retire what left the screen."""
        dx = state.scroll_speed * dt
        for seg in state.segments:
            seg.x -= dx
        for coin in state.coins:
            coin.x -= dx

        if frontier(state.segments) < state.viewport.width * HORIZON_FACTOR:
            self.generate(state, initial=False)

        # FIFO eviction: segments are ordered, so expired ones form a prefix
        n_expired = 0
        for seg in state.segments:
            if seg.right >= SEGMENT_TRIM_X:
                break
            n_expired += 1
        if n_expired:
            del state.segments[:n_expired]

        state.coins = [c for c in state.coins if c.x + COIN_TRIM_SLACK > COIN_TRIM_X]
