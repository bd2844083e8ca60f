# src/runner/difficulty.py
"""
Distance bookkeeping and speed milestones.

The per-tick distance accumulation and the generator's safe-zone lookahead
both read DISTANCE_SCALE. The lookahead is an estimate, x / speed scaled
once, and is not the distance the run will have covered when x arrives.
"""
from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING
from .config import DISTANCE_SCALE, SPEED_INCREASE_INTERVAL, SPEED_STEP

if TYPE_CHECKING:
    from .state import SimulationState

logger = logging.getLogger(__name__)


def distance_travelled(scroll_speed: float, dt: float) -> float:
    return scroll_speed * dt * DISTANCE_SCALE


def appearance_distance(distance: float, x: float, scroll_speed: float) -> float:
    """Run distance at which something currently at x reaches the origin."""
    return distance + (x / scroll_speed) * DISTANCE_SCALE


def milestone_index(distance: float) -> int:
    return int(math.floor(distance / SPEED_INCREASE_INTERVAL))


def update_difficulty(state: "SimulationState", dt: float) -> bool:
    """
    Accumulate distance and apply at most one speed step.
    Returns True when a new milestone was reached this tick.
    """
    state.distance += distance_travelled(state.scroll_speed, dt)

    level = milestone_index(state.distance)
    if level <= state.last_speed_increase:
        return False

    state.base_scroll_speed += SPEED_STEP
    state.scroll_speed = state.base_scroll_speed
    state.last_speed_increase = level
    logger.info("milestone %d at %.0f m: speed -> %.2f",
                level, state.distance, state.scroll_speed)
    return True
