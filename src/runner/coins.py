# src/runner/coins.py
from __future__ import annotations
from typing import TYPE_CHECKING, List
from .config import COIN_PICKUP_SLACK
from .geometry import circle_hits_point
from .level import Coin

if TYPE_CHECKING:
    from .state import SimulationState


def pickup_radius(coin: Coin, player_w: float, player_h: float) -> float:
    return coin.r + max(player_w, player_h) / 2 - COIN_PICKUP_SLACK


def collect_coins(state: "SimulationState") -> List[Coin]:
    """Remove every coin overlapping the player and return the ones collected."""
    player = state.player
    px, py = player.center
    kept: List[Coin] = []
    collected: List[Coin] = []
    for c in state.coins:
        if circle_hits_point(c.x, c.y, px, py, pickup_radius(c, player.w, player.h)):
            collected.append(c)
        else:
            kept.append(c)
    state.coins = kept
    state.coins_collected += len(collected)
    return collected
