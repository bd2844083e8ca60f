# src/runner/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from .config import WIDTH, HEIGHT, BASE_HEIGHT, BASE_SCROLL_SPEED, PLAYER_H
from .level import Segment, Coin, SOLID
from .particles import ParticlePool, make_dust_pool, make_sparkle_pool
from .player import Player, player_fixed_x


@dataclass
class Viewport:
    width: float = WIDTH
    height: float = HEIGHT

    @property
    def ground_y(self) -> float:
        """Top of the base ground band."""
        return self.height - BASE_HEIGHT


@dataclass
class SimulationState:
    """Everything one run owns. Rebuilt from scratch by new_state() on every reset."""
    viewport: Viewport
    player: Player
    segments: List[Segment] = field(default_factory=list)
    coins: List[Coin] = field(default_factory=list)
    dust: ParticlePool = field(default_factory=make_dust_pool)
    sparkle: ParticlePool = field(default_factory=make_sparkle_pool)
    distance: float = 0.0
    coins_collected: int = 0
    scroll_speed: float = BASE_SCROLL_SPEED
    base_scroll_speed: float = BASE_SCROLL_SPEED
    last_speed_increase: int = 0
    running: bool = True
    started: bool = False
    high_score: int = 0
    last_segment_type: str = SOLID
    death_cause: Optional[str] = None

    @property
    def ground_y(self) -> float:
        return self.viewport.ground_y

    @property
    def idle(self) -> bool:
        return self.running and not self.started

    @property
    def game_over(self) -> bool:
        return not self.running


def new_state(viewport: Viewport, high_score: int = 0) -> SimulationState:
    """Fresh run: player grounded at the baseline, centred, world empty."""
    y = viewport.ground_y - PLAYER_H
    player = Player(x=player_fixed_x(viewport.width), y=y, prev_y=y)
    return SimulationState(viewport=viewport, player=player, high_score=high_score)
