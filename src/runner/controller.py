# src/runner/controller.py
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional
from .config import FRAME_MS, MAX_FRAME_MS
from .coins import collect_coins
from .collaborators import Audio, HighScoreStore, NullAudio, MemoryHighScoreStore
from .difficulty import update_difficulty
from .level import LevelGen
from .particles import (
    spawn_jump_dust, spawn_landing_dust, spawn_milestone_burst, spawn_coin_sparkle,
)
from .state import SimulationState, Viewport, new_state

logger = logging.getLogger(__name__)


def frame_dt(elapsed_ms: float) -> float:
    """Clamp a frame's wall time and express it in nominal 60 Hz frames."""
    return max(0.0, min(MAX_FRAME_MS, elapsed_ms)) / FRAME_MS


@dataclass
class RunEvent:
    kind: str               # "jump" | "land" | "coin" | "milestone" | "game_over" | "reset"
    x: float = 0.0
    y: float = 0.0
    detail: Optional[str] = None


Listener = Callable[[RunEvent], None]

# events that have a sound effect of the same name
_SOUND_EVENTS = ("jump", "coin", "game_over")


class RunController:
    """
    Idle -> Running -> GameOver -> Idle.

    Idle:     world built but frozen; the first jump starts the run.
    Running:  tick() advances the simulation.
    GameOver: world frozen again; the next jump performs a full reset.
    """
    def __init__(self,
                 viewport: Optional[Viewport] = None,
                 audio: Optional[Audio] = None,
                 store: Optional[HighScoreStore] = None,
                 rng: Optional[random.Random] = None):
        self.viewport = viewport if viewport is not None else Viewport()
        self.audio = audio if audio is not None else NullAudio()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.level = LevelGen(self.rng)
        self.listeners: List[Listener] = []
        self._pending: List[RunEvent] = []
        self.state: SimulationState = new_state(self.viewport)
        self.reset()

    # -------------------- Events --------------------

    def add_listener(self, listener: Listener):
        self.listeners.append(listener)

    def _emit(self, event: RunEvent):
        self._pending.append(event)
        if event.kind in _SOUND_EVENTS:
            self.audio.play(event.kind)
        for listener in self.listeners:
            listener(event)

    def _drain(self) -> List[RunEvent]:
        events, self._pending = self._pending, []
        return events

    # -------------------- Triggers --------------------

    def reset(self) -> List[RunEvent]:
        """Discard the whole world and rebuild it; re-reads the stored high score."""
        self.state = new_state(self.viewport, high_score=self.store.load())
        self.level.generate(self.state, initial=True)
        logger.info("reset: %d segments, high score %d m",
                    len(self.state.segments), self.state.high_score)
        self._emit(RunEvent("reset"))
        return self._drain()

    def jump(self) -> bool:
        """
        The single input trigger. Resets after game over, starts an idle run,
        and jumps only when grounded. Returns True if the player jumped.
        """
        state = self.state
        if not state.running:
            self.reset()
            return False
        if not state.started:
            state.started = True
            logger.info("run started")

        player = state.player
        if not player.try_jump():
            return False
        foot_x = player.x + player.w / 2
        spawn_jump_dust(state.dust, self.rng, foot_x, player.bottom)
        self._emit(RunEvent("jump", foot_x, player.bottom))
        return True

    def resize(self, width: float, height: float) -> List[RunEvent]:
        """New viewport size: re-centre the player and restart the run."""
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self.viewport = Viewport(width, height)
        return self.reset()

    # -------------------- Simulation --------------------

    def tick(self, dt: float) -> List[RunEvent]:
        """One frame: scroll, generate/trim, difficulty, physics, collisions, coins, particles."""
        state = self.state
        if not state.running or not state.started:
            return self._drain()

        self.level.update_and_generate(state, dt)

        if update_difficulty(state, dt):
            spawn_milestone_burst(state.dust, self.rng,
                                  state.viewport.width, state.viewport.height)
            self._emit(RunEvent("milestone", detail=str(state.last_speed_increase)))

        player = state.player
        player.update_physics(dt, state.ground_y)
        was_airborne = not player.on_ground
        landed, cause = player.resolve_collisions(state.segments, state.ground_y,
                                                  state.viewport.height)
        if cause is not None:
            self._game_over(cause)
        elif landed:
            # dust trails every grounded tick; the event marks real touchdowns
            foot_x = player.x + player.w / 2
            spawn_landing_dust(state.dust, self.rng, foot_x, player.bottom)
            if was_airborne:
                self._emit(RunEvent("land", foot_x, player.bottom))

        # the death tick still collects and advances particles; later ticks are frozen
        for coin in collect_coins(state):
            spawn_coin_sparkle(state.sparkle, self.rng, coin.x, coin.y)
            self._emit(RunEvent("coin", coin.x, coin.y))

        state.dust.update()
        state.sparkle.update()
        return self._drain()

    def _game_over(self, cause: str):
        state = self.state
        state.running = False
        state.started = False
        state.death_cause = cause

        score = int(math.floor(state.distance))
        if score > state.high_score:
            state.high_score = score
            self.store.save(score)
        logger.info("game over (%s) at %d m, %d coins, high score %d m",
                    cause, score, state.coins_collected, state.high_score)
        self._emit(RunEvent("game_over", detail=cause))
