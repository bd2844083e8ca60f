# src/runner/particles.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Iterator, List, Tuple
from .config import (
    DUST_GRAVITY, SPARKLE_GRAVITY,
    JUMP_DUST_COUNT, JUMP_DUST_LIFE, LAND_DUST_COUNT, LAND_DUST_LIFE,
    MILESTONE_BURST_COUNT, MILESTONE_BURST_LIFE, SPARKLE_COUNT, SPARKLE_LIFE,
    COLOR_DUST, COLOR_MILESTONE, COLOR_COIN,
)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int
    size: float
    color: Tuple[int, int, int]

    @property
    def alpha(self) -> float:
        """Linear fade used by the renderer (1.0 at spawn -> 0.0 at expiry)."""
        return self.life / self.max_life if self.max_life > 0 else 0.0


class ParticlePool:
    """
    Unordered pool of short-lived particles sharing one gravity constant.
    Advanced once per tick (not dt-scaled) and compacted after the pass.
    """
    def __init__(self, gravity: float):
        self.gravity = gravity
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def emit(self, particle: Particle):
        self.particles.append(particle)

    def clear(self):
        self.particles = []

    def update(self):
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.vy += self.gravity
            p.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]


def make_dust_pool() -> ParticlePool:
    return ParticlePool(DUST_GRAVITY)


def make_sparkle_pool() -> ParticlePool:
    return ParticlePool(SPARKLE_GRAVITY)


# --- Emitters ---

def spawn_jump_dust(pool: ParticlePool, rng: random.Random, x: float, y: float):
    for _ in range(JUMP_DUST_COUNT):
        pool.emit(Particle(
            x=x, y=y,
            vx=(rng.random() - 0.5) * 4,
            vy=rng.random() * 2 + 1,
            life=JUMP_DUST_LIFE, max_life=JUMP_DUST_LIFE,
            size=rng.random() * 3 + 2,
            color=COLOR_DUST,
        ))


def spawn_landing_dust(pool: ParticlePool, rng: random.Random, x: float, y: float):
    for _ in range(LAND_DUST_COUNT):
        pool.emit(Particle(
            x=x, y=y,
            vx=(rng.random() - 0.5) * 6,
            vy=-rng.random() * 3,
            life=LAND_DUST_LIFE, max_life=LAND_DUST_LIFE,
            size=rng.random() * 4 + 2,
            color=COLOR_DUST,
        ))


def spawn_milestone_burst(pool: ParticlePool, rng: random.Random, width: float, height: float):
    """Scatter a burst across the whole viewport when the speed goes up."""
    for _ in range(MILESTONE_BURST_COUNT):
        pool.emit(Particle(
            x=rng.random() * width,
            y=rng.random() * height,
            vx=(rng.random() - 0.5) * 3,
            vy=(rng.random() - 0.5) * 3,
            life=MILESTONE_BURST_LIFE, max_life=MILESTONE_BURST_LIFE,
            size=rng.random() * 2 + 1,
            color=COLOR_MILESTONE,
        ))


def spawn_coin_sparkle(pool: ParticlePool, rng: random.Random, x: float, y: float):
    for _ in range(SPARKLE_COUNT):
        pool.emit(Particle(
            x=x, y=y,
            vx=(rng.random() - 0.5) * 8,
            vy=(rng.random() - 0.5) * 8,
            life=SPARKLE_LIFE, max_life=SPARKLE_LIFE,
            size=rng.random() * 4 + 2,
            color=COLOR_COIN,
        ))
