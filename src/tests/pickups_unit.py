# src/tests/pickups_unit.py
"""
Coin collection + particle pools.

Usage (from repo root):
  python -m pytest src/tests/pickups_unit.py
"""
from __future__ import annotations
import random

from src.runner.coins import collect_coins, pickup_radius
from src.runner.config import (
    DUST_GRAVITY, SPARKLE_GRAVITY, JUMP_DUST_COUNT, JUMP_DUST_LIFE,
    LAND_DUST_COUNT, LAND_DUST_LIFE, SPARKLE_COUNT, SPARKLE_LIFE,
    MILESTONE_BURST_COUNT, MILESTONE_BURST_LIFE,
)
from src.runner.level import Coin
from src.runner.particles import (
    Particle, make_dust_pool, make_sparkle_pool,
    spawn_jump_dust, spawn_landing_dust, spawn_coin_sparkle, spawn_milestone_burst,
)
from src.runner.state import Viewport, new_state


# ------------------------ Coins ------------------------

def test_pickup_radius():
    # 12 + 48/2 - 6
    assert pickup_radius(Coin(0, 0, 12), 48, 48) == 30


def test_collects_only_strictly_inside_radius():
    state = new_state(Viewport())
    cx, cy = state.player.center
    inside = Coin(cx + 29.9, cy)
    edge = Coin(cx + 30.0, cy)      # d^2 == rad^2 -> not collected
    far = Coin(cx, cy - 100)
    state.coins = [inside, edge, far]

    got = collect_coins(state)
    assert got == [inside]
    assert state.coins == [edge, far]
    assert state.coins_collected == 1


def test_collected_coin_never_comes_back():
    state = new_state(Viewport())
    cx, cy = state.player.center
    state.coins = [Coin(cx, cy)]
    assert len(collect_coins(state)) == 1
    assert collect_coins(state) == []
    assert state.coins == [] and state.coins_collected == 1


# ------------------------ Particles ------------------------

def test_particle_life_and_gravity():
    pool = make_dust_pool()
    pool.emit(Particle(x=0, y=0, vx=1, vy=0, life=3, max_life=3, size=2, color=(0, 0, 0)))
    pool.update()
    p = pool.particles[0]
    assert (p.x, p.y, p.life) == (1, 0, 2)
    assert p.vy == DUST_GRAVITY
    assert abs(p.alpha - 2 / 3) < 1e-9
    pool.update()
    assert pool.particles[0].life == 1
    pool.update()
    assert len(pool) == 0, "expired particles are removed the tick life hits 0"


def test_pools_have_independent_gravity():
    dust, sparkle = make_dust_pool(), make_sparkle_pool()
    for pool in (dust, sparkle):
        pool.emit(Particle(0, 0, 0, 0, 10, 10, 1, (0, 0, 0)))
        pool.update()
    assert dust.particles[0].vy == DUST_GRAVITY
    assert sparkle.particles[0].vy == SPARKLE_GRAVITY


def test_life_never_observed_negative():
    rng = random.Random(0)
    pool = make_sparkle_pool()
    spawn_coin_sparkle(pool, rng, 10, 10)
    for _ in range(SPARKLE_LIFE + 5):
        pool.update()
        assert all(p.life > 0 for p in pool)
    assert len(pool) == 0


def test_emitters():
    rng = random.Random(1)
    dust = make_dust_pool()
    spawn_jump_dust(dust, rng, 100, 200)
    assert len(dust) == JUMP_DUST_COUNT
    assert all(p.life == p.max_life == JUMP_DUST_LIFE and p.vy >= 1 for p in dust)

    dust.clear()
    spawn_landing_dust(dust, rng, 100, 200)
    assert len(dust) == LAND_DUST_COUNT
    assert all(p.life == LAND_DUST_LIFE and p.vy <= 0 for p in dust)

    dust.clear()
    spawn_milestone_burst(dust, rng, 960, 540)
    assert len(dust) == MILESTONE_BURST_COUNT
    assert all(p.life == MILESTONE_BURST_LIFE for p in dust)
    assert all(0 <= p.x < 960 and 0 <= p.y < 540 for p in dust)

    sparkle = make_sparkle_pool()
    spawn_coin_sparkle(sparkle, rng, 5, 6)
    assert len(sparkle) == SPARKLE_COUNT
    assert all((p.x, p.y) == (5, 6) for p in sparkle)


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
    print("✓ pickup/particle tests passed")


if __name__ == "__main__":
    main()
