# src/tests/physics_tests.py
"""
Player physics + collision classification.

Usage (from repo root):
  python -m pytest src/tests/physics_tests.py
"""
from __future__ import annotations

from src.runner.config import GRAVITY, JUMP_POWER, FALL_NUDGE_VY
from src.runner.level import Segment, SOLID, BUMP, HOLE
from src.runner.player import (
    Player, CAUSE_HOLE, CAUSE_OBSTACLE, player_fixed_x, segment_under,
)

GROUND_Y = 440.0        # 540 viewport - 100 ground band
VIEW_H = 540.0
PX = player_fixed_x(960)  # 456 -> centre at 480


def airborne(prev_bottom: float, cur_bottom: float, vy: float) -> Player:
    return Player(x=PX, y=cur_bottom - 48, vy=vy, on_ground=False, prev_y=prev_bottom - 48)


def grounded() -> Player:
    y = GROUND_Y - 48
    return Player(x=PX, y=y, vy=0.0, on_ground=True, prev_y=y)


def test_player_is_centred():
    assert PX == 456
    p = grounded()
    assert p.center == (480.0, GROUND_Y - 24)


def test_landing_on_solid():
    top = GROUND_Y
    p = airborne(prev_bottom=top - 1, cur_bottom=top + 2, vy=3.0)
    landed, cause = p.resolve_collisions([Segment(0, 2000, SOLID)], GROUND_Y, VIEW_H)
    assert landed and cause is None
    assert p.on_ground and p.vy == 0.0
    assert p.bottom == top


def test_no_landing_when_rising_fast():
    top = GROUND_Y
    p = airborne(prev_bottom=top - 1, cur_bottom=top + 1, vy=-7.0)
    landed, cause = p.resolve_collisions([Segment(0, 2000, SOLID)], GROUND_Y, VIEW_H)
    assert not landed and cause is None
    assert not p.on_ground


def test_landing_on_bump_top():
    seg = Segment(400, 200, BUMP, 40)
    top = seg.top(GROUND_Y)
    p = airborne(prev_bottom=top - 20, cur_bottom=top + 5, vy=3.0)
    landed, cause = p.resolve_collisions([seg], GROUND_Y, VIEW_H)
    assert landed and cause is None
    assert p.bottom == top


def test_grazing_bump_top_is_not_a_hit():
    seg = Segment(400, 200, BUMP, 40)
    top = seg.top(GROUND_Y)
    # already slightly below the top last tick, so no landing either
    p = airborne(prev_bottom=top + 4, cur_bottom=top + 5, vy=1.0)
    landed, cause = p.resolve_collisions([seg], GROUND_Y, VIEW_H)
    assert not landed
    assert cause is None


def test_running_into_bump_face():
    seg = Segment(400, 200, BUMP, 40)
    p = grounded()
    landed, cause = p.resolve_collisions([seg], GROUND_Y, VIEW_H)
    assert not landed
    assert cause == CAUSE_OBSTACLE


def test_walking_off_into_hole():
    p = grounded()
    segs = [Segment(0, 100, SOLID), Segment(100, 2000, HOLE)]
    landed, cause = p.resolve_collisions(segs, GROUND_Y, VIEW_H)
    assert not landed and cause is None
    assert not p.on_ground
    assert p.vy == FALL_NUDGE_VY


def test_missing_terrain_counts_as_hole():
    p = grounded()
    landed, cause = p.resolve_collisions([], GROUND_Y, VIEW_H)
    assert cause is None and not p.on_ground


def test_fall_is_fatal_only_below_viewport():
    segs = [Segment(0, 2000, HOLE)]
    p = Player(x=PX, y=VIEW_H + 59, vy=10.0, on_ground=False)
    assert p.resolve_collisions(segs, GROUND_Y, VIEW_H) == (False, None)
    p.y = VIEW_H + 61
    assert p.resolve_collisions(segs, GROUND_Y, VIEW_H) == (False, CAUSE_HOLE)


def test_anti_sink_snaps_to_solid_top():
    top = GROUND_Y
    p = airborne(prev_bottom=top + 5, cur_bottom=top + 15, vy=10.0)
    landed, cause = p.resolve_collisions([Segment(0, 2000, SOLID)], GROUND_Y, VIEW_H)
    assert not landed and cause is None
    assert p.on_ground and p.vy == 0.0 and p.bottom == top


def test_grounded_player_passes_landing_test_every_tick():
    p = grounded()
    for _ in range(3):
        p.update_physics(1.0, GROUND_Y)
        landed, cause = p.resolve_collisions([Segment(0, 2000, SOLID)], GROUND_Y, VIEW_H)
        assert landed and cause is None and p.on_ground
        assert p.bottom == GROUND_Y and p.vy == 0.0


def test_update_physics_integrates_when_airborne():
    p = Player(x=PX, y=300.0, vy=JUMP_POWER, on_ground=False)
    p.update_physics(1.0, GROUND_Y)
    assert p.prev_y == 300.0
    assert p.vy == JUMP_POWER + GRAVITY
    assert p.y == 300.0 + (JUMP_POWER + GRAVITY)


def test_update_physics_pins_grounded_player():
    p = Player(x=PX, y=123.0, vy=5.0, on_ground=True, squish=0.5)
    p.update_physics(1.0, GROUND_Y)
    assert p.vy == 0.0 and p.bottom == GROUND_Y
    assert abs(p.squish - 0.4) < 1e-9


def test_jump_only_from_ground():
    p = grounded()
    assert p.try_jump()
    assert p.vy == JUMP_POWER and not p.on_ground
    assert not p.try_jump()
    assert p.vy == JUMP_POWER


def test_segment_under_picks_first_on_shared_edge():
    a, b = Segment(0, 100, SOLID), Segment(100, 50, HOLE)
    assert segment_under([a, b], 100) is a
    assert segment_under([a, b], 120) is b
    assert segment_under([a, b], 151) is None


def main():
    for name, fn in sorted(globals().items()):
        if name.startswith("test_") and callable(fn):
            fn()
    print("✓ physics tests passed")


if __name__ == "__main__":
    main()
