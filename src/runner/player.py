# src/runner/player.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
from .config import (
    PLAYER_W, PLAYER_H, GRAVITY, JUMP_POWER,
    LAND_EPS, LAND_MAX_UPWARD_VY, HIT_DEPTH, SINK_DEPTH,
    FALL_NUDGE_VY, FALL_DEATH_MARGIN, SQUISH_PER_VY, SQUISH_RECOVERY,
)
from .geometry import boxes_overlap
from .level import Segment, HOLE, BUMP

CAUSE_HOLE = "fell into a hole"
CAUSE_OBSTACLE = "hit an obstacle"


def player_fixed_x(viewport_w: float) -> int:
    """Player's left edge when centred horizontally in the viewport."""
    return round(viewport_w * 0.5 - PLAYER_W / 2)


def segment_under(segments: List[Segment], x: float) -> Optional[Segment]:
    """First segment whose closed span [x, x + w] contains x."""
    for s in segments:
        if s.x <= x <= s.right:
            return s
    return None


@dataclass
class Player:
    """
    Fixed-x runner. The world scrolls; only y moves.
    - vy < 0 means moving up (screen coordinates)
    - on_ground: Grounded vs Airborne
    - prev_y: y at the start of the current tick (landing edge detection)
    """
    x: float
    y: float
    vy: float = 0.0
    on_ground: bool = True
    prev_y: float = 0.0
    w: int = PLAYER_W
    h: int = PLAYER_H
    squish: float = 0.0     # cosmetic only
    rotation: float = 0.0   # cosmetic only

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.w / 2, self.y + self.h / 2

    def box(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def try_jump(self) -> bool:
        """Jump only if grounded. Returns True if performed."""
        if not self.on_ground:
            return False
        self.vy = JUMP_POWER
        self.on_ground = False
        return True

    def update_physics(self, dt: float, ground_y: float):
        """Integrate vertical motion; grounded players are pinned to the ground line."""
        self.prev_y = self.y
        if not self.on_ground:
            self.vy += GRAVITY * dt
            self.y += self.vy * dt
            if self.vy > 0:
                self.squish = min(1.0, self.vy * SQUISH_PER_VY)
        else:
            self.vy = 0.0
            self.y = ground_y - self.h
            self.squish = max(0.0, self.squish - SQUISH_RECOVERY)

    def _land(self, top: float):
        self.y = top - self.h
        self.on_ground = True
        self.vy = 0.0

    def resolve_collisions(self, segments: List[Segment], ground_y: float,
                           viewport_h: float) -> Tuple[bool, Optional[str]]:
        """
        Classify the player against the segment under its centre.
        Returns (landed, death_cause):
          - landed is True whenever the landing test passes, which a grounded
            player on level terrain does every tick
          - death_cause is None, CAUSE_HOLE or CAUSE_OBSTACLE
        """
        cx = self.x + self.w / 2
        seg = segment_under(segments, cx)

        # No support: walk off the edge, or keep falling until out of view
        if seg is None or seg.seg_type == HOLE:
            if self.on_ground:
                self.on_ground = False
                self.vy = FALL_NUDGE_VY
            elif self.y > viewport_h + FALL_DEATH_MARGIN:
                return False, CAUSE_HOLE
            return False, None

        top = seg.top(ground_y)
        prev_bottom = self.prev_y + self.h
        cur_bottom = self.y + self.h

        # Swept landing: crossed the top this tick and not shooting upward
        if (prev_bottom <= top + LAND_EPS and cur_bottom >= top - LAND_EPS
                and self.vy >= LAND_MAX_UPWARD_VY):
            self._land(top)
            return True, None

        if seg.seg_type == BUMP:
            h_overlap, v_overlap = boxes_overlap(self.box(), seg.obstacle_box(ground_y))
            # face hit, not a graze of the top
            if h_overlap and v_overlap and cur_bottom > top + HIT_DEPTH:
                return False, CAUSE_OBSTACLE
        elif cur_bottom > top + SINK_DEPTH and self.vy > 0:
            # anti-sink: never fall through solid ground
            self._land(top)

        return False, None
