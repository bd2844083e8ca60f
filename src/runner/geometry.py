# src/runner/geometry.py
from __future__ import annotations
import random
from typing import Tuple

Box = Tuple[float, float, float, float]  # (x, y, w, h)


def rand_int(rng: random.Random, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi], both ends inclusive."""
    return rng.randint(lo, hi)


def spans_overlap(a0: float, a1: float, b0: float, b1: float) -> bool:
    """Open-interval overlap: touching edges do not count."""
    return a1 > b0 and a0 < b1


def boxes_overlap(a: Box, b: Box) -> Tuple[bool, bool]:
    """Return (horizontal_overlap, vertical_overlap) of two boxes."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return spans_overlap(ax, ax + aw, bx, bx + bw), spans_overlap(ay, ay + ah, by, by + bh)


def circle_hits_point(cx: float, cy: float, px: float, py: float, radius: float) -> bool:
    dx = cx - px
    dy = cy - py
    return dx * dx + dy * dy < radius * radius
