"""Planar ring checks used by validation."""

from __future__ import annotations

import math
from typing import Sequence

Point = Sequence[float]


def is_finite_point(point: Point) -> bool:
    return all(math.isfinite(value) for value in point)


def signed_ring_area(ring: Sequence[Point]) -> float:
    """Shoelace area of a closed ring; positive when counter-clockwise."""
    total = 0.0
    for (x1, y1), (x2, y2) in zip(ring, ring[1:]):
        total += x1 * y2 - x2 * y1
    return total / 2.0


def _orientation(a: Point, b: Point, c: Point) -> float:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def segments_cross(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    # Proper crossings only; shared endpoints between neighbouring edges are fine.
    d1 = _orientation(q1, q2, p1)
    d2 = _orientation(q1, q2, p2)
    d3 = _orientation(p1, p2, q1)
    d4 = _orientation(p1, p2, q2)
    return ((d1 > 0) != (d2 > 0)) and ((d3 > 0) != (d4 > 0)) and 0 not in (d1, d2, d3, d4)


def is_simple_ring(ring: Sequence[Point]) -> bool:
    """True when no two non-adjacent edges of a closed ring cross."""
    edges = list(zip(ring, ring[1:]))
    count = len(edges)
    for i in range(count):
        for j in range(i + 2, count):
            if i == 0 and j == count - 1:
                continue
            if segments_cross(*edges[i], *edges[j]):
                return False
    return True
