"""Plane geometry problems: covering holes, perpendicular paths, deliveries."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import NamedTuple

SHAFT_DIAMETER = 5


class Point(NamedTuple):
    """A point of the plane."""

    x: float
    y: float


def _as_points(points: Iterable[Iterable[float]]) -> list[Point]:
    return [Point(*point) for point in points]


def sweep_min_diameter(points: Iterable[Iterable[float]]) -> float:
    """Diameter found by a sweep over the holes sorted by ``x``, plus the shaft.

    The sweep only compares two holes while their ``x`` gap is below the
    diameter found so far.
    """
    ordered = sorted(_as_points(points))
    diameter = 0.0
    for index, first in enumerate(ordered):
        for second in ordered[index + 1 :]:
            if second.x - first.x >= diameter:
                break
            diameter = max(diameter, math.dist(first, second))
    return diameter + SHAFT_DIAMETER


def cover_holes_diameter(points: Iterable[Iterable[int]]) -> int:
    """Smallest whole diameter of a disc centred on a hole that covers every hole.

    The disc must also leave room for the shaft.
    """
    holes = _as_points(points)
    if not holes:
        raise ValueError("at least one hole is required")
    farthest = [0] * len(holes)
    for i, first in enumerate(holes):
        for j in range(i + 1, len(holes)):
            second = holes[j]
            squared = (first.x - second.x) ** 2 + (first.y - second.y) ** 2
            farthest[i] = max(farthest[i], squared)
            farthest[j] = max(farthest[j], squared)
    return math.floor(2 * math.sqrt(min(farthest))) + SHAFT_DIAMETER


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields signed infinities on a zero denominator."""
    if denominator == 0:
        if numerator == 0:
            raise ValueError("a segment must join two distinct points")
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def count_perpendicular(
    segments: Iterable[tuple[float, float, float, float]],
) -> int:
    """Number of segments for which some segment has the perpendicular slope.

    Each segment is ``(x1, y1, x2, y2)``; slopes follow floating-point rules,
    so vertical segments have an infinite slope whose sign depends on direction.
    """
    slopes = []
    for x1, y1, x2, y2 in segments:
        slopes.append(_divide(float(y1) - float(y2), float(x1) - float(x2)))
    present = set(slopes)
    return sum(1 for slope in slopes if _divide(-1.0, slope) in present)


def delivery_point(points: Iterable[Iterable[int]]) -> Point:
    """Point built from the sorted coordinates just past the median position."""
    locations = _as_points(points)
    count = len(locations)
    index = (count + 1) // 2 if count % 2 else count // 2 + 1
    if index >= count:
        raise ValueError("not enough points to choose a delivery point")
    xs = sorted(point.x for point in locations)
    ys = sorted(point.y for point in locations)
    return Point(xs[index], ys[index])