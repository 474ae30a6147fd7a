"""Turn circles and polygons into the points, segments and triangles drawn."""

from __future__ import annotations

import math
from typing import Sequence

from .vector2 import Vector2

DEFAULT_CIRCLE_SEGMENTS = 16


def circle_points(
    center: Vector2, radius: float, segments: int = DEFAULT_CIRCLE_SEGMENTS
) -> list[Vector2]:
    """Points on a circle, starting on the +x axis and turning anticlockwise.

    Successive directions are produced by repeated rotation rather than
    fresh trigonometry for each point.
    """
    if segments < 1:
        raise ValueError("a circle needs at least one segment")
    increment = 2.0 * math.pi / segments
    sin_inc = math.sin(increment)
    cos_inc = math.cos(increment)
    direction = Vector2(1.0, 0.0)
    points = []
    for _ in range(segments):
        points.append(center + radius * direction)
        direction = Vector2(
            cos_inc * direction.x - sin_inc * direction.y,
            sin_inc * direction.x + cos_inc * direction.y,
        )
    return points


def polygon_edges(points: Sequence[Vector2]) -> list[tuple[Vector2, Vector2]]:
    """Closed outline segments, beginning with the edge from last to first point."""
    if not points:
        return []
    return list(zip([points[-1], *points[:-1]], points))


def fan_triangles(
    points: Sequence[Vector2],
) -> list[tuple[Vector2, Vector2, Vector2]]:
    """Triangle fan around the first point of a convex polygon."""
    if len(points) < 3:
        return []
    first = points[0]
    return [(first, b, c) for b, c in zip(points[1:-1], points[2:])]