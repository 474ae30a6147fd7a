"""Colour and vertex types used by the debug renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector2 import Vector2
from .vector3 import Vector3

IMMEDIATE_DRAW_DEPTH = -0.5
"""Depth given to vertices placed without an explicit depth.

Depth runs from -1 (close) to 1 (far); immediate drawing uses [-0.5, 0.5].
"""


@dataclass(slots=True)
class Color:
    """RGBA colour with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass(slots=True)
class Vertex:
    """A position with depth, a colour and a point size."""

    position: Vector3 = field(default_factory=Vector3)
    color: Color = field(default_factory=Color)
    size: float = 0.0

    @classmethod
    def at_depth(
        cls,
        position: Vector2,
        depth: float = IMMEDIATE_DRAW_DEPTH,
        color: Color | None = None,
        size: float = 1.0,
    ) -> "Vertex":
        """Vertex at a 2D position placed at ``depth``."""
        return cls(
            Vector3.from_vector2(position, depth),
            Color() if color is None else color,
            size,
        )