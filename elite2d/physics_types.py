"""Plain data types describing rigid bodies, shapes and raycast hits."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .vector2 import Vector2


class PhysicsFlags(enum.IntFlag):
    """User flags attached to a rigid body."""

    DEFAULT = 0
    NAVIGATION_COLLIDER = 1


class ForceMode(enum.Enum):
    """How a force is applied to a body."""

    FORCE = 0
    IMPULSE = 1


class RigidBodyType(enum.Enum):
    STATIC = 0
    KINEMATIC = 1
    DYNAMIC = 2


class ShapeType(enum.Enum):
    UNDEFINED = 0
    CIRCLE = 1
    BOX = 2
    POLYGON = 3


@dataclass(slots=True)
class Transform:
    """Position and rotation of a body."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: Vector2 = field(default_factory=Vector2)


@dataclass(slots=True)
class RigidBodyUserData:
    """Optional user data stored with a body."""

    tag: int = 0
    data: Any = None


@dataclass(slots=True)
class RigidBodyDefine:
    """Settings used when creating a rigid body."""

    linear_damping: float = 0.1
    angular_damping: float = 0.01
    type: RigidBodyType = RigidBodyType.KINEMATIC
    allow_sleep: bool = False


@dataclass(slots=True)
class RaycastHitPoint:
    """Where a ray hit a body, and the outline of the shape it hit."""

    rigidbody: Any = None
    point: Vector2 = field(default_factory=Vector2)
    fraction: float = 0.0
    hit_shape_points: list[Vector2] = field(default_factory=list)


@dataclass(slots=True)
class CircleShape:
    position: Vector2 = field(default_factory=Vector2)
    radius: float = 1.0

    type: ClassVar[ShapeType] = ShapeType.CIRCLE


@dataclass(slots=True)
class BoxShape:
    position: Vector2 = field(default_factory=Vector2)
    width: float = 1.0
    height: float = 1.0
    angle: float = 0.0

    type: ClassVar[ShapeType] = ShapeType.BOX


@dataclass(slots=True)
class PolygonShape:
    center: Vector2 = field(default_factory=Vector2)
    vertices: list[Vector2] = field(default_factory=list)
    normals: list[Vector2] = field(default_factory=list)

    type: ClassVar[ShapeType] = ShapeType.POLYGON


@dataclass(slots=True)
class FixedTimestep:
    """Accumulates frame time and tells how many fixed steps to simulate."""

    hz: float = 60.0
    velocity_iterations: int = 8
    position_iterations: int = 3
    max_elapsed: float = 0.25
    accumulator: float = 0.0

    @property
    def frame_time(self) -> float:
        """Length of one simulation step in seconds."""
        return 1.0 / self.hz if self.hz > 0.0 else 1.0 / 60.0

    def advance(self, elapsed: float) -> int:
        """Add ``elapsed`` seconds and return the number of whole steps due.

        Elapsed time is capped at ``max_elapsed`` to avoid a spiral of death.
        """
        frame_time = self.frame_time
        self.accumulator += min(elapsed, self.max_elapsed)
        steps = 0
        while self.accumulator >= frame_time:
            self.accumulator -= frame_time
            steps += 1
        return steps