"""Two-dimensional vector type and helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Optional

from .mathutils import are_equal, random_binomial, random_float


@dataclass(eq=False, slots=True)
class Vector2:
    """Mutable 2D vector; equality tolerates single-precision epsilon."""

    x: float = 0.0
    y: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2 index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError(f"Vector2 index out of range: {index}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return are_equal(self.x, other.x) and are_equal(self.y, other.y)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __abs__(self) -> "Vector2":
        """Component-wise absolute value."""
        return Vector2(abs(self.x), abs(self.y))

    def __mul__(self, other: object) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector2":
        if isinstance(other, Real):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, scale: object) -> "Vector2":
        if not isinstance(scale, Real):
            return NotImplemented
        inv = 1.0 / scale
        return Vector2(self.x * inv, self.y * inv)

    def __rtruediv__(self, scale: object) -> "Vector2":
        """``s / v`` scales the vector by ``1 / s``, the same as ``v / s``."""
        if not isinstance(scale, Real):
            return NotImplemented
        inv = 1.0 / scale
        return Vector2(inv * self.x, inv * self.y)

    def __iadd__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scale: object) -> "Vector2":
        if not isinstance(scale, Real):
            return NotImplemented
        self.x *= scale
        self.y *= scale
        return self

    def __itruediv__(self, scale: object) -> "Vector2":
        if not isinstance(scale, Real):
            return NotImplemented
        inv = 1.0 / scale
        self.x *= inv
        self.y *= inv
        return self

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> float:
        """Scale this vector to unit length in place and return its old length."""
        m = self.magnitude()
        if are_equal(m, 0.0):
            self.x = 0.0
            self.y = 0.0
            return 0.0
        inv = 1.0 / m
        self.x *= inv
        self.y *= inv
        return m

    def normalized(self) -> "Vector2":
        """Unit-length copy of this vector; this vector is left unchanged."""
        v = Vector2(self.x, self.y)
        v.normalize()
        return v

    def distance_squared(self, other: "Vector2") -> float:
        return (other.x - self.x) ** 2 + (other.y - self.y) ** 2

    def distance(self, other: "Vector2") -> float:
        return math.sqrt(self.distance_squared(other))

    def clamped(self, maximum: float) -> "Vector2":
        """Copy of this vector whose length is at most ``maximum``."""
        m = self.magnitude()
        if m == 0.0:
            return Vector2(self.x, self.y)
        scale = min(maximum / m, 1.0)
        return self * scale


def random_vector2(low: float = 1.0, high: Optional[float] = None) -> Vector2:
    """Random vector.

    With one argument both components are binomial in [-low, low];
    with two they are uniform in [low, high].
    """
    if high is None:
        return Vector2(random_binomial(low), random_binomial(low))
    return Vector2(random_float(low, high), random_float(low, high))


def orientation_to_vector(orientation: float) -> Vector2:
    """Unit vector pointing along an angle given in radians."""
    return Vector2(math.cos(orientation), math.sin(orientation))


def vector_to_orientation(vector: Vector2) -> float:
    """Angle in radians of a vector, measured from the x-axis."""
    return math.atan2(vector.y, vector.x)


def angle_between(v1: Vector2, v2: Vector2) -> float:
    """Signed angle in radians that rotates ``v1`` onto ``v2``."""
    return math.atan2(v1.cross(v2), v1.dot(v2))