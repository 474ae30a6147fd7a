"""Three-dimensional vector type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .mathutils import are_equal
from .vector2 import Vector2


@dataclass(eq=False, slots=True)
class Vector3:
    """Mutable 3D vector; equality tolerates single-precision epsilon."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_vector2(cls, v: Vector2, z: float = 0.0) -> "Vector3":
        """Lift a 2D vector into 3D with the given ``z``."""
        return cls(v.x, v.y, z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        raise IndexError(f"Vector3 index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        elif index == 2:
            self.z = value
        else:
            raise IndexError(f"Vector3 index out of range: {index}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            are_equal(self.x, other.x)
            and are_equal(self.y, other.y)
            and are_equal(self.z, other.z)
        )

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __abs__(self) -> "Vector3":
        """Component-wise absolute value."""
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def __mul__(self, scale: object) -> "Vector3":
        if not isinstance(scale, Real):
            return NotImplemented
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    def __rmul__(self, scale: object) -> "Vector3":
        if not isinstance(scale, Real):
            return NotImplemented
        return Vector3(scale * self.x, scale * self.y, scale * self.z)

    def __truediv__(self, scale: object) -> "Vector3":
        if not isinstance(scale, Real):
            return NotImplemented
        inv = 1.0 / scale
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scale: object) -> "Vector3":
        if not isinstance(scale, Real):
            return NotImplemented
        self.x *= scale
        self.y *= scale
        self.z *= scale
        return self

    def __itruediv__(self, scale: object) -> "Vector3":
        if not isinstance(scale, Real):
            return NotImplemented
        inv = 1.0 / scale
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> None:
        """Scale this vector to unit length in place; a zero vector stays zero."""
        m = self.magnitude()
        if are_equal(m, 0.0):
            self.x = self.y = self.z = 0.0
            return
        inv = 1.0 / m
        self.x *= inv
        self.y *= inv
        self.z *= inv

    def normalized(self) -> "Vector3":
        """Unit-length copy of this vector; this vector is left unchanged."""
        v = Vector3(self.x, self.y, self.z)
        v.normalize()
        return v

    def distance_squared(self, other: "Vector3") -> float:
        return (
            (other.x - self.x) ** 2
            + (other.y - self.y) ** 2
            + (other.z - self.z) ** 2
        )

    def distance(self, other: "Vector3") -> float:
        return math.sqrt(self.distance_squared(other))

    def project(self, other: "Vector3") -> "Vector3":
        """Component of this vector along ``other``."""
        return other * (self.dot(other) / other.dot(other))

    def reject(self, other: "Vector3") -> "Vector3":
        """Component of this vector perpendicular to ``other``."""
        return self - self.project(other)