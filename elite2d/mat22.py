"""Row-major 2x2 matrix."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator, Union

from .mathutils import are_equal
from .vector2 import Vector2


def _identity_row0() -> Vector2:
    return Vector2(1.0, 0.0)


def _identity_row1() -> Vector2:
    return Vector2(0.0, 1.0)


@dataclass(slots=True)
class Mat22:
    """2x2 matrix stored as two row vectors; the default is the identity.

    | r0.x  r0.y |
    | r1.x  r1.y |
    """

    r0: Vector2 = field(default_factory=_identity_row0)
    r1: Vector2 = field(default_factory=_identity_row1)

    @classmethod
    def identity(cls) -> "Mat22":
        """A new identity matrix."""
        return cls()

    def __iter__(self) -> Iterator[Vector2]:
        yield self.r0
        yield self.r1

    def __getitem__(self, index: int) -> Vector2:
        if index == 0:
            return self.r0
        if index == 1:
            return self.r1
        raise IndexError(f"Mat22 row index out of range: {index}")

    def _copy(self) -> "Mat22":
        return Mat22(Vector2(self.r0.x, self.r0.y), Vector2(self.r1.x, self.r1.y))

    def __add__(self, other: "Mat22") -> "Mat22":
        if not isinstance(other, Mat22):
            return NotImplemented
        return Mat22(self.r0 + other.r0, self.r1 + other.r1)

    def __sub__(self, other: "Mat22") -> "Mat22":
        if not isinstance(other, Mat22):
            return NotImplemented
        return Mat22(self.r0 - other.r0, self.r1 - other.r1)

    def __mul__(self, other: object) -> Union["Mat22", Vector2]:
        if isinstance(other, Mat22):
            a, b = self, other
            return Mat22(
                Vector2(
                    a.r0.x * b.r0.x + a.r0.y * b.r1.x,
                    a.r0.x * b.r0.y + a.r0.y * b.r1.y,
                ),
                Vector2(
                    a.r1.x * b.r0.x + a.r1.y * b.r1.x,
                    a.r1.x * b.r0.y + a.r1.y * b.r1.y,
                ),
            )
        if isinstance(other, Vector2):
            return Vector2(
                self.r0.x * other.x + self.r0.y * other.y,
                self.r1.x * other.x + self.r1.y * other.y,
            )
        if isinstance(other, Real):
            return Mat22(self.r0 * other, self.r1 * other)
        return NotImplemented

    def __iadd__(self, other: "Mat22") -> "Mat22":
        if not isinstance(other, Mat22):
            return NotImplemented
        self.r0 += other.r0
        self.r1 += other.r1
        return self

    def __isub__(self, other: "Mat22") -> "Mat22":
        if not isinstance(other, Mat22):
            return NotImplemented
        self.r0 -= other.r0
        self.r1 -= other.r1
        return self

    def __imul__(self, other: object) -> "Mat22":
        if isinstance(other, Mat22):
            result = self * other
            self.r0, self.r1 = result.r0, result.r1
            return self
        if isinstance(other, Real):
            self.r0 *= other
            self.r1 *= other
            return self
        return NotImplemented

    def set_identity(self) -> None:
        """Reset this matrix to the identity in place."""
        self.r0 = Vector2(1.0, 0.0)
        self.r1 = Vector2(0.0, 1.0)

    def determinant(self) -> float:
        return self.r0.x * self.r1.y - self.r0.y * self.r1.x

    def inverse(self) -> "Mat22":
        """Inverse matrix; the identity when the matrix is singular."""
        det = self.determinant()
        if are_equal(det, 0.0):
            return Mat22.identity()
        inv = 1.0 / det
        return Mat22(
            Vector2(inv * self.r1.y, inv * -self.r0.y),
            Vector2(inv * -self.r1.x, inv * self.r0.x),
        )