"""Affine 2D transform stored as two axis columns and an origin."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

from .mathutils import are_equal
from .vector2 import Vector2

_PI = 3.1415926535


def _rotation_axes(degrees: float) -> tuple[Vector2, Vector2]:
    radians = degrees * _PI / 180.0
    c, s = math.cos(radians), math.sin(radians)
    return Vector2(c, s), Vector2(-s, c)


def _pair(a: Union[float, Vector2], b: Optional[float]) -> tuple[float, float]:
    if isinstance(a, Vector2):
        return a.x, a.y
    return a, (a if b is None else b)


@dataclass(eq=False, slots=True)
class Matrix2x3:
    """Affine transform; the default is the identity."""

    dir_x: Vector2 = field(default_factory=lambda: Vector2(1.0, 0.0))
    dir_y: Vector2 = field(default_factory=lambda: Vector2(0.0, 1.0))
    orig: Vector2 = field(default_factory=Vector2)

    __hash__ = None  # type: ignore[assignment]

    def transform(self, v: Vector2) -> Vector2:
        """Apply this transform to a point."""
        return v.x * self.dir_x + v.y * self.dir_y + self.orig

    def determinant(self) -> float:
        return self.dir_x.x * self.dir_y.y - self.dir_x.y * self.dir_y.x

    def inverse(self) -> "Matrix2x3":
        """Inverse transform; raises ZeroDivisionError when singular."""
        det = self.determinant()
        dx, dy, o = self.dir_x, self.dir_y, self.orig
        return Matrix2x3(
            Vector2(dy.y, -dx.y) / det,
            Vector2(-dy.x, dx.x) / det,
            Vector2(dy.x * o.y - dy.y * o.x, -(dx.x * o.y - dx.y * o.x)) / det,
        )

    def equals(self, other: "Matrix2x3", epsilon: float = 0.001) -> bool:
        """True when every component matches ``other`` within ``epsilon``."""
        return all(
            are_equal(a, b, epsilon)
            for mine, theirs in (
                (self.dir_x, other.dir_x),
                (self.dir_y, other.dir_y),
                (self.orig, other.orig),
            )
            for a, b in zip(mine, theirs)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix2x3):
            return NotImplemented
        return (
            self.dir_x == other.dir_x
            and self.dir_y == other.dir_y
            and self.orig == other.orig
        )

    def __mul__(self, rhs: "Matrix2x3") -> "Matrix2x3":
        """Compose transforms: the result applies ``rhs`` first."""
        if not isinstance(rhs, Matrix2x3):
            return NotImplemented
        lx, ly, lo = self.dir_x, self.dir_y, self.orig
        return Matrix2x3(
            Vector2(rhs.dir_x.x * lx.x + rhs.dir_x.y * ly.x,
                    rhs.dir_x.x * lx.y + rhs.dir_x.y * ly.y),
            Vector2(rhs.dir_y.x * lx.x + rhs.dir_y.y * ly.x,
                    rhs.dir_y.x * lx.y + rhs.dir_y.y * ly.y),
            Vector2(rhs.orig.x * lx.x + rhs.orig.y * ly.x + lo.x,
                    rhs.orig.x * lx.y + rhs.orig.y * ly.y + lo.y),
        )

    def __str__(self) -> str:
        return (
            f"Matrix2x3( x( {self.dir_x.x:f}, {self.dir_x.y:f} ), "
            f"y( {self.dir_y.x:f}, {self.dir_y.y:f} ), "
            f"orig( {self.orig.x:f}, {self.orig.y:f} )  )"
        )

    def set_as_identity(self) -> None:
        self.dir_x = Vector2(1.0, 0.0)
        self.dir_y = Vector2(0.0, 1.0)
        self.orig = Vector2(0.0, 0.0)

    def set_as_rotate(self, degrees: float) -> None:
        self.dir_x, self.dir_y = _rotation_axes(degrees)
        self.orig = Vector2(0.0, 0.0)

    def set_as_translate(
        self, tx: Union[float, Vector2], ty: Optional[float] = None
    ) -> None:
        """Make this a translation by ``(tx, ty)`` or by the vector ``tx``."""
        if isinstance(tx, Vector2):
            x, y = tx.x, tx.y
        elif ty is None:
            raise TypeError("set_as_translate needs a Vector2 or both tx and ty")
        else:
            x, y = tx, ty
        self.dir_x = Vector2(1.0, 0.0)
        self.dir_y = Vector2(0.0, 1.0)
        self.orig = Vector2(x, y)

    def set_as_scale(self, sx: float, sy: Optional[float] = None) -> None:
        """Make this a scale; one argument scales both axes uniformly."""
        if sy is None:
            sy = sx
        self.dir_x = Vector2(sx, 0.0)
        self.dir_y = Vector2(0.0, sy)
        self.orig = Vector2(0.0, 0.0)

    @classmethod
    def rotation(cls, degrees: float) -> "Matrix2x3":
        dir_x, dir_y = _rotation_axes(degrees)
        return cls(dir_x, dir_y, Vector2())

    @classmethod
    def identity(cls) -> "Matrix2x3":
        return cls()

    @classmethod
    def scaling(
        cls, sx: Union[float, Vector2], sy: Optional[float] = None
    ) -> "Matrix2x3":
        """Scale by ``(sx, sy)``, uniformly by ``sx``, or by a Vector2."""
        x, y = _pair(sx, sy)
        return cls(Vector2(x, 0.0), Vector2(0.0, y), Vector2())

    @classmethod
    def translation(
        cls, tx: Union[float, Vector2], ty: Optional[float] = None
    ) -> "Matrix2x3":
        """Translate by ``(tx, ty)`` or by the vector ``tx``."""
        if isinstance(tx, Vector2):
            origin = Vector2(tx.x, tx.y)
        elif ty is None:
            raise TypeError("translation needs a Vector2 or both tx and ty")
        else:
            origin = Vector2(tx, ty)
        return cls(Vector2(1.0, 0.0), Vector2(0.0, 1.0), origin)