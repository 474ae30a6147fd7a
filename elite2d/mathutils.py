"""Scalar helpers shared by the vector and matrix types."""

from __future__ import annotations

import math
import random
import struct
from typing import Any, Optional

FLT_EPSILON = 1.1920928955078125e-07
"""Smallest step between 1.0 and the next single-precision float."""

PI = 3.14159265358979323846
PI_2 = 1.57079632679489661923
PI_4 = 0.785398163397448309616

_FAST_INV_SQRT_MAGIC = 0x5F3759DF


def are_equal(a: float, b: float, precision: float = FLT_EPSILON) -> bool:
    """Return True when ``a`` and ``b`` differ by no more than ``precision``."""
    return abs(a - b) <= precision


def inv_sqrt(f: float) -> float:
    """Accurate inverse square root."""
    return 1.0 / math.sqrt(f)


def inv_sqrt_fast(f: float) -> float:
    """Approximate inverse square root using the single-precision bit trick."""
    half = 0.5 * f
    (bits,) = struct.unpack("<i", struct.pack("<f", f))
    bits = (_FAST_INV_SQRT_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    (y,) = struct.unpack("<f", struct.pack("<I", bits))
    return y * (1.5 - half * y * y)


def square(v: Any) -> Any:
    """Return ``v`` multiplied by itself."""
    return v * v


def to_radians(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * (PI / 180.0)


def to_degrees(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * (180.0 / PI)


def clamped_angle(radians: float) -> float:
    """Wrap an angle in radians into the range [-pi, pi)."""
    a = math.fmod(radians + math.pi, 2.0 * math.pi)
    return a - math.pi if a >= 0 else a + math.pi


def clamp(a: Any, minimum: Any, maximum: Any) -> Any:
    """Limit ``a`` to the closed range [minimum, maximum]."""
    if a < minimum:
        return minimum
    if a > maximum:
        return maximum
    return a


def random_int(maximum: int = 1) -> int:
    """Random integer in [0, |maximum|); zero when ``maximum`` is zero."""
    if maximum == 0:
        return 0
    return random.randrange(abs(maximum))


def random_float(low: float = 1.0, high: Optional[float] = None) -> float:
    """Random float in [low, high], or in [0, low] when ``high`` is omitted."""
    if high is None:
        low, high = 0.0, low
    return low + (high - low) * random.random()


def random_binomial(maximum: float = 1.0) -> float:
    """Difference of two random floats in [0, maximum]; clusters around zero."""
    return random_float(maximum) - random_float(maximum)


def lerp(v0: Any, v1: Any, t: float) -> Any:
    """Linear interpolation between ``v0`` and ``v1``."""
    return (1 - t) * v0 + t * v1


def smooth_step(edge0: float, edge1: float, x: float) -> float:
    """Hermite smooth step of ``x`` between the two edges."""
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3 - 2 * t)


def sign(val: Any) -> int:
    """Return -1, 0 or 1 according to the sign of ``val``."""
    return int(0 < val) - int(val < 0)