import math
import random

import pytest

from elite2d.mathutils import PI_2
from elite2d.vector2 import (
    Vector2,
    angle_between,
    orientation_to_vector,
    random_vector2,
    vector_to_orientation,
)


def test_default_is_zero():
    assert Vector2() == Vector2(0.0, 0.0)


def test_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 7.0)
    assert (a + b) - b == a


def test_negation():
    a = Vector2(3.0, -4.0)
    assert a + (-a) == Vector2()


def test_scalar_multiplication_commutes():
    a = Vector2(1.5, -2.5)
    assert a * 2 == 2 * a
    assert (a / 2) * 2 == a


def test_componentwise_multiplication():
    a = Vector2(2.0, 3.0)
    b = Vector2(4.0, 5.0)
    assert a * b == b * a
    assert a * Vector2(1.0, 1.0) == a


def test_scalar_divided_by_vector_scales_by_inverse():
    v = Vector2(3.0, -8.0)
    assert 2.0 / v == v / 2.0


def test_in_place_operations_mutate():
    v = Vector2(1.0, 2.0)
    original = Vector2(v.x, v.y)
    ref = v
    v += Vector2(1.0, 1.0)
    assert ref is v
    assert v == original + Vector2(1.0, 1.0)
    v -= Vector2(1.0, 1.0)
    assert v == original
    v *= 4
    v /= 4
    assert v == original


def test_equality_tolerance():
    assert Vector2(1.0, 2.0) == Vector2(1.0 + 1e-9, 2.0)
    assert Vector2(1.0, 2.0) != Vector2(1.1, 2.0)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1.0, 2.0))


def test_indexing():
    v = Vector2(3.0, 4.0)
    assert (v[0], v[1]) == (v.x, v.y)
    v[1] = 9.0
    assert v.y == 9.0
    with pytest.raises(IndexError):
        v[2]
    assert tuple(v) == (3.0, 9.0)


def test_abs():
    assert abs(Vector2(-1.0, 2.0)) == Vector2(1.0, 2.0)


def test_dot_and_cross():
    a = Vector2(1.0, 2.0)
    b = Vector2(-3.0, 0.5)
    assert a.dot(b) == b.dot(a)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0
    assert a.dot(Vector2(-a.y, a.x)) == 0.0


def test_magnitude():
    v = Vector2(3.0, 4.0)
    assert v.magnitude() == pytest.approx(5.0)
    assert v.magnitude_squared() == pytest.approx(v.magnitude() ** 2)


def test_normalize_in_place():
    v = Vector2(3.0, -7.0)
    length = Vector2(3.0, -7.0).magnitude()
    assert v.normalize() == pytest.approx(length)
    assert v.magnitude() == pytest.approx(1.0)
    assert v * length == Vector2(3.0, -7.0)


def test_normalize_zero_vector():
    v = Vector2()
    assert v.normalize() == 0.0
    assert v == Vector2()


def test_normalized_leaves_original():
    v = Vector2(2.0, 5.0)
    n = v.normalized()
    assert v == Vector2(2.0, 5.0)
    assert n.magnitude() == pytest.approx(1.0)
    assert n.cross(v) == pytest.approx(0.0)


def test_distance():
    a = Vector2(1.0, 2.0)
    b = Vector2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).magnitude())
    assert a.distance_squared(b) == pytest.approx(a.distance(b) ** 2)


def test_clamped_long_vector():
    v = Vector2(30.0, -40.0)
    c = v.clamped(2.5)
    assert c.magnitude() == pytest.approx(2.5)
    assert c.normalized() == v.normalized()


def test_clamped_short_and_zero_vector():
    v = Vector2(0.3, 0.4)
    assert v.clamped(10.0) == v
    assert Vector2().clamped(1.0) == Vector2()


def test_orientation_round_trip():
    v = Vector2(-2.0, 3.0)
    assert orientation_to_vector(vector_to_orientation(v)) == v.normalized()


def test_orientation_of_unit_vector():
    assert vector_to_orientation(orientation_to_vector(1.25)) == pytest.approx(1.25)


def test_angle_between():
    x_axis = Vector2(1.0, 0.0)
    y_axis = Vector2(0.0, 1.0)
    assert angle_between(x_axis, y_axis) == pytest.approx(PI_2)
    assert angle_between(y_axis, x_axis) == pytest.approx(-PI_2)
    assert angle_between(x_axis, x_axis) == pytest.approx(0.0)


def test_random_vector2_ranges():
    random.seed(7)
    for _ in range(200):
        b = random_vector2(2.0)
        assert -2.0 <= b.x <= 2.0 and -2.0 <= b.y <= 2.0
        u = random_vector2(1.0, 3.0)
        assert 1.0 <= u.x <= 3.0 and 1.0 <= u.y <= 3.0


def test_orientation_to_vector_is_unit():
    for angle in (-2.0, 0.3, math.pi):
        assert orientation_to_vector(angle).magnitude() == pytest.approx(1.0)