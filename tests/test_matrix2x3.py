import pytest

from elite2d.matrix2x3 import Matrix2x3
from elite2d.vector2 import Vector2


def _sample() -> Matrix2x3:
    return Matrix2x3(Vector2(2.0, 0.5), Vector2(-1.0, 3.0), Vector2(4.0, -2.0))


def test_identity_transform_leaves_point():
    v = Vector2(3.0, -7.5)
    assert Matrix2x3.identity().transform(v) == v
    assert Matrix2x3() == Matrix2x3.identity()


def test_translation_adds_offset():
    v = Vector2(1.0, 2.0)
    t = Vector2(5.0, -3.0)
    assert Matrix2x3.translation(t).transform(v) == v + t
    assert Matrix2x3.translation(5.0, -3.0) == Matrix2x3.translation(t)


def test_scaling_overloads_agree():
    assert Matrix2x3.scaling(Vector2(2.0, 3.0)) == Matrix2x3.scaling(2.0, 3.0)
    assert Matrix2x3.scaling(2.0) == Matrix2x3.scaling(2.0, 2.0)
    v = Vector2(1.5, -4.0)
    assert Matrix2x3.scaling(2.0, 3.0).transform(v) == Vector2(2.0, 3.0) * v


def test_inverse_round_trip():
    m = _sample()
    v = Vector2(1.25, -0.75)
    assert m.inverse().transform(m.transform(v)) == v
    assert m * m.inverse() == Matrix2x3.identity()


def test_singular_inverse_raises():
    m = Matrix2x3(Vector2(1.0, 2.0), Vector2(2.0, 4.0), Vector2())
    with pytest.raises(ZeroDivisionError):
        m.inverse()


def test_composition_applies_right_first():
    a = _sample()
    b = Matrix2x3.rotation(30.0) * Matrix2x3.translation(1.0, 2.0)
    v = Vector2(-2.0, 0.5)
    assert (a * b).transform(v) == a.transform(b.transform(v))


def test_rotations_compose():
    combined = Matrix2x3.rotation(30.0) * Matrix2x3.rotation(60.0)
    assert combined == Matrix2x3.rotation(90.0)


def test_rotation_preserves_length_and_area():
    r = Matrix2x3.rotation(37.0)
    v = Vector2(3.0, 4.0)
    assert r.transform(v).magnitude() == pytest.approx(v.magnitude())
    assert r.determinant() == pytest.approx(1.0)


def test_determinant_of_product():
    a = _sample()
    b = Matrix2x3.scaling(2.0, -0.5)
    assert (a * b).determinant() == pytest.approx(a.determinant() * b.determinant())


def test_setters_match_factories():
    m = _sample()
    m.set_as_rotate(45.0)
    assert m == Matrix2x3.rotation(45.0)
    m.set_as_translate(2.0, 3.0)
    assert m == Matrix2x3.translation(2.0, 3.0)
    m.set_as_translate(Vector2(-1.0, 4.0))
    assert m == Matrix2x3.translation(-1.0, 4.0)
    m.set_as_scale(2.0, 5.0)
    assert m == Matrix2x3.scaling(2.0, 5.0)
    m.set_as_scale(3.0)
    assert m == Matrix2x3.scaling(3.0)
    m.set_as_identity()
    assert m == Matrix2x3.identity()


def test_translate_without_second_component_raises():
    with pytest.raises(TypeError):
        Matrix2x3.translation(1.0)
    with pytest.raises(TypeError):
        Matrix2x3().set_as_translate(1.0)


def test_equals_uses_epsilon():
    a = Matrix2x3.translation(1.0, 1.0)
    b = Matrix2x3.translation(1.0005, 1.0)
    assert a.equals(b)
    assert not a.equals(b, 0.0001)
    assert a != b


def test_string_form():
    expected = (
        "Matrix2x3( x( 1.000000, 0.000000 ), y( 0.000000, 1.000000 ), "
        "orig( 0.000000, 0.000000 )  )"
    )
    assert str(Matrix2x3.identity()) == expected