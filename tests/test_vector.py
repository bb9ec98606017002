import math

import pytest

from raytrace.vector import Point3D, Vector3D, point_max, point_min


def test_normalized_has_unit_length():
    v = Vector3D(3.0, -4.0, 12.0)
    assert v.normalized().length() == pytest.approx(1.0)
    assert v.length() > 1.0  # original untouched


def test_normalize_in_place_and_zero_vector_unchanged():
    v = Vector3D(2.0, 0.0, 0.0)
    v.normalize()
    assert v == Vector3D(1.0, 0.0, 0.0)
    zero = Vector3D()
    zero.normalize()
    assert zero == Vector3D()


def test_len_squared_matches_length():
    v = Vector3D(1.5, -2.5, 0.5)
    assert v.len_squared() == pytest.approx(v.length() ** 2)


def test_cross_of_axes():
    assert Vector3D(1, 0, 0).cross(Vector3D(0, 1, 0)) == Vector3D(0, 0, 1)
    assert (Vector3D(1, 0, 0) ^ Vector3D(0, 1, 0)) == Vector3D(0, 0, 1)


def test_cross_is_orthogonal_to_operands():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_mul_dispatches_between_dot_and_scale():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(4.0, 5.0, 6.0)
    assert a * b == a.dot(b) == b * a
    assert a * 2 == 2 * a == a + a


def test_division_inverts_scaling():
    a = Vector3D(1.0, -2.0, 3.0)
    assert (a * 4.0) / 4.0 == a


def test_subtraction_order_and_reflection():
    v = Vector3D(1.0, 2.0, 3.0)
    assert v - v == Vector3D()
    a = Vector3D(5.0, 1.0, 0.0)
    b = Vector3D(2.0, 3.0, 1.0)
    assert a - b == -(b - a)
    assert (a - b) + a == b
    n = Vector3D(0.0, 1.0, 0.0)
    d = Vector3D(1.0, -1.0, 0.0).normalized()
    reflected = (2 * (d * n)) * n - d
    assert reflected.length() == pytest.approx(1.0)
    assert reflected.x == pytest.approx(d.x)
    assert reflected.y == pytest.approx(-d.y)


def test_in_place_subtraction_is_ordinary():
    a = Vector3D(5.0, 5.0, 5.0)
    a -= Vector3D(1.0, 2.0, 3.0)
    a += Vector3D(1.0, 2.0, 3.0)
    assert a == Vector3D(5.0, 5.0, 5.0)


def test_from_point():
    p = Point3D(1.0, 2.0, 3.0)
    v = Vector3D.from_point(p)
    assert (v.x, v.y, v.z) == (p.x, p.y, p.z)


def test_to_string_format():
    assert Vector3D(1, 2, 3).to_string() == "(1.000000, 2.000000, 3.000000)"
    assert Point3D(0.5, 0, -1).to_string() == "(0.500000, 0.000000, -1.000000)"


def test_point_vector_round_trip():
    p = Point3D(1.0, 2.0, 3.0)
    q = Point3D(-4.0, 0.5, 9.0)
    v = q - p
    assert isinstance(v, Vector3D)
    assert p + v == q
    assert q - v == p


def test_point_negation_and_scaling():
    p = Point3D(1.0, -2.0, 3.0)
    assert -(-p) == p
    assert p * 3 == 3 * p
    assert (p * 2) - Vector3D.from_point(p) == p


def test_distance_symmetric_and_squared():
    p = Point3D(1.0, 2.0, 3.0)
    q = Point3D(4.0, 6.0, 3.0)
    assert p.distance(q) == pytest.approx(q.distance(p))
    assert p.distance(q) == pytest.approx((q - p).length())
    assert p.d_squared(q) == pytest.approx(p.distance(q) ** 2)
    assert p.distance(p) == 0.0


def test_point_min_max():
    a = Point3D(1.0, 5.0, -2.0)
    b = Point3D(3.0, -1.0, -2.0)
    lo = point_min(a, b)
    hi = point_max(a, b)
    for axis in ("x", "y", "z"):
        assert getattr(lo, axis) <= min(getattr(a, axis), getattr(b, axis))
        assert getattr(hi, axis) >= max(getattr(a, axis), getattr(b, axis))
        assert {getattr(lo, axis), getattr(hi, axis)} == {getattr(a, axis), getattr(b, axis)}


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vector3D() + 1
    with pytest.raises(TypeError):
        Point3D() + Point3D()
    assert not math.isnan(Vector3D(1, 1, 1).length())