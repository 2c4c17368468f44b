import math

import pytest

from particlesim.constants import EPSILON
from particlesim.vector import Dimensions, Vector3


def test_default_is_zero():
    assert Vector3() == Vector3(0, 0, 0)
    assert Vector3().length() == 0


def test_add_sub_round_trip():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(-4.0, 0.5, 2.0)
    assert (a + b) - b == a
    assert a - a == Vector3()


def test_add_components():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(-4.0, 0.5, 2.0)
    s = a + b
    assert (s.x, s.y, s.z) == (a.x + b.x, a.y + b.y, a.z + b.z)


def test_negation():
    a = Vector3(1.0, -2.0, 3.0)
    assert -a + a == Vector3()
    assert -(-a) == a


def test_scalar_multiplication_commutes():
    a = Vector3(1.0, -2.0, 3.0)
    assert a * 2.5 == 2.5 * a
    assert (a * 3).x == a.x * 3


def test_division_inverts_multiplication():
    a = Vector3(1.0, -2.0, 3.0)
    assert (a * 4.0) / 4.0 == a


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 1, 1) / 0


def test_equality_within_epsilon():
    a = Vector3(1.0, 2.0, 3.0)
    assert a == Vector3(1.0 + EPSILON / 10, 2.0, 3.0)
    assert not a == Vector3(1.0 + EPSILON * 10, 2.0, 3.0)
    assert a != Vector3(1.0, 2.0, 3.0 + EPSILON * 10)


def test_equality_with_other_type_is_false():
    result = Vector3(1, 2, 3) == (1, 2, 3)
    assert result is False
    assert [Vector3(1, 2, 3)].count((1, 2, 3)) == 0


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector3())


def test_multiply_by_non_number_raises():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) * Vector3(1, 2, 3)


def test_distance_is_symmetric_and_matches_length():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 6.0, 3.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())
    assert a.distance(a) == 0


def test_dot_with_self_is_squared_length():
    a = Vector3(1.0, -2.0, 3.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_dot_of_orthogonal_vectors():
    assert Vector3(1, 0, 0).dot(Vector3(0, 1, 0)) == 0


def test_length_matches_hypot():
    a = Vector3(1.0, -2.0, 3.0)
    assert a.length() == pytest.approx(math.hypot(a.x, a.y, a.z))


def test_normalized_has_unit_length_and_same_direction():
    a = Vector3(3.0, -4.0, 12.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n * a.length() == a


def test_normalized_zero_vector():
    assert Vector3().normalized() == Vector3()


def test_unpacking():
    x, y, z = Vector3(1.0, 2.0, 3.0)
    assert (x, y, z) == (1.0, 2.0, 3.0)


def test_dimensions_default_depth():
    d = Dimensions(800, 600)
    assert d.depth == 0
    assert d.to_vector() == Vector3(800.0, 600.0, 0.0)


def test_dimensions_center_even():
    d = Dimensions(800, 600, 10)
    c = d.center()
    assert (c.width * 2, c.height * 2, c.depth * 2) == (d.width, d.height, d.depth)


def test_dimensions_center_truncates():
    c = Dimensions(7, 5).center()
    assert (c.width, c.height) == (3, 2)


def test_dimensions_center_as_vector():
    d = Dimensions(7, 5, 3)
    assert d.center_as_vector() == d.to_vector() * 0.5
    assert d.center_as_vector() * 2 == d.to_vector()