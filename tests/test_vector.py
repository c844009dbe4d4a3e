import math

import pytest

from softraster.matrix3 import Matrix3
from softraster.vector import Vector3, Vector4


def test_distance():
    assert Vector3(3, 4, 5).distance(Vector3(-3, -4, 5)) == 10


def test_distance_squared():
    assert Vector3(3, 4, 5).distance_squared(Vector3(-3, -4, 5)) == 100


def test_dot():
    assert Vector3(0, 5, 2).dot(Vector3(3, 0, 5)) == 10
    assert Vector3(-5, -5, 5).dot(Vector3(0, 7, -2)) == -45


def test_hadamard():
    assert Vector3(1, 2, 3).hadamard(Vector3(4, 5, 6)) == Vector3(4, 10, 18)


def test_cross():
    assert Vector3(3, 0, 0).cross(Vector3(0, 2, 0)) == Vector3(0, 0, 6)
    assert Vector3(1, 2, 3).cross(Vector3(4, 5, 6)) == Vector3(-3, 6, -3)


@pytest.mark.parametrize("i", range(11))
def test_lerp_range(i):
    a = Vector3(0, 0, 0)
    b = Vector3(10, 10, 10)
    assert list(a.lerp(b, i / 10.0)) == pytest.approx([i, i, i])


def test_transform():
    a = Vector3(2, 1, -3).transform(Matrix3(1.29, 1, 0, 0, 0.73, 0, 0, 0, 2.34))
    assert a[0] == pytest.approx(2.58, abs=1e-6)
    assert a[1] == pytest.approx(2.73, abs=1e-6)
    assert a[2] == pytest.approx(-7.02, abs=1e-6)


def test_transform_operator_matches_method():
    m = Matrix3(1.29, 1, 0, 0, 0.73, 0, 0, 0, 2.34)
    v = Vector3(2, 1, -3)
    assert v * m == v.transform(m)
    w = v.copy()
    w *= m
    assert w == v.transform(m)


def test_default_constructor():
    a = Vector3()
    assert a[0] == 0
    assert a[1] == 0
    assert a[2] == 0


def test_constructor_from_parameters():
    a = Vector3(1, 9, 5)
    assert a[0] == 1
    assert a[1] == 9
    assert a[2] == 5


def test_copy_of_nested_vectors_is_independent():
    d = Vector3(Vector3(), Vector3(), Vector3())
    e = d.copy()
    d[0][0] = 1
    assert d[0][0] == 1
    assert e[0][0] == 0


def test_access_scalar():
    a = Vector3(1, 5, 2)
    assert (a[0], a[1], a[2]) == (1, 5, 2)


def test_const_access_scalar():
    a = Vector3(1, 8, 2)
    x, y, z = a
    assert a[0] == x
    assert a[1] == y
    assert a[2] == z


def test_cast():
    a = Vector3(1.9, 2.3, 5.3).cast(int)
    assert a == Vector3(1, 2, 5)
    assert all(type(c) is int for c in a)


def test_equals():
    assert Vector3(50, 50, 50) == Vector3(50, 50, 50)
    assert not (Vector3(50, 50, 50) == Vector3(5, 5, 5))


def test_not_equals():
    assert Vector3(5, 5, 5) != Vector3(50, 50, 50)
    assert not (Vector3(5, 5, 5) != Vector3(5, 5, 5))


def test_less_than():
    assert Vector3(5, 5, 5) < Vector3(50, 50, 50)
    assert not (Vector3(50, 50, 50) < Vector3(5, 5, 5))


def test_less_than_or_equal():
    assert Vector3(5, 5, 5) <= Vector3(5, 5, 5)
    assert not (Vector3(50, 50, 50) <= Vector3(5, 5, 5))


def test_greater_than():
    assert Vector3(50, 50, 50) > Vector3(5, 5, 5)
    assert not (Vector3(5, 5, 5) > Vector3(50, 50, 50))


def test_greater_than_or_equal():
    assert Vector3(50, 50, 50) >= Vector3(50, 50, 50)
    assert not (Vector3(5, 5, 5) >= Vector3(50, 50, 50))


def test_divide_equals():
    a = Vector3(2.0, 4.0, 8.0)
    a /= 8.0
    assert a == Vector3(2.0 / 8.0, 4.0 / 8.0, 1.0)


def test_times_equals():
    a = Vector3(2.0, 4.0, 8.0)
    a *= 8.0
    assert a == Vector3(16.0, 32.0, 64.0)


def test_plus_equals():
    a = Vector3(2.0, 4.0, 8.0)
    a += Vector3(1.0, -1.0, 0.0)
    assert a == Vector3(3.0, 3.0, 8.0)


def test_minus_equals():
    a = Vector3(2.0, 4.0, 8.0)
    a -= Vector3(1.0, -1.0, 0.0)
    assert a == Vector3(1.0, 5.0, 8.0)


def test_divide():
    assert Vector3(2.0, 4.0, 8.0) / 8.0 == Vector3(2.0 / 8.0, 4.0 / 8.0, 1.0)


def test_times():
    assert Vector3(2.0, 4.0, 8.0) * 8.0 == Vector3(16.0, 32.0, 64.0)
    assert 8.0 * Vector3(2.0, 4.0, 8.0) == Vector3(16.0, 32.0, 64.0)
    assert Vector3(0, 5, 2) * Vector3(3, 0, 5) == 10
    assert Vector3(-5, -5, 5) * Vector3(0, 7, -2) == -45


def test_plus():
    assert Vector3(2.0, 4.0, 8.0) + Vector3(1.0, -1.0, 0.0) == Vector3(3.0, 3.0, 8.0)


def test_minus():
    assert Vector3(2.0, 4.0, 8.0) - Vector3(1.0, -1.0, 0.0) == Vector3(1.0, 5.0, 8.0)


def test_negate_operator():
    assert -Vector3(2.0, 4.0, -8.0) == Vector3(-2.0, -4.0, 8.0)
    assert -Vector3(2.0, 4.0, -8.0) != -Vector3(-2.0, -4.0, 8.0)


def test_magnitude_squared():
    assert Vector3(-3, -4, -5).magnitude_squared() == 50


def test_magnitude():
    assert Vector3(0, 10, 0).magnitude() == 10
    assert Vector3(3, 4, 5).magnitude() == pytest.approx(math.sqrt(50), abs=1e-6)
    assert Vector3(-4, 3, 8).magnitude() == pytest.approx(math.sqrt(89), abs=1e-6)


def test_normalized():
    a = Vector3(5, 5, 5).normalized()
    assert list(a) == pytest.approx([0.577350] * 3, abs=1e-6)


def test_normalize():
    a = Vector3(3, 1, 2)
    a.normalize()
    assert list(a) == pytest.approx([0.801784, 0.267261, 0.534522], abs=1e-6)


def test_negate():
    assert Vector3(1, 15, 5).negate() == Vector3(-1, -15, -5)


def test_lerp_method():
    assert Vector3(1, 2, 0).lerp(Vector3(2, 1, 1), 0.25) == Vector3(1.25, 1.75, 0.25)


def test_saturate():
    assert Vector3(-0.5, 0.5, 1.5).saturate() == Vector3(0.0, 0.5, 1.0)


def test_vector4_default():
    assert list(Vector4()) == [0.0, 0.0, 0.0, 1.0]


def test_vector4_from_vector3():
    assert Vector4.from_vector3(Vector3(1, 2, 3)) == Vector4(1, 2, 3, 1)
    assert Vector4.from_vector3(Vector3(1, 2, 3), 0.5)[3] == 0.5


def test_vector4_arithmetic():
    a = Vector4(1, 2, 3, 4)
    b = Vector4(4, 3, 2, 1)
    assert (a + b) - b == a
    assert a * 2 / 2 == a
    assert a / a == Vector4(1, 1, 1, 1)


def test_vector4_negate():
    a = Vector4(1, -2, 3, 4)
    assert -a == Vector4(-1, 2, -3, -4)
    assert a.negate() is a
    assert a == Vector4(-1, 2, -3, -4)


def test_vector4_cast_and_str():
    a = Vector4(1.9, 2.1, 3.5, 4.0).cast(int)
    assert a == Vector4(1, 2, 3, 4)
    assert str(a) == "[1, 2, 3, 4]"