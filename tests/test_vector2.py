import math

import pytest

from minisolar.vector2 import Vector2


def test_default_is_zero():
    v = Vector2()
    assert (v.x, v.y) == (0.0, 0.0)


def test_iter_unpacks_components():
    assert tuple(Vector2(1.5, -2.5)) == (1.5, -2.5)


def test_add_sub_round_trip():
    a = Vector2(1.25, -3.5)
    b = Vector2(4.0, 2.0)
    assert tuple((a + b) - b) == pytest.approx((1.25, -3.5))


def test_scalar_multiplication_commutes():
    v = Vector2(1.5, -2.0)
    assert v * 2.0 == 2.0 * v


def test_division_undoes_multiplication():
    v = Vector2(3.0, -7.0)
    assert tuple((v * 3.0) / 3.0) == pytest.approx((3.0, -7.0))


def test_division_by_near_zero_gives_infinity():
    result = Vector2(1.0, 2.0) / 0.00001
    assert tuple(result) == (math.inf, math.inf)


def test_augmented_add_rebinds():
    v = Vector2(1.0, 1.0)
    v += Vector2(2.0, 3.0)
    assert v == Vector2(3.0, 4.0)


def test_length_of_three_four():
    v = Vector2(3.0, 4.0)
    assert v.length() == 5.0
    assert v.length_sq() == 25.0


def test_normalized_has_unit_length():
    v = Vector2(-6.0, 2.5)
    assert math.isclose(v.normalized().length(), 1.0)
    assert Vector2.dot(v.normalized(), v) > 0


def test_normalized_zero_stays_zero():
    assert Vector2().normalized() == Vector2()


def test_normalize_in_place():
    v = Vector2(0.0, -9.0)
    v.normalize()
    assert tuple(v) == pytest.approx((0.0, -1.0))


def test_dot_of_orthogonal_is_zero():
    assert Vector2.dot(Vector2(2.0, 0.0), Vector2(0.0, 5.0)) == 0.0


def test_dot_with_self_is_length_sq():
    v = Vector2(1.5, -2.5)
    assert math.isclose(Vector2.dot(v, v), v.length_sq())


def test_distance_symmetric_and_squared():
    a = Vector2(1.0, 2.0)
    b = Vector2(-4.0, 7.5)
    assert math.isclose(Vector2.distance(a, b), Vector2.distance(b, a))
    assert math.isclose(Vector2.distance_sq(a, b), Vector2.distance(a, b) ** 2)


def test_direction_points_from_source_to_target():
    d = Vector2.direction(Vector2(10.0, 0.0), Vector2(2.0, 0.0))
    assert tuple(d) == pytest.approx((1.0, 0.0))


def test_direction_is_unit():
    d = Vector2.direction(Vector2(3.0, 9.0), Vector2(-1.0, 2.0))
    assert math.isclose(d.length(), 1.0)


@pytest.mark.parametrize(
    "t, expected",
    [(-1.0, (1.0, 2.0)), (0.0, (1.0, 2.0)), (1.0, (5.0, -6.0)), (2.0, (5.0, -6.0))],
)
def test_lerp_clamps_t(t, expected):
    result = Vector2.lerp(Vector2(1.0, 2.0), Vector2(5.0, -6.0), t)
    assert tuple(result) == pytest.approx(expected)


def test_lerp_halfway_is_midpoint():
    result = Vector2.lerp(Vector2(1.0, 2.0), Vector2(5.0, -6.0), 0.5)
    assert tuple(result) == pytest.approx((3.0, -2.0))


def test_reflect_off_floor():
    result = Vector2.reflect(Vector2(1.0, -1.0), Vector2(0.0, 1.0))
    assert tuple(result) == pytest.approx((1.0, 1.0))


def test_reflect_preserves_length():
    d = Vector2(2.0, -3.0)
    n = Vector2(1.0, 1.0).normalized()
    assert math.isclose(Vector2.reflect(d, n).length(), d.length())