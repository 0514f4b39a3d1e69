import math

import pytest

from sllothkit.utils import (
    angle_between,
    distance,
    dot,
    lerp,
    lerp_vector,
    normalize,
    rotate_vector,
    sqr_magnitude,
    to_degrees,
    to_radians,
)
from sllothkit.vector_algebra import Vector2, length, perpendicular_vector

POINTS = [Vector2(1.5, -2.0), Vector2(-4.0, 3.25), Vector2(7.0, 0.5), Vector2(0.0, -6.0)]


def as_tuple(v):
    return (v.x, v.y)


@pytest.mark.parametrize("v", POINTS)
def test_sqr_magnitude_is_self_dot(v):
    assert sqr_magnitude(v) == dot(v, v)
    assert sqr_magnitude(v) == pytest.approx(length(v) ** 2)


@pytest.mark.parametrize("v", POINTS)
def test_rotate_quarter_turn_matches_perpendicular(v):
    rotated = rotate_vector(v, math.pi / 2)
    assert as_tuple(rotated) == pytest.approx(as_tuple(perpendicular_vector(v)), abs=1e-9)


@pytest.mark.parametrize("v", POINTS)
def test_rotate_preserves_length(v):
    assert sqr_magnitude(rotate_vector(v, 1.234)) == pytest.approx(sqr_magnitude(v))


def test_angle_between_and_distance_reconstruct_target():
    a, b = POINTS[0], POINTS[1]
    offset = rotate_vector(Vector2(distance(a, b), 0.0), angle_between(a, b))
    assert as_tuple(a + offset) == pytest.approx(as_tuple(b))


def test_angle_between_straight_up():
    assert angle_between(Vector2(0.0, 0.0), Vector2(0.0, 5.0)) == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("deg", [-360.0, -15.0, 0.0, 90.0, 271.5])
def test_degree_radian_round_trip(deg):
    assert to_degrees(to_radians(deg)) == pytest.approx(deg)


def test_pi_is_half_turn():
    assert to_degrees(math.pi) == pytest.approx(180.0)
    assert to_radians(180.0) == pytest.approx(math.pi)


def test_distance_is_symmetric_and_matches_length():
    a, b = POINTS[2], POINTS[3]
    assert distance(a, b) == distance(b, a)
    assert distance(a, b) == pytest.approx(length(b - a))
    assert distance(a, a) == 0


@pytest.mark.parametrize("v", POINTS)
def test_normalize_gives_unit_length(v):
    n = normalize(v)
    assert math.hypot(n.x, n.y) == pytest.approx(1.0)
    assert dot(n, v) == pytest.approx(length(v))


def test_normalize_zero_returns_source():
    zero = Vector2(0.0, 0.0)
    assert normalize(zero) == zero


def test_lerp_endpoints():
    assert lerp(2.0, 9.0, 0.0) == 2.0
    assert lerp(2.0, 9.0, 1.0) == 9.0


def test_lerp_clamps_above_one():
    assert lerp(2.0, 9.0, 3.0) == lerp(2.0, 9.0, 1.0)


def test_lerp_unclamped_extrapolates():
    first, second = 2.0, 9.0
    assert lerp(first, second, 2.0, clamped=False) - second == pytest.approx(second - first)


def test_lerp_does_not_clamp_below_zero():
    first, second = 2.0, 9.0
    assert lerp(first, second, -1.0) == pytest.approx(first - (second - first))


def test_lerp_midpoint_is_equidistant():
    first, second = -3.0, 11.0
    mid = lerp(first, second, 0.5)
    assert mid - first == pytest.approx(second - mid)


def test_lerp_vector_matches_componentwise_lerp():
    a, b = POINTS[0], POINTS[1]
    for t in (0.0, 0.25, 0.8, 1.0, 4.0):
        result = lerp_vector(a, b, t)
        assert result.x == lerp(a.x, b.x, t)
        assert result.y == lerp(a.y, b.y, t)


def test_lerp_vector_clamps():
    a, b = POINTS[2], POINTS[3]
    assert lerp_vector(a, b, 5.0) == lerp_vector(a, b, 1.0)


def test_dot_is_commutative_and_zero_for_perpendicular():
    a, b = POINTS[0], POINTS[1]
    assert dot(a, b) == dot(b, a)
    assert dot(a, perpendicular_vector(a)) == 0