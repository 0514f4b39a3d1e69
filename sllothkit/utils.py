"""General vector helpers; angles here are in radians."""

from __future__ import annotations

import math

from .vector_algebra import Vector2

__all__ = [
    "angle_between",
    "distance",
    "dot",
    "lerp",
    "lerp_vector",
    "normalize",
    "rotate_vector",
    "sqr_magnitude",
    "to_degrees",
    "to_radians",
]


def sqr_magnitude(vector: Vector2) -> float:
    """Squared length of a vector."""
    return vector.x * vector.x + vector.y * vector.y


def rotate_vector(vector: Vector2, angle: float) -> Vector2:
    """Rotate a vector counter-clockwise by angle radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vector2(vector.x * cos_a - vector.y * sin_a, vector.x * sin_a + vector.y * cos_a)


def angle_between(v1: Vector2, v2: Vector2) -> float:
    """Direction in radians of the line from point v1 to point v2."""
    return math.atan2(v2.y - v1.y, v2.x - v1.x)


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return 180.0 / math.pi * radians


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return math.pi / 180.0 * degrees


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def normalize(source: Vector2) -> Vector2:
    """Vector of length 1 in the same direction; the zero vector is returned as is."""
    vec_length = math.hypot(source.x, source.y)
    if vec_length != 0:
        return Vector2(source.x / vec_length, source.y / vec_length)
    return source


def lerp(first: float, second: float, t: float, clamped: bool = True) -> float:
    """Linear interpolation; when clamped, t is capped at 1 from above only."""
    if clamped:
        t = min(t, 1.0)
    return first * (1 - t) + second * t


def lerp_vector(first: Vector2, second: Vector2, t: float) -> Vector2:
    """Component-wise clamped linear interpolation between two vectors."""
    return Vector2(lerp(first.x, second.x, t), lerp(first.y, second.y, t))


def dot(lhs: Vector2, rhs: Vector2) -> float:
    """Dot product of two vectors."""
    return lhs.x * rhs.x + lhs.y * rhs.y