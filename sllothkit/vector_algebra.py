"""Two-dimensional vectors and the algebra on them; angles are in degrees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .trigonometry import arc_tan2, cos_deg, sin_deg

__all__ = [
    "Vector2",
    "cross_product",
    "cwise_product",
    "cwise_quotient",
    "dot_product",
    "length",
    "perpendicular_vector",
    "polar_angle",
    "projected_vector",
    "rotated_vector",
    "signed_angle",
    "squared_length",
    "unit_vector",
    "with_length",
    "with_polar_angle",
]


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def is_zero(self) -> bool:
        """True for the zero vector."""
        return self.x == 0 and self.y == 0


def _require_nonzero(vector: Vector2, name: str = "vector") -> None:
    if vector.is_zero():
        raise ValueError(f"{name} must not be the zero vector")


def dot_product(lhs: Vector2, rhs: Vector2) -> float:
    """Dot product of two vectors."""
    return lhs.x * rhs.x + lhs.y * rhs.y


def cross_product(lhs: Vector2, rhs: Vector2) -> float:
    """Z component of the cross product of two vectors taken as 3D."""
    return lhs.x * rhs.y - lhs.y * rhs.x


def squared_length(vector: Vector2) -> float:
    """Square of the vector's length."""
    return dot_product(vector, vector)


def length(vector: Vector2) -> float:
    """Length of the vector."""
    return squared_length(vector) ** 0.5


def with_length(vector: Vector2, new_length: float) -> Vector2:
    """Vector scaled to |new_length|; a negative length flips the direction."""
    _require_nonzero(vector)
    return vector * (new_length / length(vector))


def unit_vector(vector: Vector2) -> Vector2:
    """Vector with the same direction and length 1."""
    _require_nonzero(vector)
    return vector / length(vector)


def polar_angle(vector: Vector2) -> float:
    """Polar angle in degrees in [-180, 180]; (1, 0) is 0 and (0, 1) is 90."""
    _require_nonzero(vector)
    return arc_tan2(vector.y, vector.x)


def with_polar_angle(vector: Vector2, new_angle: float) -> Vector2:
    """Vector of the same length pointing at the given polar angle."""
    vec_length = length(vector)
    return Vector2(vec_length * cos_deg(new_angle), vec_length * sin_deg(new_angle))


def rotated_vector(vector: Vector2, angle: float) -> Vector2:
    """Vector rotated by angle degrees counter-clockwise."""
    cos = cos_deg(angle)
    sin = sin_deg(angle)
    return Vector2(cos * vector.x - sin * vector.y, sin * vector.x + cos * vector.y)


def perpendicular_vector(vector: Vector2) -> Vector2:
    """Vector turned by 90 degrees counter-clockwise: (x, y) becomes (-y, x)."""
    return Vector2(-vector.y, vector.x)


def signed_angle(lhs: Vector2, rhs: Vector2) -> float:
    """Angle in degrees, in [-180, 180], by which lhs must turn to point like rhs."""
    _require_nonzero(lhs, "lhs")
    _require_nonzero(rhs, "rhs")
    return arc_tan2(cross_product(lhs, rhs), dot_product(lhs, rhs))


def cwise_product(lhs: Vector2, rhs: Vector2) -> Vector2:
    """Component-wise product."""
    return Vector2(lhs.x * rhs.x, lhs.y * rhs.y)


def cwise_quotient(lhs: Vector2, rhs: Vector2) -> Vector2:
    """Component-wise quotient; neither component of rhs may be zero."""
    if rhs.x == 0 or rhs.y == 0:
        raise ValueError("rhs must not have a zero component")
    return Vector2(lhs.x / rhs.x, lhs.y / rhs.y)


def projected_vector(vector: Vector2, axis: Vector2) -> Vector2:
    """Projection of vector onto axis, which need not be a unit vector."""
    _require_nonzero(axis, "axis")
    return axis * (dot_product(vector, axis) / squared_length(axis))