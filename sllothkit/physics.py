"""Axis-aligned rectangles, collision manifolds and the AABB overlap test."""

from __future__ import annotations

from dataclasses import dataclass, field

from .gameobject import GameObject
from .vector_algebra import Vector2

__all__ = ["Manifold", "Rect", "aabb_vs_aabb"]


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def center(self) -> Vector2:
        """Centre point of the rectangle."""
        return Vector2(self.left + 0.5 * self.width, self.top + 0.5 * self.height)


@dataclass
class Manifold:
    """A collision between two bodies."""

    body1: GameObject | None = None
    body2: GameObject | None = None
    penetration: float = 0.0
    normal: Vector2 = field(default_factory=Vector2)


def aabb_vs_aabb(a: Rect, b: Rect) -> tuple[Vector2, float] | None:
    """Test two rectangles for overlap.

    Returns the separation normal along the axis of least penetration and the
    penetration depth, or None when the rectangles do not overlap.
    """
    n = b.center() - a.center()
    x_overlap = a.width * 0.5 + b.width * 0.5 - abs(n.x)
    if x_overlap <= 0:
        return None
    y_overlap = a.height * 0.5 + b.height * 0.5 - abs(n.y)
    if y_overlap <= 0:
        return None
    if x_overlap < y_overlap:
        normal = Vector2(1.0, 0.0) if n.x < 0 else Vector2(-1.0, 0.0)
        return normal, x_overlap
    normal = Vector2(0.0, 1.0) if n.y < 0 else Vector2(0.0, -1.0)
    return normal, y_overlap