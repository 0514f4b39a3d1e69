"""Trigonometric helpers that take and return angles in degrees."""

from __future__ import annotations

import math

PI: float = math.pi

__all__ = [
    "PI",
    "arc_cos",
    "arc_sin",
    "arc_tan2",
    "cos_deg",
    "deg_to_rad",
    "rad_to_deg",
    "sin_deg",
    "tan_deg",
    "to_degree",
    "to_radian",
]


def rad_to_deg(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return 180.0 / PI * rad


def deg_to_rad(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return PI / 180.0 * deg


def sin_deg(deg: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(deg_to_rad(deg))


def cos_deg(deg: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(deg_to_rad(deg))


def tan_deg(deg: float) -> float:
    """Tangent of an angle given in degrees."""
    return math.tan(deg_to_rad(deg))


def arc_sin(value: float) -> float:
    """Arc sine in degrees; raises ValueError outside [-1, 1]."""
    return rad_to_deg(math.asin(value))


def arc_cos(value: float) -> float:
    """Arc cosine in degrees; raises ValueError outside [-1, 1]."""
    return rad_to_deg(math.acos(value))


def arc_tan2(val_y: float, val_x: float) -> float:
    """Two-argument arc tangent in degrees, in the interval [-180, 180]."""
    return rad_to_deg(math.atan2(val_y, val_x))


def to_degree(radian: float) -> float:
    """Convert radians to degrees."""
    return rad_to_deg(radian)


def to_radian(degree: float) -> float:
    """Convert degrees to radians."""
    return deg_to_rad(degree)