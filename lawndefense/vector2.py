"""Integer 2D vectors with Gaussian-integer arithmetic and Bezier sampling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector2:
    """A vector with integer components.

    Multiplying two vectors treats them as Gaussian integers; multiplying by
    a number scales each component and truncates toward zero.
    """

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | Real) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(
                self.x * other.x - self.y * other.y,
                self.y * other.x + self.x * other.y,
            )
        if isinstance(other, Real):
            return Vector2(int(other * self.x), int(other * self.y))
        return NotImplemented

    def __rmul__(self, other: Real) -> Vector2:
        if isinstance(other, Real):
            return Vector2(int(other * self.x), int(other * self.y))
        return NotImplemented

    def __truediv__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        norm = length_squared(other)
        return Vector2(round_div(dot(self, other), norm), round_div(cross(self, other), norm))

    def __mod__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self - (self / other) * other


def cross(a: Vector2, b: Vector2) -> int:
    """Cross product in the order a.y*b.x - a.x*b.y."""
    return a.y * b.x - a.x * b.y


def dot(a: Vector2, b: Vector2) -> int:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def round_div(a: int, b: int) -> int:
    """Integer division rounding half away from zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    if b < 0:
        a, b = -a, -b
    if a < 0:
        return -((-a + b // 2) // b)
    return (a + b // 2) // b


def length_squared(v: Vector2) -> int:
    """Squared Euclidean length."""
    return v.x * v.x + v.y * v.y


def magnitude(v: Vector2) -> int:
    """Euclidean length truncated to an integer."""
    return int(math.sqrt(length_squared(v)))


def gcd(a: Vector2, b: Vector2) -> Vector2:
    """Greatest common divisor of two Gaussian integers."""
    while length_squared(b):
        a, b = b, a % b
    return a


def bezier_point(t: float, p0: Vector2, p1: Vector2, p2: Vector2, p3: Vector2) -> Vector2:
    """Point at parameter t on the cubic Bezier curve through p0..p3."""
    u = 1 - t
    tt = t * t
    uu = u * u
    uuu = uu * u
    ttt = tt * t

    point = uuu * p0
    point = point + 3 * uu * t * p1
    point = point + 3 * u * tt * p2
    point = point + ttt * p3
    return point