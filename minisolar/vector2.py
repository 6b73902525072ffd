"""Two-dimensional vector type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .mymath import EPSILON, clamp


@dataclass
class Vector2:
    """A mutable 2D vector with arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        """Divide by ``scalar``; a near-zero divisor yields an infinite vector."""
        if abs(scalar) <= EPSILON:
            return Vector2(math.inf, math.inf)
        inv = 1.0 / scalar
        return Vector2(self.x * inv, self.y * inv)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction, or zero for a zero vector."""
        length = self.length()
        if length == 0.0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        unit = self.normalized()
        self.x, self.y = unit.x, unit.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    @staticmethod
    def dot(v1: Vector2, v2: Vector2) -> float:
        return v1.x * v2.x + v1.y * v2.y

    @staticmethod
    def distance(v1: Vector2, v2: Vector2) -> float:
        return (v1 - v2).length()

    @staticmethod
    def distance_sq(v1: Vector2, v2: Vector2) -> float:
        return (v1 - v2).length_sq()

    @staticmethod
    def direction(to: Vector2, from_: Vector2) -> Vector2:
        """Unit vector pointing from ``from_`` towards ``to``."""
        return (to - from_).normalized()

    @staticmethod
    def lerp(v0: Vector2, v1: Vector2, t: float) -> Vector2:
        """Linear interpolation with ``t`` clamped to ``[0, 1]``."""
        t = clamp(t, 0.0, 1.0)
        return Vector2(v0.x + (v1.x - v0.x) * t, v0.y + (v1.y - v0.y) * t)

    @staticmethod
    def reflect(direction: Vector2, normal: Vector2) -> Vector2:
        """Reflect ``direction`` about the line with the given ``normal``."""
        d = 2.0 * Vector2.dot(direction, normal)
        return Vector2(direction.x - d * normal.x, direction.y - d * normal.y)