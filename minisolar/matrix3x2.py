"""Affine 2D transform matrix using the row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .vector2 import Vector2


@dataclass(frozen=True)
class Matrix3x2:
    """A 3x2 affine matrix; ``a * b`` applies ``a`` first, then ``b``."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    def __mul__(self, other: Matrix3x2) -> Matrix3x2:
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        return Matrix3x2(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
            self.dx * other.m11 + self.dy * other.m21 + other.dx,
            self.dx * other.m12 + self.dy * other.m22 + other.dy,
        )

    @staticmethod
    def identity() -> Matrix3x2:
        return Matrix3x2()

    @staticmethod
    def translation(x: Union[float, Vector2], y: Optional[float] = None) -> Matrix3x2:
        """Translation by ``(x, y)``, or by a single Vector2 passed as ``x``."""
        if y is None:
            x, y = x
        return Matrix3x2(dx=float(x), dy=float(y))

    @staticmethod
    def rotation(angle_degrees: float) -> Matrix3x2:
        """Counter-clockwise rotation (in a y-up frame) by degrees."""
        radians = math.radians(angle_degrees)
        c, s = math.cos(radians), math.sin(radians)
        return Matrix3x2(c, s, -s, c, 0.0, 0.0)

    @staticmethod
    def scale(sx: Union[float, Vector2], sy: Optional[float] = None) -> Matrix3x2:
        """Scaling by ``(sx, sy)``, or by a single Vector2 passed as ``sx``."""
        if sy is None:
            sx, sy = sx
        return Matrix3x2(m11=float(sx), m22=float(sy))

    def inverse(self) -> Matrix3x2:
        """Return the inverse; raises ValueError for a singular matrix."""
        det = self.m11 * self.m22 - self.m12 * self.m21
        if det == 0.0:
            raise ValueError("matrix is singular and has no inverse")
        i11 = self.m22 / det
        i12 = -self.m12 / det
        i21 = -self.m21 / det
        i22 = self.m11 / det
        return Matrix3x2(
            i11,
            i12,
            i21,
            i22,
            -(self.dx * i11 + self.dy * i21),
            -(self.dx * i12 + self.dy * i22),
        )

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.m11, self.m12, self.m21, self.m22, self.dx, self.dy)

    def transform_point(self, point: Vector2) -> Vector2:
        x, y = point
        return Vector2(
            x * self.m11 + y * self.m21 + self.dx,
            x * self.m12 + y * self.m22 + self.dy,
        )