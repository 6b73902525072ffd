"""Draws bitmaps onto a pygame surface through affine transforms."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import pygame

from .matrix3x2 import Matrix3x2
from .mymath import clamp
from .vector2 import Vector2

RectF = Tuple[float, float, float, float]
"""A rectangle as ``(left, top, right, bottom)``."""


def _to_pygame_rect(rect: Sequence[float]) -> pygame.Rect:
    left, top, right, bottom = rect
    return pygame.Rect(round(left), round(top), round(right - left), round(bottom - top))


def _resize(image: pygame.Surface, size: Tuple[int, int]) -> pygame.Surface:
    if image.get_bitsize() in (24, 32):
        return pygame.transform.smoothscale(image, size)
    return pygame.transform.scale(image, size)


class Renderer:
    """Owns the drawing target and draws bitmaps with transforms and opacity."""

    def __init__(self, width: int, height: int, surface: Optional[pygame.Surface] = None) -> None:
        self.width = width
        self.height = height
        self.surface = surface
        self._unity = Matrix3x2.identity()

    def initialize(self) -> None:
        """Open the display if no surface was given and set up the y-up screen matrix."""
        if self.surface is None:
            self.surface = pygame.display.set_mode((self.width, self.height))
        self._unity = Matrix3x2.scale(1.0, -1.0) * Matrix3x2.translation(
            self.width / 2, self.height / 2
        )

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("renderer is not initialized")
        return self.surface

    def begin_draw(self, color) -> None:
        """Start a frame by clearing the target to ``color``."""
        self._target().fill(color)

    def end_draw(self) -> None:
        """Finish a frame, presenting it when the target is the display."""
        target = self._target()
        if pygame.display.get_init() and pygame.display.get_surface() is target:
            pygame.display.flip()

    def draw_bitmap(
        self,
        bitmap: pygame.Surface,
        transform: Optional[Matrix3x2] = None,
        destination_rect: Optional[RectF] = None,
        source_rect: Optional[RectF] = None,
        opacity: float = 1.0,
    ) -> pygame.Rect:
        """Draw ``bitmap`` and return the screen area it covers.

        Rectangles are ``(left, top, right, bottom)``.  The transform's shear,
        if any, is not represented.
        """
        target = self._target()
        matrix = transform if transform is not None else Matrix3x2.identity()

        image = bitmap
        if source_rect is not None:
            image = image.subsurface(_to_pygame_rect(source_rect))

        if destination_rect is None:
            left, top = 0.0, 0.0
            width, height = image.get_size()
        else:
            left, top, right, bottom = destination_rect
            width, height = right - left, bottom - top

        empty = pygame.Rect(0, 0, 0, 0)
        sx = math.hypot(matrix.m11, matrix.m12)
        if sx == 0.0 or width <= 0 or height <= 0:
            return empty
        det = matrix.m11 * matrix.m22 - matrix.m12 * matrix.m21
        sy = det / sx

        size = (round(abs(width * sx)), round(abs(height * sy)))
        if size[0] == 0 or size[1] == 0:
            return empty
        if size != image.get_size():
            image = _resize(image, size)
        if sy < 0:
            image = pygame.transform.flip(image, False, True)

        angle = math.degrees(math.atan2(matrix.m12, matrix.m11))
        if abs(angle) > 1e-9:
            # Screen y points down, so a positive matrix angle turns clockwise on screen.
            image = pygame.transform.rotate(image, -angle)

        if opacity < 1.0:
            image = image.copy()
            image.set_alpha(round(clamp(opacity, 0.0, 1.0) * 255))

        corners = [
            matrix.transform_point(Vector2(x, y))
            for x in (left, left + width)
            for y in (top, top + height)
        ]
        x0 = min(corner.x for corner in corners)
        y0 = min(corner.y for corner in corners)
        return target.blit(image, (round(x0), round(y0)))

    def unity_matrix(self) -> Matrix3x2:
        """Matrix mapping y-up world coordinates centred on the screen to pixels."""
        return self._unity