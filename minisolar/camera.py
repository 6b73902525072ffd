"""A camera moved with the arrow keys."""

from __future__ import annotations

import pygame

from .gameobject import GameObject
from .matrix3x2 import Matrix3x2
from .vector2 import Vector2

CAMERA_SPEED = 3.0


class Camera(GameObject):
    """Scene camera whose inverted world matrix maps world space to view space."""

    def __init__(self) -> None:
        super().__init__()
        self._inverted = Matrix3x2.identity()

    def update(self) -> None:
        self.process_input(pygame.key.get_pressed())

    def render(self) -> None:
        """A camera draws nothing."""

    def process_input(self, pressed) -> None:
        """Move by the arrow keys held in ``pressed`` and refresh the view matrix."""
        horizontal = 0.0
        vertical = 0.0
        if pressed[pygame.K_LEFT]:
            horizontal -= CAMERA_SPEED
        if pressed[pygame.K_RIGHT]:
            horizontal += CAMERA_SPEED
        if pressed[pygame.K_UP]:
            vertical += CAMERA_SPEED
        if pressed[pygame.K_DOWN]:
            vertical -= CAMERA_SPEED

        self.transform.translate(Vector2(horizontal, vertical))
        self._inverted = self.transform.world_matrix().inverse()

    def inverted_matrix(self) -> Matrix3x2:
        return self._inverted