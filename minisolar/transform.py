"""Position, rotation and scale of an object in a parent hierarchy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .matrix3x2 import Matrix3x2
from .vector2 import Vector2


@dataclass(eq=False)
class Transform:
    """Local placement of an object, optionally relative to a parent."""

    parent: Optional[Transform] = None
    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))

    def world_matrix(self) -> Matrix3x2:
        """Scale, then rotate, then translate, then apply the parent's world matrix."""
        local = (
            Matrix3x2.scale(self.scale)
            * Matrix3x2.rotation(self.rotation)
            * Matrix3x2.translation(self.position)
        )
        if self.parent is not None:
            return local * self.parent.world_matrix()
        return local

    def reset(self) -> None:
        self.position = Vector2(0.0, 0.0)
        self.rotation = 0.0
        self.scale = Vector2(1.0, 1.0)

    def translate(self, x: Union[float, Vector2], y: Optional[float] = None) -> None:
        """Move by ``(x, y)``, or by a single Vector2 passed as ``x``."""
        movement = x if y is None else Vector2(x, y)
        self.position = self.position + movement

    def rotate(self, angle: float) -> None:
        """Add ``angle`` degrees, wrapping once when the total passes 360."""
        self.rotation += angle
        if self.rotation > 360.0:
            self.rotation -= 360.0