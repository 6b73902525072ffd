"""A rotating body drawn with an image."""

from __future__ import annotations

from .camera import Camera
from .gameobject import GameObject
from .image import Image
from .matrix3x2 import Matrix3x2
from .renderer import Renderer


class SpaceObject(GameObject):
    """An image that spins by ``speed`` degrees every frame."""

    def __init__(self, camera: Camera, renderer: Renderer, speed: float) -> None:
        super().__init__()
        self.image = Image()
        self.camera = camera
        self.renderer = renderer
        self.speed = speed

    def update(self) -> None:
        self.transform.rotate(self.speed)

    def render_matrix(self) -> Matrix3x2:
        """Matrix from bitmap pixels to screen pixels, centring the bitmap on the object."""
        width, height = self.image.size()
        centring = Matrix3x2.scale(1.0, -1.0) * Matrix3x2.translation(-width / 2, height / 2)
        return (
            centring
            * self.transform.world_matrix()
            * self.camera.inverted_matrix()
            * self.renderer.unity_matrix()
        )

    def render(self) -> None:
        self.renderer.draw_bitmap(self.image.bitmap, self.render_matrix())