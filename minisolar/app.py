"""The mini solar system demo: a sun, an earth and a moon orbiting in a window."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .camera import Camera
from .spaceobject import SpaceObject
from .winapp import WinApp


class DemoGameApp(WinApp):
    """Sets up the scene, updates and draws it, and quits on Escape."""

    def __init__(self, resource_dir: Union[str, Path] = "Resource") -> None:
        super().__init__()
        self.resource_dir = Path(resource_dir)
        self.camera: Optional[Camera] = None
        self.sun: Optional[SpaceObject] = None
        self.earth: Optional[SpaceObject] = None
        self.moon: Optional[SpaceObject] = None

    def initialize(self) -> None:
        self.width = 800
        self.height = 600
        self.window_name = "MiniSolarSystem"

        super().initialize()

        self.camera = Camera()
        self.sun = SpaceObject(self.camera, self.renderer, 0.3)
        self.earth = SpaceObject(self.camera, self.renderer, 0.6)
        self.moon = SpaceObject(self.camera, self.renderer, 0.9)

        self.sun.image.bitmap = self.load_bitmap(self.resource_dir / "Sun.png")
        self.moon.image.bitmap = self.load_bitmap(self.resource_dir / "Moon.png")
        self.earth.image.bitmap = self.load_bitmap(self.resource_dir / "Earth.png")

        self.sun.transform.scale.x, self.sun.transform.scale.y = 0.2, 0.2
        self.moon.transform.scale.x, self.moon.transform.scale.y = 0.5, 0.5

        self.earth.transform.position.x, self.earth.transform.position.y = 800.0, 0.0
        self.moon.transform.position.x, self.moon.transform.position.y = 400.0, 0.0

        self.earth.transform.parent = self.sun.transform
        self.moon.transform.parent = self.earth.transform

        self.running = True

    def shutdown(self) -> None:
        self.earth = None
        self.moon = None
        self.sun = None
        self.camera = None
        super().shutdown()

    def update(self) -> None:
        self.camera.update()
        self.sun.update()
        self.earth.update()
        self.moon.update()

    def render(self) -> None:
        self.renderer.begin_draw(pygame.Color("black"))
        self.sun.render()
        self.earth.render()
        self.moon.render()
        self.renderer.end_draw()

    def handle_event(self, event: pygame.event.Event) -> None:
        super().handle_event(event)
        if event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
            self.running = False

    def load_bitmap(self, path: Union[str, Path]) -> pygame.Surface:
        """Load an image file as a surface with per-pixel alpha."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"image not found: {path}")
        bitmap = pygame.image.load(str(path))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            bitmap = bitmap.convert_alpha()
        return bitmap


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Mini solar system demo.")
    parser.add_argument(
        "--resources", default="Resource", help="directory holding Sun.png, Earth.png and Moon.png"
    )
    args = parser.parse_args(argv)

    app = DemoGameApp(args.resources)
    try:
        app.initialize()
        app.run()
    finally:
        app.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())