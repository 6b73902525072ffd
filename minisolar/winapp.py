"""Window application base class running the frame loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import pygame

from .renderer import Renderer

log = logging.getLogger(__name__)


class WinApp:
    """Opens a window, dispatches its events and calls update and render every frame."""

    def __init__(self) -> None:
        self.window_name = ""
        self.width = 0
        self.height = 0
        self.frame_rate = 60
        self.module_path: Optional[Path] = None
        self.working_path: Optional[Path] = None
        self.renderer: Optional[Renderer] = None
        self.running = False
        self._clock: Optional[pygame.time.Clock] = None

    def initialize(self) -> None:
        """Open the window and set up its renderer."""
        self.module_path = Path(sys.argv[0]).resolve() if sys.argv and sys.argv[0] else None
        self.working_path = Path.cwd()
        log.debug("module path: %s", self.module_path)
        log.debug("working path: %s", self.working_path)

        pygame.init()
        pygame.display.set_caption(self.window_name)
        surface = pygame.display.set_mode((self.width, self.height))

        self.renderer = Renderer(self.width, self.height, surface)
        self.renderer.initialize()
        self._clock = pygame.time.Clock()

    def shutdown(self) -> None:
        """Release the renderer and close the window."""
        self.renderer = None
        self._clock = None
        pygame.quit()

    def run(self) -> None:
        """Process events and draw frames until stopped or the window quits."""
        clock = self._clock or pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                self.handle_event(event)
            self.update()
            self.render()
            clock.tick(self.frame_rate)

    def is_running(self) -> bool:
        return self.running

    def update(self) -> None:
        """Per-frame state update; subclasses fill this in."""

    def render(self) -> None:
        """Per-frame drawing; subclasses fill this in."""

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to a window event; a quit request stops the loop."""
        if event.type == pygame.QUIT:
            self.running = False