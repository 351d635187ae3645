# src/app.py
"""
Demo application: a grid canvas you can zoom (mouse wheel) and pan (drag).

The window is the canvas widget, so screen coordinates are the canvas'
own screen placement.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

import src.utils.settings as settings
from src.core.hooks import AFTER_ZOOM, BusListener
from src.core.viewport import ViewTransform, Viewport
from src.core.viewport_debug import ViewportDebugOverlay
from src.rendering.canvas_renderer import CanvasRenderer
from src.ui.input_handler import InputHandler
from src.utils.event_bus import EventBus

logger = logging.getLogger(__name__)


def build_grid_canvas(width: int, height: int, step: int = settings.GRID_STEP) -> pygame.Surface:
    """Content surface: a labelled grid with a border, so zoom and pan are visible."""
    surf = pygame.Surface((width, height))
    surf.fill(settings.BACKGROUND_COLOR)
    font = pygame.font.Font(None, 14)

    for i, x in enumerate(range(0, width + 1, step)):
        color = settings.GRID_MAJOR_COLOR if i % 4 == 0 else settings.GRID_COLOR
        pygame.draw.line(surf, color, (x, 0), (x, height))
    for j, y in enumerate(range(0, height + 1, step)):
        color = settings.GRID_MAJOR_COLOR if j % 4 == 0 else settings.GRID_COLOR
        pygame.draw.line(surf, color, (0, y), (width, y))

    for x in range(0, width, step * 4):
        for y in range(0, height, step * 4):
            label = font.render(f"{x},{y}", True, settings.LABEL_COLOR)
            surf.blit(label, (x + 3, y + 3))

    pygame.draw.rect(surf, settings.BORDER_COLOR, surf.get_rect(), 2)
    return surf


class ZoomPaneApp:
    """Owns the window, the viewport and the frame loop."""

    def __init__(
        self,
        width: int = settings.CANVAS_WIDTH,
        height: int = settings.CANVAS_HEIGHT,
        *,
        scale_factor: float = settings.SCALE_FACTOR,
        max_scale: float = settings.MAX_SCALE,
        debug_overlay: bool = True,
        screen: Optional[pygame.Surface] = None,
    ) -> None:
        pygame.init()
        if screen is None:
            screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(settings.WINDOW_TITLE)
        self.screen = screen
        self.clock = pygame.time.Clock()

        self.bus = EventBus()
        self.viewport = Viewport(
            width,
            height,
            scale_factor=scale_factor,
            max_scale=max_scale,
            listener=BusListener(self.bus),
            on_transform=self._on_transform,
        )
        self.renderer = CanvasRenderer(build_grid_canvas(width, height),
                                       background=settings.BACKGROUND_COLOR)
        self.overlay = ViewportDebugOverlay() if debug_overlay else None
        self.input = InputHandler(self.viewport, overlay=self.overlay)

        self.zoom_count = 0
        self.bus.on(AFTER_ZOOM, self._count_zoom)

        self._dirty = True
        self._running = False

    # ------------------------------------------------------------------ #
    # Hooks
    # ------------------------------------------------------------------ #

    def _on_transform(self, _transform: ViewTransform) -> None:
        self._dirty = True

    def _count_zoom(self, payload: dict) -> None:
        self.zoom_count += 1
        logger.debug("zoom #%d factor=%.4f", self.zoom_count, payload["factor"])

    # ------------------------------------------------------------------ #
    # Frame
    # ------------------------------------------------------------------ #

    def handle_event(self, ev: pygame.event.Event) -> None:
        if ev.type == pygame.QUIT:
            self._running = False
            return
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
            self._running = False
            return
        if self.input.handle_event(ev):
            self._dirty = True

    def render(self, fps: Optional[float] = None) -> None:
        self.renderer.render(self.screen, self.viewport.transform)
        if self.overlay is not None:
            self.overlay.draw(self.screen, self.viewport, fps=fps)
        self._dirty = False

    def run(self) -> None:
        """Main loop for local/dev execution."""
        logger.info("ZoomPane running: %s", self.viewport)
        self._running = True
        while self._running:
            self.clock.tick(settings.FPS)

            for ev in pygame.event.get():
                self.handle_event(ev)

            # Overlay shows live fps, so it repaints every frame
            if self._dirty or self.overlay is not None:
                self.render(self.clock.get_fps())
                pygame.display.flip()

        logger.info("ZoomPane closed after %d zoom steps", self.zoom_count)
        pygame.quit()
