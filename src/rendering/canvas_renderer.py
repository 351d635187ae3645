# src/rendering/canvas_renderer.py
"""
Draws the visible part of a content surface according to a ViewTransform.

The renderer only reads transforms; it never mutates viewport state.
"""

from __future__ import annotations

import math
from typing import Optional

import pygame

from src.core.viewport import ViewTransform

__all__ = ["source_rect", "CanvasRenderer"]


def source_rect(transform: ViewTransform) -> pygame.Rect:
    """Whole-pixel canvas rect covering the visible window, clipped to the canvas."""
    x, y, vw, vh = transform.visible_rect()
    x0 = math.floor(x)
    y0 = math.floor(y)
    x1 = math.ceil(x + vw)
    y1 = math.ceil(y + vh)
    bounds = pygame.Rect(0, 0, int(transform.width), int(transform.height))
    return pygame.Rect(x0, y0, x1 - x0, y1 - y0).clip(bounds)


class CanvasRenderer:
    """Scales and blits the visible region of `content` onto a target surface."""

    def __init__(self, content: pygame.Surface, *, smooth: bool = True,
                 background: Optional[tuple] = None) -> None:
        self.content = content
        self.smooth = smooth
        self.background = background

    def render(self, target: pygame.Surface, transform: ViewTransform) -> pygame.Rect:
        """Render and return the screen rect that was drawn."""
        if self.content.get_size() != (int(transform.width), int(transform.height)):
            raise ValueError(
                f"content size {self.content.get_size()} does not match canvas "
                f"({transform.width:g}, {transform.height:g})"
            )
        if self.background is not None:
            target.fill(self.background)

        src = source_rect(transform)
        if src.width <= 0 or src.height <= 0:
            return pygame.Rect(0, 0, 0, 0)

        dest_tl = transform.to_screen(src.topleft)
        size = (max(1, int(round(src.width * transform.scale))),
                max(1, int(round(src.height * transform.scale))))

        region = self.content.subsurface(src)
        if self.smooth and region.get_bitsize() in (24, 32):
            scaled = pygame.transform.smoothscale(region, size)
        else:
            scaled = pygame.transform.scale(region, size)

        return target.blit(scaled, (int(math.floor(dest_tl.x)), int(math.floor(dest_tl.y))))
