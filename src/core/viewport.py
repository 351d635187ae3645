# src/core/viewport.py
"""
Pan & zoom viewport for a 2D canvas.

- Cursor-anchored zoom: the canvas point under the anchor keeps its screen position
- Drag panning that tracks the cursor 1:1 at any zoom level
- Translation always clamped so the visible window stays inside the canvas
- Zoom ceiling (`max_scale`, never reached) and a 1.0 "fit" floor
- Before/after hooks for moves and zooms (observers, cannot veto)
- Immutable `ViewTransform` value handed to the rendering side on every change

Coordinate model:
    canvas-local q in [0, width] x [0, height]; c = (width/2, height/2)
    screen = c + scale * (q + translation - c)

Single-threaded: call from the input/UI thread only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import pygame

from src.core.bounds import clamp_translation, visible_extent
from src.core.hooks import ViewportHooks, ViewportListener
from src.utils.settings import MAX_SCALE, SCALE_FACTOR

__all__ = ["ViewTransform", "Viewport"]

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


# ---------------------------------------------------------------------
# Transform value
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class ViewTransform:
    """Scale + translate transform for one viewport state. Replaces, never composes."""
    scale: float
    tx: float
    ty: float
    width: float
    height: float

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.width * 0.5, self.height * 0.5)

    def to_screen(self, canvas_pos: Point) -> pygame.Vector2:
        """Canvas-local -> screen."""
        c = self.center
        q = pygame.Vector2(canvas_pos)
        return c + (q + pygame.Vector2(self.tx, self.ty) - c) * self.scale

    def to_canvas(self, screen_pos: Point) -> pygame.Vector2:
        """Screen -> canvas-local."""
        c = self.center
        p = pygame.Vector2(screen_pos)
        return c + (p - c) / self.scale - pygame.Vector2(self.tx, self.ty)

    def visible_rect(self) -> Tuple[float, float, float, float]:
        """Visible window in canvas-local coordinates as (x, y, w, h)."""
        vw = visible_extent(self.width, self.scale)
        vh = visible_extent(self.height, self.scale)
        x = self.width * 0.5 - self.tx - vw * 0.5
        y = self.height * 0.5 - self.ty - vh * 0.5
        return x, y, vw, vh

    def as_matrix(self) -> Tuple[Tuple[float, float, float], ...]:
        """3x3 affine matrix (row-major) mapping canvas-local to screen."""
        s = self.scale
        cx, cy = self.width * 0.5, self.height * 0.5
        return (
            (s, 0.0, cx + s * (self.tx - cx)),
            (0.0, s, cy + s * (self.ty - cy)),
            (0.0, 0.0, 1.0),
        )


# ---------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------
class Viewport:
    """Owns scale and translation for a canvas of fixed logical size."""

    __slots__ = (
        "_width", "_height",
        "_scale", "_translation",
        "_scale_factor", "_max_scale",
        "_last_pointer",
        "_transform", "listener", "on_transform",
    )

    def __init__(
        self,
        width: float,
        height: float,
        *,
        scale_factor: float = SCALE_FACTOR,
        max_scale: float = MAX_SCALE,
        listener: Optional[ViewportListener] = None,
        on_transform: Optional[Callable[[ViewTransform], None]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self._width = float(width)
        self._height = float(height)

        self._scale = 1.0
        self._translation = pygame.Vector2(0.0, 0.0)

        self._scale_factor = 0.0
        self._max_scale = 0.0
        self.scale_factor = scale_factor
        self.max_scale = max_scale

        # Drag reference point (screen space); set on press, updated on every pan
        self._last_pointer: Optional[pygame.Vector2] = None

        self.listener: ViewportListener = listener if listener is not None else ViewportHooks()
        self.on_transform = on_transform
        self._transform = self._build_transform()

    # -------------------------
    # Accessors / configuration
    # -------------------------

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def translation(self) -> pygame.Vector2:
        """Copy of the current translation (canvas units)."""
        return pygame.Vector2(self._translation)

    @property
    def transform(self) -> ViewTransform:
        return self._transform

    @property
    def last_pointer(self) -> Optional[pygame.Vector2]:
        return None if self._last_pointer is None else pygame.Vector2(self._last_pointer)

    @property
    def scale_factor(self) -> float:
        """Zoom multiplier per scroll tick."""
        return self._scale_factor

    @scale_factor.setter
    def scale_factor(self, value: float) -> None:
        if value <= 1.0:
            raise ValueError(f"scale_factor must be > 1 (got {value})")
        self._scale_factor = float(value)

    @property
    def max_scale(self) -> float:
        """Exclusive upper bound on the scale."""
        return self._max_scale

    @max_scale.setter
    def max_scale(self, value: float) -> None:
        if value <= 1.0:
            raise ValueError(f"max_scale must be > 1 (got {value})")
        self._max_scale = float(value)

    # -------------------------
    # Core operations
    # -------------------------

    def pan(self, previous: Point, current: Point) -> None:
        """
        Move the view by the screen distance between two pointer positions.
        The drag distance is divided by the scale so content follows the cursor.
        `current` becomes the reference for the next drag.
        """
        prev = pygame.Vector2(previous)
        cur = pygame.Vector2(current)
        delta = (cur - prev) / self._scale

        self.listener.before_move()

        candidate = self._translation + delta
        self._translation = clamp_translation(candidate, self._scale, self._width, self._height)
        self._apply_transform()
        self._last_pointer = cur

        logger.debug("pan delta=(%.3f, %.3f) -> translation=(%.3f, %.3f)",
                     delta.x, delta.y, self._translation.x, self._translation.y)
        self.listener.after_move()

    def zoom_at(self, scroll_delta: float, anchor: Point) -> bool:
        """
        Zoom one tick toward (scroll_delta > 0) or away from `anchor` (screen space).

        Returns False, leaving state untouched, when the step would reach max_scale.
        A zoom-out step that would drop below 1.0 lands on exactly 1.0 instead.
        """
        factor = self._scale_factor if scroll_delta > 0 else 1.0 / self._scale_factor

        if not self._scale * factor < self._max_scale:
            logger.debug("zoom ignored: %.4f * %.4f would reach max_scale %.4f",
                         self._scale, factor, self._max_scale)
            return False

        at_floor = False
        if self._scale * factor < 1.0:
            factor = 1.0 / self._scale
            at_floor = True

        self.listener.before_zoom(factor)

        # Anchor in canvas-local coordinates under the current transform
        local = self._transform.to_canvas(anchor)
        off_x = self._width * 0.5 - local.x - self._translation.x
        off_y = self._height * 0.5 - local.y - self._translation.y
        # Shift that keeps `local` at the same screen position after scaling by `factor`
        shift = 1.0 - 1.0 / factor
        candidate = pygame.Vector2(
            self._translation.x + off_x * shift,
            self._translation.y + off_y * shift,
        )

        self._scale = 1.0 if at_floor else self._scale * factor
        self._translation = clamp_translation(candidate, self._scale, self._width, self._height)
        self._apply_transform()

        logger.debug("zoom factor=%.4f anchor=(%.1f, %.1f) -> scale=%.4f translation=(%.3f, %.3f)",
                     factor, local.x, local.y, self._scale, self._translation.x, self._translation.y)
        self.listener.after_zoom(factor)
        return True

    # -------------------------
    # Input boundary (decoded events)
    # -------------------------

    def press(self, point: Point) -> None:
        """Mouse press: remember where the drag starts."""
        self._last_pointer = pygame.Vector2(point)

    def drag(self, point: Point) -> None:
        """Mouse drag: pan from the stored reference to `point`."""
        if self._last_pointer is None:
            self._last_pointer = pygame.Vector2(point)
            return
        self.pan(self._last_pointer, point)

    def release(self) -> None:
        self._last_pointer = None

    def scroll(self, delta_y: float, point: Point) -> bool:
        """Scroll event; always consumed, even when the zoom is a no-op."""
        self.zoom_at(delta_y, point)
        return True

    # -------------------------
    # Internal helpers
    # -------------------------

    def _build_transform(self) -> ViewTransform:
        return ViewTransform(
            scale=self._scale,
            tx=float(self._translation.x),
            ty=float(self._translation.y),
            width=self._width,
            height=self._height,
        )

    def _apply_transform(self) -> None:
        self._transform = self._build_transform()
        if self.on_transform is not None:
            self.on_transform(self._transform)

    def __repr__(self) -> str:
        return (f"Viewport(size=({self._width:g}, {self._height:g}), scale={self._scale:.4f}, "
                f"translation=({self._translation.x:.3f}, {self._translation.y:.3f}))")
