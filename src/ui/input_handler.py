# src/ui/input_handler.py
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Tuple

import pygame

from src.utils.settings import DRAG_BUTTON, INVERT_WHEEL

if TYPE_CHECKING:
    from src.core.viewport import Viewport
    from src.core.viewport_debug import ViewportDebugOverlay


__all__ = ["InputHandler"]


class InputHandler:
    """
    Decodes pygame events into viewport calls.

    - Mouse wheel         : zoom at the current mouse position
    - Drag button press   : start a drag (stores the reference point)
    - Motion while held   : pan
    - Drag button release : end the drag
    - F1                  : toggle the debug overlay (if one is attached)
    """

    def __init__(
        self,
        viewport: "Viewport",
        *,
        drag_button: int = DRAG_BUTTON,
        invert_wheel: bool = INVERT_WHEEL,
        mouse_pos: Callable[[], Tuple[int, int]] = pygame.mouse.get_pos,
        overlay: Optional["ViewportDebugOverlay"] = None,
    ) -> None:
        self.viewport = viewport
        self.drag_button = drag_button
        self.invert_wheel = invert_wheel
        self.mouse_pos = mouse_pos
        self.overlay = overlay
        self._dragging = False

    @property
    def dragging(self) -> bool:
        return self._dragging

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Entry point; return True if the event was consumed."""
        if event.type == pygame.MOUSEWHEEL:
            return self._handle_wheel(event)
        if event.type == pygame.MOUSEBUTTONDOWN:
            return self._handle_button_down(event)
        if event.type == pygame.MOUSEMOTION:
            return self._handle_motion(event)
        if event.type == pygame.MOUSEBUTTONUP:
            return self._handle_button_up(event)
        if event.type == pygame.KEYDOWN:
            return self._handle_keydown(event)
        return False

    # ---- internals ---------------------------------------------------------

    def _handle_wheel(self, event: pygame.event.Event) -> bool:
        dy = event.y
        if getattr(event, "flipped", False):
            dy = -dy
        if self.invert_wheel:
            dy = -dy
        if dy == 0:
            return False
        return self.viewport.scroll(dy, self.mouse_pos())

    def _handle_button_down(self, event: pygame.event.Event) -> bool:
        if event.button != self.drag_button:
            return False
        self._dragging = True
        self.viewport.press(event.pos)
        return True

    def _handle_motion(self, event: pygame.event.Event) -> bool:
        if not self._dragging:
            return False
        self.viewport.drag(event.pos)
        return True

    def _handle_button_up(self, event: pygame.event.Event) -> bool:
        if event.button != self.drag_button or not self._dragging:
            return False
        self._dragging = False
        self.viewport.release()
        return True

    def _handle_keydown(self, event: pygame.event.Event) -> bool:
        if event.key == pygame.K_F1 and self.overlay is not None:
            self.overlay.enabled = not self.overlay.enabled
            return True
        return False
