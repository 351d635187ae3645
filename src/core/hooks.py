# src/core/hooks.py
"""
Observer hooks invoked around viewport moves and zooms.

Listeners observe only: return values are ignored and they cannot cancel
the operation. Exceptions raised by a listener propagate to the caller.
Listeners must not call back into `pan`/`zoom_at` on the same viewport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from src.utils.event_bus import EventBus, bus as default_bus

__all__ = [
    "ViewportListener",
    "ViewportHooks",
    "BusListener",
    "BEFORE_ZOOM",
    "AFTER_ZOOM",
    "BEFORE_MOVE",
    "AFTER_MOVE",
]

# Event names used by BusListener
BEFORE_ZOOM = "viewport.before_zoom"
AFTER_ZOOM = "viewport.after_zoom"
BEFORE_MOVE = "viewport.before_move"
AFTER_MOVE = "viewport.after_move"


@runtime_checkable
class ViewportListener(Protocol):
    def before_zoom(self, factor: float) -> None: ...
    def after_zoom(self, factor: float) -> None: ...
    def before_move(self) -> None: ...
    def after_move(self) -> None: ...


@dataclass
class ViewportHooks:
    """
    Four optional callback slots. Unset slots are no-ops.

        hooks = ViewportHooks(after_zoom_cb=lambda f: redraw_labels())
        vp = Viewport(800, 600, listener=hooks)
    """
    before_zoom_cb: Optional[Callable[[float], None]] = None
    after_zoom_cb: Optional[Callable[[float], None]] = None
    before_move_cb: Optional[Callable[[], None]] = None
    after_move_cb: Optional[Callable[[], None]] = None

    def before_zoom(self, factor: float) -> None:
        if self.before_zoom_cb is not None:
            self.before_zoom_cb(factor)

    def after_zoom(self, factor: float) -> None:
        if self.after_zoom_cb is not None:
            self.after_zoom_cb(factor)

    def before_move(self) -> None:
        if self.before_move_cb is not None:
            self.before_move_cb()

    def after_move(self) -> None:
        if self.after_move_cb is not None:
            self.after_move_cb()


class BusListener:
    """Republishes viewport hooks on an EventBus (payload: factor=... for zooms)."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self.bus = event_bus if event_bus is not None else default_bus

    def before_zoom(self, factor: float) -> None:
        self.bus.emit(BEFORE_ZOOM, factor=factor)

    def after_zoom(self, factor: float) -> None:
        self.bus.emit(AFTER_ZOOM, factor=factor)

    def before_move(self) -> None:
        self.bus.emit(BEFORE_MOVE)

    def after_move(self) -> None:
        self.bus.emit(AFTER_MOVE)
