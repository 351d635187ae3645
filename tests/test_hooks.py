# tests/test_hooks.py
from __future__ import annotations

import pytest

from src.core.hooks import (
    AFTER_MOVE,
    AFTER_ZOOM,
    BEFORE_MOVE,
    BEFORE_ZOOM,
    BusListener,
    ViewportHooks,
    ViewportListener,
)
from src.core.viewport import Viewport
from src.utils.event_bus import EventBus


def test_empty_hooks_are_noops():
    hooks = ViewportHooks()
    hooks.before_zoom(1.2)
    hooks.after_zoom(1.2)
    hooks.before_move()
    hooks.after_move()


def test_listeners_satisfy_protocol():
    assert isinstance(ViewportHooks(), ViewportListener)
    assert isinstance(BusListener(EventBus()), ViewportListener)


def test_bus_listener_publishes_viewport_events():
    bus = EventBus()
    seen = []
    for name in (BEFORE_ZOOM, AFTER_ZOOM, BEFORE_MOVE, AFTER_MOVE):
        bus.on(name, lambda payload, name=name: seen.append((name, payload)))

    vp = Viewport(800, 600, scale_factor=1.2, max_scale=10, listener=BusListener(bus))
    vp.zoom_at(+1, (400, 300))
    vp.pan((0, 0), (6, 6))

    assert [name for name, _ in seen] == [BEFORE_ZOOM, AFTER_ZOOM, BEFORE_MOVE, AFTER_MOVE]
    assert seen[0][1]["factor"] == pytest.approx(1.2)
    assert seen[2][1] == {}


def test_listener_errors_propagate():
    def boom(_factor):
        raise RuntimeError("listener failed")

    vp = Viewport(800, 600, listener=ViewportHooks(before_zoom_cb=boom))
    with pytest.raises(RuntimeError):
        vp.zoom_at(+1, (0, 0))
    # raised before any state change
    assert vp.scale == 1.0


def test_event_bus_unsubscribe():
    bus = EventBus()
    got = []
    off = bus.on("x", got.append)
    assert bus.handler_count("x") == 1
    bus.emit("x", a=1)
    off()
    off()  # second call is harmless
    bus.emit("x", a=2)
    assert got == [{"a": 1}]
    assert bus.handler_count("x") == 0


def test_event_bus_handler_may_unsubscribe_itself():
    bus = EventBus()
    got = []
    offs = {}

    def once(payload):
        got.append(payload)
        offs["once"]()

    offs["once"] = bus.on("tick", once)
    bus.emit("tick", n=1)
    bus.emit("tick", n=2)
    assert got == [{"n": 1}]


def test_event_bus_clear():
    bus = EventBus()
    bus.on("a", lambda p: None)
    bus.clear()
    assert bus.handler_count("a") == 0
