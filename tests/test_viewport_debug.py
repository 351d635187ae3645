# tests/test_viewport_debug.py
from __future__ import annotations

import pygame

from src.core.viewport import Viewport
from src.core.viewport_debug import ViewportDebugConfig, ViewportDebugOverlay


def test_info_lines_report_state():
    vp = Viewport(800, 600, scale_factor=1.2, max_scale=10)
    lines = ViewportDebugOverlay().info_lines(vp, fps=60.0)
    assert lines[0].startswith("scale=1.0000")
    assert "in_bounds=yes" in lines[1]
    assert lines[3] == "fps=60.0"


def test_minimap_window_matches_frame_at_fit_scale():
    vp = Viewport(800, 600)
    frame, window = ViewportDebugOverlay().minimap_rects((800, 600), vp)
    assert frame.size == (160, 120)
    assert window == frame


def test_minimap_window_shrinks_when_zoomed():
    vp = Viewport(800, 600, scale_factor=2.0, max_scale=10)
    vp.zoom_at(+1, (400, 300))
    frame, window = ViewportDebugOverlay().minimap_rects((800, 600), vp)
    assert window.size == (80, 60)
    assert frame.contains(window)
    assert window.center == frame.center


def test_draw_respects_enabled_flag():
    vp = Viewport(800, 600)
    screen = pygame.Surface((800, 600))
    screen.fill((1, 2, 3))
    overlay = ViewportDebugOverlay(ViewportDebugConfig(show_minimap=True))
    overlay.enabled = False
    overlay.draw(screen, vp)
    assert screen.get_at((400, 300))[:3] == (1, 2, 3)

    overlay.enabled = True
    overlay.draw(screen, vp, fps=30.0)
    # crosshair drawn at the screen center
    assert screen.get_at((400, 300))[:3] != (1, 2, 3)
