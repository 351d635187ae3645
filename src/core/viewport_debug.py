# viewport_debug.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from src.core.bounds import in_bounds
from src.core.viewport import Viewport


# -----------------------------
# Colors
# -----------------------------
YELLOW = (245, 220, 120)
CYAN   = (120, 210, 230)
WHITE  = (255, 255, 255)
RED    = (235, 95, 95)
PANEL_BG = (0, 0, 0, 160)
MAP_BG   = (0, 0, 0, 120)


# -----------------------------
# Config
# -----------------------------
@dataclass
class ViewportDebugConfig:
    show_crosshair: bool = True
    show_minimap: bool = True
    show_text: bool = True
    minimap_width_px: int = 160     # height follows the canvas aspect ratio
    font_name: Optional[str] = None  # None = pygame's bundled default font
    font_size: int = 16
    panel_margin: int = 8
    panel_pad_x: int = 8
    panel_pad_y: int = 6


# -----------------------------
# Overlay
# -----------------------------
class ViewportDebugOverlay:
    """Scale/translation readout plus a mini-map of the visible window."""

    def __init__(self, config: Optional[ViewportDebugConfig] = None) -> None:
        self.cfg = config or ViewportDebugConfig()
        if self.cfg.font_name:
            self.font = pygame.font.SysFont(self.cfg.font_name, self.cfg.font_size)
        else:
            self.font = pygame.font.Font(None, self.cfg.font_size)
        self.enabled = True

    # ---- public API -------------------------------------------------

    def draw(self, screen: pygame.Surface, viewport: Viewport, fps: Optional[float] = None) -> None:
        if not self.enabled:
            return

        if self.cfg.show_crosshair:
            self._draw_crosshair(screen)

        if self.cfg.show_minimap:
            self._draw_minimap(screen, viewport)

        if self.cfg.show_text:
            self._draw_info_panel(screen, self.info_lines(viewport, fps))

    def info_lines(self, viewport: Viewport, fps: Optional[float] = None) -> List[str]:
        t = viewport.translation
        x, y, vw, vh = viewport.transform.visible_rect()
        ok = in_bounds(t, viewport.scale, viewport.width, viewport.height)
        return [
            f"scale={viewport.scale:.4f}  max={viewport.max_scale:g}  step={viewport.scale_factor:g}",
            f"translation=({t.x:.2f}, {t.y:.2f})  in_bounds={'yes' if ok else 'NO'}",
            f"visible=({x:.1f}, {y:.1f}, {vw:.1f} x {vh:.1f})",
            f"fps={fps:.1f}" if fps is not None else "fps=?",
            "wheel: zoom   drag: pan   F1: toggle overlay",
        ]

    # ---- drawing helpers -------------------------------------------

    def _draw_crosshair(self, screen: pygame.Surface) -> None:
        cx, cy = screen.get_width() // 2, screen.get_height() // 2
        pygame.draw.line(screen, CYAN, (cx - 8, cy), (cx + 8, cy), 1)
        pygame.draw.line(screen, CYAN, (cx, cy - 8), (cx, cy + 8), 1)

    def minimap_rects(self, screen_size: Tuple[int, int], viewport: Viewport) -> Tuple[pygame.Rect, pygame.Rect]:
        """(canvas rect, visible-window rect) in screen pixels, docked bottom-right."""
        sw, sh = screen_size
        mw = self.cfg.minimap_width_px
        k = mw / viewport.width
        mh = max(1, int(round(viewport.height * k)))
        margin = self.cfg.panel_margin
        frame = pygame.Rect(sw - mw - margin, sh - mh - margin, mw, mh)

        x, y, vw, vh = viewport.transform.visible_rect()
        window = pygame.Rect(
            frame.x + int(round(x * k)),
            frame.y + int(round(y * k)),
            max(1, int(round(vw * k))),
            max(1, int(round(vh * k))),
        )
        return frame, window

    def _draw_minimap(self, screen: pygame.Surface, viewport: Viewport) -> None:
        frame, window = self.minimap_rects(screen.get_size(), viewport)
        bg = pygame.Surface(frame.size, pygame.SRCALPHA)
        bg.fill(MAP_BG)
        screen.blit(bg, frame.topleft)
        pygame.draw.rect(screen, WHITE, frame, 1)
        pygame.draw.rect(screen, YELLOW if frame.contains(window) else RED, window, 1)

    def _draw_info_panel(self, screen: pygame.Surface, lines: List[str]) -> None:
        max_w = 0
        total_h = 0
        rendered = []
        for line in lines:
            surf = self.font.render(line, True, WHITE)
            rendered.append(surf)
            w, h = surf.get_size()
            max_w = max(max_w, w)
            total_h += h

        pad_x, pad_y = self.cfg.panel_pad_x, self.cfg.panel_pad_y
        margin = self.cfg.panel_margin
        panel = pygame.Surface((max_w + pad_x * 2, total_h + pad_y * 2), pygame.SRCALPHA)
        panel.fill(PANEL_BG)

        y = pad_y
        for surf in rendered:
            panel.blit(surf, (pad_x, y))
            y += surf.get_height()

        screen.blit(panel, (margin, margin))
