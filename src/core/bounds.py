# src/core/bounds.py
"""
Bounds clamping for the zoom/pan viewport.

The canvas' logical rectangle is centered at the origin:
[-width/2, width/2] x [-height/2, height/2]. At a given scale the visible
window spans (width/scale, height/scale) canvas units and is positioned by
the translation. `clamp_translation` returns the nearest translation that
keeps that window inside the rectangle.

Pure functions only; nothing here touches pygame state.
"""

from __future__ import annotations

from typing import Tuple

import pygame

__all__ = ["visible_extent", "clamp_axis", "clamp_translation", "in_bounds"]

_EPS = 1e-9


def visible_extent(dimension: float, scale: float) -> float:
    """Width (or height) of the content visible at `scale`, in canvas units."""
    return dimension / scale


def clamp_axis(candidate: float, extent: float, dimension: float) -> float:
    """
    Clamp one translation coordinate.

    Right/bottom edge first, then left/top edge. When the visible extent
    covers the whole dimension the axis is centered (exactly 0.0).
    """
    if extent >= dimension:
        return 0.0

    half_dim = dimension / 2
    half_ext = extent / 2

    if candidate + half_ext > half_dim:
        value = half_dim - half_ext
    else:
        value = candidate
    if candidate - half_ext < -half_dim:
        value = -(half_dim - half_ext)
    return value


def clamp_translation(
    candidate: Tuple[float, float],
    scale: float,
    width: float,
    height: float,
) -> pygame.Vector2:
    """Map a candidate translation to the nearest in-bounds translation for `scale`."""
    cx, cy = candidate
    return pygame.Vector2(
        clamp_axis(cx, visible_extent(width, scale), width),
        clamp_axis(cy, visible_extent(height, scale), height),
    )


def in_bounds(
    translation: Tuple[float, float],
    scale: float,
    width: float,
    height: float,
    *,
    tolerance: float = _EPS,
) -> bool:
    """True if the visible window at `scale` lies inside the canvas rectangle."""
    tx, ty = translation
    vw = visible_extent(width, scale)
    vh = visible_extent(height, scale)
    if vw >= width and abs(tx) > tolerance:
        return False
    if vh >= height and abs(ty) > tolerance:
        return False
    return (
        abs(tx) + min(vw, width) / 2 <= width / 2 + tolerance
        and abs(ty) + min(vh, height) / 2 <= height / 2 + tolerance
    )
