# --- FILE: src/core/__init__.py
"""Viewport state, bounds clamping and hooks."""
from src.core.bounds import clamp_translation, in_bounds
from src.core.hooks import BusListener, ViewportHooks, ViewportListener
from src.core.viewport import ViewTransform, Viewport

__all__ = [
    "Viewport",
    "ViewTransform",
    "ViewportHooks",
    "ViewportListener",
    "BusListener",
    "clamp_translation",
    "in_bounds",
]
