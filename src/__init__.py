# --- FILE: src/__init__.py
"""
Top-level package marker for ZoomPane.

Having an __init__ here ensures imports like
`from src.core.viewport import Viewport` work consistently on all environments,
including tools and test runners that don't inject the project root to sys.path.
"""
__all__ = ["core", "ui", "rendering", "utils", "app"]
