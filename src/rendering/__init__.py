# --- FILE: src/rendering/__init__.py
"""Drawing helpers that consume ViewTransform values."""
