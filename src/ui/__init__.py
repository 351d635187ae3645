# --- FILE: src/ui/__init__.py
"""Input decoding for the viewport."""
