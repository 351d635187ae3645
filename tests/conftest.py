# tests/conftest.py
from __future__ import annotations
import os
import sys
from pathlib import Path
import pytest

# Ensure repo root is importable as a package root (so `import src...` works on CI)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame setup
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture(scope="session", autouse=True)
def _init_pygame():
    import pygame
    pygame.init()
    # tiny hidden display so surface/font paths behave like a real run
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()


@pytest.fixture
def viewport():
    """800x600 canvas, 1.2 per tick, max scale 10."""
    from src.core.viewport import Viewport
    return Viewport(800, 600, scale_factor=1.2, max_scale=10)
