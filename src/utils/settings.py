# src/utils/settings.py
"""
Centralized settings and constants for ZoomPane.
"""

# --- Canvas ---
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# --- Zoom ---
# Multiplier applied per scroll tick (> 1). 1.2 is the usual feel; larger zooms faster.
SCALE_FACTOR = 1.2
# Upper bound on the scale (> 1); the scale never reaches this value.
MAX_SCALE = 10.0

# --- Input ---
# Mouse button that drags the view (1 = left, 2 = middle, 3 = right)
DRAG_BUTTON = 1
# Invert wheel direction (True: wheel down zooms in)
INVERT_WHEEL = False

# --- Demo app ---
FPS = 60
WINDOW_TITLE = "ZoomPane"
GRID_STEP = 50
BACKGROUND_COLOR = (24, 26, 32)
GRID_COLOR = (60, 66, 80)
GRID_MAJOR_COLOR = (96, 104, 124)
LABEL_COLOR = (200, 205, 215)
BORDER_COLOR = (235, 95, 95)
