"""Window, layout and color constants."""
from __future__ import annotations

FPS = 60

# Window defaults (overridden by CLI --width / --height)
SCREEN_W = 800
SCREEN_H = 600
TITLE = "Gradient Bars"

# Layout defaults (overridden by CLI --bars / --margin)
MARGIN = 9
BAR_COUNT = 8

# Colors: (r, g, b) or (r, g, b, a), alpha 0-255
THEME = {
    "background": (17, 17, 30),
    "bg_start": (35, 230, 35, 0),
    "bg_end": (0, 0, 255, 120),
    "bar_start": (35, 230, 35, 0),
    "bar_end": (255, 255, 255, 255),
}

# Mouse buttons that start a drag (4/5 are wheel events)
DRAG_BUTTONS = (1, 2, 3)
