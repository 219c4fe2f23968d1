"""gradient-bars - Draggable gradient bars over a gradient background."""
from __future__ import annotations

from gradient_bars.canvas import draw_background, draw_bar, draw_scene
from gradient_bars.color import Color, to_color
from gradient_bars.config import POWER_FLOOR, SENSITIVITY, CanvasConfig, Theme
from gradient_bars.gradient import GradientSpec, render_span, shape_fraction
from gradient_bars.interaction import BackgroundDrag, BarDrag, InteractionController
from gradient_bars.scene import Background, Bar, Scene

__all__ = [
    "Background",
    "BackgroundDrag",
    "Bar",
    "BarDrag",
    "CanvasConfig",
    "Color",
    "GradientSpec",
    "InteractionController",
    "POWER_FLOOR",
    "SENSITIVITY",
    "Scene",
    "Theme",
    "draw_background",
    "draw_bar",
    "draw_scene",
    "render_span",
    "shape_fraction",
    "to_color",
]
