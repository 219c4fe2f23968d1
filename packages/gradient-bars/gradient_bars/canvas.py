"""Scanline drawing of the scene onto a pygame surface."""
from __future__ import annotations

import pygame

from gradient_bars.config import Theme
from gradient_bars.gradient import render_span
from gradient_bars.scene import Background, Bar, Scene


def _layer(surface: pygame.Surface) -> pygame.Surface:
    return pygame.Surface(surface.get_size(), pygame.SRCALPHA)


def draw_background(surface: pygame.Surface, background: Background) -> None:
    """One horizontal scanline per row, blended over ``surface``."""
    width, height = surface.get_size()
    layer = _layer(surface)
    for row, color in enumerate(render_span(background.gradient, height)):
        pygame.draw.line(layer, color, (0, row), (width, row))
    surface.blit(layer, (0, 0))


def draw_bar(surface: pygame.Surface, bar: Bar) -> None:
    """One vertical scanline per column spanning the bar's height."""
    layer = _layer(surface)
    _draw_bar_columns(layer, bar)
    surface.blit(layer, (0, 0))


def _draw_bar_columns(layer: pygame.Surface, bar: Bar) -> None:
    top = round(bar.y)
    bottom = round(bar.y + bar.h)
    for i, color in enumerate(render_span(bar.gradient, bar.w)):
        x = round(bar.x + i)
        pygame.draw.line(layer, color, (x, top), (x, bottom))


def draw_scene(surface: pygame.Surface, scene: Scene, theme: Theme) -> None:
    """Repaint the whole frame from current scene state."""
    surface.fill(theme.background)
    draw_background(surface, scene.background)
    layer = _layer(surface)
    for bar in scene.bars:
        _draw_bar_columns(layer, bar)
    surface.blit(layer, (0, 0))
