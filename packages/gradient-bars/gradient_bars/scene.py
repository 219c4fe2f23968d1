"""Bars, background and the scene that owns them."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Literal

from gradient_bars.config import CanvasConfig, Theme
from gradient_bars.gradient import GradientSpec

logger = logging.getLogger(__name__)

ResizeMode = Literal["vertical", "none"]


@dataclass
class Bar:
    """A gradient-filled rectangle; ``x, y`` is its top-left corner."""

    x: float
    y: float
    w: float
    h: float
    gradient: GradientSpec
    resize_mode: ResizeMode = "vertical"

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, px: float, py: float) -> bool:
        """Strict hit test: points on the border are outside."""
        return self.x < px < self.x + self.w and self.y < py < self.y + self.h


@dataclass
class Background:
    """Full-canvas vertical gradient."""

    gradient: GradientSpec


def _check_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size must be > 0, got {width}x{height}")


def _clamp(value: float, lo: float, hi: float) -> float:
    # The lower bound wins when the range is inverted.
    return max(min(value, hi), lo)


class Scene:
    """Canvas size, configuration, the fixed bar row and the background.

    Bars are created once by :meth:`create` and never added or removed.
    """

    def __init__(
        self,
        config: CanvasConfig,
        width: float,
        height: float,
        bars: list[Bar],
        background: Background,
    ) -> None:
        _check_size(width, height)
        if len(bars) != config.bar_count:
            raise ValueError(
                f"expected {config.bar_count} bars, got {len(bars)}"
            )
        self._config = config
        self._width = width
        self._height = height
        self._bars = bars
        self.background = background

    @classmethod
    def create(
        cls,
        config: CanvasConfig,
        width: float,
        height: float,
        theme: Theme | None = None,
        rng: random.Random | None = None,
    ) -> Scene:
        """Lay out ``config.bar_count`` bars with random heights and exponents."""
        _check_size(width, height)
        theme = theme or Theme()
        rng = rng or random.Random()
        margin = config.margin
        lo, hi = config.initial_power

        background = Background(
            GradientSpec(theme.bg_start, theme.bg_end, rng.uniform(lo, hi))
        )
        bar_w = config.bar_width(width)
        bars: list[Bar] = []
        for i in range(config.bar_count):
            h = _clamp(
                rng.uniform(config.min_height, height - 2 * margin),
                config.min_height, height - 2 * margin,
            )
            y = _clamp(rng.uniform(margin, height - margin - h), margin, height - margin - h)
            power = rng.uniform(lo, hi)
            bars.append(Bar(
                x=config.bar_x(i, bar_w),
                y=y,
                w=bar_w,
                h=h,
                gradient=GradientSpec(theme.bar_start, theme.bar_end, power),
            ))
        logger.debug(
            "scene created: %dx%d, %d bars of width %.3f",
            width, height, len(bars), bar_w,
        )
        return cls(config, width, height, bars, background)

    @property
    def config(self) -> CanvasConfig:
        return self._config

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def bars(self) -> tuple[Bar, ...]:
        return tuple(self._bars)

    def resize(self, width: float, height: float) -> None:
        """Reflow bar geometry for a new canvas size.

        Gradient exponents are kept; only ``x, w`` are recomputed and
        ``h, y`` clamped back inside the margins.
        """
        _check_size(width, height)
        self._width = width
        self._height = height
        margin = self._config.margin
        bar_w = self._config.bar_width(width)
        for i, bar in enumerate(self._bars):
            bar.x = self._config.bar_x(i, bar_w)
            bar.w = bar_w
            bar.h = _clamp(bar.h, self._config.min_height, height - 2 * margin)
            bar.y = _clamp(bar.y, margin, height - margin - bar.h)
        logger.debug("scene resized to %dx%d", width, height)
