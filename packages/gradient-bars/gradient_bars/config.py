"""Canvas configuration and color theme dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gradient_bars.color import Color, ColorLike, to_color

POWER_FLOOR = 0.1
SENSITIVITY = 0.01


@dataclass(frozen=True)
class CanvasConfig:
    """Immutable layout and interaction settings, resolved once at startup.

    Attributes:
        margin: Pixel gap between bars and between bars and canvas edges.
        bar_count: Number of bars laid out left to right.
        min_height: Smallest height a bar may take (defaults to ``margin``).
        sensitivity: Exponent units gained per pixel of pointer movement.
        power_floor: Lowest gradient exponent a drag can produce.
        initial_power: ``(lo, hi)`` range the starting exponents are drawn from.
    """

    margin: float = 9.0
    bar_count: int = 8
    min_height: float | None = None
    sensitivity: float = SENSITIVITY
    power_floor: float = POWER_FLOOR
    initial_power: tuple[float, float] = (0.5, 2.0)

    def __post_init__(self) -> None:
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")
        if self.bar_count < 1:
            raise ValueError(f"bar_count must be >= 1, got {self.bar_count}")
        if self.min_height is None:
            object.__setattr__(self, "min_height", float(self.margin))
        if self.min_height <= 0:
            raise ValueError(f"min_height must be > 0, got {self.min_height}")
        if self.sensitivity <= 0:
            raise ValueError(f"sensitivity must be > 0, got {self.sensitivity}")
        if self.power_floor <= 0:
            raise ValueError(f"power_floor must be > 0, got {self.power_floor}")
        lo, hi = self.initial_power
        if lo <= 0 or hi < lo:
            raise ValueError(
                f"initial_power must be a positive (lo, hi) range, got {self.initial_power}"
            )

    def bar_width(self, canvas_width: float) -> float:
        """Uniform bar width for a canvas ``canvas_width`` pixels wide."""
        return (canvas_width - self.margin * (self.bar_count + 1)) / self.bar_count

    def bar_x(self, index: int, bar_width: float) -> float:
        return self.margin * (index + 1) + bar_width * index


def _color_field(default: ColorLike) -> Any:
    return field(default_factory=lambda: to_color(default))


@dataclass(frozen=True)
class Theme:
    """Five named colors: solid background, background gradient, bar gradient.

    Accepts RGB/RGBA literals and stores ``pygame.Color`` values.
    """

    background: Color = _color_field((17, 17, 30))
    bg_start: Color = _color_field((35, 230, 35, 0))
    bg_end: Color = _color_field((0, 0, 255, 120))
    bar_start: Color = _color_field((35, 230, 35, 0))
    bar_end: Color = _color_field((255, 255, 255, 255))

    def __post_init__(self) -> None:
        for name in ("background", "bg_start", "bg_end", "bar_start", "bar_end"):
            object.__setattr__(self, name, to_color(getattr(self, name)))
