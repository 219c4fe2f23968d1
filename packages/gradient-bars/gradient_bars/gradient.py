"""Power-law shaped two-color gradients."""
from __future__ import annotations

import math
from dataclasses import dataclass

from gradient_bars.color import Color


@dataclass
class GradientSpec:
    """Two end colors and the exponent applied to the blend fraction.

    ``power < 1`` pushes the transition toward the far end, ``power > 1``
    toward the near end, ``power == 1`` is linear.
    """

    c1: Color
    c2: Color
    power: float = 1.0

    def __post_init__(self) -> None:
        if not self.power > 0:
            raise ValueError(f"power must be > 0, got {self.power}")


def shape_fraction(offset: float, length: float, power: float) -> float:
    """Blend fraction for ``offset`` along a span of ``length`` pixels.

    Returns 0.0 for an empty span.
    """
    if length <= 0:
        return 0.0
    t = offset / length
    return t ** power


def span_offsets(length: float) -> range:
    """Integer offsets ``i`` with ``0 <= i < length``."""
    if length <= 0:
        return range(0)
    return range(math.ceil(length))


def render_span(spec: GradientSpec, length: float) -> list[Color]:
    """Color for every integer offset along a span of ``length`` pixels."""
    return [
        spec.c1.lerp(spec.c2, shape_fraction(i, length, spec.power))
        for i in span_offsets(length)
    ]
