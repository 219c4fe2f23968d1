"""Color literals and conversion to pygame colors."""
from __future__ import annotations

from typing import Sequence, Union

import pygame

Color = pygame.Color

# Theme literals: (r, g, b) or (r, g, b, a), alpha defaults to opaque.
ColorLike = Union[Sequence[int], pygame.Color]


def to_color(value: ColorLike) -> Color:
    """Convert an RGB/RGBA literal into a ``pygame.Color``.

    Raises ``ValueError`` for anything that is not 3 or 4 integer channels
    in ``0..255``.
    """
    if isinstance(value, pygame.Color):
        return pygame.Color(value)
    try:
        channels = tuple(value)
    except TypeError:
        raise ValueError(f"color must be a sequence of channels, got {value!r}") from None
    if len(channels) not in (3, 4):
        raise ValueError(f"color must have 3 or 4 channels, got {len(channels)}")
    for ch in channels:
        if isinstance(ch, bool) or not isinstance(ch, int):
            raise ValueError(f"color channels must be integers, got {ch!r}")
        if not 0 <= ch <= 255:
            raise ValueError(f"color channel out of range 0..255: {ch}")
    if len(channels) == 3:
        channels = (*channels, 255)
    return pygame.Color(*channels)
