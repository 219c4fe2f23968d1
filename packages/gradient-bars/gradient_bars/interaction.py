"""Single-pointer press/drag/release controller.

A press snapshots the grabbed targets; every later drag event is computed
from that snapshot and the current pointer position alone, so repeated
small moves never accumulate drift.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from gradient_bars.scene import Bar, Scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarDrag:
    """Press-time snapshot for one grabbed bar."""

    start_x: float
    start_y: float
    start_height: float
    start_top: float
    start_power: float
    from_top: bool


@dataclass(frozen=True)
class BackgroundDrag:
    """Press-time snapshot for the background gradient."""

    start_y: float
    start_power: float


class InteractionController:
    """Maps pointer events onto bar geometry and gradient exponents.

    States are ``idle`` and ``dragging``. A press grabs every bar under the
    pointer, or the background when no bar is hit, never both.
    """

    def __init__(self, scene: Scene) -> None:
        self._scene = scene
        self._bar_sessions: dict[int, BarDrag] = {}
        self._background_session: BackgroundDrag | None = None

    @property
    def bar_sessions(self) -> dict[int, BarDrag]:
        return dict(self._bar_sessions)

    @property
    def background_session(self) -> BackgroundDrag | None:
        return self._background_session

    @property
    def active(self) -> bool:
        return bool(self._bar_sessions) or self._background_session is not None

    @property
    def state(self) -> str:
        return "dragging" if self.active else "idle"

    def press(self, x: float, y: float) -> list[int]:
        """Start a session at ``(x, y)``; returns the grabbed bar indices."""
        self._bar_sessions.clear()
        self._background_session = None

        for index, bar in enumerate(self._scene.bars):
            if not bar.contains(x, y):
                continue
            self._bar_sessions[index] = BarDrag(
                start_x=x,
                start_y=y,
                start_height=bar.h,
                start_top=bar.y,
                start_power=bar.gradient.power,
                from_top=y < bar.y + bar.h / 2,
            )

        if self._bar_sessions:
            grabbed = sorted(self._bar_sessions)
            logger.debug("press at (%.1f, %.1f) grabbed bars %s", x, y, grabbed)
            return grabbed

        self._background_session = BackgroundDrag(
            start_y=y, start_power=self._scene.background.gradient.power
        )
        logger.debug("press at (%.1f, %.1f) grabbed background", x, y)
        return []

    def drag(self, x: float, y: float) -> None:
        """Apply pointer position ``(x, y)`` to every grabbed target."""
        config = self._scene.config
        bars = self._scene.bars
        for index, session in self._bar_sessions.items():
            bar = bars[index]
            dx = x - session.start_x
            dy = y - session.start_y
            if bar.resize_mode == "vertical":
                if session.from_top:
                    self._drag_top(index, bar, session, dy)
                else:
                    self._drag_bottom(bar, session, dy)
            bar.gradient.power = max(
                config.power_floor, session.start_power + dx * config.sensitivity
            )

        if self._background_session is not None:
            dy = y - self._background_session.start_y
            self._scene.background.gradient.power = max(
                config.power_floor,
                self._background_session.start_power + dy * config.sensitivity,
            )

    def release(self) -> None:
        """End the session for every target, wherever the pointer is."""
        if self.active:
            logger.debug("release")
        self._bar_sessions.clear()
        self._background_session = None

    def _drag_top(self, index: int, bar: Bar, session: BarDrag, dy: float) -> None:
        # Bottom edge stays put; geometry that would fall below min_height
        # is rejected rather than clamped.
        config = self._scene.config
        bottom = session.start_top + session.start_height
        new_top = max(config.margin, session.start_top + dy)
        new_height = bottom - new_top
        new_height = min(new_height, (self._scene.height - config.margin) - new_top)
        if new_height >= config.min_height:
            bar.y = new_top
            bar.h = new_height
        else:
            logger.debug("top drag on bar %d rejected: height %.1f", index, new_height)

    def _drag_bottom(self, bar: Bar, session: BarDrag, dy: float) -> None:
        # Top edge stays put; height is clamped, never rejected.
        config = self._scene.config
        limit = self._scene.height - config.margin
        new_height = session.start_height + dy
        if session.start_top + new_height > limit:
            new_height = limit - session.start_top
        bar.h = max(new_height, config.min_height)
