"""Tests for scanline drawing onto off-screen pygame surfaces."""

import pygame
import pytest

from gradient_bars.canvas import draw_background, draw_bar, draw_scene
from gradient_bars.config import CanvasConfig, Theme
from gradient_bars.gradient import GradientSpec
from gradient_bars.scene import Background, Bar, Scene

W, H = 40, 30
RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def make_bar(**overrides) -> Bar:
    fields = dict(
        x=5.0, y=5.0, w=30.0, h=20.0,
        gradient=GradientSpec(pygame.Color(RED), pygame.Color(BLUE), 1.0),
    )
    fields.update(overrides)
    return Bar(**fields)


def make_background(start=(0, 0, 0, 255), end=(255, 255, 255, 255)) -> Background:
    return Background(GradientSpec(pygame.Color(start), pygame.Color(end), 1.0))


def assert_rgb(color, expected, tol: int = 1) -> None:
    """Blending may round by one step per channel."""
    for got, want in zip(tuple(color)[:3], expected[:3]):
        assert abs(got - want) <= tol, (tuple(color), expected)


def pixels(surface: pygame.Surface) -> list[tuple[int, int, int, int]]:
    return [tuple(surface.get_at((x, y))) for y in range(H) for x in range(W)]


@pytest.fixture
def surface() -> pygame.Surface:
    return pygame.Surface((W, H))


class TestDrawBackground:
    """Test the vertical background gradient."""

    def test_rows_follow_gradient(self, surface):
        draw_background(surface, make_background())
        assert_rgb(surface.get_at((0, 0)), (0, 0, 0))
        mid = surface.get_at((W // 2, H // 2))
        assert 126 <= mid.r <= 129
        assert mid.r == mid.g == mid.b

    def test_rows_are_uniform(self, surface):
        """Every pixel in a row shares the row's color."""
        draw_background(surface, make_background())
        row = [surface.get_at((x, 10)) for x in range(W)]
        assert all(c == row[0] for c in row)

    def test_brightens_downward(self, surface):
        draw_background(surface, make_background())
        reds = [surface.get_at((0, y)).r for y in range(H)]
        assert reds == sorted(reds)
        assert reds[-1] > 240

    def test_transparent_gradient_keeps_fill(self, surface):
        surface.fill((10, 20, 30))
        draw_background(surface, make_background((0, 0, 0, 0), (255, 255, 255, 0)))
        assert surface.get_at((3, 3))[:3] == (10, 20, 30)
        assert surface.get_at((3, H - 1))[:3] == (10, 20, 30)


class TestDrawBar:
    """Test the horizontal bar gradient drawn as vertical scanlines."""

    def test_first_column_is_start_color(self, surface):
        draw_bar(surface, make_bar())
        assert_rgb(surface.get_at((5, 10)), RED)

    def test_middle_column_is_blend(self, surface):
        draw_bar(surface, make_bar())
        mid = surface.get_at((20, 10))
        assert mid.g == 0
        assert 126 <= mid.r <= 129
        assert 126 <= mid.b <= 129

    def test_columns_are_uniform(self, surface):
        draw_bar(surface, make_bar())
        column = [surface.get_at((12, y)) for y in range(5, 26)]
        assert all(c == column[0] for c in column)

    def test_outside_bar_untouched(self, surface):
        surface.fill((1, 2, 3))
        draw_bar(surface, make_bar())
        assert surface.get_at((2, 10))[:3] == (1, 2, 3)
        assert surface.get_at((10, 2))[:3] == (1, 2, 3)
        assert surface.get_at((10, 28))[:3] == (1, 2, 3)
        assert surface.get_at((37, 10))[:3] == (1, 2, 3)

    def test_zero_width_bar_draws_nothing(self, surface):
        surface.fill((1, 2, 3))
        before = pixels(surface)
        draw_bar(surface, make_bar(w=0.0))
        assert pixels(surface) == before

    def test_negative_width_bar_draws_nothing(self, surface):
        surface.fill((1, 2, 3))
        before = pixels(surface)
        draw_bar(surface, make_bar(w=-3.0))
        assert pixels(surface) == before


class TestDrawScene:
    """Test full-frame repaint order: fill, background, bars."""

    def make_scene(self, bar: Bar, background: Background) -> Scene:
        return Scene(CanvasConfig(margin=5, bar_count=1), W, H, [bar], background)

    def test_fill_then_background_then_bar(self, surface):
        theme = Theme(background=(10, 10, 10))
        scene = self.make_scene(
            make_bar(), make_background((0, 0, 0, 0), (0, 0, 0, 0))
        )
        draw_scene(surface, scene, theme)
        assert surface.get_at((1, 1))[:3] == (10, 10, 10)
        assert_rgb(surface.get_at((5, 10)), RED)

    def test_bar_drawn_over_background(self, surface):
        scene = self.make_scene(make_bar(), make_background())
        draw_scene(surface, scene, Theme())
        assert_rgb(surface.get_at((5, 10)), RED)
        assert_rgb(surface.get_at((1, 0)), (0, 0, 0))

    def test_repaint_is_idempotent(self, surface):
        scene = self.make_scene(make_bar(), make_background())
        draw_scene(surface, scene, Theme())
        first = pixels(surface)
        draw_scene(surface, scene, Theme())
        assert pixels(surface) == first

    def test_repaint_reflects_power_change(self, surface):
        bar = make_bar()
        scene = self.make_scene(bar, make_background())
        draw_scene(surface, scene, Theme())
        linear = surface.get_at((20, 10))
        bar.gradient.power = 3.0
        draw_scene(surface, scene, Theme())
        assert surface.get_at((20, 10)).r > linear.r
