"""Tests for the coordinate handling of the Arcade surface (no window needed)."""

import math

import pytest

try:
    from game.defender.arcade_surface import ArcadeSurface
except Exception as exc:  # arcade/pyglet can fail to load without GL libraries
    pytest.skip(f"arcade unavailable: {exc}", allow_module_level=True)


@pytest.fixture
def surface():
    return ArcadeSurface(400, 600)


def test_y_axis_is_flipped(surface):
    assert surface.to_screen([(0, 0), (10, 600)]) == [(0.0, 600.0), (10.0, 0.0)]


def test_translate(surface):
    surface.translate(100, 50)
    assert surface.to_screen([(5, 5)]) == [(105.0, 545.0)]


def test_rotate_after_translate(surface):
    surface.translate(100, 100)
    surface.rotate(math.pi / 2)
    (x, y), = surface.to_screen([(10, 0)])
    assert x == pytest.approx(100.0)
    assert y == pytest.approx(600 - 110.0)


def test_save_restore(surface):
    surface.save()
    surface.translate(30, 30)
    surface.restore()
    assert surface.to_screen([(0, 0)]) == [(0.0, 600.0)]


def test_restore_without_save_is_harmless(surface):
    surface.restore()
    assert surface.to_screen([(1, 1)]) == [(1.0, 599.0)]
