"""Tests for the render step against a recording surface."""

import copy

import pytest

from game.defender import simulation
from game.defender.config import GameConfig
from game.defender.render import BACKGROUND, obstacle_outline, render
from game.defender.session import GameSession
from conftest import RecordingSurface, make_obstacle


def test_no_surface_is_a_noop(playing):
    assert render(playing, None) is False


def test_missing_viewport_is_a_noop():
    session = GameSession(GameConfig(), width=0, height=0)
    surface = RecordingSurface()
    assert render(session, surface) is False
    assert surface.calls == []


def test_frame_starts_with_partial_clear(playing, surface):
    assert render(playing, surface)
    name, args, kwargs = surface.calls[0]
    assert name == "clear"
    assert args[0] == BACKGROUND
    assert kwargs["alpha"] == pytest.approx(0.3)


def test_draws_every_entity(playing, surface):
    simulation.fire(playing)
    playing.obstacles = [make_obstacle(10, 10), make_obstacle(100, 50)]
    playing.particles = simulation.make_burst(playing, 50, 50, (1, 2, 3))

    render(playing, surface)
    names = surface.names()

    # stars + projectile + particles + two engine glows
    assert names.count("fill_rect") == 100 + 1 + 15 + 2
    # craft hull + one per obstacle
    assert names.count("fill_polygon") == 1 + 2
    assert names.count("fill_circle") == 1
    assert names.count("save") == names.count("restore") == 1 + 2


def test_obstacle_is_rotated_about_its_center(playing, surface):
    o = make_obstacle(100, 40, size=30)
    o.rotation = 1.25
    playing.obstacles = [o]
    render(playing, surface)

    translates = [c for c in surface.calls if c[0] == "translate"]
    rotates = [c for c in surface.calls if c[0] == "rotate"]
    assert translates[-1][1] == (115, 55)
    assert rotates == [("rotate", (1.25,), {})]


def test_particle_fades_with_life(playing, surface):
    burst = simulation.make_burst(playing, 50, 50, (9, 9, 9))
    burst[0].life = 15
    playing.particles = burst[:1]
    render(playing, surface)
    rects = [c for c in surface.calls if c[0] == "fill_rect" and c[1][4] == (9, 9, 9)]
    assert rects[0][2]["alpha"] == pytest.approx(0.5)


def test_render_only_reads_the_session(playing, surface):
    simulation.fire(playing)
    playing.obstacles = [make_obstacle(10, 10)]
    before = copy.deepcopy((playing.craft, playing.projectiles, playing.obstacles,
                            playing.particles, playing.stars, playing.rng.getstate()))
    render(playing, surface)
    after = (playing.craft, playing.projectiles, playing.obstacles,
             playing.particles, playing.stars, playing.rng.getstate())
    assert after == before


def test_outline_uses_shape_jitter():
    o = make_obstacle(0, 0, size=40)
    o.shape = (1.0, 1.2, 0.8, 1.0, 1.0, 1.0, 1.0, 1.0)
    points = obstacle_outline(o)
    assert len(points) == 8
    assert points[0] == pytest.approx((20.0, 0.0))
    assert points[2] == pytest.approx((0.0, 16.0))


def test_outline_without_shape_is_regular():
    points = obstacle_outline(make_obstacle(0, 0, size=40))
    assert len(points) == 8
    assert all((x * x + y * y) ** 0.5 == pytest.approx(20.0) for x, y in points)
