"""Tests for obstacle spawning and spawn-interval scaling."""

import random

import pytest

from game.defender.config import GameConfig
from game.defender.spawner import Spawner


@pytest.fixture
def spawner():
    return Spawner(GameConfig(width=400, height=600), random.Random(7))


class TestMaybeSpawn:

    def test_spawns_exactly_on_interval_multiples(self, spawner):
        spawned = [t for t in range(1, 241) if spawner.maybe_spawn(t, 60, 1, 400) is not None]
        assert spawned == [60, 120, 180, 240]

    def test_no_spawn_without_viewport_width(self, spawner):
        assert spawner.maybe_spawn(60, 60, 1, 0) is None

    def test_obstacle_fields(self, spawner):
        cfg = spawner.config
        for _ in range(200):
            o = spawner.maybe_spawn(60, 60, 1, 400)
            assert cfg.obstacle_min_size <= o.size <= cfg.obstacle_max_size
            assert 0 <= o.x <= 400 - o.size
            assert o.y == -o.size
            assert o.width == o.height == o.size
            assert abs(o.rotation_speed) <= cfg.obstacle_max_rotation_speed
            assert len(o.shape) == 8

    @pytest.mark.parametrize("level,expected", [(1, 2.0), (2, 2.3), (5, 3.2)])
    def test_speed_scales_with_level(self, spawner, level, expected):
        o = spawner.spawn(level, 400)
        assert o.speed == pytest.approx(expected)

    def test_same_seed_same_obstacle(self):
        a = Spawner(GameConfig(), random.Random(3)).spawn(1, 800)
        b = Spawner(GameConfig(), random.Random(3)).spawn(1, 800)
        assert a == b


class TestNextInterval:

    def test_one_level_reduces_by_step(self, spawner):
        assert spawner.next_interval(60) == 55

    def test_floor_is_respected(self, spawner):
        interval = 60
        for _ in range(20):
            interval = spawner.next_interval(interval)
        assert interval == 30

    def test_multiple_levels_at_once(self, spawner):
        assert spawner.next_interval(60, levels_gained=2) == 50
        assert spawner.next_interval(60, levels_gained=100) == 30

    def test_zero_levels_keeps_interval(self, spawner):
        assert spawner.next_interval(45, levels_gained=0) == 45
