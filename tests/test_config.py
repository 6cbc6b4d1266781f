"""Tests for GameConfig validation."""

import pytest

from game.defender.config import GameConfig


def test_defaults_are_valid():
    cfg = GameConfig()
    assert cfg.spawn_interval == 60
    assert cfg.spawn_interval_floor == 30
    assert cfg.starting_lives == 3


@pytest.mark.parametrize("kwargs", [
    {"craft_width": 0},
    {"projectile_height": -1},
    {"obstacle_min_size": 60, "obstacle_max_size": 50},
    {"spawn_interval": 20, "spawn_interval_floor": 30},
    {"spawn_interval_floor": 0},
    {"points_per_kill": 0},
    {"starting_lives": 0},
    {"particle_life": 0},
    {"fps": 0},
])
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)
