"""
Obstacle spawner with level-scaled difficulty
"""

from __future__ import annotations
import math
import random
from typing import Optional

from .config import GameConfig
from .entities import Obstacle
from .utils import hsl_color

OUTLINE_VERTICES = 8


class Spawner:
    """Decides when a new obstacle appears and builds it"""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()

    def maybe_spawn(self, tick: int, interval: int, level: int, viewport_width: float) -> Optional[Obstacle]:
        """Return a new obstacle when tick is a multiple of interval, else None"""
        if viewport_width <= 0 or interval <= 0:
            return None
        if tick % interval != 0:
            return None
        return self.spawn(level, viewport_width)

    def spawn(self, level: int, viewport_width: float) -> Obstacle:
        cfg = self.config
        rng = self.rng

        size = rng.uniform(cfg.obstacle_min_size, cfg.obstacle_max_size)
        x = rng.uniform(0.0, max(0.0, viewport_width - size))
        speed = cfg.obstacle_base_speed + (level - 1) * cfg.obstacle_speed_per_level
        hue = rng.uniform(*cfg.obstacle_hue_range)

        return Obstacle(
            x=x,
            y=-size,
            size=size,
            speed=speed,
            rotation=rng.uniform(0.0, math.pi * 2),
            rotation_speed=rng.uniform(-cfg.obstacle_max_rotation_speed, cfg.obstacle_max_rotation_speed),
            color=hsl_color(hue, 0.7, 0.5),
            shape=tuple(rng.uniform(0.8, 1.2) for _ in range(OUTLINE_VERTICES)),
        )

    def next_interval(self, interval: int, levels_gained: int = 1) -> int:
        """Shrink the spawn interval for each level gained, never below the floor"""
        cfg = self.config
        for _ in range(max(0, levels_gained)):
            interval = max(cfg.spawn_interval_floor, interval - cfg.spawn_interval_step)
        return interval
