"""
Gameplay configuration for Space Defender
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class GameConfig:
    """All tunable gameplay constants (per-tick units, pixels)"""

    # Viewport
    width: int = 800
    height: int = 600
    fps: int = 60

    # Craft
    craft_width: float = 50.0
    craft_height: float = 50.0
    craft_speed: float = 7.0
    craft_bottom_margin: float = 20.0
    craft_color: Color = (66, 153, 225)

    # Projectiles
    projectile_width: float = 4.0
    projectile_height: float = 15.0
    projectile_speed: float = 8.0
    projectile_color: Color = (72, 187, 120)

    # Obstacles
    obstacle_min_size: float = 20.0
    obstacle_max_size: float = 50.0
    obstacle_base_speed: float = 2.0
    obstacle_speed_per_level: float = 0.3
    obstacle_max_rotation_speed: float = 0.05
    obstacle_hue_range: Tuple[float, float] = (15.0, 75.0)

    # Spawning / difficulty
    spawn_interval: int = 60  # ticks between spawns at level 1
    spawn_interval_step: int = 5
    spawn_interval_floor: int = 30
    points_per_kill: int = 10
    points_per_level: int = 100
    starting_lives: int = 3

    # Effects
    burst_size: int = 15
    particle_life: int = 30
    particle_max_speed: float = 4.0
    particle_min_size: float = 2.0
    particle_max_size: float = 6.0
    hit_color: Color = (245, 101, 101)

    # Background field
    star_count: int = 100
    star_max_size: float = 2.0
    star_min_speed: float = 0.2
    star_max_speed: float = 0.7

    def __post_init__(self):
        for name in ("craft_width", "craft_height", "projectile_width", "projectile_height",
                     "obstacle_min_size", "fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.obstacle_max_size < self.obstacle_min_size:
            raise ValueError("obstacle_max_size must be >= obstacle_min_size")
        if self.spawn_interval_floor <= 0:
            raise ValueError("spawn_interval_floor must be positive")
        if self.spawn_interval < self.spawn_interval_floor:
            raise ValueError("spawn_interval must be >= spawn_interval_floor")
        if self.points_per_kill <= 0 or self.points_per_level <= 0:
            raise ValueError("points_per_kill and points_per_level must be positive")
        if self.starting_lives <= 0:
            raise ValueError("starting_lives must be positive")
        if self.burst_size < 0 or self.star_count < 0:
            raise ValueError("burst_size and star_count must be non-negative")
        if self.particle_life <= 0:
            raise ValueError("particle_life must be positive")
