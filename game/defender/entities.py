"""
Game entity dataclasses

Every collidable entity exposes x, y, width, height (top-left origin, y down).
"""

from dataclasses import dataclass, field
from typing import Tuple

from .config import Color


@dataclass
class Craft:
    """Player craft, a singleton for the whole session"""
    x: float
    y: float
    width: float = 50.0
    height: float = 50.0
    speed: float = 7.0
    color: Color = (66, 153, 225)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Projectile:
    """Projectile moving straight up"""
    x: float
    y: float
    width: float = 4.0
    height: float = 15.0
    speed: float = 8.0
    color: Color = (72, 187, 120)


@dataclass
class Obstacle:
    """Descending obstacle (square bounding box)"""
    x: float
    y: float
    size: float
    speed: float
    rotation: float = 0.0
    rotation_speed: float = 0.0  # radians per tick, visual only
    color: Color = (217, 119, 38)
    shape: Tuple[float, ...] = field(default_factory=tuple)  # radial jitter per outline vertex

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.size / 2, self.y + self.size / 2


@dataclass
class Particle:
    """Cosmetic explosion particle"""
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Color
    life: int  # ticks left


@dataclass
class BackgroundPoint:
    """Star in the scrolling background, recycled instead of destroyed"""
    x: float
    y: float
    size: float
    speed: float
