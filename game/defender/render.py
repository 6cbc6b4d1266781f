"""
Render step: draws a GameSession onto a drawing surface

Only reads the session. The surface uses top-left origin with y pointing down.
"""

from __future__ import annotations
import math
import random
from typing import Optional, Protocol, Sequence, Tuple

from .config import Color
from .entities import Craft, Obstacle
from .session import GameSession

Point = Tuple[float, float]

BACKGROUND = (0, 4, 40)
BACKGROUND_ALPHA = 0.3  # partial clear leaves short motion trails
STAR_COLOR = (255, 255, 255)
COCKPIT_COLOR = (144, 205, 244)
ENGINE_COLOR = (255, 216, 155)


class Surface(Protocol):
    width: int
    height: int

    def clear(self, color: Color, alpha: float = 1.0) -> None: ...
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color, alpha: float = 1.0) -> None: ...
    def fill_polygon(self, points: Sequence[Point], color: Color, alpha: float = 1.0) -> None: ...
    def fill_circle(self, x: float, y: float, radius: float, color: Color, alpha: float = 1.0) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def rotate(self, angle: float) -> None: ...


def render(session: GameSession, surface: Optional[Surface]) -> bool:
    """Draw one frame. Returns False when there is nothing to draw on."""
    if surface is None or not session.has_viewport:
        return False

    surface.clear(BACKGROUND, BACKGROUND_ALPHA)

    for s in session.stars:
        surface.fill_rect(s.x, s.y, s.size, s.size, STAR_COLOR, alpha=0.8)

    draw_craft(surface, session.craft)

    for p in session.projectiles:
        surface.fill_rect(p.x, p.y, p.width, p.height, p.color)

    for o in session.obstacles:
        draw_obstacle(surface, o)

    life = session.config.particle_life
    for p in session.particles:
        surface.fill_rect(p.x, p.y, p.size, p.size, p.color, alpha=p.life / life)

    return True


def draw_craft(surface: Surface, craft: Craft):
    w, h = craft.width, craft.height
    surface.save()
    surface.translate(craft.x + w / 2, craft.y + h / 2)

    # Arrow-shaped hull
    surface.fill_polygon(
        [(0.0, -h / 2), (w / 2, h / 2), (0.0, h / 3), (-w / 2, h / 2)],
        craft.color,
    )
    surface.fill_circle(0.0, -10.0, 8.0, COCKPIT_COLOR)

    glow = 0.7 + random.random() * 0.3
    surface.fill_rect(-10.0, h / 3, 8.0, 10.0, ENGINE_COLOR, alpha=glow)
    surface.fill_rect(2.0, h / 3, 8.0, 10.0, ENGINE_COLOR, alpha=glow)

    surface.restore()


def obstacle_outline(o: Obstacle) -> list:
    """Jagged polygon around the origin, before rotation"""
    n = len(o.shape) or 8
    radius = o.size / 2
    points = []
    for i in range(n):
        angle = (math.pi * 2 / n) * i
        r = radius * (o.shape[i] if o.shape else 1.0)
        points.append((math.cos(angle) * r, math.sin(angle) * r))
    return points


def draw_obstacle(surface: Surface, o: Obstacle):
    cx, cy = o.center
    surface.save()
    surface.translate(cx, cy)
    surface.rotate(o.rotation)
    surface.fill_polygon(obstacle_outline(o), o.color)
    surface.restore()
