"""
Simulation step: advances every entity collection of a GameSession by one tick

The order of the stages below matters and must not change:
craft -> projectiles -> spawn -> obstacles vs craft -> projectiles vs obstacles
-> level -> particles -> background.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import Color
from .controls import InputState
from .entities import Obstacle, Particle, Projectile
from .session import GameSession, GameState
from .utils import clamp, overlaps


@dataclass
class StepResult:
    """Events produced by one tick"""
    kills: int = 0
    lives_lost: int = 0
    levels_gained: int = 0
    spawned: int = 0
    game_over: bool = False

    @property
    def changed_hud(self) -> bool:
        return bool(self.kills or self.lives_lost or self.levels_gained or self.game_over)


def step(session: GameSession, controls: Optional[InputState] = None) -> StepResult:
    """Advance the session one tick. Does nothing unless the session is playing
    with lives left; a tick that takes the last life is the final one even for
    callers that drive `step` without a GameController."""
    result = StepResult()
    if session.state is not GameState.PLAYING or session.lives <= 0 or not session.has_viewport:
        return result

    controls = controls or InputState()

    _move_craft(session, controls)
    _update_projectiles(session)

    session.tick += 1
    obstacle = session.spawner.maybe_spawn(session.tick, session.spawn_interval, session.level, session.width)
    if obstacle is not None:
        session.obstacles.append(obstacle)
        result.spawned = 1

    _update_obstacles(session, result)

    old_score = session.score
    _resolve_projectile_hits(session, result)
    _update_level(session, old_score, result)

    _update_particles(session)
    _update_stars(session)
    return result


def fire(session: GameSession) -> Optional[Projectile]:
    """Launch a projectile from the craft's top-center (playing only)"""
    if session.state is not GameState.PLAYING or session.lives <= 0:
        return None
    cfg = session.config
    craft = session.craft
    projectile = Projectile(
        x=craft.center_x - cfg.projectile_width / 2,
        y=craft.y,
        width=cfg.projectile_width,
        height=cfg.projectile_height,
        speed=cfg.projectile_speed,
        color=cfg.projectile_color,
    )
    session.projectiles.append(projectile)
    return projectile


def make_burst(session: GameSession, x: float, y: float, color: Color) -> List[Particle]:
    """Explosion particles at (x, y)"""
    cfg = session.config
    rng = session.rng
    v = cfg.particle_max_speed
    return [
        Particle(
            x=x,
            y=y,
            vx=rng.uniform(-v, v),
            vy=rng.uniform(-v, v),
            size=rng.uniform(cfg.particle_min_size, cfg.particle_max_size),
            color=color,
            life=cfg.particle_life,
        )
        for _ in range(cfg.burst_size)
    ]


# ----------------------------
# Stages
# ----------------------------

def _move_craft(session: GameSession, controls: InputState):
    craft = session.craft
    if controls.pointer_x is not None:
        craft.x = controls.pointer_x - craft.width / 2
    else:
        if controls.left:
            craft.x -= craft.speed
        if controls.right:
            craft.x += craft.speed
    craft.x = clamp(craft.x, 0.0, max(0.0, session.width - craft.width))


def _update_projectiles(session: GameSession):
    survivors = []
    for p in session.projectiles:
        p.y -= p.speed
        if p.y > -p.height:
            survivors.append(p)
    session.projectiles = survivors


def _update_obstacles(session: GameSession, result: StepResult):
    craft = session.craft
    survivors = []
    for o in session.obstacles:
        o.y += o.speed
        o.rotation += o.rotation_speed

        if session.lives > 0 and overlaps(craft, o):
            session.lives -= 1
            result.lives_lost += 1
            cx, cy = o.center
            session.particles.extend(make_burst(session, cx, cy, session.config.hit_color))
            if session.lives <= 0:
                result.game_over = True
            continue

        if o.y < session.height + o.height:
            survivors.append(o)
    session.obstacles = survivors


def _resolve_projectile_hits(session: GameSession, result: StepResult):
    # Each entity is consumed at most once per tick
    spent_projectiles = set()
    destroyed = set()
    hits: List[Tuple[Projectile, Obstacle]] = []

    for pi, p in enumerate(session.projectiles):
        for oi, o in enumerate(session.obstacles):
            if oi in destroyed:
                continue
            if overlaps(p, o):
                spent_projectiles.add(pi)
                destroyed.add(oi)
                hits.append((p, o))
                break

    for _, o in hits:
        session.score += session.config.points_per_kill
        cx, cy = o.center
        session.particles.extend(make_burst(session, cx, cy, o.color))
    result.kills += len(hits)

    if hits:
        session.projectiles = [p for i, p in enumerate(session.projectiles) if i not in spent_projectiles]
        session.obstacles = [o for i, o in enumerate(session.obstacles) if i not in destroyed]


def _update_level(session: GameSession, old_score: int, result: StepResult):
    per_level = session.config.points_per_level
    gained = session.score // per_level - old_score // per_level
    if gained <= 0:
        return
    session.level += gained
    session.spawn_interval = session.spawner.next_interval(session.spawn_interval, gained)
    result.levels_gained += gained


def _update_particles(session: GameSession):
    survivors = []
    for p in session.particles:
        p.x += p.vx
        p.y += p.vy
        p.life -= 1
        if p.life > 0:
            survivors.append(p)
    session.particles = survivors


def _update_stars(session: GameSession):
    for s in session.stars:
        s.y += s.speed
        if s.y > session.height:
            s.y = 0.0
            s.x = session.rng.uniform(0.0, session.width)
