"""
GameSession - the single owned aggregate of entity collections and session state
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .config import GameConfig
from .entities import BackgroundPoint, Craft, Obstacle, Particle, Projectile
from .spawner import Spawner

logger = logging.getLogger(__name__)


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameover"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session handed to the display layer"""
    state: GameState
    score: int
    lives: int
    level: int
    high_score: int
    max_lives: int
    final_score: Optional[int] = None
    final_level: Optional[int] = None
    new_record: bool = False
    sound_enabled: bool = True


class GameSession:
    """Owns every entity collection plus score/lives/level for one game"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        high_score: int = 0,
        seed: Optional[int] = None,
    ):
        self.config = config or GameConfig()
        self.width = self.config.width if width is None else width
        self.height = self.config.height if height is None else height

        self.rng = random.Random(seed)
        self.spawner = Spawner(self.config, self.rng)

        self.state = GameState.MENU
        self.score = 0
        self.lives = self.config.starting_lives
        self.level = 1
        self.high_score = high_score
        self.tick = 0
        self.spawn_interval = self.config.spawn_interval

        self.final_score: Optional[int] = None
        self.final_level: Optional[int] = None
        self.new_record = False
        self.sound_enabled = True

        self.craft = Craft(
            x=0.0,
            y=0.0,
            width=self.config.craft_width,
            height=self.config.craft_height,
            speed=self.config.craft_speed,
            color=self.config.craft_color,
        )
        self.projectiles: List[Projectile] = []
        self.obstacles: List[Obstacle] = []
        self.particles: List[Particle] = []
        self.stars: List[BackgroundPoint] = []

        if self.has_viewport:
            self.reposition_craft()
            self.stars = self._make_stars()
        else:
            logger.warning("No usable viewport (%sx%s); game will stay idle", self.width, self.height)

    @property
    def has_viewport(self) -> bool:
        return self.width > 0 and self.height > 0

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def reset(self):
        """Fresh game: clears dynamic entities, keeps the background and high score"""
        self.score = 0
        self.lives = self.config.starting_lives
        self.level = 1
        self.tick = 0
        self.spawn_interval = self.config.spawn_interval
        self.final_score = None
        self.final_level = None
        self.new_record = False

        self.projectiles = []
        self.obstacles = []
        self.particles = []

        if self.has_viewport:
            self.reposition_craft()

    def reposition_craft(self):
        self.craft.x = self.width / 2 - self.craft.width / 2
        self.craft.y = self.height - self.craft.height - self.config.craft_bottom_margin

    def resize(self, width: int, height: int) -> bool:
        """Adopt new viewport dimensions; refused while a game is running"""
        if self.state is GameState.PLAYING:
            return False
        self.width = width
        self.height = height
        if self.has_viewport:
            self.reposition_craft()
            if not self.stars:
                self.stars = self._make_stars()
        return True

    def _make_stars(self) -> List[BackgroundPoint]:
        cfg = self.config
        rng = self.rng
        return [
            BackgroundPoint(
                x=rng.uniform(0.0, self.width),
                y=rng.uniform(0.0, self.height),
                size=rng.uniform(0.0, cfg.star_max_size),
                speed=rng.uniform(cfg.star_min_speed, cfg.star_max_speed),
            )
            for _ in range(cfg.star_count)
        ]

    # ----------------------------
    # Snapshot for presentation
    # ----------------------------

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self.state,
            score=self.score,
            lives=self.lives,
            level=self.level,
            high_score=self.high_score,
            max_lives=self.config.starting_lives,
            final_score=self.final_score,
            final_level=self.final_level,
            new_record=self.new_record,
            sound_enabled=self.sound_enabled,
        )
