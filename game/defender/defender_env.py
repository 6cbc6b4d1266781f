"""
DefenderEnv - Space Defender as a Gymnasium environment
-------------------------------------------------------
- Same GameSession / simulation step as the playable game
- 1 RL agent that slides left/right and fires (with cooldown)
- Obstacles fall faster and spawn more often as the level rises
- Vector observation: craft state + top-K nearest obstacles
- Discrete MultiDiscrete action space: [move(3), fire(2)]

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.defender.defender_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GameConfig
from .controller import GameController
from .controls import InputState
from .session import GameSession, GameState
from .storage import MemoryHighScoreStore
from .utils import clamp, seed_everything

DEFAULT_REWARDS = {
    "R_KILL": 1.0,       # obstacle destroyed
    "R_LIFE_LOST": 2.0,  # obstacle hit the craft
    "R_DEATH": 5.0,      # last life lost
    "R_SHOT": 0.01,      # per projectile fired
    "R_TIME": -0.001,    # per step survived (negative = time penalty)
}


class DefenderEnv(gym.Env):
    """Space Defender environment driven through the GameController"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_obstacles: int = 5,
        fire_cooldown_steps: int = 8,
        reward_config: Optional[Dict[str, float]] = None,
        **game_kwargs,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.config = GameConfig(**game_kwargs)
        self.width = self.config.width
        self.height = self.config.height
        self.max_steps = max_steps
        self.k_obstacles = k_obstacles
        self.fire_cooldown_steps = fire_cooldown_steps

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        # Action space:
        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Craft: x(1) lives(1) level(1) spawn interval(1) cooldown(1)
        # Each obstacle: rel pos(2) size(1) speed(1)
        obs_dim = 5 + self.k_obstacles * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self.session: GameSession = None  # type: ignore
        self.controller: GameController = None  # type: ignore
        self._store = MemoryHighScoreStore()

        self._step_count = 0
        self._cooldown = 0
        self._kills = 0
        self._lives_lost = 0
        self._shots = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        session_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.session = GameSession(self.config, high_score=self._store.read_high_score(), seed=session_seed)
        self.controller = GameController(self.session, store=self._store)
        self.controller.start()

        self._step_count = 0
        self._cooldown = 0
        self._kills = 0
        self._lives_lost = 0
        self._shots = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])

        shot = 0
        if fire == 1 and self._cooldown == 0:
            if self.controller.fire():
                shot = 1
                self._cooldown = self.fire_cooldown_steps

        controls = InputState(left=(move == 1), right=(move == 2))
        result = self.controller.tick(controls)

        if self._cooldown > 0:
            self._cooldown -= 1

        self._kills += result.kills
        self._lives_lost += result.lives_lost
        self._shots += shot

        r = self.rewards
        reward = (r["R_KILL"] * result.kills
                  - r["R_LIFE_LOST"] * result.lives_lost
                  - r["R_SHOT"] * shot
                  + r["R_TIME"])
        if result.game_over:
            reward -= r["R_DEATH"]

        terminated = self.session.state is GameState.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        s = self.session
        cfg = self.config
        craft = s.craft

        span = max(1.0, self.width - craft.width)
        obs_parts = [
            (craft.x / span) * 2 - 1,
            (s.lives / cfg.starting_lives) * 2 - 1,
            clamp((s.level - 1) / 10.0, 0, 1) * 2 - 1,
            (s.spawn_interval / cfg.spawn_interval) * 2 - 1,
            (self._cooldown / max(1, self.fire_cooldown_steps)) * 2 - 1,
        ]

        cx = craft.center_x
        cy = craft.y + craft.height / 2

        def dist2(o):
            ox, oy = o.center
            return (ox - cx) ** 2 + (oy - cy) ** 2

        nearest = sorted(s.obstacles, key=dist2)
        max_speed = cfg.obstacle_base_speed + 10 * cfg.obstacle_speed_per_level
        for i in range(self.k_obstacles):
            if i < len(nearest):
                o = nearest[i]
                ox, oy = o.center
                obs_parts += [
                    clamp((ox - cx) / self.width, -1, 1),
                    clamp((oy - cy) / self.height, -1, 1),
                    clamp(o.size / cfg.obstacle_max_size, 0, 1),
                    clamp(o.speed / max_speed, 0, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        s = self.session
        return {
            "score": s.score,
            "lives": s.lives,
            "level": s.level,
            "high_score": s.high_score,
            "kills": self._kills,
            "lives_lost": self._lives_lost,
            "shots": self._shots,
            "num_obstacles": len(s.obstacles),
            "num_projectiles": len(s.projectiles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        from .app import DefenderWindow
        from .arcade_surface import ArcadeSurface
        from .render import render

        if self._window is None:
            self._window = DefenderWindow(self.width, self.height, "DefenderEnv - Arcade")
            self._surface = ArcadeSurface(self.width, self.height)

        self._window.dispatch_events()
        self._window.hud.show_screen("playing")
        self._window.hud.update(self.session.snapshot())
        render(self.session, self._surface)
        self._window.hud.draw(self.width, self.height)
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            if not self._window.closed:
                self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True):
    """Run a random episode for testing"""
    env = DefenderEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=42)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            if env._window is None or env._window.closed:
                break
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f}  score: {info['score']}  level: {info['level']}")
    env.close()


if __name__ == "__main__":
    run_random_episode(render=True)
