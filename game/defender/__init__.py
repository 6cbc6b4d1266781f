"""2D Game module - Space Defender arcade game and its RL environment"""

from .config import GameConfig
from .controls import Action, InputState
from .controller import GameController
from .session import GameSession, GameState, SessionSnapshot
from .simulation import StepResult, step, fire
from .utils import overlaps
from .defender_env import DefenderEnv, run_random_episode

__all__ = [
    'GameConfig',
    'Action',
    'InputState',
    'GameController',
    'GameSession',
    'GameState',
    'SessionSnapshot',
    'StepResult',
    'step',
    'fire',
    'overlaps',
    'DefenderEnv',
    'run_random_episode',
]
