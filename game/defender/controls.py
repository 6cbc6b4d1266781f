"""
Input model: held controls sampled per tick plus discrete actions
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class InputState:
    """Controls held during one tick"""
    left: bool = False
    right: bool = False
    pointer_x: Optional[float] = None  # overrides left/right for this tick when set


class Action(Enum):
    FIRE = "fire"
    START = "start"
    RESTART = "restart"
    PAUSE = "pause"
    RESUME = "resume"
    TOGGLE_PAUSE = "toggle_pause"
    BACK = "back"
    QUIT = "quit"
    TOGGLE_SOUND = "toggle_sound"
