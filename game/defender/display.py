"""
Display layer boundary: consumes snapshots and screen switches
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .session import SessionSnapshot

logger = logging.getLogger(__name__)

SCREENS = ("start", "playing", "paused", "gameover")


def lives_display(snapshot: SessionSnapshot) -> str:
    """Hearts row: filled for remaining lives, empty for lost ones"""
    remaining = max(0, snapshot.lives)
    lost = max(0, snapshot.max_lives - remaining)
    return "♥" * remaining + "♡" * lost


class LogDisplay:
    """Headless display that just logs what would be shown"""

    def __init__(self):
        self.screen: Optional[str] = None
        self.snapshot: Optional[SessionSnapshot] = None
        self.screens: List[str] = []

    def show_screen(self, name: str):
        if name not in SCREENS:
            raise ValueError(f"Unknown screen: {name}")
        self.screen = name
        self.screens.append(name)
        logger.debug("Screen -> %s", name)

    def update(self, snapshot: SessionSnapshot):
        self.snapshot = snapshot
        logger.debug("Score %d | Level %d | Lives %s | Best %d",
                     snapshot.score, snapshot.level, lives_display(snapshot), snapshot.high_score)
