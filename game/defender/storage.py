"""
High-score persistence (best effort)
"""

from __future__ import annotations
import json
import logging
import os
from typing import Dict

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "spaceGameHighScore"


class MemoryHighScoreStore:
    """In-process store, used by the RL environment and tests"""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.writes = 0

    def read_high_score(self) -> int:
        return self.value

    def write_high_score(self, score: int):
        self.value = int(score)
        self.writes += 1


class JsonHighScoreStore:
    """Key-value JSON file. Read failures give 0, write failures are ignored."""

    def __init__(self, path: str, key: str = HIGH_SCORE_KEY):
        self.path = path
        self.key = key

    def _load(self) -> Dict:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def read_high_score(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            value = int(self._load().get(self.key, 0))
        except (OSError, ValueError, TypeError, OverflowError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        return max(0, value)

    def write_high_score(self, score: int):
        try:
            data = self._load() if os.path.exists(self.path) else {}
        except (OSError, ValueError):
            data = {}
        data[self.key] = int(score)
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
