"""Shared fixtures and fakes for the Space Defender tests."""

import pytest

from game.defender.config import GameConfig
from game.defender.controller import GameController
from game.defender.display import LogDisplay
from game.defender.entities import Obstacle
from game.defender.loop import FrameScheduler
from game.defender.session import GameSession, GameState
from game.defender.storage import MemoryHighScoreStore


class RecordingSurface:
    """Surface that records every call as (name, args, kwargs)."""

    def __init__(self, width=400, height=600):
        self.width = width
        self.height = height
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def clear(self, color, alpha=1.0):
        self._record("clear", color, alpha=alpha)

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        self._record("fill_rect", x, y, w, h, color, alpha=alpha)

    def fill_polygon(self, points, color, alpha=1.0):
        self._record("fill_polygon", list(points), color, alpha=alpha)

    def fill_circle(self, x, y, radius, color, alpha=1.0):
        self._record("fill_circle", x, y, radius, color, alpha=alpha)

    def save(self):
        self._record("save")

    def restore(self):
        self._record("restore")

    def translate(self, dx, dy):
        self._record("translate", dx, dy)

    def rotate(self, angle):
        self._record("rotate", angle)

    def names(self):
        return [c[0] for c in self.calls]


def make_obstacle(x, y, size=30.0, speed=0.0, color=(200, 100, 50)):
    return Obstacle(x=x, y=y, size=size, speed=speed, color=color)


@pytest.fixture
def config():
    return GameConfig(width=400, height=600)


@pytest.fixture
def session(config):
    return GameSession(config, seed=1234)


@pytest.fixture
def playing(session):
    """Session reset and in the playing state, no obstacles yet."""
    session.reset()
    session.state = GameState.PLAYING
    return session


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def display():
    return LogDisplay()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def controller(session, store, display, surface, scheduler):
    return GameController(session, store=store, display=display, surface=surface, scheduler=scheduler)
