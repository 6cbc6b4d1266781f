"""Tests for GameSession lifecycle helpers."""

from game.defender.config import GameConfig
from game.defender.session import GameSession, GameState


def test_resize_refused_while_playing(playing):
    assert not playing.resize(1000, 800)
    assert (playing.width, playing.height) == (400, 600)


def test_resize_in_menu_repositions_craft(session):
    assert session.resize(1000, 800)
    assert session.craft.x == 500 - 25
    assert session.craft.y == 800 - 50 - 20


def test_late_viewport_builds_background():
    session = GameSession(GameConfig(), width=0, height=0, seed=2)
    assert not session.has_viewport and session.stars == []
    session.resize(640, 480)
    assert session.has_viewport
    assert len(session.stars) == 100
    assert all(0 <= s.x <= 640 and 0 <= s.y <= 480 for s in session.stars)


def test_reset_keeps_background_and_high_score(session):
    stars = list(session.stars)
    session.high_score = 500
    session.score = 120
    session.reset()
    assert session.stars == stars
    assert session.high_score == 500
    assert session.score == 0
    assert session.state is GameState.MENU
