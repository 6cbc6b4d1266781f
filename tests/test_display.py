"""Tests for snapshots and the headless display."""

import pytest

from game.defender.display import LogDisplay, lives_display
from game.defender.session import GameState


def test_snapshot_is_read_only(session):
    snap = session.snapshot()
    with pytest.raises(AttributeError):
        snap.score = 100


def test_snapshot_values(session):
    session.score, session.lives, session.level, session.high_score = 40, 2, 1, 90
    snap = session.snapshot()
    assert (snap.score, snap.lives, snap.level, snap.high_score) == (40, 2, 1, 90)
    assert snap.state is GameState.MENU
    assert snap.final_score is None


def test_lives_display(session):
    session.lives = 2
    assert lives_display(session.snapshot()) == "♥♥♡"
    session.lives = 0
    assert lives_display(session.snapshot()) == "♡♡♡"


def test_log_display_rejects_unknown_screens():
    display = LogDisplay()
    display.show_screen("paused")
    assert display.screen == "paused"
    with pytest.raises(ValueError):
        display.show_screen("credits")
