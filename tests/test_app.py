"""Tests for the window's input collection (no window is opened)."""

from types import SimpleNamespace

import pytest

try:
    from game.defender.app import DefenderWindow
except Exception as exc:  # arcade/pyglet can fail to load without GL libraries
    pytest.skip(f"arcade unavailable: {exc}", allow_module_level=True)


def make_window(playing):
    state = SimpleNamespace(playing=playing)
    window = SimpleNamespace(
        _left=False,
        _right=False,
        _pointer_x=None,
        accepts_pointer=lambda: state.playing,
    )
    return window, state


def sample(window):
    return DefenderWindow.sample_input(window)


def test_pointer_applies_once():
    window, _ = make_window(playing=True)
    DefenderWindow.on_mouse_motion(window, 120, 40, 1, 0)
    assert sample(window).pointer_x == 120
    assert sample(window).pointer_x is None


def test_pointer_moves_while_paused_are_ignored():
    window, state = make_window(playing=False)
    DefenderWindow.on_mouse_motion(window, 300, 40, 1, 0)

    state.playing = True
    assert sample(window).pointer_x is None


def test_discard_pointer():
    window, _ = make_window(playing=True)
    DefenderWindow.on_mouse_motion(window, 80, 40, 1, 0)
    DefenderWindow.discard_pointer(window)
    assert sample(window).pointer_x is None
