"""
Playable Arcade front end

Keyboard: Left/Right or A/D move, Space fires, Esc pauses/resumes,
Enter starts or restarts, M returns to the menu after a game over,
Q quits a running game to the menu, S toggles sound.
Mouse: moving sets the craft position, clicking fires.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, List, Optional

import arcade

from .arcade_surface import ArcadeSurface
from .config import GameConfig
from .controller import GameController
from .controls import Action, InputState
from .display import SCREENS, lives_display
from .loop import FrameScheduler
from .session import GameSession, GameState, SessionSnapshot
from .storage import JsonHighScoreStore

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    arcade.key.SPACE: Action.FIRE,
    arcade.key.ESCAPE: Action.TOGGLE_PAUSE,
    arcade.key.ENTER: Action.START,
    arcade.key.RETURN: Action.START,
    arcade.key.M: Action.BACK,
    arcade.key.Q: Action.QUIT,
    arcade.key.S: Action.TOGGLE_SOUND,
}
LEFT_KEYS = (arcade.key.LEFT, arcade.key.A)
RIGHT_KEYS = (arcade.key.RIGHT, arcade.key.D)


class HudDisplay:
    """Display layer drawn with arcade text on top of the game frame"""

    def __init__(self):
        self.screen = "start"
        self.snapshot: Optional[SessionSnapshot] = None

        self.TEXT_C = (226, 232, 240)
        self.ACCENT_C = (246, 224, 94)
        self.SHADE_C = (0, 0, 0, 160)

    def show_screen(self, name: str):
        if name not in SCREENS:
            raise ValueError(f"Unknown screen: {name}")
        self.screen = name

    def update(self, snapshot: SessionSnapshot):
        self.snapshot = snapshot

    def draw(self, width: int, height: int):
        snap = self.snapshot
        if snap is None:
            return

        if self.screen in ("playing", "paused"):
            sound = "sound on" if snap.sound_enabled else "muted"
            arcade.draw_text(f"Score: {snap.score}", 12, height - 28, self.TEXT_C, 16)
            arcade.draw_text(f"Level: {snap.level}", 12, height - 52, self.TEXT_C, 16)
            arcade.draw_text(lives_display(snap), width - 12, height - 28, self.TEXT_C, 18,
                             anchor_x="right")
            arcade.draw_text(sound, width - 12, height - 52, self.TEXT_C, 12, anchor_x="right")

        if self.screen == "playing":
            return

        arcade.draw_lrbt_rectangle_filled(0, width, 0, height, self.SHADE_C)
        cx, cy = width / 2, height / 2

        if self.screen == "start":
            arcade.draw_text("SPACE DEFENDER", cx, cy + 60, self.ACCENT_C, 36, anchor_x="center")
            arcade.draw_text(f"High score: {snap.high_score}", cx, cy, self.TEXT_C, 18, anchor_x="center")
            arcade.draw_text("Press ENTER to start", cx, cy - 50, self.TEXT_C, 16, anchor_x="center")
        elif self.screen == "paused":
            arcade.draw_text("PAUSED", cx, cy + 20, self.ACCENT_C, 36, anchor_x="center")
            arcade.draw_text("ESC to resume, Q to quit", cx, cy - 30, self.TEXT_C, 16, anchor_x="center")
        elif self.screen == "gameover":
            arcade.draw_text("GAME OVER", cx, cy + 80, self.ACCENT_C, 36, anchor_x="center")
            arcade.draw_text(f"Final score: {snap.final_score}", cx, cy + 20, self.TEXT_C, 18,
                             anchor_x="center")
            arcade.draw_text(f"Level reached: {snap.final_level}", cx, cy - 10, self.TEXT_C, 18,
                             anchor_x="center")
            if snap.new_record:
                arcade.draw_text("NEW RECORD!", cx, cy - 45, self.ACCENT_C, 20, anchor_x="center")
            arcade.draw_text("ENTER to play again, M for menu", cx, cy - 85, self.TEXT_C, 16,
                             anchor_x="center")


class DefenderWindow(arcade.Window):
    """Collects raw input; the app drains it once per refresh"""

    def __init__(self, width: int, height: int, title: str = "Space Defender",
                 accepts_pointer: Optional[Callable[[], bool]] = None):
        super().__init__(width, height, title)
        self.accepts_pointer = accepts_pointer or (lambda: True)
        arcade.set_background_color((0, 4, 40))
        self.hud = HudDisplay()
        self.closed = False
        self.resized_to = None

        self._left = False
        self._right = False
        self._pointer_x: Optional[float] = None
        self._actions: List[Action] = []

    def sample_input(self) -> InputState:
        """Held controls for this tick; a pointer position only applies once"""
        state = InputState(left=self._left, right=self._right, pointer_x=self._pointer_x)
        self._pointer_x = None
        return state

    def drain_actions(self) -> List[Action]:
        actions, self._actions = self._actions, []
        return actions

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in LEFT_KEYS:
            self._left = True
        elif symbol in RIGHT_KEYS:
            self._right = True
        elif symbol in KEY_ACTIONS:
            self._actions.append(KEY_ACTIONS[symbol])

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in LEFT_KEYS:
            self._left = False
        elif symbol in RIGHT_KEYS:
            self._right = False

    def discard_pointer(self):
        self._pointer_x = None

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        # Pointer moves made while paused or in a menu never reach the craft
        if self.accepts_pointer():
            self._pointer_x = x

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self._actions.append(Action.FIRE)

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.resized_to = (width, height)

    def on_close(self):
        self.closed = True
        super().on_close()


class DefenderApp:
    """Owns the window and runs one dispatch/tick/draw/flip pass per refresh"""

    def __init__(self, config: Optional[GameConfig] = None, high_score_path: str = "highscore.json",
                 seed: Optional[int] = None):
        self.config = config or GameConfig()
        self.window = DefenderWindow(self.config.width, self.config.height,
                                     accepts_pointer=self._is_playing)
        self.scheduler = FrameScheduler()
        self.session = GameSession(self.config, seed=seed)
        self.surface = ArcadeSurface(self.config.width, self.config.height)
        self.controller = GameController(
            self.session,
            store=JsonHighScoreStore(high_score_path),
            display=self.window.hud,
            surface=self.surface,
            scheduler=self.scheduler,
            input_source=self.window.sample_input,
        )

    def _is_playing(self) -> bool:
        return self.session.state is GameState.PLAYING

    def refresh(self):
        window = self.window
        window.dispatch_events()
        if window.closed:
            return

        if window.resized_to is not None:
            width, height = window.resized_to
            window.resized_to = None
            if self.session.resize(width, height):
                self.surface.width, self.surface.height = width, height

        for action in window.drain_actions():
            self.controller.handle(action)
        if not self._is_playing():
            window.discard_pointer()

        # Playing frames are drawn by the game loop; other screens redraw the frozen scene
        if self.scheduler.run_pending() == 0:
            self.controller.render()
        window.hud.draw(self.surface.width, self.surface.height)
        window.flip()

    def run(self):
        frame_time = 1.0 / self.config.fps
        logger.info("Window open (%dx%d)", self.config.width, self.config.height)
        while not self.window.closed:
            started = time.perf_counter()
            self.refresh()
            elapsed = time.perf_counter() - started
            if elapsed < frame_time:
                time.sleep(frame_time - elapsed)
        logger.info("Window closed")
