"""
GameController - the menu/playing/paused/gameover state machine

Wires a GameSession to its collaborators: high-score store, display layer,
input source, drawing surface and the refresh-driven game loop. All display
updates happen here, after the simulation step, from session snapshots.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from . import simulation
from .controls import Action, InputState
from .loop import FrameScheduler, GameLoop
from .render import Surface, render
from .session import GameSession, GameState
from .simulation import StepResult
from .storage import MemoryHighScoreStore

logger = logging.getLogger(__name__)


class GameController:
    """State machine over a GameSession"""

    def __init__(
        self,
        session: GameSession,
        store=None,
        display=None,
        surface: Optional[Surface] = None,
        scheduler: Optional[FrameScheduler] = None,
        input_source: Optional[Callable[[], InputState]] = None,
    ):
        self.session = session
        self.store = store or MemoryHighScoreStore()
        self.display = display
        self.surface = surface
        self.input_source = input_source or InputState
        self.last_result = StepResult()

        self.loop: Optional[GameLoop] = None
        if scheduler is not None:
            self.loop = GameLoop(
                step=self.tick,
                render=self.render,
                is_running=lambda: self.session.state is GameState.PLAYING,
                scheduler=scheduler,
            )

        session.high_score = self.store.read_high_score()
        self._show("start")
        self._publish()

    @property
    def state(self) -> GameState:
        return self.session.state

    # ----------------------------
    # Transitions
    # ----------------------------

    def start(self) -> bool:
        """menu|gameover -> playing with a fresh session"""
        if self.session.state not in (GameState.MENU, GameState.GAME_OVER):
            return False
        self.session.reset()
        self.session.state = GameState.PLAYING
        logger.info("Game started")
        self._show("playing")
        self._publish()
        self._start_loop()
        return True

    def restart(self) -> bool:
        return self.start()

    def pause(self) -> bool:
        if self.session.state is not GameState.PLAYING:
            return False
        self.session.state = GameState.PAUSED
        logger.info("Paused at tick %d", self.session.tick)
        self._show("paused")
        return True

    def resume(self) -> bool:
        if self.session.state is not GameState.PAUSED:
            return False
        self.session.state = GameState.PLAYING
        logger.info("Resumed at tick %d", self.session.tick)
        self._show("playing")
        self._start_loop()
        return True

    def toggle_pause(self) -> bool:
        if self.session.state is GameState.PLAYING:
            return self.pause()
        return self.resume()

    def back_to_menu(self) -> bool:
        """gameover -> menu"""
        if self.session.state is not GameState.GAME_OVER:
            return False
        self.session.state = GameState.MENU
        self._show("start")
        self._publish()
        return True

    def quit_to_menu(self) -> bool:
        """Abandon a running or paused game without touching the high score"""
        if self.session.state not in (GameState.PLAYING, GameState.PAUSED):
            return False
        self.session.state = GameState.MENU
        logger.info("Quit to menu with score %d", self.session.score)
        self._show("start")
        self._publish()
        return True

    def fire(self) -> bool:
        return simulation.fire(self.session) is not None

    def toggle_sound(self) -> bool:
        self.session.sound_enabled = not self.session.sound_enabled
        self._publish()
        return True

    def handle(self, action: Action) -> bool:
        """Dispatch a discrete input action; irrelevant actions are no-ops"""
        handlers = {
            Action.FIRE: self.fire,
            Action.START: self.start,
            Action.RESTART: self.restart,
            Action.PAUSE: self.pause,
            Action.RESUME: self.resume,
            Action.TOGGLE_PAUSE: self.toggle_pause,
            Action.BACK: self.back_to_menu,
            Action.QUIT: self.quit_to_menu,
            Action.TOGGLE_SOUND: self.toggle_sound,
        }
        return handlers[action]()

    # ----------------------------
    # Per-tick work
    # ----------------------------

    def tick(self, controls: Optional[InputState] = None) -> StepResult:
        """Simulation step plus the game-over transition it may trigger"""
        if self.session.state is not GameState.PLAYING:
            self.last_result = StepResult()
            return self.last_result

        result = simulation.step(self.session, controls if controls is not None else self.input_source())
        if result.game_over:
            self._game_over()
        elif result.changed_hud:
            self._publish()
        self.last_result = result
        return result

    def render(self) -> bool:
        return render(self.session, self.surface)

    def _game_over(self):
        session = self.session
        session.state = GameState.GAME_OVER
        session.final_score = session.score
        session.final_level = session.level
        session.new_record = session.score > session.high_score
        if session.new_record:
            session.high_score = session.score
            self.store.write_high_score(session.score)
        logger.info("Game over: score %d, level %d%s", session.score, session.level,
                    " (new record)" if session.new_record else "")
        self._show("gameover")
        self._publish()

    def _start_loop(self):
        if self.loop is not None:
            self.loop.start()

    def _show(self, screen: str):
        if self.display is not None:
            self.display.show_screen(screen)

    def _publish(self):
        if self.display is not None:
            self.display.update(self.session.snapshot())
