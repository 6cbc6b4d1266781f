"""
Game loop driver and the refresh-callback scheduler it runs on
"""

from __future__ import annotations
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)


class FrameScheduler:
    """Queue of callbacks to run on the next display refresh (requestAnimationFrame-like)"""

    def __init__(self):
        self._pending: List[Callable[[], None]] = []

    def request(self, callback: Callable[[], None]):
        self._pending.append(callback)

    def run_pending(self) -> int:
        """Run callbacks requested before this refresh; ones they request wait for the next"""
        due, self._pending = self._pending, []
        for callback in due:
            callback()
        return len(due)

    @property
    def pending(self) -> int:
        return len(self._pending)


class GameLoop:
    """Runs step then render once per refresh while is_running() holds.

    The chain stops rescheduling itself once is_running() turns false;
    start() restarts it. Only one request is ever outstanding.
    """

    def __init__(
        self,
        step: Callable[[], None],
        render: Callable[[], None],
        is_running: Callable[[], bool],
        scheduler: FrameScheduler,
    ):
        self._step = step
        self._render = render
        self._is_running = is_running
        self.scheduler = scheduler
        self._scheduled = False
        self.frames = 0

    def start(self):
        if self._scheduled:
            return
        self._scheduled = True
        self.scheduler.request(self._frame)

    def run_frame(self):
        """One step + render pass, then reschedule if still running"""
        if not self._is_running():
            return
        self._step()
        self._render()
        self.frames += 1
        if self._is_running():
            self.start()
        else:
            logger.debug("Loop stopped after %d frames", self.frames)

    def _frame(self):
        self._scheduled = False
        self.run_frame()
