"""
game_loop.py: The controller. Owns the Idle/Running/Over lifecycle and
re-requests a frame from the host scheduler each time it wants to continue.
"""

import logging
from enum import Enum
from typing import Callable, List

from .physics_core import SimulationState
from .renderer import Renderer

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler:
    """
    The host's "call me on the next frame" primitive.
    Callbacks requested while a batch is running wait for the next frame.
    """

    def __init__(self):
        self._pending: List[FrameCallback] = []

    def request_frame(self, callback: FrameCallback):
        self._pending.append(callback)

    def run_pending(self) -> int:
        """
        Runs the callbacks queued so far. Returns how many ran.
        If one raises, the callbacks after it stay queued ahead of newer requests.
        """
        batch, self._pending = self._pending, []
        ran = 0
        try:
            for callback in batch:
                ran += 1
                callback()
        finally:
            self._pending[:0] = batch[ran:]
        return ran

    @property
    def pending(self) -> int:
        return len(self._pending)


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class GameLoop:
    def __init__(self, state: SimulationState, renderer: Renderer, scheduler: FrameScheduler):
        self.state = state
        self.renderer = renderer
        self.scheduler = scheduler
        self.loop_state = LoopState.IDLE
        self._frame_queued = False

    @property
    def is_running(self) -> bool:
        return self.loop_state is LoopState.RUNNING

    def start(self):
        if self.loop_state is not LoopState.IDLE:
            logger.debug(f"Ignoring start while {self.loop_state.value}")
            return
        self.loop_state = LoopState.RUNNING
        self.renderer.hide_start_screen()
        logger.info("Game started")
        self._schedule()

    def restart(self):
        if self.loop_state is not LoopState.OVER:
            logger.debug(f"Ignoring restart while {self.loop_state.value}")
            return
        self.state.reset()
        self.renderer.hide_game_over_screen()
        self.loop_state = LoopState.RUNNING
        logger.info("Game restarted")
        self._schedule()

    def stop(self):
        """
        External stop. Any frame already queued becomes a no-op, and the
        episode is discarded so the next start begins from a fresh model.
        """
        if self.is_running:
            self.loop_state = LoopState.IDLE
            self.state.reset()
            self.renderer.show_start_screen()
            logger.info("Game loop stopped")

    def on_jump(self):
        if self.is_running:
            self.state.jump()
        elif self.loop_state is LoopState.IDLE and not self.state.game_over:
            self.start()
        else:
            logger.debug("Ignoring jump after game over")

    def _schedule(self):
        # At most one frame callback in flight
        if not self._frame_queued:
            self._frame_queued = True
            self.scheduler.request_frame(self._frame)

    def _frame(self):
        self._frame_queued = False
        # A frame may already be queued when the loop stops
        if not self.is_running:
            return

        self.state.update()
        self.renderer.draw(self.state)

        if self.state.game_over:
            self.loop_state = LoopState.OVER
            self.renderer.show_game_over_screen(self.state.score)
            logger.info(f"Game over, score {self.state.score}")
        else:
            self._schedule()
