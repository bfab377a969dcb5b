"""
app.py: The pygame shell. Creates the window, wires model, view and
controller together, and turns pygame events into game commands.
"""

import logging
from typing import Optional, Tuple

import pygame

from .constants import FIELD_WIDTH, FIELD_HEIGHT, FPS, Difficulty, select_difficulty
from .game_loop import FrameScheduler, GameLoop, LoopState
from .physics_core import SimulationState
from .renderer import Renderer

logger = logging.getLogger(__name__)


class FlappyApp:
    def __init__(self, difficulty: Optional[Difficulty] = None, surface: Optional[pygame.Surface] = None):
        pygame.init()
        if surface is None:
            surface = pygame.display.set_mode((FIELD_WIDTH, FIELD_HEIGHT))
            pygame.display.set_caption("Flappy Bird")

        if difficulty is None:
            difficulty = select_difficulty()
        logger.info(f"Using {difficulty.name} difficulty")

        # --- Game Logic ---
        self.state = SimulationState(difficulty)
        self.renderer = Renderer(surface)
        self.scheduler = FrameScheduler()
        self.loop = GameLoop(self.state, self.renderer, self.scheduler)

        self.clock = pygame.time.Clock()
        self.renderer.show_start_screen()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Translates one pygame event into a command. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.loop.on_jump()
            elif event.key == pygame.K_RETURN:
                self._confirm()

        # Touches also arrive as synthesized mouse events; handle them once, as fingers
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
            self._press(event.pos)
        elif event.type == pygame.FINGERDOWN:
            self._press((event.x * FIELD_WIDTH, event.y * FIELD_HEIGHT))

        return True

    def _confirm(self):
        if self.loop.loop_state is LoopState.IDLE:
            self.loop.start()
        elif self.loop.loop_state is LoopState.OVER:
            self.loop.restart()

    def _press(self, pos: Tuple[float, float]):
        if self.renderer.start_visible and self.renderer.start_button.collidepoint(pos):
            self.loop.start()
        elif self.renderer.game_over_visible and self.renderer.restart_button.collidepoint(pos):
            self.loop.restart()
        else:
            self.loop.on_jump()

    def step(self):
        """One host frame: run queued frame callbacks, or just present overlays."""
        ran = self.scheduler.run_pending()
        if not ran:
            self.renderer.draw(self.state)

    def run(self):
        """The main execution loop."""
        running = True
        while running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            self.step()
            pygame.display.flip()

        logger.info(f"Shutting down, last score {self.state.score}")
        self.loop.stop()
        pygame.quit()
