"""
physics_core.py: The deterministic per-frame simulation step and collision logic.
"""

import logging
import random
from typing import List, Optional

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, PIPE_GAP, PIPE_MIN_HEIGHT, PIPE_MAX_HEIGHT, DESKTOP, Difficulty
)
from .data_models import Bird, Pipe

logger = logging.getLogger(__name__)


class SimulationState:
    """
    The game model: bird kinematics, pipes, score and the game-over flag.
    Advances one discrete frame per update() call.
    """

    def __init__(self, difficulty: Optional[Difficulty] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.apply_difficulty(difficulty or DESKTOP)
        self.score = 0
        self.bird = Bird()
        self.pipes: List[Pipe] = []
        self.game_over = False

    def apply_difficulty(self, difficulty: Difficulty):
        """Overwrites the tunables in place. reset() leaves them alone."""
        self.gravity = difficulty.gravity
        self.jump_strength = difficulty.jump_strength
        self.pipe_speed = difficulty.pipe_speed
        self.pipe_interval = difficulty.pipe_interval

    def update(self):
        if self.game_over:
            return

        # 1. Semi-implicit Euler: velocity first, then position
        self.bird.velocity += self.gravity
        self.bird.y += self.bird.velocity

        # 2. Spawn. Compares the newest pipe's absolute x against the interval.
        if not self.pipes or self.pipes[-1].x < self.pipe_interval:
            self.add_pipe()

        # 3. Scroll
        for pipe in self.pipes:
            pipe.x -= self.pipe_speed

        # 4. Prune pipes that left the screen
        self.pipes = [p for p in self.pipes if p.x > -p.width]

        # 5. Collision ends the episode before any scoring
        if self.check_collision():
            self.game_over = True
            return

        # 6. Score
        self.update_score()

    def add_pipe(self):
        """Appends a top/bottom pair at the right edge of the field."""
        height = self.rng.randint(PIPE_MIN_HEIGHT, PIPE_MAX_HEIGHT)

        self.pipes.append(Pipe(x=FIELD_WIDTH, y=0, height=height))
        self.pipes.append(Pipe(x=FIELD_WIDTH, y=height + PIPE_GAP,
                               height=FIELD_HEIGHT - height - PIPE_GAP))
        logger.debug(f"Spawned pipe pair with top height {height}")

    def check_collision(self) -> bool:
        """Checks for collisions with floor, ceiling, or pipes."""
        bird = self.bird

        # 1. Floor/Ceiling
        if bird.y < 0 or bird.y + bird.height > FIELD_HEIGHT:
            return True

        # 2. Pipes (strict AABB overlap)
        for pipe in self.pipes:
            if (bird.x < pipe.x + pipe.width and
                    bird.x + bird.width > pipe.x and
                    bird.y < pipe.y + pipe.height and
                    bird.y + bird.height > pipe.y):
                return True

        return False

    def update_score(self):
        # Each pipe of a pair counts, so one gap is worth 2
        for pipe in self.pipes:
            if not pipe.passed and pipe.x + pipe.width < self.bird.x:
                pipe.passed = True
                self.score += 1

    def jump(self):
        """Sets (not adds) the jump velocity."""
        if not self.game_over:
            self.bird.velocity = self.jump_strength

    def reset(self):
        self.score = 0
        self.bird = Bird()
        self.pipes = []
        self.game_over = False
