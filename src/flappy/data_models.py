"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass

from .constants import BIRD_X, BIRD_START_Y, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH

@dataclass
class Bird:
    """The player-controlled bird. Only y and velocity change during play."""
    x: float = BIRD_X
    y: float = BIRD_START_Y
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT
    velocity: float = 0.0

@dataclass
class Pipe:
    """A single rectangular obstacle, always spawned as half of a top/bottom pair."""
    x: float
    y: float
    height: float
    width: int = PIPE_WIDTH
    passed: bool = False

    @property
    def is_top(self) -> bool:
        return self.y == 0
