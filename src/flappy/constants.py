"""
constants.py: Centralized configuration for the play field, physics and difficulty.
"""

import platform
import re
import sys
from dataclasses import dataclass
from typing import Optional

# -------- Play Field Config --------
FIELD_WIDTH = 400
FIELD_HEIGHT = 600
FPS = 60                        # Frames requested per second

# -------- Bird Config --------
BIRD_X = 50                     # Fixed bird X position, the world scrolls instead
BIRD_START_Y = 200
BIRD_WIDTH = 30
BIRD_HEIGHT = 30
BIRD_TILT_PER_VELOCITY = 2      # Degrees of rotation per unit of velocity

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 180
PIPE_MIN_HEIGHT = 80
PIPE_MAX_HEIGHT = 280

# -------- Colours --------
SKY_COLOR = (112, 197, 206)
BIRD_COLOR = (250, 212, 60)
PIPE_TOP_COLOR = (84, 160, 56)
PIPE_BOTTOM_COLOR = (104, 184, 72)
TEXT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 150)
BUTTON_COLOR = (230, 126, 34)

# Platform identifiers that mark a touch/mobile host
TOUCH_PLATFORM_PATTERN = re.compile(
    r"Android|webOS|iPhone|iPad|iPod|BlackBerry|IEMobile|Opera Mini", re.IGNORECASE)


@dataclass(frozen=True)
class Difficulty:
    """Physics tunables applied to a SimulationState (units per frame)."""
    name: str
    gravity: float
    jump_strength: float
    pipe_speed: float
    pipe_interval: float


DESKTOP = Difficulty("desktop", gravity=0.3, jump_strength=-7.0, pipe_speed=1.5, pipe_interval=200)
TOUCH = Difficulty("touch", gravity=0.1, jump_strength=-3.0, pipe_speed=2.0, pipe_interval=250)


def platform_identifier() -> str:
    """Describes the host the way a user agent would."""
    return f"{sys.platform} {platform.platform()}"


def detect_touch_device(platform_id: Optional[str] = None) -> bool:
    if platform_id is None:
        platform_id = platform_identifier()
    return TOUCH_PLATFORM_PATTERN.search(platform_id) is not None


def select_difficulty(platform_id: Optional[str] = None) -> Difficulty:
    """Touch hosts get the easier profile."""
    return TOUCH if detect_touch_device(platform_id) else DESKTOP
