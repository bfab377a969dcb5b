"""
Flappy Bird clone: model (physics_core), view (renderer), controller (game_loop).
"""

from .physics_core import SimulationState
from .renderer import Renderer
from .game_loop import FrameScheduler, GameLoop, LoopState

__all__ = ["SimulationState", "Renderer", "FrameScheduler", "GameLoop", "LoopState"]
