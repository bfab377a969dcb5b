import os

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from flappy.constants import FIELD_WIDTH, FIELD_HEIGHT
from flappy.physics_core import SimulationState


@pytest.fixture
def state():
    return SimulationState(rng=random.Random(1234))


@pytest.fixture
def surface():
    return pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT))
