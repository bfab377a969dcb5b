#!/usr/bin/env python3
"""
Flappy Bird: single-screen model-view-controller game on pygame.
"""

from .app import FlappyApp
from .logger import setup_logging


def main():
    setup_logging()
    FlappyApp().run()


if __name__ == "__main__":
    main()
