"""
logger.py: Console logging for the flappy logger tree.
"""

import logging
import sys
from typing import Optional

# INFO stays in the terminal's default colour
LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}


class ConsoleFormatter(logging.Formatter):
    """One line per record: time, level initial, module name, message."""

    def __init__(self, color: bool = True):
        super().__init__("%(asctime)s [%(levelname).1s] %(module_name)s: %(message)s", datefmt="%H:%M:%S")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        record.module_name = record.name.rpartition(".")[2]
        line = super().format(record)
        prefix = LEVEL_COLORS.get(record.levelno) if self.color else None
        return f"{prefix}{line}\033[0m" if prefix else line


def setup_logging(level: str = "info", color: Optional[bool] = None) -> logging.Logger:
    """Configure the flappy root logger and return it. Colour defaults to on for a tty."""
    if color is None:
        color = sys.stderr.isatty()

    root = logging.getLogger("flappy")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter(color))
    root.addHandler(console)
    return root
