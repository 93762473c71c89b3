"""Console logging for the game."""

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",     # grey
        "INFO": "\033[36m",      # cyan
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("flappy.", "")
        return f"{color}{ts} [{record.levelname[0]}] {name}: {record.getMessage()}{self.RESET}"


def setup_logging(level="info"):
    root = logging.getLogger("flappy")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)


def get_logger(name):
    """Child logger under the flappy namespace."""
    if name.startswith("flappy"):
        return logging.getLogger(name)
    return logging.getLogger(f"flappy.{name}")
