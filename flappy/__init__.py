"""Flappy Bird clone built on pygame."""

from .config import GameConfig
from .game import Game
from .state import GameState, World

__version__ = "1.0.0"

__all__ = ["Game", "GameConfig", "GameState", "World"]
