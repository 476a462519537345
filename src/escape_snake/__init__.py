# src/escape_snake/__init__.py
"""Snake game core where the food tries to get away."""

from .config import Config
from .errors import BoardFullError, NoTailError, SnakeGameError
from .game import Game, GameSnapshot
from .geometry import Block, Direction
from .snake import Snake

__all__ = [
    "Config",
    "Game",
    "GameSnapshot",
    "Block",
    "Direction",
    "Snake",
    "SnakeGameError",
    "BoardFullError",
    "NoTailError",
]
