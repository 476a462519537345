# errors.py


class SnakeGameError(Exception):
    """Base class for the game's explicit failure modes."""


class BoardFullError(SnakeGameError):
    """No free cell is left to place food on."""


class NoTailError(SnakeGameError):
    """restore_tail() was called without a buffered tail from a previous move."""
