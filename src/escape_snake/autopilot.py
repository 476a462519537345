# autopilot.py
"""Greedy steering used by the headless runner."""
from typing import List, Optional

from .game import Game
from .geometry import Direction


def best_moves_toward_food(game: Game) -> List[Direction]:
    """
    Preference ordering of directions that reduce the distance to the food,
    followed by the remaining directions. Does NOT check collisions.
    """
    prefs: List[Direction] = []
    head = game.snake.head_position()
    if game.food is not None:
        if game.food.x < head.x:
            prefs.append(Direction.LEFT)
        elif game.food.x > head.x:
            prefs.append(Direction.RIGHT)
        if game.food.y < head.y:
            prefs.append(Direction.UP)
        elif game.food.y > head.y:
            prefs.append(Direction.DOWN)
    # Keep the current heading ahead of the other fallbacks.
    for d in (game.snake.head_direction(), *Direction):
        if d not in prefs:
            prefs.append(d)
    return prefs


def choose_direction(game: Game) -> Optional[Direction]:
    """
    Greedy on food distance with simple safety:
    - never reverse
    - take the first preferred move that keeps the snake alive
    - None if every move is fatal (boxed in)
    """
    reverse = game.snake.head_direction().opposite()
    for d in best_moves_toward_food(game):
        if d != reverse and game.check_snake_alive(d):
            return d
    return None
