# food.py
from __future__ import annotations
import logging
import math
import random
from typing import List

from .errors import BoardFullError
from .geometry import Block, Bounds, Direction, Offset
from .snake import Snake

logger = logging.getLogger(__name__)

STAY: Offset = (0, 0)


# ---------- Helpers ----------
def get_distance(a: Block, b: Block) -> float:
    """Euclidean distance between two cells."""
    dx, dy = a.x - b.x, a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def free_cells(snake: Snake, x_bounds: Bounds, y_bounds: Bounds) -> List[Block]:
    """Every in-bounds cell the snake does not occupy (tail excluded)."""
    return [
        Block(x, y)
        for y in range(y_bounds[0] + 1, y_bounds[1] - 1)
        for x in range(x_bounds[0] + 1, x_bounds[1] - 1)
        if not snake.overlap_tail(Block(x, y))
    ]


# ---------- Evasion ----------
def get_escape_offset(food: Block, snake: Snake, x_bounds: Bounds, y_bounds: Bounds, rng=None) -> Offset:
    """
    Pick the step that takes the food farthest from the snake's head.

    Staying put is always a candidate; moves that leave the board or land on
    the body are skipped. Ties are broken uniformly at random.
    """
    rng = rng or random
    head = snake.head_position()
    best_dist = get_distance(food, head)
    best_offsets: List[Offset] = [STAY]

    for _, offset in Direction.offsets():
        destination = food.shifted(offset)
        if destination.out_of_bounds(x_bounds, y_bounds) or snake.overlap_tail(destination):
            continue
        dist = get_distance(destination, head)
        if dist > best_dist:
            best_dist = dist
            best_offsets = [offset]
        elif dist == best_dist:
            best_offsets.append(offset)

    return rng.choice(best_offsets)


def escape(
    food: Block,
    snake: Snake,
    x_bounds: Bounds,
    y_bounds: Bounds,
    speed_param: int,
    rng=None,
) -> Offset:
    """
    Escape with a probability that grows with the snake's length.
    Returns the optimal escape offset, or (0, 0) when the food stays put.
    """
    rng = rng or random
    area = (x_bounds[1] - x_bounds[0]) * (y_bounds[1] - y_bounds[0])
    weight = min(max(len(snake) * speed_param, 0), area)
    draw = rng.randrange(area)
    if draw <= weight:
        return get_escape_offset(food, snake, x_bounds, y_bounds, rng)
    return STAY


# ---------- Placement ----------
def place_food(
    snake: Snake,
    x_bounds: Bounds,
    y_bounds: Bounds,
    rng=None,
    max_attempts: int = 1000,
) -> Block:
    """
    Random in-bounds cell not covered by the snake.

    Rejection-samples up to max_attempts times, then picks among the
    remaining free cells directly. Raises BoardFullError if there are none.
    """
    rng = rng or random
    for _ in range(max_attempts):
        food = Block(
            rng.randrange(x_bounds[0] + 1, x_bounds[1] - 1),
            rng.randrange(y_bounds[0] + 1, y_bounds[1] - 1),
        )
        if not snake.overlap_tail(food):
            return food

    cells = free_cells(snake, x_bounds, y_bounds)
    if not cells:
        raise BoardFullError(f"No free cell left for food (snake length {len(snake)})")
    logger.debug("Food placement fell back to %d free cells", len(cells))
    return rng.choice(cells)

