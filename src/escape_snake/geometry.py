# geometry.py
from __future__ import annotations
from enum import Enum
from typing import Iterator, NamedTuple, Tuple

Offset = Tuple[int, int]
Bounds = Tuple[int, int]


class Block(NamedTuple):
    """A single grid cell, in game coordinates."""
    x: int
    y: int

    def shifted(self, offset: Offset) -> "Block":
        return Block(self.x + offset[0], self.y + offset[1])

    def out_of_bounds(self, x_bounds: Bounds, y_bounds: Bounds) -> bool:
        """
        True if the cell touches or crosses the outer ring of the board.
        Bounds are [low, high); the outermost ring is reserved for the walls.
        """
        return (
            self.x <= x_bounds[0]
            or self.x >= x_bounds[1] - 1
            or self.y <= y_bounds[0]
            or self.y >= y_bounds[1] - 1
        )


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Offset:
        """Unit vector (dx, dy) of this direction."""
        return _OFFSETS[self]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def offsets(cls) -> Iterator[Tuple["Direction", Offset]]:
        """All four (direction, unit offset) pairs: Up, Down, Left, Right."""
        for direction in cls:
            yield direction, direction.offset


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
