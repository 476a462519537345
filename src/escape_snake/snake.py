# snake.py
from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Iterator, Optional

from .errors import NoTailError
from .geometry import Block, Direction

SNAKE_STARTING_LENGTH = 3


class Snake:
    """
    The snake's body from head (index 0) to tail (last index).

    Movement is a single transition, move_forward(), gated by the caller:
    the snake never decides on its own whether a move kills it.

    Attributes:
        digesting: cell -> remaining ticks that cell is drawn as a swallowed
                   food item travelling down the body.
    """

    def __init__(
        self,
        x: int,
        y: int,
        length: int = SNAKE_STARTING_LENGTH,
        direction: Direction = Direction.RIGHT,
    ):
        if length < 1:
            raise ValueError("A snake needs at least one segment")
        dx, dy = direction.offset
        # Segments trail behind the head, opposite to the direction of travel.
        self.body: Deque[Block] = deque(Block(x - i * dx, y - i * dy) for i in range(length))
        self.current_direction = direction
        self.tail: Optional[Block] = None
        self.digesting: Dict[Block, int] = {}

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.body)

    def head_position(self) -> Block:
        return self.body[0]

    def head_direction(self) -> Direction:
        return self.current_direction

    def next_head(self, direction: Optional[Direction] = None) -> Block:
        """Where the head would be after one step, without moving."""
        moving = direction if direction is not None else self.current_direction
        return self.head_position().shifted(moving.offset)

    def move_forward(self, direction: Optional[Direction] = None) -> None:
        """
        Step the head once and drop the tail into the restore buffer.
        Callers must have checked survivability (next_head + overlap/bounds) first.
        """
        if direction is not None:
            self.current_direction = direction

        # Counters at 0 survive this pass and are dropped on the next one.
        self.digesting = {
            block: count - 1 for block, count in self.digesting.items() if count >= 1
        }

        self.body.appendleft(self.next_head())
        self.tail = self.body.pop()

    def restore_tail(self) -> Block:
        """Re-append the last popped tail after eating; returns the restored cell."""
        if self.tail is None:
            raise NoTailError("No tail to restore; the snake has not moved since the last restore")
        block, self.tail = self.tail, None
        self.body.append(block)
        return block

    def digest(self, block: Block, ticks: int) -> None:
        self.digesting[block] = ticks

    def is_digesting(self, block: Block) -> bool:
        return block in self.digesting

    def overlap_tail(self, block: Block) -> bool:
        """
        True if block is on the body, ignoring the last segment: the tail
        vacates its cell on the same tick a head would arrive there.
        """
        last = len(self.body) - 1
        for i, part in enumerate(self.body):
            if i == last:
                break
            if part == block:
                return True
        return False
