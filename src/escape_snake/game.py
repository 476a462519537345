# game.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import Config
from .errors import BoardFullError
from .food import escape, place_food
from .geometry import Block, Direction
from .snake import Snake

logger = logging.getLogger(__name__)

# Cell codes used by GameSnapshot.as_grid()
EMPTY, BODY, HEAD, DIGESTING, FOOD = 0, 1, 2, 3, 4

_GLYPHS = {EMPTY: " ", BODY: "o", HEAD: "H", DIGESTING: "O", FOOD: "*"}


# ---------- Renderer boundary ----------
@dataclass(frozen=True)
class GameSnapshot:
    body: Tuple[Block, ...]          # head at index 0
    digesting: Tuple[bool, ...]      # aligned with body
    head_direction: Direction
    food: Optional[Block]
    score: int
    game_over: bool
    board_full: bool
    width: int
    height: int

    def _inside(self, block: Block) -> bool:
        return 0 <= block.x < self.width and 0 <= block.y < self.height

    def as_grid(self) -> np.ndarray:
        """(height, width) int8 array of cell codes."""
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for block, digesting in zip(self.body[1:], self.digesting[1:]):
            if self._inside(block):
                grid[block.y, block.x] = DIGESTING if digesting else BODY
        if self.food is not None and self._inside(self.food):
            grid[self.food.y, self.food.x] = FOOD
        head = self.body[0]
        if self._inside(head):
            grid[head.y, head.x] = HEAD
        return grid

    def render_text(self) -> str:
        """ASCII board; the wall ring is drawn with '#'."""
        grid = self.as_grid()
        x_bounds, y_bounds = (0, self.width), (0, self.height)
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                code = int(grid[y, x])
                if code == EMPTY and Block(x, y).out_of_bounds(x_bounds, y_bounds):
                    row.append("#")
                else:
                    row.append(_GLYPHS[code])
            rows.append("".join(row))
        return "\n".join(rows)


# ---------- Tick coordinator ----------
class Game:
    """
    Owns the snake, the food and the score, and advances them one tick at a
    time from accumulated frame time.

    Input is queued through key_pressed(); only the latest queued direction
    is used when a tick fires.
    """

    def __init__(self, config: Optional[Config] = None, rng=None):
        self.config = (config or Config()).validate()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.restart()

    # ----- state -----
    def restart(self) -> None:
        cfg = self.config
        x, y = cfg.start_head
        self.snake = Snake(x, y, cfg.start_length, cfg.start_direction)
        self.food: Optional[Block] = None
        self.direction_queue: List[Direction] = []
        self.waiting_time = 0.0
        self._score = 0
        self._game_over = False
        self.board_full = False
        self.high_score = False      # set while a ranking name is being entered
        self.add_food()
        logger.info("New game on a %dx%d board", cfg.width, cfg.height)

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def period(self) -> float:
        return self.config.period_for(self._score)

    @property
    def x_bounds(self):
        return self.config.x_bounds

    @property
    def y_bounds(self):
        return self.config.y_bounds

    # ----- input -----
    def key_pressed(self, direction: Optional[Direction]) -> bool:
        """
        Queue a direction for the next tick. A reversal of the current
        heading is dropped. Returns True if the press was queued.
        """
        if self._game_over:
            return False
        if direction is None:
            direction = self.snake.head_direction()
        if direction == self.snake.head_direction().opposite():
            logger.debug("Dropped reversal to %s", direction.name)
            return False
        self.direction_queue.append(direction)
        return True

    def confirm_restart(self) -> bool:
        """Restart right away if the round is over and no name entry is pending."""
        if not self._game_over or self.high_score:
            return False
        self.restart()
        return True

    # ----- update -----
    def update(self, delta_time: float) -> bool:
        """
        Advance by delta_time seconds of frame time.
        Returns True while the round is still running.
        """
        self.waiting_time += delta_time

        if self._game_over:
            if (
                self.config.auto_restart
                and not self.high_score
                and self.waiting_time > self.config.restart_time
            ):
                self.restart()
            return not self._game_over

        if self.food is None:
            self.add_food()
            if self._game_over:
                return False

        if self.waiting_time > self.period:
            self.update_snake()
            if not self._game_over:
                self.update_food()
        return not self._game_over

    def update_snake(self) -> None:
        """One tick: validate the move, apply it, then check for food."""
        direction = self.direction_queue[-1] if self.direction_queue else None
        if self.check_snake_alive(direction):
            self.snake.move_forward(direction)
            self.check_eaten()
        else:
            self._end_round()
        self.waiting_time = 0.0
        self.direction_queue.clear()

    def update_food(self) -> None:
        if self.food is None:
            return
        offset = escape(
            self.food,
            self.snake,
            self.x_bounds,
            self.y_bounds,
            self.config.food_speed_increase,
            self.rng,
        )
        if offset != (0, 0):
            logger.debug("Food escapes %s -> %s", self.food, offset)
        self.food = self.food.shifted(offset)

    def add_food(self) -> None:
        try:
            self.food = place_food(
                self.snake,
                self.x_bounds,
                self.y_bounds,
                self.rng,
                self.config.max_food_attempts,
            )
        except BoardFullError as exc:
            logger.info("%s", exc)
            self.food = None
            self.board_full = True
            self._end_round()

    def check_eaten(self) -> bool:
        if self.food is None or self.snake.head_position() != self.food:
            return False
        self.food = None
        restored = self.snake.restore_tail()
        self.snake.digest(restored, len(self.snake))
        self._score += 1
        logger.debug("Food eaten, score %d, length %d", self._score, len(self.snake))
        return True

    def check_snake_alive(self, direction: Optional[Direction]) -> bool:
        """Whether moving in direction (or straight on) keeps the snake alive."""
        destination = self.snake.next_head(direction)
        return not self.snake.overlap_tail(destination) and not destination.out_of_bounds(
            self.x_bounds, self.y_bounds
        )

    def _end_round(self) -> None:
        self._game_over = True
        self.waiting_time = 0.0
        logger.info("Game over with score %d", self._score)

    # ----- output -----
    def snapshot(self) -> GameSnapshot:
        body = tuple(self.snake)
        return GameSnapshot(
            body=body,
            digesting=tuple(self.snake.is_digesting(b) for b in body),
            head_direction=self.snake.head_direction(),
            food=self.food,
            score=self._score,
            game_over=self._game_over,
            board_full=self.board_full,
            width=self.config.width,
            height=self.config.height,
        )
