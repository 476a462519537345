# config.py
from dataclasses import dataclass
from typing import Optional

from .geometry import Block, Direction

# ----- Window & grid -----
CELL_SIZE = 24
SNAKE_CELL_SIZE = 20
SCORE_STRIP = 1          # rows below the board for the score
FPS = 60

# ----- Colors -----
BG_COLOR        = (128, 128, 128)
BORDER_COLOR    = (0, 0, 0)
HEAD_COLOR      = (0, 153, 0)
BODY_COLOR      = (0, 204, 0)
FOOD_COLOR      = (204, 0, 0)
TEXT_COLOR      = (220, 220, 230)
GAME_OVER_COLOR = (230, 0, 0, 128)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    width: int = 20
    height: int = 20
    start_length: int = 3
    start_direction: Direction = Direction.RIGHT
    start_x: Optional[int] = None    # default: board centre
    start_y: Optional[int] = None
    move_period: float = 0.1         # seconds between moves at score 0
    speed_decay: float = 0.9
    foods_per_speedup: int = 5
    min_move_period: float = 0.04
    restart_time: float = 1.0
    auto_restart: bool = True
    food_speed_increase: int = 5     # weight per segment for food evasion
    max_food_attempts: int = 1000
    seed: Optional[int] = None

    @property
    def x_bounds(self):
        return (0, self.width)

    @property
    def y_bounds(self):
        return (0, self.height)

    @property
    def start_head(self):
        x = self.width // 2 if self.start_x is None else self.start_x
        y = self.height // 2 if self.start_y is None else self.start_y
        return x, y

    def validate(self) -> "Config":
        if self.width < 3 or self.height < 3:
            raise ValueError(f"Board must be at least 3x3, got {self.width}x{self.height}")
        if self.start_length < 1:
            raise ValueError("start_length must be >= 1")
        x, y = self.start_head
        dx, dy = self.start_direction.offset
        for i in range(self.start_length):
            if Block(x - i * dx, y - i * dy).out_of_bounds(self.x_bounds, self.y_bounds):
                raise ValueError(
                    f"Starting snake at {(x, y)} heading {self.start_direction.name} "
                    f"with length {self.start_length} does not fit inside the walls"
                )
        if self.move_period <= 0 or self.min_move_period <= 0:
            raise ValueError("move periods must be positive")
        if not 0 < self.speed_decay <= 1:
            raise ValueError("speed_decay must be in (0, 1]")
        if self.foods_per_speedup < 1:
            raise ValueError("foods_per_speedup must be >= 1")
        if self.max_food_attempts < 0:
            raise ValueError("max_food_attempts must be >= 0")
        return self

    def period_for(self, score: int) -> float:
        """Seconds between moves; shrinks geometrically every foods_per_speedup points."""
        period = self.move_period * self.speed_decay ** (score // self.foods_per_speedup)
        return max(self.min_move_period, period)
