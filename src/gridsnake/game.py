# game.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Deque, Iterable, List, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import CFG, Config

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ---------- Directions ----------
class Direction(Enum):
    """Unit step (dx, dy) on the grid; y grows downward."""
    UP    = (0, -1)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

class CellKind(IntEnum):
    EMPTY = 0
    BODY  = 1
    HEAD  = 2
    FOOD  = 3

class FoodPlacementError(RuntimeError):
    """Raised when the snake covers every cell and food has nowhere to go."""

# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b

def spawn_food(
    snake: Iterable[Cell],
    width: int,
    height: int,
    rng: random.Random,
    attempts: int = CFG.placement_attempts,
) -> Cell:
    """
    Pick a free cell for food.

    Samples x and y uniformly and independently, accepting the first cell the
    snake does not cover. After `attempts` misses it scans the whole board and
    picks uniformly among the free cells, so a crowded board never spins.
    """
    occupied = set(snake)
    for _ in range(attempts):
        fx = rng.randrange(width)
        fy = rng.randrange(height)
        if (fx, fy) not in occupied:
            return (fx, fy)

    free: List[Cell] = [
        (x, y) for y in range(height) for x in range(width) if (x, y) not in occupied
    ]
    if not free:
        raise FoodPlacementError(
            f"no free cell for food on a {width}x{height} board "
            f"(snake length {len(occupied)})"
        )
    logger.debug("food sampling missed %d times; scanned %d free cells", attempts, len(free))
    return rng.choice(free)

# ---------- State ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game, what the front-end draws each frame."""
    snake: Tuple[Cell, ...]   # head at index 0
    food: Cell
    score: int
    game_over: bool
    direction: Direction
    width: int
    height: int

    def board(self) -> np.ndarray:
        """(height, width) int8 grid of CellKind values, indexed [y, x]."""
        grid = np.full((self.height, self.width), CellKind.EMPTY, dtype=np.int8)
        fx, fy = self.food
        grid[fy, fx] = CellKind.FOOD
        for x, y in self.snake:
            grid[y, x] = CellKind.BODY
        hx, hy = self.snake[0]
        grid[hy, hx] = CellKind.HEAD
        return grid

class GameState:
    """
    Snake game engine. Pure state machine, no I/O.

    The driving loop calls `tick()` on a fixed cadence and forwards input as
    `request_direction_change()`. Once `game_over` is set the state is frozen;
    restarting means building a new instance.
    """

    def __init__(
        self,
        width: int,
        height: int,
        snake: Iterable[Cell],
        direction: Direction = Direction.RIGHT,
        food: Optional[Cell] = None,
        score: int = 0,
        rng: Optional[random.Random] = None,
        placement_attempts: int = CFG.placement_attempts,
    ):
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        if not isinstance(direction, Direction):
            raise TypeError(f"direction must be a Direction, got {direction!r}")
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")

        self._width = width
        self._height = height
        self._snake: Deque[Cell] = deque(tuple(c) for c in snake)  # head at index 0
        if not self._snake:
            raise ValueError("snake must have at least one cell")
        for cell in self._snake:
            if not self._in_bounds(cell):
                raise ValueError(f"snake cell {cell} is outside the {width}x{height} board")
        if len(set(self._snake)) != len(self._snake):
            raise ValueError("snake cells must be pairwise distinct")

        self._direction = direction
        self._score = score
        self._game_over = False
        self._rng = rng if rng is not None else random.Random()
        self._placement_attempts = placement_attempts

        if food is None:
            food = spawn_food(self._snake, width, height, self._rng, placement_attempts)
        food = tuple(food)
        if not self._in_bounds(food):
            raise ValueError(f"food {food} is outside the {width}x{height} board")
        if food in self._snake:
            raise ValueError(f"food {food} overlaps the snake")
        self._food: Cell = food

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        seed: Optional[int] = None,
        placement_attempts: int = CFG.placement_attempts,
    ) -> GameState:
        """Fresh live game: one-cell snake at the centre heading right, food on a free cell."""
        if width < 1 or height < 1 or width * height < 2:
            raise ValueError(f"board {width}x{height} has no room for both snake and food")
        return cls(
            width,
            height,
            snake=[(width // 2, height // 2)],
            direction=Direction.RIGHT,
            rng=random.Random(seed),
            placement_attempts=placement_attempts,
        )

    # ---------- Read accessors ----------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def snake(self) -> Tuple[Cell, ...]:
        return tuple(self._snake)

    @property
    def head(self) -> Cell:
        return self._snake[0]

    @property
    def food(self) -> Cell:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def game_over(self) -> bool:
        return self._game_over

    def __len__(self) -> int:
        return len(self._snake)

    def __repr__(self) -> str:
        return (
            f"GameState({self._width}x{self._height}, head={self.head}, "
            f"len={len(self)}, dir={self._direction.name}, food={self._food}, "
            f"score={self._score}, game_over={self._game_over})"
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake,
            food=self._food,
            score=self._score,
            game_over=self._game_over,
            direction=self._direction,
            width=self._width,
            height=self._height,
        )

    def board(self) -> np.ndarray:
        return self.snapshot().board()

    # ---------- Transitions ----------
    def request_direction_change(self, new_direction: Direction) -> None:
        """Turn, unless it is a 180° reversal of the current heading (ignored)."""
        if not isinstance(new_direction, Direction):
            raise TypeError(f"expected a Direction, got {new_direction!r}")
        if is_opposite(new_direction, self._direction):
            return
        self._direction = new_direction

    def tick(self) -> None:
        """Advance one cell. No-op once the game is over."""
        if self._game_over:
            return

        # Wall collision, decided before the shifted cell exists
        if not self._can_step():
            self._game_over = True
            return

        hx, hy = self._snake[0]
        dx, dy = self._direction.value
        new_head = (hx + dx, hy + dy)

        # Self collision against the pre-move body, tail included
        if new_head in self._snake:
            self._game_over = True
            return

        # Eating the last free cell leaves nowhere for food: the board is full
        if new_head == self._food and len(self._snake) + 1 >= self._width * self._height:
            logger.debug("board %dx%d full at score %d", self._width, self._height, self._score)
            self._game_over = True
            return

        # Move / grow
        self._snake.appendleft(new_head)
        if new_head == self._food:
            self._score += 1
            self._food = spawn_food(
                self._snake, self._width, self._height, self._rng, self._placement_attempts
            )
        else:
            self._snake.pop()

    def _can_step(self) -> bool:
        x, y = self._snake[0]
        d = self._direction
        if d is Direction.UP:
            return y > 0
        if d is Direction.DOWN:
            return y < self._height - 1
        if d is Direction.LEFT:
            return x > 0
        return x < self._width - 1

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

def new_game_state(cfg: Config = CFG) -> GameState:
    return GameState.new(cfg.grid_w, cfg.grid_h, seed=cfg.seed, placement_attempts=cfg.placement_attempts)
