# gridsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

Cell = Tuple[int, int]                         # (x, z)
Footprint = Tuple[Cell, Cell, Cell, Cell]      # 2x2 obstacle cells

RIGHT: Cell = (1, 0)
LEFT: Cell = (-1, 0)
DOWN: Cell = (0, 1)
UP: Cell = (0, -1)
DIRS = (RIGHT, DOWN, LEFT, UP)

class GameState(str, Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"

class Reason(str, Enum):
    HIT_WALL = "hit wall"
    HIT_SELF = "hit itself"
    HIT_OBSTACLE = "hit obstacle"

class Occupant(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    OBSTACLE = 3

def is_reverse(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]             # head first
    foods: Tuple[Cell, ...]
    obstacles: Tuple[Footprint, ...]
    dir: Cell
    score: int
    step_count: int
    state: GameState
    reason: Reason | None
    grid_half: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING
