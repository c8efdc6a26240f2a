# gridsnake/core/occupancy.py  (pure queries, no state of its own)
from __future__ import annotations
from typing import Iterable, Sequence
import numpy as np
from .interfaces import Cell, Footprint, Occupant

class GridOccupancy:
    """Answers "what is on this cell?" for a board of half-extent ``grid_half``.

    Nothing is cached: every query takes the current snake, foods and
    obstacles so callers can never read stale occupancy.
    """

    def __init__(self, grid_half: int):
        self.grid_half = grid_half

    def in_bounds(self, cell: Cell) -> bool:
        h = self.grid_half
        return -h <= cell[0] <= h and -h <= cell[1] <= h

    @staticmethod
    def obstacle_covers(cell: Cell, obstacles: Iterable[Footprint]) -> bool:
        return any(cell in fp for fp in obstacles)

    def occupant(
        self,
        cell: Cell,
        snake: Sequence[Cell],
        foods: Iterable[Cell],
        obstacles: Iterable[Footprint],
    ) -> Occupant:
        if cell in snake:
            return Occupant.SNAKE
        if self.obstacle_covers(cell, obstacles):
            return Occupant.OBSTACLE
        if cell in foods:
            return Occupant.FOOD
        return Occupant.EMPTY

    def is_occupied(self, cell: Cell, snake, foods, obstacles) -> bool:
        return self.occupant(cell, snake, foods, obstacles) is not Occupant.EMPTY

    def as_array(self, snake, foods, obstacles) -> np.ndarray:
        """Board of Occupant codes, shape (2H+1, 2H+1), indexed [z+H, x+H].

        Later layers overwrite earlier ones so the result agrees with
        ``occupant`` on overlapping categories.
        """
        h = self.grid_half
        side = 2 * h + 1
        grid = np.zeros((side, side), dtype=np.int8)
        for (x, z) in foods:
            grid[z + h, x + h] = Occupant.FOOD
        for fp in obstacles:
            for (x, z) in fp:
                grid[z + h, x + h] = Occupant.OBSTACLE
        for (x, z) in snake:
            if self.in_bounds((x, z)):
                grid[z + h, x + h] = Occupant.SNAKE
        return grid
