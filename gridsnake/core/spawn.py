# gridsnake/core/spawn.py
from __future__ import annotations
import logging
import random
from typing import Optional
from .interfaces import Cell, Footprint
from .occupancy import GridOccupancy

logger = logging.getLogger(__name__)

class SpawnError(RuntimeError):
    """The board has no free cell (or 2x2 area) left to place on."""

def obstacle_footprint(base: Cell) -> Footprint:
    x, z = base
    return ((x, z), (x + 1, z), (x, z + 1), (x + 1, z + 1))

class SpawnPlanner:
    def __init__(
        self,
        occupancy: GridOccupancy,
        rng: Optional[random.Random] = None,
        max_attempts: int = 10_000,
    ):
        self.occupancy = occupancy
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def place_food(self, snake, foods, obstacles) -> Cell:
        h = self.occupancy.grid_half
        snake = set(snake)
        for _ in range(self.max_attempts):
            cell = (self.rng.randint(-h, h), self.rng.randint(-h, h))
            if not self.occupancy.is_occupied(cell, snake, foods, obstacles):
                logger.debug("food spawned at %s", cell)
                return cell
        # crowded board: pick among what is actually left
        free = [(x, z) for x in range(-h, h + 1) for z in range(-h, h + 1)
                if not self.occupancy.is_occupied((x, z), snake, foods, obstacles)]
        if not free:
            raise SpawnError(
                f"no free cell for food "
                f"(snake={len(snake)}, foods={len(foods)}, obstacles={len(obstacles)})"
            )
        cell = self.rng.choice(free)
        logger.debug("food spawned at %s after %d rejected samples", cell, self.max_attempts)
        return cell

    def _fits(self, fp: Footprint, snake, foods, obstacles) -> bool:
        return not any(self.occupancy.is_occupied(c, snake, foods, obstacles) for c in fp)

    def place_obstacle(self, snake, foods, obstacles) -> Footprint:
        # base stays in [-H, H-1] so the 2x2 footprint never leaves the board
        h = self.occupancy.grid_half
        snake = set(snake)
        for _ in range(self.max_attempts):
            base = (self.rng.randint(-h, h - 1), self.rng.randint(-h, h - 1))
            fp = obstacle_footprint(base)
            if self._fits(fp, snake, foods, obstacles):
                logger.debug("obstacle spawned at base %s", base)
                return fp
        free = [fp for fp in (obstacle_footprint((x, z)) for x in range(-h, h) for z in range(-h, h))
                if self._fits(fp, snake, foods, obstacles)]
        if not free:
            raise SpawnError(
                f"no free 2x2 area for obstacle "
                f"(snake={len(snake)}, foods={len(foods)}, obstacles={len(obstacles)})"
            )
        fp = self.rng.choice(free)
        logger.debug("obstacle spawned at base %s after %d rejected samples", fp[0], self.max_attempts)
        return fp
