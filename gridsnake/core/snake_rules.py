# gridsnake/core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
from typing import Optional
from .interfaces import Cell, GameState, Reason, Snapshot, RIGHT
from .occupancy import GridOccupancy
from .spawn import SpawnPlanner
from gridsnake.config import AppConfig

logger = logging.getLogger(__name__)

ORIGIN: Cell = (0, 0)

class SnakeSimulation:
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self.occupancy = GridOccupancy(cfg.grid_half)
        self.spawner = SpawnPlanner(
            self.occupancy,
            rng=random.Random(cfg.seed),
            max_attempts=cfg.max_spawn_attempts,
        )
        self._reset_state()

    def seed(self, seed: Optional[int]):
        self.spawner.seed(seed)

    def _reset_state(self):
        self.snake: list[Cell] = [ORIGIN]
        self.dir: Cell = RIGHT
        self.pending_dir: Cell = RIGHT
        self.obstacles: list = []
        self.score = 0
        self.step_count = 0
        self.state = GameState.RUNNING
        self.reason: Reason | None = None
        # food before obstacles, so obstacles also steer clear of food
        self.foods: list[Cell] = self._refilled(self.snake, [])
        for _ in range(self.cfg.obstacle_count):
            self.obstacles.append(
                self.spawner.place_obstacle(self.snake, self.foods, self.obstacles)
            )

    def reset(self) -> Snapshot:
        self._reset_state()
        return self.snapshot()

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def terminated(self) -> bool:
        return self.state is GameState.GAME_OVER

    def queue_direction(self, d: Cell) -> None:
        """Set the direction the next step will latch. Validation is the caller's job."""
        self.pending_dir = d

    def _refilled(self, snake, foods) -> list[Cell]:
        """``foods`` topped back up to food_count against ``snake``; raises SpawnError on a full board."""
        foods = list(foods)
        while len(foods) < self.cfg.food_count:
            foods.append(self.spawner.place_food(snake, foods, self.obstacles))
        return foods

    def _game_over(self, reason: Reason):
        self.state, self.reason = GameState.GAME_OVER, reason
        logger.info("game over: %s (score=%d, steps=%d)", reason.value, self.score, self.step_count)

    def step(self) -> Snapshot:
        if self.terminated:
            return self.snapshot()

        d = self.pending_dir
        hx, hz = self.snake[0]
        new_head = (hx + d[0], hz + d[1])

        # collisions, all fatal before any growth
        reason = None
        if not self.occupancy.in_bounds(new_head):
            reason = Reason.HIT_WALL
        # whole body, tail included: stepping into the vacating tail still kills
        elif new_head in self.snake:
            reason = Reason.HIT_SELF
        elif self.occupancy.obstacle_covers(new_head, self.obstacles):
            reason = Reason.HIT_OBSTACLE
        if reason is not None:
            self.dir = d
            self.step_count += 1
            self._game_over(reason)
            return self.snapshot()

        if new_head in self.foods:
            grown = [new_head] + self.snake
            # spawn against the grown body first; a SpawnError leaves the board untouched
            foods = self._refilled(grown, [f for f in self.foods if f != new_head])
            self.snake, self.foods = grown, foods
            self.score += 1
        else:
            self.snake.insert(0, new_head)
            self.snake.pop()
        self.dir = d
        self.step_count += 1
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            foods=tuple(self.foods),
            obstacles=tuple(self.obstacles),
            dir=self.dir,
            score=self.score,
            step_count=self.step_count,
            state=self.state,
            reason=self.reason,
            grid_half=self.cfg.grid_half,
        )

    def get_state(self) -> dict:
        """Pure-Python state (plus RNG)."""
        return {
            "snake": list(self.snake),
            "dir": self.dir,
            "pending_dir": self.pending_dir,
            "foods": list(self.foods),
            "obstacles": [list(fp) for fp in self.obstacles],
            "score": self.score,
            "step_count": self.step_count,
            "state": self.state.value,
            "reason": self.reason.value if self.reason else None,
            "rng_state": self.spawner.rng.getstate(),
        }

    def set_state(self, state: dict) -> None:
        """Restore exact internal state (including RNG)."""
        self.snake = list(map(tuple, state["snake"]))
        self.dir = tuple(state["dir"])
        self.pending_dir = tuple(state.get("pending_dir", self.dir))
        self.foods = list(map(tuple, state["foods"]))
        self.obstacles = [tuple(map(tuple, fp)) for fp in state["obstacles"]]
        self.score = int(state["score"])
        self.step_count = int(state["step_count"])
        self.state = GameState(state["state"])
        self.reason = Reason(state["reason"]) if state["reason"] else None
        if "rng_state" in state:
            self.spawner.rng.setstate(tuple(state["rng_state"]))
