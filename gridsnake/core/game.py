# gridsnake/core/game.py
from __future__ import annotations
import logging
from typing import Optional, Tuple
from .clock import SimulationClock
from .input_router import InputRouter
from .interfaces import Cell, Footprint, GameState, Reason, Snapshot
from .snake_rules import SnakeSimulation
from gridsnake.config import AppConfig

logger = logging.getLogger(__name__)

class SnakeGame:
    """Everything a host needs: reset, tick, steer, and read-only state.

    Renderers interpolate between ``previous_snapshot()`` and ``snapshot()``
    using ``progress``; nothing here holds a rendering handle.
    """

    def __init__(self, cfg: Optional[AppConfig] = None):
        self.cfg = cfg or AppConfig()
        self.sim = SnakeSimulation(self.cfg)
        self.clock = SimulationClock(self.cfg.step_sec, max_dt=self.cfg.max_frame_dt)
        self.router = InputRouter(self.sim)
        self.episode = 0
        self.reset()

    def reset(self, *, seed: Optional[int] = None) -> Snapshot:
        if seed is not None:
            self.sim.seed(seed)
        self.sim.reset()
        self.clock.reset()
        self.episode += 1
        self._prev = self._cur = self.sim.snapshot()
        logger.info(
            "episode %d started (foods=%d, obstacles=%d)",
            self.episode, len(self._cur.foods), len(self._cur.obstacles),
        )
        return self._cur

    def load_state(self, state: dict) -> Snapshot:
        """Restore a ``SnakeSimulation.get_state()`` dict and resync the snapshots."""
        self.sim.set_state(state)
        self.clock.reset()
        self._prev = self._cur = self.sim.snapshot()
        return self._cur

    def _step(self) -> None:
        before = self._cur
        self._cur = self.sim.step()
        # freeze the last frame once the episode ends
        self._prev = before if self._cur.running else self._cur

    def tick(self, dt: float) -> int:
        """Advance wall time by ``dt`` seconds; returns the number of steps run."""
        return self.clock.advance(dt, self._step)

    def set_direction(self, symbol) -> bool:
        return self.router.set_direction(symbol)

    # ---- read accessors ----
    def snapshot(self) -> Snapshot:
        return self._cur

    def previous_snapshot(self) -> Snapshot:
        return self._prev

    @property
    def snake(self) -> Tuple[Cell, ...]:
        return self._cur.snake

    @property
    def foods(self) -> Tuple[Cell, ...]:
        return self._cur.foods

    @property
    def obstacles(self) -> Tuple[Footprint, ...]:
        return self._cur.obstacles

    @property
    def score(self) -> int:
        return self._cur.score

    @property
    def state(self) -> GameState:
        return self._cur.state

    @property
    def reason(self) -> Reason | None:
        return self._cur.reason

    @property
    def progress(self) -> float:
        if not self._cur.running:
            return 0.0
        return self.clock.progress
