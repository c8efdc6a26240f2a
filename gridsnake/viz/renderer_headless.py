# gridsnake/viz/renderer_headless.py
from __future__ import annotations
import logging
from typing import Optional
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Occupant, Snapshot
from gridsnake.core.occupancy import GridOccupancy

logger = logging.getLogger(__name__)

GLYPHS = {Occupant.EMPTY: ".", Occupant.SNAKE: "o", Occupant.FOOD: "*", Occupant.OBSTACLE: "#"}

def board_text(s: Snapshot) -> str:
    grid = GridOccupancy(s.grid_half).as_array(s.snake, s.foods, s.obstacles)
    rows = ["".join(GLYPHS[Occupant(v)] for v in row) for row in grid]
    if s.running:
        hx, hz = s.head
        row = list(rows[hz + s.grid_half])
        row[hx + s.grid_half] = "@"
        rows[hz + s.grid_half] = "".join(row)
    return "\n".join(rows)

class HeadlessRenderer:
    """No window. Counts frames and, if asked, logs the board every ``log_every`` frames."""
    def __init__(self, log_every: Optional[int] = None, dt: Optional[float] = None):
        self.log_every = log_every
        self.dt = dt
        self.frames = 0
        self.last: Optional[Snapshot] = None
        self.cfg: Optional[AppConfig] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames = 0

    def draw(self, prev: Snapshot, cur: Snapshot, progress: float) -> None:
        self.frames += 1
        self.last = cur
        if self.log_every and self.frames % self.log_every == 0:
            logger.info("frame %d score=%d\n%s", self.frames, cur.score, board_text(cur))

    def tick(self, fps: int) -> float:
        # fixed virtual frame time, no sleeping
        return self.dt if self.dt is not None else 1.0 / fps

    def close(self) -> None:
        pass
