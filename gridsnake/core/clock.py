# gridsnake/core/clock.py
from __future__ import annotations
from typing import Callable, Optional

class SimulationClock:
    """Fixed-timestep accumulator.

    Each ``advance(dt, step_fn)`` adds the frame's wall time to a running
    timer and calls ``step_fn`` once per whole ``step_sec`` it holds, so a
    slow frame catches up with several steps and a fast one may run none.
    ``progress`` is the leftover fraction of a step, in [0, 1), for
    interpolating between the last two discrete states.
    """

    def __init__(self, step_sec: float, max_dt: Optional[float] = None):
        if step_sec <= 0:
            raise ValueError(f"step_sec must be > 0, got {step_sec}")
        self.step_sec = step_sec
        self.max_dt = max_dt
        self.timer = 0.0

    def reset(self) -> None:
        self.timer = 0.0

    @property
    def progress(self) -> float:
        return self.timer / self.step_sec

    def advance(self, dt: float, step_fn: Callable[[], object]) -> int:
        if dt < 0:
            dt = 0.0
        if self.max_dt is not None:
            dt = min(dt, self.max_dt)
        self.timer += dt
        steps = 0
        while self.timer >= self.step_sec:
            step_fn()
            self.timer -= self.step_sec
            steps += 1
        return steps
