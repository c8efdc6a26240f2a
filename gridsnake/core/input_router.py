# gridsnake/core/input_router.py
from __future__ import annotations
from typing import Optional
from .interfaces import Cell, UP, DOWN, LEFT, RIGHT, is_reverse
from .snake_rules import SnakeSimulation

# symbol -> direction; w/a/s/d and arrow-key names are accepted too
SYMBOLS = {
    "up": UP, "w": UP, "arrowup": UP,
    "down": DOWN, "s": DOWN, "arrowdown": DOWN,
    "left": LEFT, "a": LEFT, "arrowleft": LEFT,
    "right": RIGHT, "d": RIGHT, "arrowright": RIGHT,
}

def to_direction(symbol) -> Optional[Cell]:
    if not isinstance(symbol, str):
        return None
    return SYMBOLS.get(symbol.strip().lower())

class InputRouter:
    def __init__(self, sim: SnakeSimulation):
        self.sim = sim

    def set_direction(self, symbol) -> bool:
        """Queue a turn for the next step. Returns False when the input is dropped."""
        d = to_direction(symbol)
        if d is None or self.sim.terminated:
            return False
        # compare against the latched direction, not the pending one
        if is_reverse(d, self.sim.dir):
            return False
        self.sim.queue_direction(d)
        return True
