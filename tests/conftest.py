# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a source checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from gridsnake.config import AppConfig

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((800, 600))

@pytest.fixture
def cfg():
    return AppConfig(seed=1234)

@pytest.fixture
def sim_factory(cfg):
    from gridsnake.core.snake_rules import SnakeSimulation
    def make(**overrides):
        return SnakeSimulation(cfg.with_(**overrides))
    return make

@pytest.fixture
def make_state():
    """Build a SnakeSimulation.get_state()-shaped dict for a hand-made board."""
    from gridsnake.core.spawn import obstacle_footprint
    def make(snake, dir=(1, 0), foods=(), obstacle_bases=(), score=None):
        return {
            "snake": list(snake),
            "dir": dir,
            "pending_dir": dir,
            "foods": list(foods),
            "obstacles": [obstacle_footprint(b) for b in obstacle_bases],
            "score": len(snake) - 1 if score is None else score,
            "step_count": 0,
            "state": "running",
            "reason": None,
        }
    return make
