# gridsnake/runners/run_headless.py
from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple
from gridsnake.config import AppConfig
from gridsnake.core.game import SnakeGame
from gridsnake.core.interfaces import Reason
from gridsnake.viz.render_iface import Renderer
from gridsnake.viz.renderer_headless import HeadlessRenderer

logger = logging.getLogger(__name__)

STEER = ("up", "down", "left", "right")

def run_episode(
    game: SnakeGame,
    rend: Renderer,
    fps: int,
    rng: random.Random,
    turn_prob: float = 0.15,
    max_frames: int = 20_000,
) -> Tuple[int, Optional[Reason]]:
    """Random steering until the snake dies or ``max_frames`` pass."""
    for _ in range(max_frames):
        if rng.random() < turn_prob:
            game.set_direction(rng.choice(STEER))
        game.tick(rend.tick(fps))
        rend.draw(game.previous_snapshot(), game.snapshot(), game.progress)
        if not game.snapshot().running:
            break
    return game.score, game.reason

def main(cfg: AppConfig = AppConfig(), episodes: int = 5, log_every: Optional[int] = None) -> List[Tuple[int, Optional[Reason]]]:
    game = SnakeGame(cfg)
    rend = HeadlessRenderer(log_every=log_every)
    rend.open(cfg)
    rng = random.Random(cfg.seed)

    results = []
    for ep in range(episodes):
        if ep:
            game.reset()
        score, reason = run_episode(game, rend, cfg.fps, rng)
        results.append((score, reason))
        logger.info("[ep %d] score=%d reason=%s steps=%d", ep, score,
                    reason.value if reason else "timeout", game.snapshot().step_count)
    rend.close()
    return results
