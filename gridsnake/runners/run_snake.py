# gridsnake/runners/run_snake.py
import logging
from gridsnake.config import AppConfig
from gridsnake.core.game import SnakeGame
from gridsnake.viz.keyboard import Keyboard
from gridsnake.viz.render_iface import Renderer
from gridsnake.viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)

def main(cfg: AppConfig = AppConfig()):
    game = SnakeGame(cfg)

    rend: Renderer = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()

    rend.tick(cfg.fps)  # start the frame clock so the first dt is small
    try:
        running = True
        while running:
            for cmd in kbd.poll():
                if cmd == "quit":
                    running = False
                    break
                if cmd == "reset":
                    game.reset()
                else:
                    game.set_direction(cmd)

            dt = rend.tick(cfg.fps)
            game.tick(dt)
            rend.draw(game.previous_snapshot(), game.snapshot(), game.progress)
    finally:
        rend.close()
    logger.info("quit after %d episode(s), last score %d", game.episode, game.score)
