# gridsnake/viz/renderer_pygame.py
from __future__ import annotations
from typing import List, Optional, Tuple
import pygame as pg
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot
from gridsnake.viz.renderer_colors import Theme, get_theme

HUD_PX = 28

def interpolate_segments(prev: Snapshot, cur: Snapshot, t: float) -> List[Tuple[float, float]]:
    """Blend each segment from where it was in ``prev`` to where it is in ``cur``.

    A segment that did not exist in ``prev`` (the one just grown) starts at
    its own target, so it appears in place rather than sliding in.
    """
    t = min(max(t, 0.0), 1.0)
    out = []
    for i, (x, z) in enumerate(cur.snake):
        px, pz = prev.snake[i] if i < len(prev.snake) else (x, z)
        out.append((px + (x - px) * t, pz + (z - pz) * t))
    return out

class PygameRenderer:
    def __init__(self):
        self.cell = 20
        self.cfg: Optional[AppConfig] = None
        self.theme: Optional[Theme] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._half = 0
        self._hud = 0

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self._configure(cfg)

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.size)
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface; the caller flips and keeps time."""
        if not pg.get_init():
            pg.init()
        self._configure(cfg)
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def _configure(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.theme = get_theme(cfg.render_theme)
        self.cell = cfg.render_cell
        self._half = cfg.grid_half
        self._hud = HUD_PX if cfg.render_show_hud else 0

    @property
    def size(self) -> Tuple[int, int]:
        side = (2 * self._half + 1) * self.cell
        return side, side + self._hud

    def to_px(self, x: float, z: float) -> Tuple[int, int]:
        return (round((x + self._half) * self.cell),
                round((z + self._half) * self.cell) + self._hud)

    def draw(self, prev: Snapshot, cur: Snapshot, progress: float) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None and self.theme is not None, "Renderer config not set (call open first)"
        surf, c, theme = self.surf, self.cell, self.theme

        surf.fill(theme.BG)
        w, h = self.size
        surf.fill(theme.GROUND, pg.Rect(0, self._hud, w, h - self._hud))

        if self.cfg.render_grid_lines:
            for i in range(2 * self._half + 2):
                pg.draw.line(surf, theme.GRID, (i * c, self._hud), (i * c, h))
                pg.draw.line(surf, theme.GRID, (0, self._hud + i * c), (w, self._hud + i * c))

        for fp in cur.obstacles:
            bx, bz = min(fp)
            pg.draw.rect(surf, theme.OBSTACLE, pg.Rect(*self.to_px(bx, bz), 2 * c, 2 * c))

        r = max(c // 2 - 1, 1)
        for (fx, fz) in cur.foods:
            px, pz = self.to_px(fx, fz)
            pg.draw.circle(surf, theme.FOOD, (px + c // 2, pz + c // 2), r)

        segments = interpolate_segments(prev, cur, progress)
        # tail first so the head is drawn on top
        for i in range(len(segments) - 1, -1, -1):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(*self.to_px(*segments[i]), c, c))

        if self.cfg.render_show_hud:
            status = "" if cur.running else "Game Over"
            self._text(f"Score: {cur.score}   {status}", (6, 6))

        if not cur.running:
            self._game_over_panel(cur)

        if self._auto_flip:
            pg.display.flip()

    def tick(self, fps: int) -> float:
        if self.clock:
            return self.clock.tick(fps) / 1000.0
        return 0.0

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _text(self, msg: str, pos: Tuple[int, int]) -> pg.Rect:
        assert self.surf is not None and self.theme is not None
        font = pg.font.SysFont(None, 22)
        txt = font.render(msg, True, self.theme.TEXT)
        return self.surf.blit(txt, pos)

    def _game_over_panel(self, s: Snapshot) -> None:
        assert self.surf is not None and self.theme is not None
        w, h = self.size
        panel = pg.Rect(0, 0, min(w - 20, 240), 78)
        panel.center = (w // 2, h // 2)
        pg.draw.rect(self.surf, self.theme.PANEL, panel)
        reason = s.reason.value if s.reason else ""
        self._text("Game Over", (panel.x + 10, panel.y + 8))
        self._text(f"Reason: {reason}", (panel.x + 10, panel.y + 30))
        self._text(f"Final score: {s.score}   (R to restart)", (panel.x + 10, panel.y + 52))
