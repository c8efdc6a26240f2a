# gridsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional

THEMES = ("prototype", "full")

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / rules
    grid_half: int = 15
    step_sec: float = 0.18
    food_count: int = 3
    obstacle_count: int = 3
    seed: Optional[int] = None

    # spawn / scheduling guards
    max_spawn_attempts: int = 10_000
    max_frame_dt: Optional[float] = None   # None = never clamp a frame's dt

    # render
    fps: int = 60
    render_cell: int = 20
    render_title: str = "Snake"
    render_theme: str = "prototype"
    render_grid_lines: bool = False
    render_show_hud: bool = True

    def __post_init__(self):
        if self.grid_half < 1:
            raise ValueError(f"grid_half must be >= 1, got {self.grid_half}")
        if self.step_sec <= 0:
            raise ValueError(f"step_sec must be > 0, got {self.step_sec}")
        if self.food_count < 0 or self.obstacle_count < 0:
            raise ValueError("food_count and obstacle_count must be non-negative")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be >= 1")
        if self.max_frame_dt is not None and self.max_frame_dt <= 0:
            raise ValueError("max_frame_dt must be > 0 when set")
        if self.fps < 1 or self.render_cell < 1:
            raise ValueError("fps and render_cell must be >= 1")
        if self.render_theme not in THEMES:
            raise ValueError(f"unknown render_theme {self.render_theme!r}, expected one of {THEMES}")
        # a fresh snake + every food + every 2x2 obstacle must fit with room to spare
        needed = 1 + self.food_count + 4 * self.obstacle_count
        if self.board_cells <= needed:
            raise ValueError(
                f"board too small: {self.board_cells} cells for {needed} initial occupants "
                f"(grid_half={self.grid_half}, food_count={self.food_count}, "
                f"obstacle_count={self.obstacle_count})"
            )
        # on a 3x3 board every 2x2 footprint covers the origin, where the snake starts
        if self.obstacle_count and self.grid_half < 2:
            raise ValueError(f"obstacles need grid_half >= 2, got {self.grid_half}")

    @property
    def board_side(self) -> int:
        return 2 * self.grid_half + 1

    @property
    def board_cells(self) -> int:
        return self.board_side * self.board_side

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
