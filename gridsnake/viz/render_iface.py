# gridsnake/viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, prev: Snapshot, cur: Snapshot, progress: float) -> None: ...
    def tick(self, fps: int) -> float: ...   # seconds since the previous tick
    def close(self) -> None: ...
