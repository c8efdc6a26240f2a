# gridsnake/viz/renderer_colors.py
from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

@dataclass(frozen=True)
class Theme:
    BG: RGB
    GROUND: RGB
    GRID: RGB
    HEAD: RGB
    BODY: RGB
    FOOD: RGB
    OBSTACLE: RGB
    TEXT: RGB
    PANEL: RGB

# flat colours, dark board
PROTOTYPE = Theme(
    BG=(0x20, 0x20, 0x20),
    GROUND=(0x33, 0x33, 0x33),
    GRID=(0x44, 0x44, 0x44),
    HEAD=(0x66, 0xff, 0x66),
    BODY=(0x00, 0xff, 0x00),
    FOOD=(0xff, 0x00, 0x00),
    OBSTACLE=(0x55, 0x55, 0xff),
    TEXT=(0xee, 0xee, 0xee),
    PANEL=(0x10, 0x10, 0x10),
)

# brighter sky, grass-like board
FULL = Theme(
    BG=(0x88, 0xaa, 0xff),
    GROUND=(0x5c, 0x8a, 0x3a),
    GRID=(0x4e, 0x78, 0x30),
    HEAD=(0x80, 0xff, 0xc0),
    BODY=(0x00, 0xff, 0x80),
    FOOD=(0xff, 0x40, 0x40),
    OBSTACLE=(0x33, 0x66, 0xff),
    TEXT=(0x10, 0x10, 0x10),
    PANEL=(0xf0, 0xf0, 0xf0),
)

THEMES = {"prototype": PROTOTYPE, "full": FULL}

def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"unknown theme {name!r}, expected one of {sorted(THEMES)}") from None
