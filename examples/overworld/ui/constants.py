"""Layout, color, and rendering constants."""
from __future__ import annotations

# Layout
GRID_PX = 480
SIDEBAR_W = 220
LOG_H = 100
STATUS_H = 28
SCREEN_W = GRID_PX + SIDEBAR_W
SCREEN_H = GRID_PX + LOG_H + STATUS_H
FPS = 60

# Input limits for the settings keys
MIN_SIZE = 3
MAX_SIZE = 40
PCT_STEP = 5

# Colors
COLOR_BG = (20, 20, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_LOG_BG = (18, 18, 25)
COLOR_GRID_LINE = (0, 0, 0)
COLOR_CURSOR = (220, 40, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (120, 120, 130)
COLOR_OK = (100, 255, 100)
COLOR_WARN = (255, 180, 80)
COLOR_ERROR = (255, 80, 80)


def tile_size(rows: int, columns: int) -> int:
    """Largest square tile that fits the map into the grid area."""
    return max(4, min(40, GRID_PX // max(rows, columns)))
