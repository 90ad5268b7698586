"""Procedural map generation from zone percentage targets."""
from __future__ import annotations

import logging
import random

from tick_overworld.config import MapConfig
from tick_overworld.state import GameState
from tick_overworld.types import GRASS, LAND, WATER, Grid
from tick_overworld.zones import fill_zone

log = logging.getLogger(__name__)


def zone_target(pct: float, size: int) -> int:
    """Number of cells a zone should cover: floor(pct% of size)."""
    # Multiply before dividing so whole percentages stay exact.
    return int(pct * size // 100)


def generate_map(
    rows: int,
    columns: int,
    water_pct: float,
    grass_pct: float,
    rng: random.Random,
) -> tuple[Grid, int]:
    """Build a grid of terrain codes and the starting cursor.

    Every cell starts as land. A water zone is grown first, then a grass zone,
    which may paint over water. The cursor starts at the middle flat index
    whatever its terrain. No validation: non-positive dimensions give an
    empty grid.
    """
    rows, columns = max(rows, 0), max(columns, 0)
    size = rows * columns
    grid: Grid = [LAND] * size

    water = fill_zone(grid, rows, columns, WATER, zone_target(water_pct, size), rng)
    grass = fill_zone(grid, rows, columns, GRASS, zone_target(grass_pct, size), rng)
    log.debug("generated %dx%d map: %d water, %d grass cells", rows, columns, water, grass)

    return grid, len(grid) // 2


def generate_state(config: MapConfig, rng: random.Random) -> GameState:
    grid, cursor = generate_map(
        config.rows, config.columns, config.water_pct, config.grass_pct, rng
    )
    return GameState(rows=config.rows, columns=config.columns, cursor=cursor, grid=grid)
