"""Terrain grid and cursor rendering."""
from __future__ import annotations

import pygame

from tick_overworld import MapSnapshot, terrain_of

from ui.constants import COLOR_CURSOR, COLOR_GRID_LINE, tile_size


def draw_map(surface: pygame.Surface, snap: MapSnapshot) -> None:
    """Draw every cell in its terrain color, with the cursor cell highlighted."""
    size = tile_size(snap.rows, snap.columns)
    for index, code in enumerate(snap.grid):
        row, column = divmod(index, snap.columns)
        rect = pygame.Rect(column * size, row * size, size, size)
        color = COLOR_CURSOR if index == snap.cursor else terrain_of(code).color
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)
