"""Settings and controls sidebar."""
from __future__ import annotations

import pygame

from tick_overworld import MapConfig, MapSnapshot

from ui.constants import COLOR_SIDEBAR_BG, COLOR_TEXT, COLOR_TEXT_DIM, GRID_PX, SIDEBAR_W

CONTROLS = [
    "Arrows/WASD  move",
    "1 / 2        rows -/+",
    "3 / 4        columns -/+",
    "5 / 6        water -/+",
    "7 / 8        grass -/+",
    "9 / 0        land -/+",
    "F5 / F9      save / load",
    "Esc          quit",
]


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    config: MapConfig,
    snap: MapSnapshot,
) -> None:
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (GRID_PX, 0, SIDEBAR_W, GRID_PX))
    x = GRID_PX + 10
    y = 10
    row, column = snap.cursor_cell()
    lines = [
        f"Rows:    {config.rows}",
        f"Columns: {config.columns}",
        f"Water:   {config.water_pct}%",
        f"Grass:   {config.grass_pct}%",
        f"Land:    {config.land_pct}%",
        "",
        f"Cursor:  ({row}, {column})",
        f"Terrain: {snap.terrain_at(snap.cursor)}",
    ]
    for line in lines:
        surface.blit(font.render(line, True, COLOR_TEXT), (x, y))
        y += 16

    y += 12
    for line in CONTROLS:
        surface.blit(font.render(line, True, COLOR_TEXT_DIM), (x, y))
        y += 14
