"""Captured-creature list below the map."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_LOG_BG, COLOR_TEXT, COLOR_TEXT_DIM, GRID_PX, LOG_H, SCREEN_W


def draw_encounter_log(
    surface: pygame.Surface,
    font: pygame.font.Font,
    encounters: tuple[str, ...],
) -> None:
    """Draw the most recent encounters that fit, newest last."""
    pygame.draw.rect(surface, COLOR_LOG_BG, (0, GRID_PX, SCREEN_W, LOG_H))
    pygame.draw.line(surface, (50, 50, 60), (0, GRID_PX), (SCREEN_W, GRID_PX))

    header = font.render(f"Captured ({len(encounters)})", True, COLOR_TEXT)
    surface.blit(header, (6, GRID_PX + 4))

    line_h = 14
    max_lines = max(1, (LOG_H - 24) // line_h)
    ty = GRID_PX + 22
    for label in encounters[-max_lines:]:
        surface.blit(font.render(label, True, COLOR_TEXT_DIM), (12, ty))
        ty += line_h
