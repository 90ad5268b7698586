"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_TEXT, GRID_PX, LOG_H, SCREEN_W, STATUS_H


class StatusBar:
    """Displays the latest message at the bottom of the screen."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_TEXT

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        top = GRID_PX + LOG_H
        pygame.draw.rect(surface, (30, 30, 40), (0, top, SCREEN_W, STATUS_H))
        if self._message:
            text = font.render(self._message, True, self._color)
            surface.blit(text, (8, top + 7))
