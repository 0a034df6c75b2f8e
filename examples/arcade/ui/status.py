"""Bottom status bar and prompt text."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_STATUS_BG, COLOR_TEXT, COLOR_TEXT_DIM, FONT_NAME, STATUS_H


class StatusBar:
    """A two-line bar: a message and a dimmer hint line."""

    def __init__(self) -> None:
        self._message = ""
        self._color = COLOR_TEXT
        self._hint = ""
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(FONT_NAME, 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT, hint: str = "") -> None:
        self._message = message
        self._color = color
        self._hint = hint

    def draw(self, surface: pygame.Surface, top: int) -> None:
        bar_rect = pygame.Rect(0, top, surface.get_width(), STATUS_H)
        pygame.draw.rect(surface, COLOR_STATUS_BG, bar_rect)
        font = self._get_font()
        if self._message:
            surface.blit(font.render(self._message, True, self._color), (8, top + 6))
        if self._hint:
            surface.blit(font.render(self._hint, True, COLOR_TEXT_DIM), (8, top + 26))
