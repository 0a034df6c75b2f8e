"""Glyph rendering of the board, driven by redraw events."""
from __future__ import annotations

import pygame

from pakman import Redraw
from ui.constants import COLOR_BG, FONT_NAME


class BoardView:
    """Keeps an off-screen surface in sync with redraw events.

    Only cells named by a Redraw are repainted; the round start sends
    every cell once.
    """

    def __init__(self, tile_size: int) -> None:
        self._tile = tile_size
        self._surface: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(FONT_NAME, self._tile, bold=True)
        return self._font

    def reset(self, width: int, height: int) -> None:
        self._surface = pygame.Surface((width * self._tile, height * self._tile))
        self._surface.fill(COLOR_BG)

    def clear(self) -> None:
        self._surface = None

    def pixel_size(self, width: int, height: int) -> tuple[int, int]:
        return (width * self._tile, height * self._tile)

    def on_redraw(self, event: Redraw) -> None:
        if self._surface is None:
            return
        x, y = event.coord
        rect = pygame.Rect(x * self._tile, y * self._tile, self._tile, self._tile)
        pygame.draw.rect(self._surface, COLOR_BG, rect)
        if event.glyph.strip():
            text = self._get_font().render(event.glyph, True, event.color)
            self._surface.blit(text, text.get_rect(center=rect.center))

    def draw(self, screen: pygame.Surface) -> None:
        if self._surface is not None:
            screen.blit(self._surface, (0, 0))
