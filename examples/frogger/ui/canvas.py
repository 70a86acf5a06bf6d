"""Drawing surface over a pygame display."""
from __future__ import annotations

import pygame


class PygameCanvas:
    """``draw_image(handle, x, y)`` and centred ``fill_text(text, x, y)``."""

    def __init__(
        self,
        screen: pygame.Surface,
        font: pygame.font.Font,
        color: tuple[int, int, int],
    ) -> None:
        self._screen = screen
        self._font = font
        self._color = color

    def clear(self, color: tuple[int, int, int]) -> None:
        self._screen.fill(color)

    def draw_image(self, handle: pygame.Surface, x: float, y: float) -> None:
        self._screen.blit(handle, (round(x), round(y)))

    def fill_text(self, text: str, x: float, y: float) -> None:
        # y is the text baseline, as on an HTML canvas
        image = self._font.render(text, True, self._color)
        rect = image.get_rect()
        rect.midbottom = (round(x), round(y) - self._font.get_descent())
        self._screen.blit(image, rect)
