"""Image cache keyed by asset URL, backed by pygame surfaces."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

import pygame

from ui.constants import DEFAULT_PLACEHOLDER, PLACEHOLDER_COLORS, SPRITE_SIZE

logger = logging.getLogger(__name__)


def placeholder(url: str) -> pygame.Surface:
    """Flat stand-in for a missing image, sized like the real art."""
    stem = Path(url).stem
    color = DEFAULT_PLACEHOLDER
    for prefix, candidate in PLACEHOLDER_COLORS.items():
        if stem.startswith(prefix):
            color = candidate
            break
    surface = pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)
    w, h = SPRITE_SIZE
    # Visible body sits in the lower part of the 101x171 cell like the real art.
    surface.fill(color, pygame.Rect(0, 50, w, h - 80))
    return surface


class ImageCache:
    """``load(urls)``, ``on_ready(callback)``, ``get(url)``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._images: dict[str, pygame.Surface] = {}
        self._callbacks: list[Callable[[], None]] = []
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def load(self, urls: Iterable[str]) -> None:
        self._ready = False
        for url in urls:
            if url in self._images:
                continue
            path = self._root / url
            try:
                image = pygame.image.load(str(path)).convert_alpha()
            except (FileNotFoundError, pygame.error) as exc:
                logger.warning("using placeholder for %s (%s)", url, exc)
                image = placeholder(url)
            self._images[url] = image
        self._ready = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def on_ready(self, callback: Callable[[], None]) -> None:
        if self._ready:
            callback()
        else:
            self._callbacks.append(callback)

    def get(self, url: str) -> pygame.Surface:
        """Raises KeyError for an image that was never loaded."""
        return self._images[url]
