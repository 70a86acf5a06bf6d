"""Render pass over a drawing surface and an image cache.

Both collaborators are protocols; the pygame front end provides one
implementation, tests provide a recording fake.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Protocol

from frogger.entities import AVATAR_SPRITES, ENEMY_SPRITE, GEM_SPRITE
from frogger.session import SessionState

if TYPE_CHECKING:
    from frogger.entities import Sprite
    from frogger.game import GameState

ROW_IMAGES = (
    "images/water-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/grass-block.png",
    "images/grass-block.png",
)
ROW_STRIDE = 83
START_IMAGE = "images/start-message.png"
ASSET_URLS = (
    "images/stone-block.png",
    "images/water-block.png",
    "images/grass-block.png",
    ENEMY_SPRITE,
    *AVATAR_SPRITES,
    GEM_SPRITE,
    START_IMAGE,
)

TEXT_FONT = "24px sans-serif"
TEXT_COLOR = "#a12a04"
TEXT_ALIGN = "center"
TEXT_Y = 40


class Surface(Protocol):
    def draw_image(self, handle: Any, x: float, y: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...


class ResourceCache(Protocol):
    def load(self, urls: Iterable[str]) -> None: ...

    def on_ready(self, callback: Callable[[], None]) -> None: ...

    def get(self, url: str) -> Any: ...


def draw_sprite(surface: Surface, cache: ResourceCache, sprite: Sprite) -> None:
    surface.draw_image(cache.get(sprite.sprite), sprite.x, sprite.y)


def render_stage(surface: Surface, cache: ResourceCache, state: GameState) -> None:
    config = state.config
    for row in range(config.rows):
        image = cache.get(ROW_IMAGES[min(row, len(ROW_IMAGES) - 1)])
        for col in range(config.cols):
            surface.draw_image(image, col * config.tile_width, row * ROW_STRIDE)


def render_intro(surface: Surface, cache: ResourceCache, state: GameState) -> None:
    config = state.config
    for index, url in enumerate(AVATAR_SPRITES):
        surface.draw_image(cache.get(url), config.tile_x(index), config.spawn_y)
    surface.draw_image(cache.get(START_IMAGE), 0, 0)


def render_entities(surface: Surface, cache: ResourceCache, state: GameState) -> None:
    for enemy in state.roster:
        draw_sprite(surface, cache, enemy)
    if state.gem is not None:
        draw_sprite(surface, cache, state.gem)
    surface.fill_text(state.message, state.config.stage_width / 2, TEXT_Y)
    if state.player is not None:
        draw_sprite(surface, cache, state.player)


def render(state: GameState, surface: Surface, cache: ResourceCache) -> None:
    """Draw one frame: stage, then the intro picker or the live entities."""
    render_stage(surface, cache, state)
    if state.session is SessionState.INTRO:
        render_intro(surface, cache, state)
    else:
        render_entities(surface, cache, state)
