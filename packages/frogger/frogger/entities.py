"""Player, Enemy and Gem records.

The three variants share no base class. Anything with ``sprite``, ``x``,
``y``, ``width`` and ``height`` satisfies :class:`Sprite` and can be drawn
or hit-tested.
"""
from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from frogger.config import WATER_ROW, GameConfig
from frogger.rand import random_int, random_speed

if TYPE_CHECKING:
    from frogger.timers import TimerHandle

ENEMY_SPRITE = "images/enemy-bug.png"
GEM_SPRITE = "images/Gem-Blue.png"
AVATAR_SPRITES = (
    "images/char-boy.png",
    "images/char-cat-girl.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
    "images/char-princess-girl.png",
)

_STEPS = {
    "left": (-1, 0),
    "right": (1, 0),
    "up": (0, -1),
    "down": (0, 1),
}


class Sprite(Protocol):
    sprite: str
    x: float
    y: float
    width: int
    height: int


class Outcome(enum.Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


@dataclass
class Player:
    sprite: str
    col: int
    row: int
    x: float
    y: float
    width: int = 60
    height: int = 84
    is_alive: bool = True
    score: int = 0

    @classmethod
    def at_spawn(cls, sprite: str, config: GameConfig) -> Player:
        width, height = config.player_size
        return cls(
            sprite=sprite,
            col=config.spawn_col,
            row=config.spawn_row,
            x=config.tile_x(config.spawn_col),
            y=config.tile_y(config.spawn_row),
            width=width,
            height=height,
        )

    @property
    def tile(self) -> tuple[int, int]:
        return self.col, self.row

    @property
    def in_water(self) -> bool:
        return self.row == WATER_ROW

    def handle_input(self, direction: str, config: GameConfig) -> Outcome:
        """Hop one tile unless that would leave the grid.

        Landing on the water row reports ``Outcome.WON``; what a win means
        is up to the caller.
        """
        step = _STEPS.get(direction)
        if step is None:
            return Outcome.BLOCKED
        col, row = self.col + step[0], self.row + step[1]
        if not (0 <= col < config.cols and WATER_ROW <= row < config.rows):
            return Outcome.BLOCKED
        entered_water = row == WATER_ROW and self.row != WATER_ROW
        self.col, self.row = col, row
        self._snap(config)
        return Outcome.WON if entered_water else Outcome.MOVED

    def update(self, rng: random.Random, config: GameConfig) -> None:
        # death shake; tile position is untouched
        if not self.is_alive:
            self.x += random_int(rng, config.jitter_span, config.jitter_offset)
            self.y += random_int(rng, config.jitter_span, config.jitter_offset)

    def die(self) -> None:
        if not self.is_alive:
            return
        self.is_alive = False
        self.score = 0

    def reset_position(self, config: GameConfig) -> None:
        self.col, self.row = config.spawn_col, config.spawn_row
        self._snap(config)

    def start_over(self, config: GameConfig) -> None:
        self.reset_position(config)
        self.is_alive = True

    def _snap(self, config: GameConfig) -> None:
        self.x = config.tile_x(self.col)
        self.y = config.tile_y(self.row)


@dataclass
class Enemy:
    lane: int
    x: float
    y: float
    speed: float
    baseline: int
    sprite: str = ENEMY_SPRITE
    width: int = 90
    height: int = 68

    @classmethod
    def spawn(cls, rng: random.Random, config: GameConfig, baseline: int) -> Enemy:
        width, height = config.enemy_size
        enemy = cls(
            lane=0,
            x=config.enemy_start_x,
            y=config.lane_y(0),
            speed=0.0,
            baseline=baseline,
            width=width,
            height=height,
        )
        enemy.relocate(rng, config)
        enemy.set_speed(rng, config)
        return enemy

    def update(self, dt: float, rng: random.Random, config: GameConfig) -> None:
        self.x += self.speed * dt
        if self.x > config.stage_width:
            self.relocate(rng, config)
            self.set_speed(rng, config)

    def relocate(self, rng: random.Random, config: GameConfig) -> None:
        """Move to a random lane just left of the stage."""
        self.lane = random_int(rng, config.enemy_lanes)
        self.x = config.enemy_start_x
        self.y = config.lane_y(self.lane)

    def set_speed(
        self, rng: random.Random, config: GameConfig, baseline: int | None = None
    ) -> None:
        if baseline is not None:
            self.baseline = baseline
        self.speed = random_speed(rng, config.min_speed, self.baseline)


@dataclass
class Gem:
    col: int
    row: int
    x: float
    y: float
    sprite: str = GEM_SPRITE
    width: int = 74
    height: int = 82
    lifespan: TimerHandle | None = field(default=None, repr=False, compare=False)

    @classmethod
    def on_tile(cls, col: int, row: int, config: GameConfig) -> Gem:
        width, height = config.gem_size
        return cls(
            col=col,
            row=row,
            x=config.tile_x(col),
            y=config.tile_y(row),
            width=width,
            height=height,
        )

    @property
    def tile(self) -> tuple[int, int]:
        return self.col, self.row

    def disarm(self) -> None:
        """Cancel the lifespan timer, if any is still pending."""
        if self.lifespan is not None:
            self.lifespan.cancel()
