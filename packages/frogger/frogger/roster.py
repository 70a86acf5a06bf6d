"""Enemy roster: staged spawn-in, score-scaled speeds, growth and reset."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Iterator

from frogger.entities import Enemy

if TYPE_CHECKING:
    from frogger.config import GameConfig
    from frogger.timers import TimerHandle, TimerQueue
    from frogger.types import TickContext

logger = logging.getLogger(__name__)


class EnemyRoster:
    """Ordered enemies in spawn order. Enemies leave only through reset()."""

    def __init__(self, config: GameConfig, timers: TimerQueue) -> None:
        self._config = config
        self._timers = timers
        self._enemies: list[Enemy] = []
        self._spawn_timer: TimerHandle | None = None
        self.baseline = config.baseline(0)

    def __len__(self) -> int:
        return len(self._enemies)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self._enemies)

    def __getitem__(self, index: int) -> Enemy:
        return self._enemies[index]

    @property
    def spawning(self) -> bool:
        return self._spawn_timer is not None and self._spawn_timer.active

    def add(self, rng: random.Random) -> Enemy:
        enemy = Enemy.spawn(rng, self._config, self.baseline)
        self._enemies.append(enemy)
        logger.debug("enemy %d joined lane %d at %d px/s",
                     len(self._enemies), enemy.lane, enemy.speed)
        return enemy

    def begin_spawn_in(self, rng: random.Random) -> None:
        """Add one enemy now and the rest one interval apart."""
        self.cancel_spawn_in()
        self._stage(rng)

    def cancel_spawn_in(self) -> None:
        if self._spawn_timer is not None:
            self._spawn_timer.cancel()
            self._spawn_timer = None

    def _stage(self, rng: random.Random) -> None:
        target = self._config.initial_enemies
        if len(self._enemies) < target:
            self.add(rng)
        if len(self._enemies) < target:
            self._spawn_timer = self._timers.call_later(
                self._config.spawn_interval_ms, self._on_spawn_timer, "enemy_spawn"
            )
        else:
            self._spawn_timer = None

    def _on_spawn_timer(self, ctx: TickContext) -> None:
        self._stage(ctx.random)

    def rescale(self, rng: random.Random, baseline: int) -> None:
        """Resample every enemy's speed against a new baseline."""
        self.baseline = baseline
        for enemy in self._enemies:
            enemy.set_speed(rng, self._config, baseline)

    def grow(self, rng: random.Random) -> Enemy | None:
        if len(self._enemies) >= self._config.max_enemies:
            return None
        return self.add(rng)

    def reset(self, rng: random.Random, baseline: int) -> None:
        """Truncate to the initial size and resample speeds."""
        del self._enemies[self._config.initial_enemies:]
        self.rescale(rng, baseline)

    def update(self, dt: float, rng: random.Random) -> None:
        for enemy in self._enemies:
            enemy.update(dt, rng, self._config)
