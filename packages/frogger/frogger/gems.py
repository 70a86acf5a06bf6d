"""Gem spawner: random delay, finite lifespan, one gem at a time."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from frogger import signals
from frogger.entities import Gem
from frogger.rand import random_int

if TYPE_CHECKING:
    from frogger.config import GameConfig
    from frogger.signals import SignalBus
    from frogger.timers import TimerHandle, TimerQueue
    from frogger.types import TickContext

logger = logging.getLogger(__name__)

Tile = tuple[int, int]


class GemSpawner:
    """Owns the single gem slot and the timer that fills it.

    Expiry and collection both end in :meth:`remove`, which only succeeds
    for the gem currently on stage, so a gem is scored or expired once.
    """

    def __init__(
        self,
        config: GameConfig,
        timers: TimerQueue,
        bus: SignalBus,
        occupied: Callable[[], set[Tile]] | None = None,
    ) -> None:
        self._config = config
        self._timers = timers
        self._bus = bus
        self._occupied = occupied or set
        self._pending: TimerHandle | None = None
        self.gem: Gem | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None and self._pending.active

    def arm(self, rng: random.Random, delay: tuple[int, int] | None = None) -> bool:
        """Schedule the next gem. No-op while a gem is pending or on stage."""
        if self.gem is not None or self.pending:
            return False
        span, offset = delay or self._config.gem_delay
        delay_ms = random_int(rng, span, offset) * 1000
        self._pending = self._timers.call_later(delay_ms, self._materialize, "gem_spawn")
        return True

    def _materialize(self, ctx: TickContext) -> None:
        self._pending = None
        taken = self._occupied()
        tiles = [
            (col, row)
            for row in self._config.gem_tile_rows()
            for col in range(self._config.cols)
            if (col, row) not in taken
        ]
        if not tiles:
            return
        col, row = ctx.random.choice(tiles)
        gem = Gem.on_tile(col, row, self._config)

        def expire(_: TickContext) -> None:
            self._bus.publish(signals.GEM_EXPIRED, gem=gem)

        span, offset = self._config.gem_lifespan
        lifespan_ms = random_int(ctx.random, span, offset) * 1000
        gem.lifespan = self._timers.call_later(lifespan_ms, expire, "gem_lifespan")
        self.gem = gem
        logger.info("gem appeared at %s for %d ms", gem.tile, lifespan_ms)

    def remove(self, gem: Gem | None) -> bool:
        """Take *gem* off the stage. False if it is no longer there."""
        if gem is None or gem is not self.gem:
            return False
        gem.disarm()
        self.gem = None
        return True

    def clear(self) -> None:
        """Cancel any pending spawn and remove the gem on stage."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.remove(self.gem)
