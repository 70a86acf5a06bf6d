"""Engine - runs the ordered per-tick systems against one game state."""

import logging
import os
import random
from typing import Any, Iterable

from frogger.clock import Clock
from frogger.types import System, TickContext

logger = logging.getLogger(__name__)


class Engine:
    def __init__(
        self, state: Any, seed: int | None = None, start_ms: float = 0.0
    ) -> None:
        self._clock = Clock(start_ms)
        self._state = state
        self._systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def state(self) -> Any:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def start(self, now_ms: float) -> None:
        """Re-base the clock so the first tick after a pause has a small dt."""
        logger.debug("engine started at %.1f ms (seed=%d)", now_ms, self._seed)
        self._clock.reset(now_ms, self._clock.tick_number)

    def step(self, now_ms: float) -> TickContext:
        self._clock.advance(now_ms)
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self._state, ctx)
        return ctx

    def run(self, timestamps: Iterable[float]) -> None:
        for now_ms in timestamps:
            self.step(now_ms)
