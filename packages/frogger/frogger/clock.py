"""Clock and TickContext for a frame-driven, variable-timestep loop."""

import random

from frogger.types import TickContext


class Clock:
    """Turns monotonic millisecond timestamps into per-tick deltas."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._last = float(start_ms)
        self._dt = 0.0
        self._tick_number = 0

    @property
    def now(self) -> float:
        return self._last

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, now_ms: float) -> float:
        """Move to *now_ms* and return the elapsed time in seconds."""
        if now_ms < self._last:
            raise ValueError(
                f"timestamps must be monotonic: {now_ms} < {self._last}"
            )
        self._dt = (now_ms - self._last) / 1000.0
        self._last = float(now_ms)
        self._tick_number += 1
        return self._dt

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            now=self._last,
            random=rng,
        )

    def reset(self, now_ms: float, tick_number: int = 0) -> None:
        self._last = float(now_ms)
        self._dt = 0.0
        self._tick_number = tick_number
