"""In-memory notification queue, drained once per tick."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from frogger.types import TickContext

_Handler = Callable[[str, dict[str, Any]], None]

WIN = "win"
PLAYER_HIT = "player_hit"
GEM_COLLECTED = "gem_collected"
GEM_EXPIRED = "gem_expired"
SCORE_CHANGED = "score_changed"
STATE_CHANGED = "state_changed"


class SignalBus:
    """Publishers queue signals; subscribers see them at the next flush."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch what was queued before the call. Returns the count.

        Signals published by handlers during the flush stay queued
        for the next one.
        """
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()


def make_signal_system(bus: SignalBus) -> Callable[[Any, TickContext], None]:
    def signal_system(state: Any, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
