"""One-shot, cancelable timers evaluated against the tick clock."""
from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from frogger.types import TickContext

logger = logging.getLogger(__name__)

TimerCallback = Callable[["TickContext"], None]

_PENDING = "pending"
_FIRED = "fired"
_CANCELLED = "cancelled"


class TimerHandle:
    """A scheduled callback. Cancelling is idempotent; a cancelled or
    already-fired handle never runs its callback again."""

    __slots__ = ("name", "deadline", "_callback", "_status")

    def __init__(self, name: str, deadline: float, callback: TimerCallback) -> None:
        self.name = name
        self.deadline = deadline
        self._callback: TimerCallback | None = callback
        self._status = _PENDING

    def __repr__(self) -> str:
        return f"TimerHandle({self.name!r}, deadline={self.deadline}, {self._status})"

    @property
    def active(self) -> bool:
        return self._status == _PENDING

    @property
    def cancelled(self) -> bool:
        return self._status == _CANCELLED

    @property
    def fired(self) -> bool:
        return self._status == _FIRED

    def cancel(self) -> bool:
        """Cancel the timer. Returns True only if this call cancelled it."""
        if self._status != _PENDING:
            return False
        self._status = _CANCELLED
        self._callback = None
        return True

    def fire(self, ctx: TickContext) -> bool:
        """Run the callback once. No-op (returns False) unless pending."""
        if self._status != _PENDING or self._callback is None:
            return False
        callback, self._callback = self._callback, None
        self._status = _FIRED
        callback(ctx)
        return True


class TimerQueue:
    """Deadline-ordered one-shot timers. Times are in milliseconds."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)
        self._heap: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def call_later(
        self, delay_ms: float, callback: TimerCallback, name: str = "timer"
    ) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay must not be negative, got {delay_ms}")
        handle = TimerHandle(name, self._now + delay_ms, callback)
        heapq.heappush(self._heap, (handle.deadline, next(self._seq), handle))
        logger.debug("scheduled %s at %.1f ms", name, handle.deadline)
        return handle

    def pending(self) -> int:
        return sum(1 for _, _, handle in self._heap if handle.active)

    def advance(self, ctx: TickContext) -> int:
        """Fire every active timer due at ``ctx.now``. Returns the count.

        Timers scheduled by a callback wait for the next advance even if
        already due.
        """
        self._now = ctx.now
        due: list[TimerHandle] = []
        while self._heap and self._heap[0][0] <= self._now:
            _, _, handle = heapq.heappop(self._heap)
            if handle.active:
                due.append(handle)
        fired = 0
        for handle in due:
            if handle.fire(ctx):
                fired += 1
        return fired

    def clear(self) -> None:
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()


def make_timer_system(queue: TimerQueue) -> Callable[[Any, TickContext], None]:
    """Return a system that fires due timers each tick."""

    def timer_system(state: Any, ctx: TickContext) -> None:
        queue.advance(ctx)

    return timer_system
