"""Tests for TimerQueue and TimerHandle."""
import random

import pytest
from frogger.timers import TimerQueue, make_timer_system
from frogger.types import TickContext

_rng = random.Random(0)


def at(now: float) -> TickContext:
    return TickContext(tick_number=0, dt=0.0, now=now, random=_rng)


class TestFiring:
    def test_fires_at_deadline_not_before(self):
        queue = TimerQueue()
        fired = []
        queue.call_later(1500, lambda ctx: fired.append(ctx.now), "spawn")

        assert queue.advance(at(1499)) == 0
        assert fired == []
        assert queue.advance(at(1500)) == 1
        assert fired == [1500]

    def test_fires_once(self):
        queue = TimerQueue()
        fired = []
        handle = queue.call_later(10, lambda ctx: fired.append(1))
        queue.advance(at(10))
        queue.advance(at(20))
        assert fired == [1]
        assert handle.fired
        assert not handle.active

    def test_deadline_order_then_schedule_order(self):
        queue = TimerQueue()
        order = []
        queue.call_later(300, lambda ctx: order.append("late"))
        queue.call_later(100, lambda ctx: order.append("early-a"))
        queue.call_later(100, lambda ctx: order.append("early-b"))
        queue.advance(at(1000))
        assert order == ["early-a", "early-b", "late"]

    def test_deadline_is_relative_to_last_advance(self):
        queue = TimerQueue(start_ms=200)
        handle = queue.call_later(50, lambda ctx: None)
        assert handle.deadline == 250
        queue.advance(at(1000))
        assert queue.call_later(50, lambda ctx: None).deadline == 1050

    def test_timer_scheduled_by_callback_waits_for_next_advance(self):
        queue = TimerQueue()
        fired = []

        def first(ctx):
            fired.append("first")
            queue.call_later(0, lambda c: fired.append("second"))

        queue.call_later(0, first)
        queue.advance(at(0))
        assert fired == ["first"]
        queue.advance(at(1))
        assert fired == ["first", "second"]

    def test_negative_delay_raises(self):
        with pytest.raises(ValueError):
            TimerQueue().call_later(-1, lambda ctx: None)


class TestCancellation:
    def test_cancelled_timer_never_fires(self):
        queue = TimerQueue()
        fired = []
        handle = queue.call_later(100, lambda ctx: fired.append(1), "gem_lifespan")
        assert handle.cancel() is True
        queue.advance(at(10_000))
        assert fired == []
        assert handle.cancelled

    def test_cancel_is_idempotent(self):
        handle = TimerQueue().call_later(100, lambda ctx: None)
        assert handle.cancel() is True
        assert handle.cancel() is False
        assert handle.cancelled

    def test_fire_after_cancel_is_noop(self):
        fired = []
        handle = TimerQueue().call_later(100, lambda ctx: fired.append(1))
        handle.cancel()
        assert handle.fire(at(100)) is False
        assert fired == []

    def test_cancel_after_fire_keeps_fired(self):
        queue = TimerQueue()
        handle = queue.call_later(5, lambda ctx: None)
        queue.advance(at(5))
        assert handle.cancel() is False
        assert handle.fired and not handle.cancelled

    def test_callback_may_cancel_a_later_timer_due_same_tick(self):
        queue = TimerQueue()
        fired = []
        victim = queue.call_later(20, lambda ctx: fired.append("victim"))
        queue.call_later(10, lambda ctx: victim.cancel())
        queue.advance(at(50))
        assert fired == []

    def test_pending_and_clear(self):
        queue = TimerQueue()
        a = queue.call_later(10, lambda ctx: None)
        queue.call_later(20, lambda ctx: None)
        a.cancel()
        assert queue.pending() == 1
        queue.clear()
        assert queue.pending() == 0
        assert queue.advance(at(100)) == 0


def test_timer_system_advances_queue():
    queue = TimerQueue()
    fired = []
    queue.call_later(30, lambda ctx: fired.append(ctx.tick_number))
    system = make_timer_system(queue)
    system(None, TickContext(tick_number=4, dt=0.03, now=30, random=_rng))
    assert fired == [4]
