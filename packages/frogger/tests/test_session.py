"""Tests for session guards and the session state machine system."""
import random
from types import SimpleNamespace

import pytest
from frogger.session import (
    TRANSITIONS,
    SessionGuards,
    SessionState,
    make_session_guards,
    make_session_system,
)
from frogger.types import TickContext

_rng = random.Random(0)


def at(now: float) -> TickContext:
    return TickContext(tick_number=0, dt=0.0, now=now, random=_rng)


def make_state(**overrides):
    fields = dict(
        session=SessionState.INTRO, avatar=None, hit=False, won=False, resume_at=None
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestGuards:
    def test_register_and_check(self):
        guards = SessionGuards()
        guards.register("always", lambda s, c: True)
        assert guards.has("always")
        assert guards.check("always", None, None)
        assert guards.names() == ["always"]

    def test_unknown_guard_raises(self):
        with pytest.raises(KeyError):
            SessionGuards().check("missing", None, None)

    def test_standard_guards_cover_the_table(self):
        guards = make_session_guards()
        for edges in TRANSITIONS.values():
            for guard_name, _ in edges:
                assert guards.has(guard_name)

    def test_pause_over_is_a_deadline(self):
        guards = make_session_guards()
        state = make_state(resume_at=1750.0)
        assert not guards.check("pause_over", state, at(1749))
        assert guards.check("pause_over", state, at(1750))
        assert not guards.check("pause_over", make_state(), at(99_999))


class TestSessionSystem:
    def _system(self, log):
        return make_session_system(
            make_session_guards(),
            on_transition=lambda s, c, old, new: log.append((old, new)),
        )

    def test_intro_waits_for_avatar(self):
        log = []
        system = self._system(log)
        state = make_state()
        system(state, at(0))
        assert state.session is SessionState.INTRO
        state.avatar = 3
        system(state, at(16))
        assert state.session is SessionState.PLAYING
        assert log == [(SessionState.INTRO, SessionState.PLAYING)]

    def test_one_transition_per_tick(self):
        log = []
        system = self._system(log)
        state = make_state(avatar=0, won=True)
        system(state, at(0))
        # won is still set, but the PLAYING edge waits for the next tick
        assert state.session is SessionState.PLAYING
        system(state, at(16))
        assert state.session is SessionState.WIN_PAUSE
        assert len(log) == 2

    def test_hit_outranks_win(self):
        system = self._system([])
        state = make_state(session=SessionState.PLAYING, hit=True, won=True)
        system(state, at(0))
        assert state.session is SessionState.DEATH_PAUSE

    @pytest.mark.parametrize("pause", [SessionState.WIN_PAUSE, SessionState.DEATH_PAUSE])
    def test_pauses_resume_at_deadline(self, pause):
        system = self._system([])
        state = make_state(session=pause, resume_at=1000.0)
        system(state, at(999))
        assert state.session is pause
        system(state, at(1000))
        assert state.session is SessionState.PLAYING
