"""Session state machine: guard table evaluated once per tick."""
from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from frogger.game import GameState
    from frogger.types import TickContext

logger = logging.getLogger(__name__)

Guard = Callable[["GameState", "TickContext"], bool]
TransitionHook = Callable[["GameState", "TickContext", "SessionState", "SessionState"], None]


class SessionState(enum.Enum):
    INTRO = "intro"
    PLAYING = "playing"
    WIN_PAUSE = "win_pause"
    DEATH_PAUSE = "death_pause"


# First passing guard wins. A hit outranks a win landed in the same tick.
TRANSITIONS: dict[SessionState, list[tuple[str, SessionState]]] = {
    SessionState.INTRO: [("avatar_chosen", SessionState.PLAYING)],
    SessionState.PLAYING: [
        ("player_hit", SessionState.DEATH_PAUSE),
        ("reached_water", SessionState.WIN_PAUSE),
    ],
    SessionState.WIN_PAUSE: [("pause_over", SessionState.PLAYING)],
    SessionState.DEATH_PAUSE: [("pause_over", SessionState.PLAYING)],
}


class SessionGuards:
    """Maps guard name strings to callable predicates."""

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, state: GameState, ctx: TickContext) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](state, ctx)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)


def _pause_over(state: GameState, ctx: TickContext) -> bool:
    return state.resume_at is not None and ctx.now >= state.resume_at


def make_session_guards() -> SessionGuards:
    guards = SessionGuards()
    guards.register("avatar_chosen", lambda s, c: s.avatar is not None)
    guards.register("player_hit", lambda s, c: s.hit)
    guards.register("reached_water", lambda s, c: s.won)
    guards.register("pause_over", _pause_over)
    return guards


def make_session_system(
    guards: SessionGuards,
    transitions: dict[SessionState, list[tuple[str, SessionState]]] = TRANSITIONS,
    on_transition: TransitionHook | None = None,
) -> Callable[[GameState, TickContext], None]:
    """Return a system that takes at most one transition per tick."""

    def session_system(state: GameState, ctx: TickContext) -> None:
        for guard_name, target in transitions.get(state.session, ()):
            if guards.check(guard_name, state, ctx):
                old = state.session
                state.session = target
                logger.info("session %s -> %s (%s)", old.value, target.value, guard_name)
                if on_transition is not None:
                    on_transition(state, ctx, old, target)
                return

    return session_system
