"""Game - session state plus the wiring of every per-tick system."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from frogger import signals
from frogger.collision import make_collision_system
from frogger.commands import (
    DIRECTIONS,
    ChooseAvatar,
    CommandQueue,
    Move,
    avatar_at,
    make_command_system,
)
from frogger.config import GameConfig
from frogger.engine import Engine
from frogger.entities import AVATAR_SPRITES, Gem, Outcome, Player
from frogger.gems import GemSpawner
from frogger.roster import EnemyRoster
from frogger.session import SessionState, make_session_guards, make_session_system
from frogger.signals import SignalBus, make_signal_system
from frogger.timers import TimerQueue, make_timer_system
from frogger.types import TickContext

logger = logging.getLogger(__name__)

START_MESSAGE = "Use arrow keys to hop to water!"
SCORE_MESSAGE = "Your score: {score}"
DEATH_MESSAGE = "Ah, too bad! Start over..."


@dataclass
class GameState:
    """Everything a session mutates. Owned by one Game."""

    config: GameConfig
    roster: EnemyRoster
    gems: GemSpawner
    session: SessionState = SessionState.INTRO
    player: Player | None = None
    avatar: int | None = None
    message: str = START_MESSAGE
    input_enabled: bool = False
    collisions_enabled: bool = False
    # Guard inputs, cleared on every transition.
    won: bool = False
    hit: bool = False
    resume_at: float | None = None

    @property
    def score(self) -> int:
        return self.player.score if self.player is not None else 0

    @property
    def gem(self) -> Gem | None:
        return self.gems.gem


class Game:
    """One play session: feed it input and timestamps, then draw it.

    Each ``step(now_ms)`` runs, in order: queued input, due timers,
    movement, collision checks, signal dispatch, and the session state
    machine. Rendering reads the state after ``step`` returns.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        start_ms: float = 0.0,
    ) -> None:
        self.config = config or GameConfig()
        self.bus = SignalBus()
        self.timers = TimerQueue(start_ms)
        self.commands = CommandQueue()
        self.state = GameState(
            config=self.config,
            roster=EnemyRoster(self.config, self.timers),
            gems=GemSpawner(self.config, self.timers, self.bus, occupied=self._occupied_tiles),
        )
        self.engine = Engine(self.state, seed=seed, start_ms=start_ms)

        self.commands.handle(Move, self._on_move)
        self.commands.handle(ChooseAvatar, self._on_choose_avatar)

        self.bus.subscribe(signals.WIN, self._on_win)
        self.bus.subscribe(signals.PLAYER_HIT, self._on_player_hit)
        self.bus.subscribe(signals.GEM_COLLECTED, self._on_gem_collected)
        self.bus.subscribe(signals.GEM_EXPIRED, self._on_gem_expired)

        # Wire systems (order matters)
        self.engine.add_system(make_command_system(self.commands, on_reject=self._on_reject))
        self.engine.add_system(make_timer_system(self.timers))
        self.engine.add_system(self._motion_system)
        self.engine.add_system(make_collision_system(self.bus))
        self.engine.add_system(make_signal_system(self.bus))
        self.engine.add_system(
            make_session_system(make_session_guards(), on_transition=self._on_transition)
        )

    # -- Driving --

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def session(self) -> SessionState:
        return self.state.session

    def move(self, direction: str) -> None:
        self.commands.enqueue(Move(direction))

    def click(self, x: float, y: float) -> None:
        self.commands.enqueue(ChooseAvatar(x, y))

    def start(self, now_ms: float) -> None:
        self.engine.start(now_ms)

    def step(self, now_ms: float) -> TickContext:
        return self.engine.step(now_ms)

    # -- Commands --

    def _on_move(self, cmd: Move, state: GameState, ctx: TickContext) -> bool:
        player = state.player
        if cmd.direction not in DIRECTIONS or player is None:
            return False
        if state.session is not SessionState.PLAYING or not state.input_enabled:
            return False
        if player.in_water:
            return False
        outcome = player.handle_input(cmd.direction, self.config)
        if outcome is Outcome.WON:
            self.bus.publish(signals.WIN, score=player.score)
        return outcome is not Outcome.BLOCKED

    def _on_choose_avatar(self, cmd: ChooseAvatar, state: GameState, ctx: TickContext) -> bool:
        if state.session is not SessionState.INTRO or state.avatar is not None:
            return False
        index = avatar_at(cmd.x, cmd.y)
        if index is None or index >= len(AVATAR_SPRITES):
            return False
        state.avatar = index
        return True

    def _on_reject(self, cmd: Any) -> None:
        logger.debug("ignored %r in %s", cmd, self.state.session.value)

    # -- Systems --

    def _motion_system(self, state: GameState, ctx: TickContext) -> None:
        state.roster.update(ctx.dt, ctx.random)
        if state.player is not None:
            state.player.update(ctx.random, self.config)

    def _occupied_tiles(self) -> set[tuple[int, int]]:
        player = self.state.player
        return {player.tile} if player is not None else set()

    # -- Signals --

    def _on_win(self, signal: str, data: dict) -> None:
        self.state.won = True

    def _on_player_hit(self, signal: str, data: dict) -> None:
        self.state.hit = True

    def _on_gem_collected(self, signal: str, data: dict) -> None:
        state = self.state
        if state.player is None or not state.gems.remove(data.get("gem")):
            return
        state.player.score += self.config.gem_points
        state.message = SCORE_MESSAGE.format(score=state.score)
        logger.info("gem collected, score %d", state.score)
        self.bus.publish(signals.SCORE_CHANGED, score=state.score)
        state.gems.arm(self.engine.random, self.config.gem_respawn_delay)

    def _on_gem_expired(self, signal: str, data: dict) -> None:
        state = self.state
        if not state.gems.remove(data.get("gem")):
            return
        logger.debug("gem expired")
        if state.score > 0:
            state.gems.arm(self.engine.random, self.config.gem_respawn_delay)

    # -- Session transitions --

    def _on_transition(
        self, state: GameState, ctx: TickContext, old: SessionState, new: SessionState
    ) -> None:
        state.won = state.hit = False
        if new is SessionState.PLAYING:
            self._resume(state, ctx, old)
        elif new is SessionState.WIN_PAUSE:
            self._enter_win_pause(state, ctx)
        elif new is SessionState.DEATH_PAUSE:
            self._enter_death_pause(state, ctx)
        self.bus.publish(signals.STATE_CHANGED, old=old, new=new)

    def _resume(self, state: GameState, ctx: TickContext, old: SessionState) -> None:
        state.resume_at = None
        if old is SessionState.INTRO:
            state.player = Player.at_spawn(AVATAR_SPRITES[state.avatar], self.config)
            state.roster.begin_spawn_in(ctx.random)
        elif old is SessionState.DEATH_PAUSE:
            state.player.start_over(self.config)
        else:
            state.player.reset_position(self.config)
        state.input_enabled = True
        state.collisions_enabled = True

    def _enter_win_pause(self, state: GameState, ctx: TickContext) -> None:
        state.input_enabled = False
        state.collisions_enabled = False
        state.player.score += self.config.win_points
        score = state.score
        state.message = SCORE_MESSAGE.format(score=score)
        self.bus.publish(signals.SCORE_CHANGED, score=score)

        state.roster.rescale(ctx.random, self.config.baseline(score))
        state.roster.grow(ctx.random)
        if score > 0:
            state.gems.arm(ctx.random)
        state.resume_at = ctx.now + self.config.win_pause_ms
        logger.info("reached the water: score %d, %d enemies", score, len(state.roster))

    def _enter_death_pause(self, state: GameState, ctx: TickContext) -> None:
        state.input_enabled = False
        state.collisions_enabled = False
        state.player.die()
        state.message = DEATH_MESSAGE
        self.bus.publish(signals.SCORE_CHANGED, score=0)

        state.roster.reset(ctx.random, self.config.baseline(0))
        state.gems.clear()
        state.resume_at = ctx.now + self.config.death_pause_ms
        logger.info("player hit, restarting in %d ms", self.config.death_pause_ms)
