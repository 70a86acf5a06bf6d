"""Overlap tests: continuous boxes for enemies, tile equality for gems."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from frogger import signals
from frogger.session import SessionState

if TYPE_CHECKING:
    from frogger.entities import Gem, Player, Sprite
    from frogger.game import GameState
    from frogger.signals import SignalBus
    from frogger.types import TickContext

logger = logging.getLogger(__name__)


def boxes_overlap(
    ax: float, ay: float, aw: float, ah: float,
    bx: float, by: float, bw: float, bh: float,
) -> bool:
    """Strict AABB overlap of two top-left anchored rectangles."""
    return ax + aw > bx and ax < bx + bw and ay + ah > by and ay < by + bh


def collides(a: Sprite, b: Sprite) -> bool:
    return boxes_overlap(
        a.x, a.y, a.width, a.height,
        b.x, b.y, b.width, b.height,
    )


def on_same_tile(player: Player, gem: Gem) -> bool:
    return player.tile == gem.tile


def make_collision_system(bus: SignalBus) -> Callable[[GameState, TickContext], None]:
    """Publish ``player_hit`` / ``gem_collected`` while play is live.

    At most one hit is reported per tick.
    """

    def collision_system(state: GameState, ctx: TickContext) -> None:
        player = state.player
        if player is None or state.session is not SessionState.PLAYING:
            return
        if not state.collisions_enabled:
            return
        for enemy in state.roster:
            if collides(enemy, player):
                logger.debug("player hit by enemy in lane %d", enemy.lane)
                bus.publish(signals.PLAYER_HIT, enemy=enemy)
                break
        gem = state.gems.gem
        if gem is not None and on_same_tile(player, gem):
            bus.publish(signals.GEM_COLLECTED, gem=gem)

    return collision_system
