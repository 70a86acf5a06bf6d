"""frogger - tick-driven lane-crossing arcade game core."""

from frogger.config import GameConfig
from frogger.engine import Engine
from frogger.entities import Enemy, Gem, Outcome, Player
from frogger.game import Game, GameState
from frogger.session import SessionState
from frogger.signals import SignalBus
from frogger.timers import TimerHandle, TimerQueue
from frogger.types import TickContext

__all__ = [
    "Game",
    "GameState",
    "GameConfig",
    "Engine",
    "TickContext",
    "SessionState",
    "SignalBus",
    "TimerQueue",
    "TimerHandle",
    "Player",
    "Enemy",
    "Gem",
    "Outcome",
]
