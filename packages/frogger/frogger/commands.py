"""Input commands, queued between frames and applied inside the tick."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from frogger.types import TickContext

LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"
DIRECTIONS = (LEFT, RIGHT, UP, DOWN)

# Canvas band the avatars are clicked in, and the right edge of each pick.
AVATAR_BAND = (430, 575)
AVATAR_RIGHT_EDGES = (101, 202, 303, 404, 600)


@dataclass(frozen=True)
class Move:
    direction: str


@dataclass(frozen=True)
class ChooseAvatar:
    x: float
    y: float


def avatar_at(x: float, y: float) -> int | None:
    """Map a canvas-relative click to an avatar index, or None."""
    top, bottom = AVATAR_BAND
    if not (top < y < bottom and 0 < x < AVATAR_RIGHT_EDGES[-1]):
        return None
    for index, edge in enumerate(AVATAR_RIGHT_EDGES):
        if x < edge:
            return index
    return None


class CommandQueue:
    """FIFO of player commands, routed by type to one handler each.

    ``handler(cmd, state, ctx) -> bool`` returns True to accept.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[..., bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(self, cmd_type: type[Any], handler: Callable[..., bool]) -> None:
        self._handlers[cmd_type] = handler

    def enqueue(self, cmd: Any) -> None:
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, state: Any, ctx: TickContext) -> list[tuple[Any, bool]]:
        """Process all pending commands. Raises TypeError for unrouted types."""
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(
                    f"No handler registered for {type(cmd).__qualname__}"
                )
            results.append((cmd, handler(cmd, state, ctx)))
        return results


def make_command_system(
    queue: CommandQueue,
    on_reject: Callable[[Any], None] | None = None,
) -> Callable[[Any, TickContext], None]:
    def command_system(state: Any, ctx: TickContext) -> None:
        for cmd, accepted in queue.drain(state, ctx):
            if not accepted and on_reject is not None:
                on_reject(cmd)

    return command_system
