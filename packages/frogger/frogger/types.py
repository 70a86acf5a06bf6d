"""Shared types for the frogger tick loop."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    now: float
    random: _random.Random


System = Callable[[Any, TickContext], None]
