"""Bounded random integers used for speeds, lanes, delays and jitter."""
from __future__ import annotations

import random


def random_int(rng: random.Random, span: int, offset: int = 0) -> int:
    """Return an integer in ``[offset, offset + span)``."""
    if span <= 0:
        raise ValueError(f"span must be positive, got {span}")
    return offset + rng.randrange(span)


def random_speed(rng: random.Random, minimum: int, baseline: int) -> int:
    """Uniform speed in ``[minimum, baseline]`` (both inclusive)."""
    return random_int(rng, baseline - minimum + 1, minimum)
