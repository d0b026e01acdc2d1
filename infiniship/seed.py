"""Seed pairs and seed sources.

A ship is fully determined by two independent integers: the color seed
(hue bytes) and the shape seed (one bit per optional cell). Seeds are only
ever used as bit sources and are never combined with each other.

Randomness is isolated behind :data:`infiniship.types.SeedFn`; callers that
need reproducible output pass :func:`fixed_seed_fn` or a seeded
:func:`random_seed_fn`.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, Optional

from infiniship.types import SeedFn


logger = logging.getLogger(__name__)

# Seeds span [0, 2**32): enough bits for every shape cell and all hue bytes.
SEED_RANGE: int = 4 * 1024**3


@dataclass(frozen=True)
class SeedPair:
    """Seeds for a single ship.

    Attributes:
        color: Bit source for hue selection.
        shape: Bit source for body / cockpit cell selection.
    """

    color: int
    shape: int


def random_seed_fn(rng: Optional[random.Random] = None) -> SeedFn:
    """Return a seed source drawing uniformly from ``[0, SEED_RANGE)``.

    Arguments:
        rng: Random generator to draw from. A fresh unseeded ``random.Random``
            is used when omitted.
    """
    source = rng if rng is not None else random.Random()

    def seed_fn() -> int:
        return math.floor(source.random() * SEED_RANGE)

    return seed_fn


def fixed_seed_fn(seeds: Iterable[int]) -> SeedFn:
    """Return a seed source that replays ``seeds`` in order.

    Raises ``ValueError`` once the values are exhausted.
    """
    iterator = iter(seeds)

    def seed_fn() -> int:
        try:
            return next(iterator)
        except StopIteration:
            raise ValueError("Seed source exhausted") from None

    return seed_fn


def draw_seed_pair(seed_fn: SeedFn) -> SeedPair:
    """Draw a color seed, then a shape seed, from ``seed_fn``."""
    color = seed_fn()
    shape = seed_fn()
    logger.debug("Drew seeds color=%d shape=%d", color, shape)
    return SeedPair(color=color, shape=shape)
