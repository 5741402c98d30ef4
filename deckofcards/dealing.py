"""Shuffle algorithm and dealing preconditions shared by every deck backend.

All backends must produce the same permutation for the same seed, so the
shuffle is pinned down here rather than left to ``random.shuffle``: a
Durstenfeld Fisher-Yates pass that walks ``i`` from ``size - 1`` down to 1
and swaps position ``i`` with ``rng.randrange(i + 1)``.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Tuple, Union

LOGGER = logging.getLogger("deckofcards.dealing")

SeedOrRng = Union[int, random.Random]


class PreconditionError(ValueError):
    """Raised when a deal is requested that cannot be satisfied."""


def resolve_rng(seed_or_rng: SeedOrRng) -> random.Random:
    if isinstance(seed_or_rng, random.Random):
        return seed_or_rng
    if isinstance(seed_or_rng, bool) or not isinstance(seed_or_rng, int):
        raise TypeError(f"Seed must be an int or random.Random, got {type(seed_or_rng).__name__}")
    return random.Random(seed_or_rng)


def swap_sequence(size: int, rng: random.Random) -> Iterator[Tuple[int, int]]:
    """Yield the (i, j) swaps of one Fisher-Yates pass over ``size`` items."""
    for i in range(size - 1, 0, -1):
        yield i, rng.randrange(i + 1)


def shuffle_order(size: int, rng: random.Random) -> List[int]:
    order = list(range(size))
    for i, j in swap_sequence(size, rng):
        order[i], order[j] = order[j], order[i]
    return order


def require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise PreconditionError(f"{name} must be a positive integer, got {value!r}")


def require_available(remaining: int, wanted: int) -> None:
    if wanted > remaining:
        LOGGER.debug("Rejecting deal of %d cards with %d remaining", wanted, remaining)
        raise PreconditionError(f"Not enough cards left in deck: wanted {wanted}, {remaining} remaining")
