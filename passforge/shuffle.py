"""
passforge.shuffle
Duplicate-free generation by shuffling, used when "no repeats" is the only
positional constraint in play.
"""

from __future__ import annotations

from typing import List, MutableSequence, TypeVar

from .randomness import RandomSource

T = TypeVar("T")


def fisher_yates_shuffle(items: MutableSequence[T], rng: RandomSource) -> None:
    """Uniformly permute `items` in place."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.next_index(i + 1)
        items[i], items[j] = items[j], items[i]


def duplicate_free_eligible(no_duplicate: bool, no_sequential: bool, symbols: str) -> bool:
    return no_duplicate and not no_sequential and not symbols


def generate_duplicate_free(
    length: int,
    charset: str,
    first_char_pool: str,
    rng: RandomSource,
) -> str:
    """
    Draw the first character from `first_char_pool`, then take `length - 1`
    characters from a shuffled copy of the rest of `charset`.
    Callers must have checked `length <= len(charset)`.
    """
    first = first_char_pool[rng.next_index(len(first_char_pool))]
    rest: List[str] = list(charset)
    if first in rest:
        rest.remove(first)
    fisher_yates_shuffle(rest, rng)
    return first + "".join(rest[: length - 1])
