"""
passforge.selector
Per-position constrained character selection.

A candidate is valid when it is not already used (no_duplicate), does not
differ by exactly one code point from the previous character (no_sequential)
and would not push the symbol count past the quota. Selection first tries a
few unfiltered random draws; when constraints are tight, or those draws all
fail, it builds the list of every valid character and picks one uniformly.
Both phases pick uniformly among valid characters.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Set

from .errors import CharacterExhaustionError
from .randomness import RandomSource

logger = logging.getLogger(__name__)

FAST_ATTEMPTS = 5
USED_FRACTION_LIMIT = 0.5
QUOTA_MARGIN = 0.9


@dataclass
class SelectionState:
    """Running state of one left-to-right generation."""

    symbols: str = ""
    quota: float = math.inf
    no_duplicate: bool = False
    no_sequential: bool = False
    prev_char: Optional[str] = None
    used: Set[str] = field(default_factory=set)
    symbol_count: int = 0

    def accept(self, char: str) -> None:
        self.prev_char = char
        if self.no_duplicate:
            self.used.add(char)
        if char in self.symbols:
            self.symbol_count += 1


def is_valid_char(char: str, state: SelectionState) -> bool:
    if state.no_duplicate and char in state.used:
        return False
    if (
        state.no_sequential
        and state.prev_char is not None
        and abs(ord(char) - ord(state.prev_char)) == 1
    ):
        return False
    if char in state.symbols and state.symbol_count >= state.quota:
        return False
    return True


def constraints_are_tight(alphabet: str, state: SelectionState) -> bool:
    """True when random draws are unlikely to hit a valid character quickly."""
    if state.no_sequential:
        return True
    if state.no_duplicate and len(state.used) > len(alphabet) * USED_FRACTION_LIMIT:
        return True
    if state.symbols and state.symbol_count >= state.quota * QUOTA_MARGIN:
        return True
    return False


def _fast_pick(alphabet: str, state: SelectionState, rng: RandomSource) -> Optional[str]:
    for _ in range(FAST_ATTEMPTS):
        char = alphabet[rng.next_index(len(alphabet))]
        if is_valid_char(char, state):
            return char
    return None


def _filtered_pick(alphabet: str, state: SelectionState, rng: RandomSource) -> Optional[str]:
    valid: List[str] = [c for c in alphabet if is_valid_char(c, state)]
    if not valid:
        return None
    return valid[rng.next_index(len(valid))]


def select_character(
    alphabet: str,
    position: int,
    state: SelectionState,
    rng: RandomSource,
) -> str:
    """
    Choose the character for `position` from `alphabet`.
    Raises CharacterExhaustionError when no character is valid.
    """
    if not constraints_are_tight(alphabet, state):
        char = _fast_pick(alphabet, state, rng)
        if char is not None:
            return char

    char = _filtered_pick(alphabet, state, rng)
    if char is None:
        logger.debug("no valid character left at position %d", position)
        raise CharacterExhaustionError(position)
    return char
