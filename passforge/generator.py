"""
passforge.generator
Generate one or many passwords under the configured constraints.

Generation is strictly left to right with no backtracking: a character,
once accepted, is never revisited, so a late position can exhaust its
candidates even when a different earlier choice would have succeeded.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .charset import build_charset, filter_similar, symbol_quota
from .errors import GenerationError
from .randomness import RandomSource, default_source
from .selector import SelectionState, select_character
from .settings import GenerationSettings
from .shuffle import duplicate_free_eligible, generate_duplicate_free
from .validation import validate

logger = logging.getLogger(__name__)


def generate_one(
    length: int,
    charset: str,
    first_char_pool: str,
    no_similar: bool = False,
    no_duplicate: bool = False,
    no_sequential: bool = False,
    symbols: str = "",
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Generate a single password of `length` characters.

    Raises a ValidationError subclass when the pools cannot satisfy the
    request and CharacterExhaustionError when a position runs out of
    valid characters.
    """
    rng = rng or default_source()
    if no_similar:
        charset = filter_similar(charset)
        first_char_pool = filter_similar(first_char_pool)
    validate(length, charset, first_char_pool, no_duplicate)

    if duplicate_free_eligible(no_duplicate, no_sequential, symbols):
        return generate_duplicate_free(length, charset, first_char_pool, rng)

    state = SelectionState(
        symbols=symbols,
        quota=symbol_quota(length, symbols),
        no_duplicate=no_duplicate,
        no_sequential=no_sequential,
    )
    chars: List[str] = []
    for position in range(length):
        alphabet = first_char_pool if position == 0 else charset
        char = select_character(alphabet, position, state, rng)
        state.accept(char)
        chars.append(char)
    return "".join(chars)


def generate_batch(settings: GenerationSettings, rng: Optional[RandomSource] = None) -> List[str]:
    """
    Generate `settings.amount` passwords in order. The first failure aborts
    the whole batch; no partial list is returned.
    """
    rng = rng or default_source()
    pools = build_charset(settings)
    logger.debug(
        "charset=%d first_pool=%d symbols=%d quota=%s",
        len(pools.charset),
        len(pools.first_char_pool),
        len(pools.symbols),
        symbol_quota(settings.length, pools.symbols),
    )
    try:
        validate(settings.length, pools.charset, pools.first_char_pool, settings.no_duplicate)
        if duplicate_free_eligible(settings.no_duplicate, settings.no_sequential, pools.symbols):
            logger.debug("using shuffle path for duplicate-free passwords")

        passwords = []
        for _ in range(settings.amount):
            passwords.append(
                generate_one(
                    settings.length,
                    pools.charset,
                    pools.first_char_pool,
                    no_similar=settings.no_similar,
                    no_duplicate=settings.no_duplicate,
                    no_sequential=settings.no_sequential,
                    symbols=pools.symbols,
                    rng=rng,
                )
            )
    except GenerationError as e:
        logger.warning("password generation failed: %s", e)
        raise
    return passwords
