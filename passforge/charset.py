"""
passforge.charset
Derive the sampling alphabet, the first-character pool and the symbol set
from a GenerationSettings value. Pure functions, no randomness.
"""

from __future__ import annotations

import math
import string
from typing import NamedTuple

from .settings import GenerationSettings

NUMBERS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DEFAULT_SYMBOLS = "!#%*+-=?@^_~"
# visually ambiguous glyphs
SIMILAR_CHARS = "iIl1oO0"

SYMBOL_RATIO = 0.1


class CharsetPools(NamedTuple):
    charset: str
    first_char_pool: str
    # empty when symbols are disabled
    symbols: str


def filter_similar(chars: str) -> str:
    return "".join(c for c in chars if c not in SIMILAR_CHARS)


def symbol_quota(length: int, symbols: str) -> float:
    """Max symbol occurrences per password; unbounded when no symbols are in play."""
    if not symbols:
        return math.inf
    return math.ceil(length * SYMBOL_RATIO)


def build_charset(settings: GenerationSettings) -> CharsetPools:
    """
    Concatenate the enabled categories in a fixed order (numbers, lowercase,
    uppercase, symbols) and derive the first-character pool from it.
    """
    symbols = ""
    if settings.include_symbols:
        symbols = settings.custom_symbols or DEFAULT_SYMBOLS

    parts = []
    if settings.include_numbers:
        parts.append(NUMBERS)
    if settings.include_lowercase:
        parts.append(LOWERCASE)
    if settings.include_uppercase:
        parts.append(UPPERCASE)
    if symbols:
        parts.append(symbols)
    charset = "".join(parts)

    first = charset
    if settings.no_start_number:
        first = "".join(c for c in first if c not in NUMBERS)
    if settings.no_start_symbol and symbols:
        first = "".join(c for c in first if c not in symbols)

    if settings.no_similar:
        charset = filter_similar(charset)
        first = filter_similar(first)

    return CharsetPools(charset, first, symbols)
