import math
import string

from passforge.charset import (
    DEFAULT_SYMBOLS,
    build_charset,
    filter_similar,
    symbol_quota,
)
from passforge.settings import GenerationSettings


def test_category_order():
    pools = build_charset(GenerationSettings(include_symbols=True))
    assert pools.charset == string.digits + string.ascii_lowercase + string.ascii_uppercase + DEFAULT_SYMBOLS
    assert pools.first_char_pool == pools.charset
    assert pools.symbols == DEFAULT_SYMBOLS


def test_symbols_disabled_means_no_symbol_set():
    pools = build_charset(GenerationSettings(custom_symbols="$%"))
    assert pools.symbols == ""
    assert "$" not in pools.charset


def test_custom_symbols_replace_default():
    pools = build_charset(GenerationSettings(include_symbols=True, custom_symbols="$%"))
    assert pools.symbols == "$%"
    assert pools.charset.endswith("$%")
    assert "!" not in pools.charset


def test_first_char_pool_restrictions():
    s = GenerationSettings(include_symbols=True, no_start_number=True, no_start_symbol=True)
    pools = build_charset(s)
    assert pools.first_char_pool == string.ascii_lowercase + string.ascii_uppercase
    assert len(pools.charset) == 62 + len(DEFAULT_SYMBOLS)


def test_no_start_symbol_without_symbols_is_noop():
    pools = build_charset(GenerationSettings(no_start_symbol=True))
    assert pools.first_char_pool == pools.charset


def test_no_similar_applies_to_both_pools():
    pools = build_charset(GenerationSettings(no_similar=True, no_start_number=True))
    for c in "iIl1oO0":
        assert c not in pools.charset
        assert c not in pools.first_char_pool
    assert len(pools.charset) == 62 - 7
    assert pools.first_char_pool == filter_similar(string.ascii_lowercase + string.ascii_uppercase)


def test_empty_selection():
    pools = build_charset(GenerationSettings(
        include_numbers=False, include_lowercase=False, include_uppercase=False))
    assert pools.charset == ""
    assert pools.first_char_pool == ""


def test_symbol_quota():
    assert symbol_quota(50, DEFAULT_SYMBOLS) == 5
    assert symbol_quota(12, DEFAULT_SYMBOLS) == 2
    assert symbol_quota(1, "!") == 1
    assert math.isinf(symbol_quota(50, ""))
