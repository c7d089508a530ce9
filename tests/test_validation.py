import pytest

from passforge.errors import (
    EmptyCharsetError,
    EmptyFirstCharPoolError,
    NotEnoughUniqueCharsError,
    ValidationError,
)
from passforge.validation import validate


def test_feasible():
    assert validate(10, "0123456789", "0123456789", True) is None
    assert validate(100, "ab", "a", False) is None


def test_check_order():
    # empty charset is reported before the empty first pool
    with pytest.raises(EmptyCharsetError):
        validate(5, "", "", True)
    with pytest.raises(EmptyFirstCharPoolError):
        validate(50, "abc", "", True)


def test_not_enough_unique():
    with pytest.raises(NotEnoughUniqueCharsError) as info:
        validate(11, "0123456789", "0123456789", True)
    assert (info.value.available, info.value.required) == (10, 11)
    assert isinstance(info.value, ValidationError)
    assert "(10)" in str(info.value) and "(11)" in str(info.value)
