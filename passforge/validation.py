"""
passforge.validation
Feasibility gate run on the final pools before any sampling.
"""

from .errors import EmptyCharsetError, EmptyFirstCharPoolError, NotEnoughUniqueCharsError


def validate(length: int, charset: str, first_char_pool: str, no_duplicate: bool) -> None:
    """
    Raise the first failing check, in order: empty charset, empty
    first-character pool, too few characters for a duplicate-free password.
    """
    if not charset:
        raise EmptyCharsetError()
    if not first_char_pool:
        raise EmptyFirstCharPoolError()
    if no_duplicate and length > len(charset):
        raise NotEnoughUniqueCharsError(available=len(charset), required=length)
