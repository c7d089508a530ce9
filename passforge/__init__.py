"""
Constrained random password generator.
"""

from .errors import (
    GenerationError,
    InvalidSettingsError,
    ValidationError,
    EmptyCharsetError,
    EmptyFirstCharPoolError,
    NotEnoughUniqueCharsError,
    CharacterExhaustionError,
)
from .settings import GenerationSettings
from .charset import build_charset
from .validation import validate
from .generator import generate_one, generate_batch

__all__ = [
    "GenerationError",
    "InvalidSettingsError",
    "ValidationError",
    "EmptyCharsetError",
    "EmptyFirstCharPoolError",
    "NotEnoughUniqueCharsError",
    "CharacterExhaustionError",
    "GenerationSettings",
    "build_charset",
    "validate",
    "generate_one",
    "generate_batch",
]
