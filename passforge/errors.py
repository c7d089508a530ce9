"""
passforge.errors
Exceptions raised while building, validating or generating passwords.

Every error is terminal for the current request: nothing here is retried
and constraints are never relaxed automatically.
"""


class GenerationError(ValueError):
    """Base class for every password request failure."""


class InvalidSettingsError(GenerationError):
    """A settings value (length, amount, ...) is malformed."""


class ValidationError(GenerationError):
    """The request is provably infeasible before any sampling happens."""


class EmptyCharsetError(ValidationError):
    def __init__(self, message: str = "Select at least one character type.") -> None:
        super().__init__(message)


class EmptyFirstCharPoolError(ValidationError):
    def __init__(
        self,
        message: str = "No valid characters available for the first position. Please adjust your constraints.",
    ) -> None:
        super().__init__(message)


class NotEnoughUniqueCharsError(ValidationError):
    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Not enough unique characters ({available}) for the requested "
            f"password length ({required}) with no duplicates."
        )


class CharacterExhaustionError(GenerationError):
    """No character satisfies the constraints at `position` (zero-based)."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(
            f"Failed to generate character at position {position + 1}. "
            "Try relaxing some constraints."
        )
