"""
passforge.settings
Immutable request object for one generation call.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .errors import InvalidSettingsError

logger = logging.getLogger(__name__)

# camelCase keys of the settings record the form layer produces
_CAMEL_KEYS = {
    "length": "length",
    "amount": "amount",
    "includeNumbers": "include_numbers",
    "includeLowercase": "include_lowercase",
    "includeUppercase": "include_uppercase",
    "includeSymbols": "include_symbols",
    "customSymbols": "custom_symbols",
    "noStartNumber": "no_start_number",
    "noStartSymbol": "no_start_symbol",
    "noSimilar": "no_similar",
    "noDuplicate": "no_duplicate",
    "noSequential": "no_sequential",
}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off")
    return bool(value)


def _as_count(name: str, value: Any) -> Any:
    """Coerce JSON-ish numbers; only whole values are accepted."""
    if isinstance(value, int):
        # bools are rejected by __post_init__
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidSettingsError(f"{name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class GenerationSettings:
    length: int = 32
    amount: int = 15
    include_numbers: bool = True
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_symbols: bool = False
    # empty means DEFAULT_SYMBOLS
    custom_symbols: str = ""
    no_start_number: bool = False
    no_start_symbol: bool = False
    no_similar: bool = False
    no_duplicate: bool = False
    no_sequential: bool = False

    def __post_init__(self) -> None:
        for name in ("length", "amount"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidSettingsError(f"{name} must be > 0")
        if self.custom_symbols is None:
            object.__setattr__(self, "custom_symbols", "")

    def replace(self, **changes: Any) -> "GenerationSettings":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationSettings":
        """
        Build settings from a loosely typed mapping such as a JSON body or a
        config file. Accepts camelCase or snake_case keys; unknown keys are
        ignored and missing ones fall back to the defaults.
        """
        fields = {f.name for f in dataclasses.fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in fields:
                logger.debug("ignoring unknown settings key %r", key)
                continue
            kwargs[name] = value

        for name in ("length", "amount"):
            if name in kwargs:
                kwargs[name] = _as_count(name, kwargs[name])
        for name in fields - {"length", "amount", "custom_symbols"}:
            if name in kwargs:
                kwargs[name] = _as_bool(kwargs[name])
        if "custom_symbols" in kwargs:
            kwargs["custom_symbols"] = str(kwargs["custom_symbols"] or "")
        return cls(**kwargs)
