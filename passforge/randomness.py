"""
passforge.randomness
Uniform index sources used by every sampling step.

SecureRandomSource draws from the OS CSPRNG via random.SystemRandom and uses
exact rejection sampling, so next_index(max) is unbiased for every max.
PseudoRandomSource is a seeded Mersenne Twister: reproducible, NOT suitable
for real passwords.
"""

from __future__ import annotations

import logging
import random
from random import SystemRandom
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def next_index(self, max: int) -> int:
        """Return an integer uniformly distributed over [0, max)."""
        ...


def _check_max(max: int) -> None:
    if max <= 0:
        raise ValueError(f"max must be > 0, got {max}")


class SecureRandomSource:
    """
    CSPRNG-backed source. Falls back to a general-purpose PRNG (weaker
    guarantee, logged at WARNING) if the OS offers no randomness source.
    """

    def __init__(self) -> None:
        self._rng: random.Random = SystemRandom()
        self.is_cryptographic = True
        try:
            self._rng.getrandbits(8)
        except NotImplementedError:
            logger.warning("OS randomness source unavailable; falling back to a non-cryptographic PRNG")
            self._rng = random.Random()
            self.is_cryptographic = False

    def next_index(self, max: int) -> int:
        _check_max(max)
        return self._rng.randrange(max)


class PseudoRandomSource:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self.is_cryptographic = False

    def next_index(self, max: int) -> int:
        _check_max(max)
        return self._rng.randrange(max)


_default: Optional[SecureRandomSource] = None


def default_source() -> SecureRandomSource:
    """Shared secure source. SystemRandom keeps no state, so sharing is safe."""
    global _default
    if _default is None:
        _default = SecureRandomSource()
    return _default
