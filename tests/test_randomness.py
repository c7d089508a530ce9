from collections import Counter

import pytest

import passforge.randomness as randomness
from passforge.randomness import PseudoRandomSource, SecureRandomSource, default_source


def test_secure_range():
    src = SecureRandomSource()
    assert src.is_cryptographic
    for max in (1, 2, 7, 1000):
        for _ in range(50):
            assert 0 <= src.next_index(max) < max


def test_rejects_non_positive_max():
    for src in (SecureRandomSource(), PseudoRandomSource(1)):
        with pytest.raises(ValueError):
            src.next_index(0)
        with pytest.raises(ValueError):
            src.next_index(-3)


def test_seeded_source_is_reproducible():
    a = PseudoRandomSource(42)
    b = PseudoRandomSource(42)
    assert [a.next_index(100) for _ in range(20)] == [b.next_index(100) for _ in range(20)]
    assert not a.is_cryptographic


def test_roughly_uniform():
    src = PseudoRandomSource(5)
    counts = Counter(src.next_index(4) for _ in range(2000))
    assert set(counts) == {0, 1, 2, 3}
    assert min(counts.values()) > 350


def test_fallback_when_os_source_missing(monkeypatch):
    class BrokenSystemRandom(randomness.random.Random):
        def getrandbits(self, k):
            raise NotImplementedError

    monkeypatch.setattr(randomness, "SystemRandom", BrokenSystemRandom)
    src = SecureRandomSource()
    assert not src.is_cryptographic
    assert 0 <= src.next_index(10) < 10


def test_default_source_is_shared():
    assert default_source() is default_source()
