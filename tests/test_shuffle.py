from collections import Counter

from passforge.randomness import PseudoRandomSource
from passforge.shuffle import duplicate_free_eligible, fisher_yates_shuffle, generate_duplicate_free


class ScriptedSource:
    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = []

    def next_index(self, max):
        self.calls.append(max)
        return self.indices.pop(0)


def test_eligibility():
    assert duplicate_free_eligible(True, False, "")
    assert not duplicate_free_eligible(False, False, "")
    assert not duplicate_free_eligible(True, True, "")
    assert not duplicate_free_eligible(True, False, "!#")


def test_scripted_construction():
    rng = ScriptedSource([2, 0, 0])
    assert generate_duplicate_free(3, "abcd", "abcd", rng) == "cbd"
    assert rng.calls == [4, 3, 2]


def test_shuffle_is_permutation():
    items = list("abcdefgh")
    fisher_yates_shuffle(items, PseudoRandomSource(7))
    assert sorted(items) == list("abcdefgh")


def test_shuffle_covers_all_orders():
    rng = PseudoRandomSource(11)
    seen = Counter()
    for _ in range(600):
        items = list("abc")
        fisher_yates_shuffle(items, rng)
        seen["".join(items)] += 1
    assert len(seen) == 6
    assert min(seen.values()) > 50


def test_first_char_only_once():
    for seed in range(20):
        pw = generate_duplicate_free(10, "0123456789", "56789", PseudoRandomSource(seed))
        assert pw[0] in "56789"
        assert sorted(pw) == list("0123456789")
