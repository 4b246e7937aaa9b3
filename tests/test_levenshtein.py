"""Tests for failtriage.levenshtein - the bounded edit-distance evaluator."""

import random

import pytest

from failtriage.levenshtein import distance


def _reference(a: str, b: str) -> int:
    """Full-matrix Levenshtein distance, for cross-checking."""
    rows = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        rows[i][0] = i
    for j in range(len(b) + 1):
        rows[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            rows[i][j] = min(rows[i - 1][j] + 1, rows[i][j - 1] + 1, rows[i - 1][j - 1] + cost)
    return rows[len(a)][len(b)]


def _random_strings(seed: int, count: int):
    rng = random.Random(seed)
    for _ in range(count):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(5, 24)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(5, 24)))
        yield a, b


class TestUnbounded:
    """Exact distances with no limit."""

    @pytest.mark.parametrize("s", ["", "a", "panic: boom", "x" * 300])
    @pytest.mark.parametrize("limit", [0, 1, 5])
    def test_identity(self, s, limit):
        assert distance(s, s, limit) == 0

    def test_boundaries(self):
        assert distance("", "", 0) == 0
        assert distance("", "abc", 0) == 3
        assert distance("abc", "", 0) == 3

    def test_single_substitution(self):
        assert distance("connection refused", "connection refuses", 0) == 1

    def test_single_insertion(self):
        assert distance("connection refused", "connection refused!", 0) == 1

    def test_single_deletion(self):
        assert distance("timeout", "timout", 0) == 1

    def test_classic_example(self):
        assert distance("kitten", "sitting") == 3

    def test_symmetric(self):
        for a, b in _random_strings(seed=1, count=50):
            assert distance(a, b, 0) == distance(b, a, 0)

    def test_matches_reference(self):
        for a, b in _random_strings(seed=2, count=100):
            assert distance(a, b, 0) == _reference(a, b)

    def test_negative_limit_means_unbounded(self):
        assert distance("kitten", "sitting", -1) == 3


class TestBounded:
    """Early exit once the limit is provably exceeded."""

    def test_within_limit_is_exact(self):
        assert distance("kitten", "sitting", 3) == 3
        assert distance("kitten", "sitting", 5) == 3

    def test_over_limit_reports_limit_plus_one(self):
        assert distance("kitten", "sitting", 2) == 3
        assert distance("kitten", "sitting", 1) == 2

    def test_length_difference_shortcut(self):
        """A length gap larger than the limit is over the limit outright."""
        assert distance("a", "abcdefgh", 3) == 4
        assert distance("", "abc", 2) == 3

    def test_empty_within_limit(self):
        assert distance("", "abc", 3) == 3

    def test_never_undercounts(self):
        """With a limit, results are exact up to the limit and otherwise
        strictly greater than it."""
        for a, b in _random_strings(seed=3, count=300):
            full = _reference(a, b)
            bounded = distance(a, b, 5)
            if full <= 5:
                assert bounded == full
            else:
                assert bounded > 5

    def test_long_strings_far_apart(self):
        """Very different long texts stop early with ``limit + 1``."""
        a = "a" * 2000
        b = "b" * 2000
        assert distance(a, b, 10) == 11


class TestBytes:
    """Distances are measured in UTF-8 bytes."""

    def test_bytes_input(self):
        assert distance(b"abc", b"abd") == 1

    def test_multibyte_character(self):
        """``é`` is two bytes, so turning it into ``e`` costs two edits."""
        assert distance("é", "e") == 2

    def test_str_and_bytes_agree(self):
        assert distance("naïve", "naive") == distance("naïve".encode("utf-8"), b"naive")
