# tests/test_sums.py
"""Tests for sequence sums and string repetition."""

from drills.core.sums import sum_ints, sum_all, sum_all_tails
from drills.core.repeat import repeat


# === Sums ===

def test_sum_ints():
    assert sum_ints([1, 2, 3, 4, 5]) == 15


def test_sum_ints_empty():
    assert sum_ints([]) == 0


def test_sum_all():
    assert sum_all([1, 2], [0, 9]) == [3, 9]


def test_sum_all_no_sequences():
    assert sum_all() == []


def test_sum_all_tails():
    assert sum_all_tails([1, 2], [0, 9]) == [2, 9]


def test_sum_all_tails_empty_sequence():
    assert sum_all_tails([], [3, 4, 5]) == [0, 9]


# === Repeat ===

def test_repeat_default_count():
    assert repeat("a") == "aaaaa"


def test_repeat_count():
    assert repeat("ab", 3) == "ababab"


def test_repeat_zero():
    assert repeat("a", 0) == ""
