# src/drills/core/sums.py
"""Summing integer sequences."""

from typing import Sequence


def sum_ints(numbers: Sequence[int]) -> int:
    total = 0
    for n in numbers:
        total += n
    return total


def sum_all(*sequences: Sequence[int]) -> list[int]:
    """Sum each sequence separately."""
    return [sum_ints(numbers) for numbers in sequences]


def sum_all_tails(*sequences: Sequence[int]) -> list[int]:
    """Sum each sequence minus its first element. Empty sequences give 0."""
    sums = []
    for numbers in sequences:
        if len(numbers) == 0:
            sums.append(0)
        else:
            sums.append(sum_ints(numbers[1:]))
    return sums
