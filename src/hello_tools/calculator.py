"""Sum-of-a-list calculator."""

from collections.abc import Iterable


def calculate_sum(numbers: Iterable[int]) -> int:
    """Return the sum of the given integers, 0 for an empty list."""
    return sum(numbers)
