"""Iterative and recursive element counters."""

from arraycount.counting.iterative import count_false, count_round_to_even, count_zero
from arraycount.counting.recursive import (
    count_false_recursive,
    count_round_to_even_recursive,
    count_zero_recursive,
)

__all__ = [
    "count_false",
    "count_false_recursive",
    "count_round_to_even",
    "count_round_to_even_recursive",
    "count_zero",
    "count_zero_recursive",
]
