"""Count false, zero and round-to-even elements in arrays."""

from arraycount.core.engine import get_engine, set_engine, use_engine
from arraycount.core.errors import InvalidArgumentError
from arraycount.counting import (
    count_false,
    count_false_recursive,
    count_round_to_even,
    count_round_to_even_recursive,
    count_zero,
    count_zero_recursive,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "count_false",
    "count_false_recursive",
    "count_round_to_even",
    "count_round_to_even_recursive",
    "count_zero",
    "count_zero_recursive",
    "get_engine",
    "set_engine",
    "use_engine",
]
