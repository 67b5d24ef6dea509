"""Shared errors, input validation and engine selection."""

from arraycount.core.engine import ENGINES, get_engine, set_engine, use_engine
from arraycount.core.errors import InvalidArgumentError
from arraycount.core.validation import as_bool_array, as_decimal_array, as_float_array

__all__ = [
    "ENGINES",
    "InvalidArgumentError",
    "as_bool_array",
    "as_decimal_array",
    "as_float_array",
    "get_engine",
    "set_engine",
    "use_engine",
]
