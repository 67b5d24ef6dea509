"""Recursive counters over boolean, decimal and float arrays.

The recursive variants address one shared buffer through ``(start, end)``
index ranges. The decimal and float counters halve their range at each
level, which keeps the call depth logarithmic in the input length.
"""

import logging

from arraycount.core.validation import as_bool_array, as_decimal_array, as_float_array
from arraycount.counting.predicates import is_false, is_zero, rounds_to_even

__all__ = [
    "count_false_recursive",
    "count_round_to_even_recursive",
    "count_zero_recursive",
]

log = logging.getLogger(__name__)


def count_false_recursive(values):
    """Count the false elements of a boolean array with an accumulator.

    Parameters
    ----------
    values : array_like of bool
        Input sequence, possibly empty.

    Returns
    -------
    int
        Number of false elements. Always equal to :func:`count_false`.

    Raises
    ------
    InvalidArgumentError
        If *values* is None.
    """
    arr = as_bool_array(values)
    result = _count_false_from(arr, len(arr), 0)
    log.debug("count_false_recursive: %d of %d", result, len(arr))
    return result


def count_zero_recursive(values):
    """Count the zero elements of a decimal array by halving.

    Parameters
    ----------
    values : array_like of Decimal
        Input sequence, possibly empty.

    Returns
    -------
    int
        Number of zero elements. Always equal to :func:`count_zero`.

    Raises
    ------
    InvalidArgumentError
        If *values* is None.
    """
    arr = as_decimal_array(values)
    result = _count_zero_between(arr, 0, len(arr))
    log.debug("count_zero_recursive: %d of %d", result, len(arr))
    return result


def count_round_to_even_recursive(values):
    """Count the float elements that round half-to-even onto an even integer.

    Each level halves the range; each half contributes its first element
    and hands the rest back to the halving step.

    Parameters
    ----------
    values : array_like of float
        Input sequence, possibly empty.

    Returns
    -------
    int
        Number of matching elements. Always equal to
        :func:`count_round_to_even`.

    Raises
    ------
    InvalidArgumentError
        If *values* is None.
    """
    arr = as_float_array(values)
    result = _halve_round_to_even(arr, 0, len(arr))
    log.debug("count_round_to_even_recursive: %d of %d", result, len(arr))
    return result


def _count_false_from(values, elements_left, accumulator):
    # Each pass is one tail call: the arguments are rebound instead of
    # pushing a frame.
    n = len(values)
    while True:
        if elements_left <= 0:
            return accumulator
        increment = 1 if is_false(values[n - elements_left]) else 0
        elements_left, accumulator = elements_left - 1, accumulator + increment


def _count_zero_between(values, start, end):
    size = end - start
    if size == 0:
        return 0
    if size == 1:
        return 1 if is_zero(values[start]) else 0
    mid = start + size // 2
    return _count_zero_between(values, start, mid) + _count_zero_between(values, mid, end)


def _halve_round_to_even(values, start, end):
    if end == start:
        return 0
    mid = start + (end - start) // 2
    return _take_first_round_to_even(values, start, mid) + _take_first_round_to_even(values, mid, end)


def _take_first_round_to_even(values, start, end):
    if end <= start:
        return 0
    increment = 1 if rounds_to_even(values[start]) else 0
    if end - start > 1:
        return _halve_round_to_even(values, start + 1, end) + increment
    return increment
