"""Iterative counters over boolean, decimal and float arrays."""

import logging

from arraycount.core.validation import as_bool_array, as_decimal_array, as_float_array
from arraycount.counting.numba import scan_false, scan_round_to_even, scan_zero

__all__ = [
    "count_false",
    "count_round_to_even",
    "count_zero",
]

log = logging.getLogger(__name__)


def count_false(values):
    """Count the elements of a boolean array that are false.

    Parameters
    ----------
    values : array_like of bool
        Input sequence, possibly empty.

    Returns
    -------
    int
        Number of false elements.

    Raises
    ------
    InvalidArgumentError
        If *values* is None.

    Examples
    --------
    >>> count_false([False, True, False])
    2
    """
    arr = as_bool_array(values)
    result = scan_false(arr)
    log.debug("count_false: %d of %d", result, len(arr))
    return result


def count_zero(values):
    """Count the elements of a decimal array equal to zero.

    The array is split at ``len(values) // 2`` and each half is consumed
    from the front; the two partial counts are summed.

    Parameters
    ----------
    values : array_like of Decimal
        Input sequence, possibly empty.

    Returns
    -------
    int
        Number of zero elements.

    Raises
    ------
    InvalidArgumentError
        If *values* is None.
    """
    arr = as_decimal_array(values)
    result = scan_zero(arr)
    log.debug("count_zero: %d of %d", result, len(arr))
    return result


def count_round_to_even(values):
    """Count the elements of a float array that round to an even integer.

    Rounding is half-to-even, so ``2.5`` counts (rounds to 2) and so does
    ``3.5`` (rounds to 4), while ``1.4`` does not.

    Parameters
    ----------
    values : array_like of float
        Input sequence, possibly empty.

    Returns
    -------
    int
        Number of matching elements.

    Raises
    ------
    InvalidArgumentError
        If *values* is None.

    Examples
    --------
    >>> count_round_to_even([2.5, 3.5, 1.4, 1.6])
    3
    """
    arr = as_float_array(values)
    result = scan_round_to_even(arr)
    log.debug("count_round_to_even: %d of %d", result, len(arr))
    return result
