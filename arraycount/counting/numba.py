"""Scan kernels for the iterative counters."""

import numba as nb
import numpy as np

from arraycount.core.engine import get_engine
from arraycount.counting.predicates import is_false, is_zero, rounds_to_even

__all__ = [
    "scan_false",
    "scan_round_to_even",
    "scan_zero",
]


def _count_false_impl(values):
    n = len(values)
    result = 0
    elements_left = n
    while elements_left > 0:
        if is_false(values[n - elements_left]):
            result += 1
        elements_left -= 1
    return result


def _count_round_to_even_impl(values):
    result = 0
    i = len(values)
    while i > 0:
        i -= 1
        if rounds_to_even(values[i]):
            result += 1
    return result


def _count_zero_from_front(values, start, end):
    count = 0
    while start < end:
        if is_zero(values[start]):
            count += 1
        start += 1
    return count


@nb.njit(cache=True)
def _count_false_nb(values):
    n = len(values)
    result = 0
    elements_left = n
    while elements_left > 0:
        if not values[n - elements_left]:
            result += 1
        elements_left -= 1
    return result


@nb.njit(cache=True)
def _count_round_to_even_nb(values):
    result = 0
    i = len(values)
    while i > 0:
        i -= 1
        val = values[i]
        if np.isfinite(val) and np.rint(val) % 2.0 == 0.0:
            result += 1
    return result


def scan_false(values):
    """Count false elements, scanning with an elements-left cursor.

    Parameters
    ----------
    values : ndarray of bool
        One-dimensional input.

    Returns
    -------
    int
        Number of false elements.
    """
    if get_engine() == "numba":
        return int(_count_false_nb(np.ascontiguousarray(values)))
    return _count_false_impl(values)


def scan_zero(values):
    """Count decimal zeros, consuming the left and right halves separately.

    Decimals live in object arrays, which numba cannot compile, so this scan
    runs in the interpreter under either engine.

    Parameters
    ----------
    values : ndarray of object
        One-dimensional array of decimals.

    Returns
    -------
    int
        Number of elements equal to zero.
    """
    end = len(values)
    mid = end // 2
    left_count = _count_zero_from_front(values, 0, mid)
    right_count = _count_zero_from_front(values, mid, end)
    return left_count + right_count


def scan_round_to_even(values):
    """Count elements that round half-to-even onto an even integer, last to first.

    Parameters
    ----------
    values : ndarray of float64
        One-dimensional input.

    Returns
    -------
    int
        Number of matching elements.
    """
    if get_engine() == "numba":
        return int(_count_round_to_even_nb(np.ascontiguousarray(values)))
    return _count_round_to_even_impl(values)
