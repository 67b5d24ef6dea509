"""Scalar predicates tested by the counters."""

from decimal import Decimal

import numpy as np

__all__ = [
    "is_false",
    "is_zero",
    "rounds_to_even",
]

_ZERO = Decimal(0)


def is_false(value):
    """Return True if *value* is false."""
    return not value


def is_zero(value):
    """Return True if *value* equals decimal zero exactly.

    Scale and sign are ignored, so ``Decimal("0.00")`` and ``Decimal("-0")``
    are both zero.
    """
    return value == _ZERO


def rounds_to_even(value):
    """Return True if *value* rounds half-to-even onto an even integer.

    Ties go to the even neighbour, so 2.5 rounds to 2 and 3.5 to 4.
    NaN and infinities never match.

    Parameters
    ----------
    value : float
        Value to test.

    Returns
    -------
    bool
    """
    if not np.isfinite(value):
        return False
    return bool(np.rint(value) % 2.0 == 0.0)
