"""Coercion of caller input into one-dimensional NumPy buffers."""

import numpy as np

from arraycount.core.errors import InvalidArgumentError

__all__ = [
    "as_bool_array",
    "as_decimal_array",
    "as_float_array",
]


def as_bool_array(values, name="values"):
    """Return *values* as a 1-D boolean array.

    Parameters
    ----------
    values : array_like of bool
        Input sequence. Must not be None.
    name : str, default "values"
        Parameter name reported in errors.

    Returns
    -------
    ndarray
        Array of dtype ``bool_``. No copy is made when *values* already is one.
    """
    return _as_1d(values, name, np.bool_)


def as_decimal_array(values, name="values"):
    """Return *values* as a 1-D object array of decimals.

    Parameters
    ----------
    values : array_like of Decimal
        Input sequence. Must not be None.
    name : str, default "values"
        Parameter name reported in errors.

    Returns
    -------
    ndarray
        Array of dtype ``object``.
    """
    return _as_1d(values, name, object)


def as_float_array(values, name="values"):
    """Return *values* as a 1-D float64 array.

    Parameters
    ----------
    values : array_like of float
        Input sequence. Must not be None.
    name : str, default "values"
        Parameter name reported in errors.

    Returns
    -------
    ndarray
        Array of dtype ``float64``.
    """
    return _as_1d(values, name, np.float64)


def _as_1d(values, name, dtype):
    if values is None:
        raise InvalidArgumentError(name)
    try:
        arr = np.asarray(values, dtype=dtype)
    except ValueError as exc:
        raise InvalidArgumentError(name, f"{name} must be a one-dimensional sequence: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidArgumentError(name, f"{name} must be one-dimensional, got ndim={arr.ndim}.")
    if arr.dtype == object and any(isinstance(v, (list, tuple, np.ndarray)) for v in arr):
        raise InvalidArgumentError(name, f"{name} must be one-dimensional, got nested sequences.")
    return arr
