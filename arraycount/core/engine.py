"""Selection of the engine that runs the iterative scans."""

from __future__ import annotations

import contextlib
import logging
from contextvars import ContextVar

__all__ = [
    "ENGINES",
    "get_engine",
    "set_engine",
    "use_engine",
]

log = logging.getLogger(__name__)

ENGINES = ("numba", "python")

_active_engine: ContextVar[str] = ContextVar("arraycount_engine", default="numba")


def set_engine(name):
    """Set the scan engine for the current context.

    Parameters
    ----------
    name : {"numba", "python"}
        ``"numba"`` runs the iterative scans as compiled kernels, ``"python"``
        runs the same loops in the interpreter.
    """
    name = _validate_engine_name(name)
    _active_engine.set(name)
    log.debug("engine set to %s", name)


def get_engine():
    """Return the name of the active scan engine.

    Returns
    -------
    str
        ``"numba"`` or ``"python"``.
    """
    return _active_engine.get()


@contextlib.contextmanager
def use_engine(name):
    """Context manager that temporarily activates a scan engine.

    The previous engine is restored when the context exits, even if an
    exception is raised.

    Parameters
    ----------
    name : {"numba", "python"}
        Engine to activate for the duration of the block.
    """
    name = _validate_engine_name(name)
    token = _active_engine.set(name)
    log.debug("engine set to %s for block", name)
    try:
        yield
    finally:
        _active_engine.reset(token)


def _validate_engine_name(name):
    """Validate and normalise an engine name.

    Parameters
    ----------
    name : str
        Engine name (case-insensitive).

    Returns
    -------
    str
        Normalised engine name (``"numba"`` or ``"python"``).
    """
    if not isinstance(name, str):
        raise ValueError(f"Unknown engine {name!r}. Choose 'numba' or 'python'.")
    name = name.lower()
    if name not in ENGINES:
        raise ValueError(f"Unknown engine {name!r}. Choose 'numba' or 'python'.")
    return name
