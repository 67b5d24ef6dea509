"""Shared test configuration for arraycount."""

from __future__ import annotations

import numpy as np
import pytest

from arraycount import use_engine


@pytest.fixture(autouse=True)
def _default_engine():
    """Run every test under the default engine and undo any engine changes."""
    with use_engine("numba"):
        yield


@pytest.fixture(params=["numba", "python"])
def engine(request):
    """Run the test once per scan engine."""
    with use_engine(request.param):
        yield request.param


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return np.random.default_rng(42)
