"""Tests for the iterative counters."""

import logging
from decimal import Decimal

import numpy as np
import pytest

from arraycount import InvalidArgumentError, count_false, count_round_to_even, count_zero


class TestCountFalse:
    @pytest.mark.parametrize(
        "values,expected",
        [
            ([], 0),
            ([False, True, False], 2),
            ([True, True], 0),
            ([False], 1),
            ([True], 0),
            ([False] * 7, 7),
            (np.array([True, False, True, False, False]), 3),
        ],
    )
    def test_counts(self, engine, values, expected):
        assert count_false(values) == expected

    def test_returns_int(self, engine):
        assert type(count_false(np.array([False, True]))) is int

    def test_non_contiguous_view(self, engine):
        values = np.array([False, True, False, True, True, False])
        assert count_false(values[::2]) == 2
        assert count_false(values[::-1]) == 3

    def test_none_raises(self, engine):
        with pytest.raises(InvalidArgumentError, match="values"):
            count_false(None)

    def test_logs_result(self, caplog):
        caplog.set_level(logging.DEBUG, logger="arraycount")
        count_false([False, True, False])
        assert "count_false: 2 of 3" in caplog.text


class TestCountZero:
    @pytest.mark.parametrize(
        "values,expected",
        [
            ([], 0),
            ([0, 1, 0, 0, 2], 3),
            ([Decimal(0)], 1),
            ([Decimal(1)], 0),
            ([Decimal("0.00"), Decimal("-0"), Decimal("0.01"), Decimal("1E-28")], 2),
            ([Decimal("-5.5"), Decimal("79228162514264337593543950335")], 0),
            ([Decimal(0)] * 9, 9),
        ],
    )
    def test_counts(self, engine, values, expected):
        assert count_zero(values) == expected

    @pytest.mark.parametrize("zero_index", [0, 1, 2, 3, 4])
    def test_either_half(self, zero_index):
        values = [Decimal(1)] * 5
        values[zero_index] = Decimal(0)
        assert count_zero(values) == 1

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentError, match="values"):
            count_zero(None)


class TestCountRoundToEven:
    @pytest.mark.parametrize(
        "values,expected",
        [
            ([], 0),
            ([2.5, 3.5, 1.4, 1.6], 3),
            ([0.5], 1),
            ([1.4], 0),
            ([-2.5, -3.5, -1.5, -0.5], 4),
            ([1.0, 3.0, -1.0, 2.0], 1),
            ([np.nan, np.inf, -np.inf, 2.0], 1),
        ],
    )
    def test_counts(self, engine, values, expected):
        assert count_round_to_even(values) == expected

    def test_ties_go_to_even(self, engine):
        ties = np.arange(-10, 10) + 0.5
        assert count_round_to_even(ties) == len(ties)

    def test_returns_int(self, engine):
        assert type(count_round_to_even(np.array([2.0]))) is int

    def test_none_raises(self, engine):
        with pytest.raises(InvalidArgumentError, match="values"):
            count_round_to_even(None)


@pytest.mark.parametrize(
    "func,values",
    [
        (count_false, np.array([False, True, False])),
        (count_zero, np.array([Decimal(0), Decimal(1)], dtype=object)),
        (count_round_to_even, np.array([2.5, 1.4, 0.5])),
    ],
)
def test_input_not_mutated(func, values):
    before = values.copy()
    func(values)
    np.testing.assert_array_equal(values, before)
