"""Tests for number rendering."""

import math

import pytest

from calcline.core.formatting import format_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (14.0, "14"),
        (-6.0, "-6"),
        (-0.0, "0"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "1e+20"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
    ],
)
def test_shortest_form(value: float, expected: str) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize(
    ("value", "precision", "expected"),
    [
        (1 / 3, 4, "0.3333"),
        (2.0, 3, "2"),
        (2.5, 0, "2"),
        (-0.0001, 2, "0"),
        (1.25, 1, "1.2"),
    ],
)
def test_fixed_precision(value: float, precision: int, expected: str) -> None:
    assert format_number(value, precision) == expected
