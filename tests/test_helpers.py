from __future__ import annotations

import math

import pytest

from services.helpers import to_display_string, to_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        (28, 28.0),
        (7.5, 7.5),
        ("80", 80.0),
        (" 3.6 ", 3.6),
        ("-1", -1.0),
    ],
)
def test_to_number_accepts_numbers_and_numeric_strings(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "n/a", "12abc", True, [1], {"t": 1}, float("inf"), "nan"])
def test_to_number_returns_nan_for_unusable_values(raw):
    assert math.isnan(to_number(raw))


def test_to_number_keeps_zero_distinct_from_missing():
    assert to_number("0") == 0.0
    assert to_number(0) == 0.0
    assert math.isnan(to_number(None))


def test_to_display_string():
    assert to_display_string(None) == ""
    assert to_display_string("Cerah") == "Cerah"
    assert to_display_string(12) == "12"
    assert to_display_string("") == ""
