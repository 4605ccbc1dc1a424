from decimal import Decimal

import pytest

from restopos.utils.numbers import coerce_amount, coerce_quantity
from restopos.utils.timezones import days_in_month, parse_month


@pytest.mark.parametrize("raw, expected", [
    ("10", Decimal("10")),
    ("12.50", Decimal("12.50")),
    (7, Decimal("7")),
    (2.5, Decimal("2.5")),
    ("abc", Decimal("0")),
    ("", Decimal("0")),
    (None, Decimal("0")),
    ("-5", Decimal("0")),
    ("nan", Decimal("0")),
    ("Infinity", Decimal("0")),
    (True, Decimal("0")),
])
def test_coerce_amount(raw, expected):
    assert coerce_amount(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    (3, 3),
    ("4", 4),
    ("2.9", 2),
    ("abc", 0),
    ("", 0),
    (None, 0),
    ("-2", -2),
    (float("nan"), 0),
])
def test_coerce_quantity(raw, expected):
    assert coerce_quantity(raw) == expected


def test_days_in_month_handles_leap_years():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2025, 2) == 28
    assert days_in_month(2025, 4) == 30
    assert days_in_month(2025, 12) == 31


def test_parse_month():
    assert parse_month("2025-10") == (2025, 10)
    with pytest.raises(ValueError):
        parse_month("2025-13")
    with pytest.raises(ValueError):
        parse_month("October")
