from __future__ import annotations

from decimal import Decimal, ROUND_DOWN

import pytest

from cbclient.utils.converters import format_decimal, format_quantity, to_decimal


@pytest.mark.parametrize(
    "value,expected",
    [
        (1.5, "1.50000000"),
        (0.1, "0.10000000"),
        ("0.123456789", "0.12345679"),
        ("0.000000025", "0.00000002"),
        ("0.000000035", "0.00000004"),
        (Decimal("12"), "12.00000000"),
        (0, "0.00000000"),
        (" 3.25 ", "3.25000000"),
    ],
)
def test_format_quantity_uses_eight_digits_half_even(value, expected) -> None:
    assert format_quantity(value) == expected


def test_format_decimal_precision_and_rounding() -> None:
    assert format_decimal("10.005") == "10.00"
    assert format_decimal("10.015") == "10.02"
    assert format_decimal("10.019", rounding=ROUND_DOWN) == "10.01"
    assert format_decimal(5, precision=0) == "5"


@pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity", float("inf"), True])
def test_to_decimal_rejects_non_numbers(value) -> None:
    with pytest.raises(ValueError):
        to_decimal(value)


def test_format_quantity_rejects_out_of_range_precision() -> None:
    with pytest.raises(ValueError):
        format_quantity("1e30")
