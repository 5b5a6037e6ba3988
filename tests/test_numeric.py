from __future__ import annotations

from decimal import Decimal

import pytest

from parity_oracle.common.numeric import format_number, is_numeric


@pytest.mark.parametrize("value", [7, -5, 0, 10**40, 3.5, -8.0, "12", " 4 ", "2.5", "-1e3"])
def test_accepts_numeric_values(value) -> None:
    assert is_numeric(value)


@pytest.mark.parametrize(
    "value",
    ["abc", "", "nan", "inf", float("nan"), float("inf"), None, True, b"7", [7], Decimal("7")],
)
def test_rejects_non_numeric_values(value) -> None:
    assert not is_numeric(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        (7, "7"),
        (-8, "-8"),
        (0, "0"),
        (7.0, "7"),
        (7.5, "7.5"),
        ("10", "10"),
        (" -5 ", "-5"),
        ("3.25", "3.25"),
        (1e21, "1e+21"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


def test_format_number_keeps_digits_beyond_float_range() -> None:
    huge = 10**400 + 1
    assert format_number(huge) == str(huge)


@pytest.mark.parametrize("text", ["1_000", "٣", "７", "1,000", "12abc", "0x10", "1e400", "."])
def test_rejects_strings_that_are_not_plain_literals(text: str) -> None:
    assert not is_numeric(text)


@pytest.mark.parametrize("text", ["+3", "-0", ".5", "5.", "1E3", "2.5e-3"])
def test_accepts_plain_literals(text: str) -> None:
    assert is_numeric(text)
