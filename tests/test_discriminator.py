from __future__ import annotations

import pytest

from memberstate.codec.discriminator import format_discriminator, parse_discriminator


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "0000"), (7, "0007"), (42, "0042"), (123, "0123"), (4321, "4321")],
)
def test_format_pads_to_four_digits(value: int, expected: str) -> None:
    assert format_discriminator(value) == expected


def test_format_wide_values_pass_through() -> None:
    assert format_discriminator(12345) == "12345"


@pytest.mark.parametrize(("text", "expected"), [("0007", 7), ("42", 42), ("9999", 9999), ("0", 0)])
def test_parse_valid(text: str, expected: int) -> None:
    assert parse_discriminator(text) == expected


@pytest.mark.parametrize("text", ["", None, "abcd", "12a4", "-1", "10000"])
def test_parse_degrades_to_zero(text: str | None) -> None:
    assert parse_discriminator(text) == 0
