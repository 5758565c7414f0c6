"""Tests for calendar period helpers."""

from datetime import date

from src.domain.services.periods import (
    end_of_month,
    format_period,
    is_past_or_current_month,
    next_month,
    parse_period,
)


def test_format_and_parse_period() -> None:
    assert format_period(2024, 3) == "2024-03"
    assert parse_period("2024-03") == (2024, 3)


def test_end_of_month_handles_leap_years() -> None:
    assert end_of_month(2024, 2) == date(2024, 2, 29)
    assert end_of_month(2023, 2) == date(2023, 2, 28)
    assert end_of_month(2024, 12) == date(2024, 12, 31)


def test_next_month_rolls_over_year() -> None:
    assert next_month(2024, 12) == (2025, 1)
    assert next_month(2024, 1) == (2024, 2)


def test_is_past_or_current_month() -> None:
    reference = date(2024, 5, 2)

    assert is_past_or_current_month(2024, 5, reference)
    assert is_past_or_current_month(2023, 12, reference)
    assert not is_past_or_current_month(2024, 6, reference)
