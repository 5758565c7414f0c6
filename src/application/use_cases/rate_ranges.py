"""Shared validation of currency rate date ranges."""

from datetime import date

from src.domain.errors import InvalidDateRangeError


def validate_rate_range(
    start_date: date,
    end_date: date,
    max_span_days: int,
) -> None:
    """Reject inverted ranges and ranges longer than the configured span.

    Args:
        start_date: First day of the range, inclusive.
        end_date: Last day of the range, inclusive.
        max_span_days: Maximum number of days a range may cover.

    Raises:
        InvalidDateRangeError: If the range is inverted or too long.
    """
    if start_date > end_date:
        raise InvalidDateRangeError(
            f"Start date {start_date.isoformat()} is after "
            f"end date {end_date.isoformat()}"
        )
    span = (end_date - start_date).days + 1
    if span > max_span_days:
        raise InvalidDateRangeError(
            f"Date range covers {span} days; the maximum is {max_span_days}"
        )


__all__ = ["validate_rate_range"]
