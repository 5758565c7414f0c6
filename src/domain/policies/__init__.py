"""Domain policies package."""

from .period_state import (
    is_period_editable,
    is_period_fully_closed,
    summarize_periods,
)

__all__ = [
    "is_period_editable",
    "is_period_fully_closed",
    "summarize_periods",
]
