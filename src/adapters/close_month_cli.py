"""CLI adapter to close a month of balances for one user.

Reads ``CLOSE_USER_ID`` and ``CLOSE_PERIOD`` (``YYYY-MM``) from the
environment and seeds the following month with carried-forward balances.
"""

import os

from src.domain.services import parse_period
from src.infrastructure.container import build_close_month_use_case
from src.infrastructure.logging.logger import get_usage_logger


def _required_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def main() -> None:
    """Run the close-month use case."""
    user_id = _required_env("CLOSE_USER_ID")
    year, month = parse_period(_required_env("CLOSE_PERIOD"))
    use_case = build_close_month_use_case()

    result = use_case.execute(user_id, year, month)
    get_usage_logger().info(
        f"close_month user={user_id} period={year}-{month:02d}"
    )

    print(
        f"Closed {result.closed_count} balances for "
        f"{result.period_year}-{result.period_month:02d}; "
        f"seeded {result.seeded_count} balances into the next month."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
