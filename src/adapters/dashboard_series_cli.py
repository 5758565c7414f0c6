"""CLI adapter printing the dashboard series for one user.

Reads ``DASHBOARD_USER_ID`` plus optional ``REPORT_CURRENCY``,
``DASHBOARD_RANGE`` (all, 1y, ytd) and ``RETURN_METHOD`` (simple, twr, mwr).
"""

import os

from src.domain.models import DashboardRange, ReturnMethod
from src.infrastructure.container import build_dashboard_series_use_case
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import AnalyticsSettings


def _format_pct(value) -> str:
    return "-" if value is None else f"{value}%"


def main() -> None:
    """Run the dashboard series use case and print one row per month."""
    user_id = os.getenv("DASHBOARD_USER_ID", "").strip()
    if not user_id:
        raise RuntimeError("Missing environment variable: DASHBOARD_USER_ID")
    settings = AnalyticsSettings.from_env()
    range_ = DashboardRange(os.getenv("DASHBOARD_RANGE", "all").strip().lower())
    method = ReturnMethod(os.getenv("RETURN_METHOD", "simple").strip().lower())

    series = build_dashboard_series_use_case().execute(
        user_id,
        settings.report_currency,
        range_=range_,
        return_method=method,
    )
    get_usage_logger().info(
        f"dashboard_series user={user_id} range={range_.value} "
        f"method={method.value}"
    )

    print(
        f"{series.currency} {series.range.value} "
        f"{series.from_period or '-'} .. {series.to_period or '-'}"
    )
    for point in series.points:
        print(
            f"{point.period}  equity={point.equity_with_net_flow}  "
            f"inflow={point.inflow}  income={point.net_income}  "
            f"return={_format_pct(point.return_pct)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
