"""CLI adapter printing the spending summary of one month.

The month is read from ``SUMMARY_MONTH`` (``YYYY-MM``) and defaults to the
current month.
"""

from decimal import Decimal
import os

from src.domain.models import DerivedViews, InsightData, TimeWindowCursor
from src.domain.services.insights import build_insight_data
from src.infrastructure.container import build_monthly_spending_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import SpendingSettings


def _parse_month(value: str | None, logger) -> TimeWindowCursor | None:
    """Parse a ``YYYY-MM`` string into a cursor.

    Args:
        value: Month string.
        logger: Logger used for warnings.

    Returns:
        TimeWindowCursor | None: Parsed cursor or None when invalid.
    """
    if not value:
        return None
    year_text, _, month_text = value.strip().partition("-")
    try:
        year = int(year_text)
        month = int(month_text)
    except ValueError:
        month = 0
    if not 1 <= month <= 12:
        logger.warning(
            f"Invalid month '{value}'. Expected format YYYY-MM."
        )
        return None
    return TimeWindowCursor(year=year, month=month - 1)


def _format_amount(value: Decimal, currency_code: str) -> str:
    """Format amounts for display."""
    symbol = "$" if currency_code == "USD" else f"{currency_code} "
    return f"{symbol}{value:,.2f}"


def _format_change(views: DerivedViews) -> str:
    change = views.month_over_month_change
    if change is None:
        return "n/a"
    if change.percent_absolute == 0:
        return "0%"
    sign = "+" if change.is_increase else "-"
    return f"{sign}{change.percent_absolute}%"


def _print_summary(
    views: DerivedViews,
    insight: InsightData,
    currency: str,
) -> None:
    print(f"Spending for {views.month_label}")
    print(
        f"Total: {_format_amount(views.selected_month_spend, currency)} "
        f"across {views.receipt_count} receipts"
    )
    print(
        f"Previous month: "
        f"{_format_amount(views.previous_month_spend, currency)} "
        f"(change: {_format_change(views)})"
    )
    print(
        f"Daily average: {_format_amount(insight.daily_average, currency)}"
    )
    if insight.highest_spend_day is not None:
        print(
            f"Highest day: {insight.highest_spend_day.day} "
            f"({_format_amount(insight.highest_spend_day.amount, currency)})"
        )
    print("Top categories:")
    for item in views.category_breakdown:
        print(f"  {item.name}: {_format_amount(item.total, currency)}")
    print("Top merchants:")
    for item in views.merchant_breakdown:
        print(f"  {item.name}: {_format_amount(item.total, currency)}")


def main() -> None:
    """Compute and print the spending summary of the requested month."""
    logger = get_app_logger()
    get_usage_logger().info("spending_summary_cli invoked")
    settings = SpendingSettings.from_env()
    cursor = _parse_month(os.getenv("SUMMARY_MONTH"), logger)

    use_case = build_monthly_spending_use_case()
    views = use_case.execute(cursor)
    insight = build_insight_data(views, top_n=settings.top_n)
    if views.receipt_count == 0:
        logger.info(f"No receipts found for {views.month_label}")

    _print_summary(views, insight, settings.currency)


if __name__ == "__main__":  # pragma: no cover
    main()
