"""Domain service preparing spending context for AI insights."""

from datetime import date
from decimal import Decimal

from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import (
    CategoryShare,
    DaySpend,
    DerivedViews,
    InsightData,
    ReceiptRecord,
    ReceiptSummary,
)
from src.domain.services.normalization import category_name, merchant_name
from src.domain.services.spending import compute_breakdown
from src.domain.services.validation import usable_amount
from src.utils.decimal_utils import round_half_up


def build_insight_data(
    views: DerivedViews,
    top_n: int = DEFAULT_TOP_N,
) -> InsightData:
    """Summarize the selected month for the insights backend.

    Args:
        views: Views of the selected month.
        top_n: Number of categories reported.

    Returns:
        InsightData: Totals, averages and flattened receipts.
    """
    total_spend = views.selected_month_spend
    by_name = compute_breakdown(
        views.selected_month_receipts,
        lambda record: (category_name(record), category_name(record)),
        top_n,
    )
    top_categories = [
        CategoryShare(
            name=item.name,
            total=item.total,
            percentage=(
                round_half_up(item.total / total_spend * Decimal("100"))
                if total_spend > 0
                else 0
            ),
        )
        for item in by_name
    ]

    spending_days = [day for day in views.daily_series if day.amount > 0]
    daily_average = (
        total_spend / len(spending_days) if spending_days else Decimal("0")
    )
    highest_spend_day = None
    for day in spending_days:
        if highest_spend_day is None or day.amount > highest_spend_day.amount:
            highest_spend_day = DaySpend(day=day.day, amount=day.amount)

    return InsightData(
        total_spend=total_spend,
        receipt_count=views.receipt_count,
        month_label=views.month_label,
        top_categories=top_categories,
        daily_average=daily_average,
        highest_spend_day=highest_spend_day,
        month_over_month_change=views.month_over_month_change,
        receipts=[
            _summarize(record) for record in views.selected_month_receipts
        ],
    )


def _summarize(record: ReceiptRecord) -> ReceiptSummary:
    raw_date = record.date
    if isinstance(raw_date, date):
        date_text = raw_date.isoformat()
    else:
        date_text = raw_date or ""
    return ReceiptSummary(
        merchant=merchant_name(record),
        amount=usable_amount(record) or Decimal("0"),
        date=date_text,
        category=category_name(record),
    )


__all__ = ["build_insight_data"]
