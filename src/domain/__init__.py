"""Domain package for receipt spending rules and core models."""

from .constants import (
    DEFAULT_TOP_N,
    OTHER_CATEGORY_LABEL,
    RECEIPT_STATUSES,
    UNKNOWN_MERCHANT_LABEL,
)
from .models import (
    BreakdownItem,
    CategoryRef,
    DailySpend,
    DerivedViews,
    InsightData,
    MerchantRef,
    MonthGroup,
    MonthOverMonthChange,
    ReceiptRecord,
    TimeWindowCursor,
)
from .services import (
    build_insight_data,
    compute_breakdown,
    compute_daily_series,
    compute_derived_views,
    compute_month_over_month_change,
    compute_month_spend,
    compute_selected_month_receipts,
    resolve_date,
)

__all__ = [
    "BreakdownItem",
    "CategoryRef",
    "DailySpend",
    "DerivedViews",
    "InsightData",
    "MerchantRef",
    "MonthGroup",
    "MonthOverMonthChange",
    "ReceiptRecord",
    "TimeWindowCursor",
    "DEFAULT_TOP_N",
    "OTHER_CATEGORY_LABEL",
    "RECEIPT_STATUSES",
    "UNKNOWN_MERCHANT_LABEL",
    "build_insight_data",
    "compute_breakdown",
    "compute_daily_series",
    "compute_derived_views",
    "compute_month_over_month_change",
    "compute_month_spend",
    "compute_selected_month_receipts",
    "resolve_date",
]
