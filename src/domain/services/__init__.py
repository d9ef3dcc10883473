"""Domain services package."""

from .receipt_lists import (
    count_needs_review,
    group_receipts_by_month,
    group_receipts_by_status,
    prioritize_month,
    search_receipts,
)
from .dates import (
    cursor_for,
    days_in_month,
    month_label,
    resolve_date,
    shift_month,
)
from .insights import build_insight_data
from .normalization import (
    category_key,
    category_name,
    merchant_key,
    merchant_name,
    normalize_label,
)
from .spending import (
    compute_breakdown,
    compute_daily_series,
    compute_derived_views,
    compute_month_over_month_change,
    compute_month_spend,
    compute_selected_month_receipts,
)
from .validation import is_valid_month, usable_amount

__all__ = [
    "resolve_date",
    "days_in_month",
    "month_label",
    "shift_month",
    "cursor_for",
    "usable_amount",
    "is_valid_month",
    "normalize_label",
    "category_key",
    "category_name",
    "merchant_key",
    "merchant_name",
    "compute_selected_month_receipts",
    "compute_daily_series",
    "compute_month_spend",
    "compute_month_over_month_change",
    "compute_breakdown",
    "compute_derived_views",
    "group_receipts_by_month",
    "prioritize_month",
    "group_receipts_by_status",
    "count_needs_review",
    "search_receipts",
    "build_insight_data",
]
