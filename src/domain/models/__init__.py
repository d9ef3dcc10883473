"""Domain models package."""

from .insights import CategoryShare, DaySpend, InsightData, ReceiptSummary
from .receipts import CategoryRef, MerchantRef, ReceiptRecord
from .spending import (
    BreakdownItem,
    DailySpend,
    DerivedViews,
    MonthGroup,
    MonthOverMonthChange,
    TimeWindowCursor,
)

__all__ = [
    "CategoryRef",
    "MerchantRef",
    "ReceiptRecord",
    "TimeWindowCursor",
    "DailySpend",
    "MonthOverMonthChange",
    "BreakdownItem",
    "DerivedViews",
    "MonthGroup",
    "CategoryShare",
    "DaySpend",
    "ReceiptSummary",
    "InsightData",
]
