"""Domain models for the payload sent to the AI insights backend."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.spending import MonthOverMonthChange


@dataclass(frozen=True)
class CategoryShare:
    """Category total with its share of the month's spend."""

    name: str
    total: Decimal
    percentage: int


@dataclass(frozen=True)
class DaySpend:
    day: int
    amount: Decimal


@dataclass(frozen=True)
class ReceiptSummary:
    """Flattened receipt line for insight prompts."""

    merchant: str
    amount: Decimal
    date: str
    category: str


@dataclass(frozen=True)
class InsightData:
    """Aggregated spending context for the selected month."""

    total_spend: Decimal
    receipt_count: int
    month_label: str
    top_categories: list[CategoryShare]
    daily_average: Decimal
    highest_spend_day: DaySpend | None
    month_over_month_change: MonthOverMonthChange | None
    receipts: list[ReceiptSummary]


__all__ = ["CategoryShare", "DaySpend", "ReceiptSummary", "InsightData"]
