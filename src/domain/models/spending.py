"""Domain models for derived spending views."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.receipts import ReceiptRecord


@dataclass(frozen=True)
class TimeWindowCursor:
    """Selected calendar month.

    Attributes:
        year: Calendar year.
        month: Zero-based month index (0 is January, 11 is December).
    """

    year: int
    month: int


@dataclass(frozen=True)
class DailySpend:
    """Spend for a single day of the selected month."""

    day: int
    amount: Decimal
    cumulative: Decimal


@dataclass(frozen=True)
class MonthOverMonthChange:
    """Rounded percentage change against the previous month."""

    percent_absolute: int
    is_increase: bool


@dataclass(frozen=True)
class BreakdownItem:
    """Spend grouped under a category or merchant name.

    Attributes:
        name: Group label.
        total: Sum of usable amounts in the group.
        percentage_of_max: Total relative to the largest group (0-100).
    """

    name: str
    total: Decimal
    percentage_of_max: Decimal


@dataclass(frozen=True)
class DerivedViews:
    """Every view derived from one (snapshot, cursor) pair."""

    cursor: TimeWindowCursor
    month_label: str
    selected_month_receipts: tuple[ReceiptRecord, ...]
    selected_month_spend: Decimal
    daily_series: tuple[DailySpend, ...]
    previous_month_spend: Decimal
    month_over_month_change: MonthOverMonthChange | None
    category_breakdown: tuple[BreakdownItem, ...]
    merchant_breakdown: tuple[BreakdownItem, ...]

    @property
    def receipt_count(self) -> int:
        """Return the number of receipts in the selected month."""
        return len(self.selected_month_receipts)


@dataclass(frozen=True)
class MonthGroup:
    """Receipts sharing the same resolved month."""

    year: int
    month: int
    label: str
    receipts: list[ReceiptRecord] = field(default_factory=list)


__all__ = [
    "TimeWindowCursor",
    "DailySpend",
    "MonthOverMonthChange",
    "BreakdownItem",
    "DerivedViews",
    "MonthGroup",
]
