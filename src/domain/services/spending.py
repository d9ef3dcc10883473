"""Domain services deriving spending views from a receipt snapshot.

Every function here is pure: the same snapshot and cursor always produce
equal results, and a malformed receipt only removes itself from the sums.
"""

from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal

from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import (
    BreakdownItem,
    DailySpend,
    DerivedViews,
    MonthOverMonthChange,
    ReceiptRecord,
    TimeWindowCursor,
)
from src.domain.services.dates import (
    days_in_month,
    month_label,
    resolve_date,
    shift_month,
)
from src.domain.services.normalization import category_key, merchant_key
from src.domain.services.validation import usable_amount
from src.utils.decimal_utils import round_half_up


GroupKeyFn = Callable[[ReceiptRecord], tuple[str, str]]


def compute_selected_month_receipts(
    snapshot: Iterable[ReceiptRecord],
    cursor: TimeWindowCursor,
) -> tuple[ReceiptRecord, ...]:
    """Return receipts whose resolved date falls in the cursor month.

    Args:
        snapshot: Receipts in store order.
        cursor: Selected month.

    Returns:
        tuple[ReceiptRecord, ...]: Matching receipts, snapshot order kept.
    """
    return tuple(
        record
        for record in snapshot
        if _in_month(record, cursor.year, cursor.month)
    )


def compute_daily_series(
    selected_receipts: Iterable[ReceiptRecord],
    cursor: TimeWindowCursor,
) -> tuple[DailySpend, ...]:
    """Bucket usable amounts by day of month with a running total.

    Args:
        selected_receipts: Receipts of the cursor month.
        cursor: Selected month, which fixes the series length.

    Returns:
        tuple[DailySpend, ...]: One entry per calendar day, starting at 1.
    """
    day_count = days_in_month(cursor.year, cursor.month)
    buckets = [Decimal("0")] * day_count
    for record in selected_receipts:
        amount = usable_amount(record)
        if amount is None:
            continue
        resolved = resolve_date(record)
        if resolved is None or not 1 <= resolved.day <= day_count:
            continue
        buckets[resolved.day - 1] += amount

    series = []
    running = Decimal("0")
    for index, amount in enumerate(buckets):
        running += amount
        series.append(
            DailySpend(day=index + 1, amount=amount, cumulative=running)
        )
    return tuple(series)


def compute_month_spend(
    snapshot: Iterable[ReceiptRecord],
    year: int,
    month: int,
) -> Decimal:
    """Sum usable amounts of receipts dated in (year, month).

    Args:
        snapshot: Receipts in store order.
        year: Calendar year.
        month: Zero-based month index.

    Returns:
        Decimal: Total spend, zero when nothing matches.
    """
    total = Decimal("0")
    for record in snapshot:
        if not _in_month(record, year, month):
            continue
        amount = usable_amount(record)
        if amount is not None:
            total += amount
    return total


def compute_month_over_month_change(
    current: Decimal,
    previous: Decimal,
) -> MonthOverMonthChange | None:
    """Compare two monthly totals.

    Args:
        current: Spend of the selected month.
        previous: Spend of the month before.

    Returns:
        MonthOverMonthChange | None: Rounded change, or None from a zero base.
    """
    if previous == 0:
        return None
    percent = (current - previous) / previous * Decimal("100")
    return MonthOverMonthChange(
        percent_absolute=round_half_up(abs(percent)),
        is_increase=percent > 0,
    )


def compute_breakdown(
    selected_receipts: Iterable[ReceiptRecord],
    key_fn: GroupKeyFn,
    top_n: int = DEFAULT_TOP_N,
) -> tuple[BreakdownItem, ...]:
    """Group receipts and rank the groups by total spend.

    Args:
        selected_receipts: Receipts of the cursor month.
        key_fn: Returns the (group key, display label) of a receipt.
        top_n: Maximum number of groups returned.

    Returns:
        tuple[BreakdownItem, ...]: Largest groups first.
    """
    totals: dict[str, Decimal] = {}
    labels: dict[str, str] = {}
    for record in selected_receipts:
        key, name = key_fn(record)
        labels.setdefault(key, name)
        amount = usable_amount(record) or Decimal("0")
        totals[key] = totals.get(key, Decimal("0")) + amount

    if not totals:
        return ()
    largest = max(totals.values())
    items = [
        BreakdownItem(
            name=labels[key],
            total=total,
            percentage_of_max=(
                total / largest * Decimal("100")
                if largest > 0
                else Decimal("0")
            ),
        )
        for key, total in totals.items()
    ]
    items.sort(key=lambda item: item.total, reverse=True)
    return tuple(items[:top_n])


def compute_derived_views(
    snapshot: Sequence[ReceiptRecord],
    cursor: TimeWindowCursor,
    top_n: int = DEFAULT_TOP_N,
) -> DerivedViews:
    """Compute every spending view for a snapshot and a cursor.

    Args:
        snapshot: Full, materialized receipt set.
        cursor: Selected month.
        top_n: Maximum groups in the category and merchant breakdowns.

    Returns:
        DerivedViews: Views consistent with the two inputs.
    """
    selected = compute_selected_month_receipts(snapshot, cursor)
    selected_spend = compute_month_spend(selected, cursor.year, cursor.month)
    previous = shift_month(cursor, -1)
    previous_spend = compute_month_spend(snapshot, previous.year, previous.month)
    return DerivedViews(
        cursor=cursor,
        month_label=month_label(cursor),
        selected_month_receipts=selected,
        selected_month_spend=selected_spend,
        daily_series=compute_daily_series(selected, cursor),
        previous_month_spend=previous_spend,
        month_over_month_change=compute_month_over_month_change(
            selected_spend,
            previous_spend,
        ),
        category_breakdown=compute_breakdown(selected, category_key, top_n),
        merchant_breakdown=compute_breakdown(selected, merchant_key, top_n),
    )


def _in_month(record: ReceiptRecord, year: int, month: int) -> bool:
    resolved = resolve_date(record)
    return (
        resolved is not None
        and resolved.year == year
        and resolved.month - 1 == month
    )


__all__ = [
    "compute_selected_month_receipts",
    "compute_daily_series",
    "compute_month_spend",
    "compute_month_over_month_change",
    "compute_breakdown",
    "compute_derived_views",
]
