"""Domain services listing receipts outside of monetary aggregation."""

from collections.abc import Iterable, Sequence

from src.domain.constants import RECEIPT_STATUSES
from src.domain.models import MonthGroup, ReceiptRecord, TimeWindowCursor
from src.domain.services.dates import month_label, resolve_date
from src.domain.services.validation import usable_amount


def group_receipts_by_month(
    snapshot: Iterable[ReceiptRecord],
) -> list[MonthGroup]:
    """Group receipts by resolved month, newest month first.

    Args:
        snapshot: Receipts in store order.

    Returns:
        list[MonthGroup]: Groups keeping store order within each month.
    """
    groups: dict[tuple[int, int], MonthGroup] = {}
    for record in snapshot:
        resolved = resolve_date(record)
        if resolved is None:
            continue
        key = (resolved.year, resolved.month - 1)
        if key not in groups:
            groups[key] = MonthGroup(
                year=key[0],
                month=key[1],
                label=month_label(TimeWindowCursor(*key)),
            )
        groups[key].receipts.append(record)
    return sorted(
        groups.values(),
        key=lambda group: (group.year, group.month),
        reverse=True,
    )


def prioritize_month(
    groups: Sequence[MonthGroup],
    cursor: TimeWindowCursor,
    limit: int,
) -> list[MonthGroup]:
    """Move the selected month's group first and keep ``limit`` groups.

    Args:
        groups: Month groups, newest first.
        cursor: Selected month.
        limit: Number of groups currently visible.

    Returns:
        list[MonthGroup]: Visible groups.
    """
    ordered = list(groups)
    for index, group in enumerate(ordered):
        if group.year == cursor.year and group.month == cursor.month:
            if index > 0:
                ordered.insert(0, ordered.pop(index))
            break
    return ordered[:limit]


def group_receipts_by_status(
    snapshot: Iterable[ReceiptRecord],
) -> dict[str, list[ReceiptRecord]]:
    """Group receipts by processing status.

    Unknown statuses are kept under their own key.
    """
    grouped: dict[str, list[ReceiptRecord]] = {
        status: [] for status in RECEIPT_STATUSES
    }
    for record in snapshot:
        grouped.setdefault(record.status, []).append(record)
    return grouped


def count_needs_review(snapshot: Iterable[ReceiptRecord]) -> int:
    return sum(1 for record in snapshot if record.status == "needs_review")


def search_receipts(
    snapshot: Sequence[ReceiptRecord],
    query: str,
    limit: int = 10,
) -> list[ReceiptRecord]:
    """Filter receipts by merchant, amount, date or file name.

    Args:
        snapshot: Receipts in store order.
        query: Free text typed by the user.
        limit: Number of receipts returned for an empty query.

    Returns:
        list[ReceiptRecord]: Matching receipts in store order.
    """
    needle = query.strip().lower()
    if not needle:
        return list(snapshot[:limit])
    return [
        record
        for record in snapshot
        if any(needle in field for field in _searchable_fields(record))
    ]


def _searchable_fields(record: ReceiptRecord) -> list[str]:
    fields = []
    if record.merchant is not None:
        fields.append((record.merchant.canonical_name or "").lower())
        fields.append((record.merchant.raw_name or "").lower())
    amount = usable_amount(record)
    if amount is not None:
        fields.append(str(amount))
    if record.date is not None:
        fields.append(str(record.date).lower())
    if record.file_name:
        fields.append(record.file_name.lower())
    return [field for field in fields if field]


__all__ = [
    "group_receipts_by_month",
    "prioritize_month",
    "group_receipts_by_status",
    "count_needs_review",
    "search_receipts",
]
