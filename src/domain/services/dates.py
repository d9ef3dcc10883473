"""Calendar helpers and the canonical receipt date resolution."""

import calendar
from datetime import date, datetime, timezone
from typing import Any

from src.domain.models import ReceiptRecord, TimeWindowCursor


_TIMESTAMP_ACCESSORS = ("to_datetime", "ToDatetime", "to_date", "toDate")


def resolve_date(record: ReceiptRecord) -> date | None:
    """Return the calendar date a receipt is bucketed under.

    The transaction date wins when it parses as an ISO calendar date;
    otherwise the creation timestamp is used.

    Args:
        record: Receipt from the current snapshot.

    Returns:
        date | None: Resolved date, or None when neither field is usable.
    """
    transaction_date = _parse_transaction_date(record.date)
    if transaction_date is not None:
        return transaction_date
    return _timestamp_to_date(record.created_at)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a zero-based month."""
    return calendar.monthrange(year, month + 1)[1]


def month_label(cursor: TimeWindowCursor) -> str:
    """Return a display label such as ``December 2024``."""
    return f"{calendar.month_name[cursor.month + 1]} {cursor.year}"


def shift_month(cursor: TimeWindowCursor, months: int) -> TimeWindowCursor:
    """Move a cursor by a number of months, rolling the year as needed."""
    index = cursor.year * 12 + cursor.month + months
    return TimeWindowCursor(year=index // 12, month=index % 12)


def cursor_for(day: date) -> TimeWindowCursor:
    """Return the cursor of the month containing ``day``."""
    return TimeWindowCursor(year=day.year, month=day.month - 1)


def _parse_transaction_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def _timestamp_to_date(value: Any) -> date | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        # Epoch milliseconds, as stored by JavaScript clients.
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).date()
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        return _parse_iso_timestamp(value)
    for accessor_name in _TIMESTAMP_ACCESSORS:
        accessor = getattr(value, accessor_name, None)
        if not callable(accessor):
            continue
        try:
            converted = accessor()
        except (TypeError, ValueError, OverflowError):
            return None
        if isinstance(converted, (datetime, date)):
            return _timestamp_to_date(converted)
        return None
    return None


def _parse_iso_timestamp(value: str) -> date | None:
    text = value.strip()
    # JavaScript toISOString() output ends with a UTC "Z" designator.
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


__all__ = [
    "resolve_date",
    "days_in_month",
    "month_label",
    "shift_month",
    "cursor_for",
]
