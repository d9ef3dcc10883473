"""Domain validation helpers."""

from decimal import Decimal

from src.domain.models import ReceiptRecord
from src.utils.decimal_utils import coerce_optional_decimal


def usable_amount(record: ReceiptRecord) -> Decimal | None:
    """Return the receipt amount when it can be aggregated.

    Missing, negative and non-finite amounts are not usable.

    Args:
        record: Receipt from the current snapshot.

    Returns:
        Decimal | None: Amount to add to sums, or None to skip the record.
    """
    amount = coerce_optional_decimal(record.total_amount)
    if amount is None or not amount.is_finite():
        return None
    if amount < 0:
        return None
    return amount


def is_valid_month(month: int) -> bool:
    """Return True when ``month`` is a zero-based month index."""
    return isinstance(month, int) and 0 <= month <= 11


__all__ = ["usable_amount", "is_valid_month"]
