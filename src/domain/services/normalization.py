"""Domain normalization helpers."""

from src.domain.constants import (
    OTHER_CATEGORY_ID,
    OTHER_CATEGORY_LABEL,
    UNKNOWN_MERCHANT_LABEL,
)
from src.domain.models import ReceiptRecord


def normalize_label(value: str | None) -> str | None:
    """Strip a display label, mapping blank values to None.

    Args:
        value: Raw label from a receipt field.

    Returns:
        str | None: Cleaned label.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned or None


def category_key(record: ReceiptRecord) -> tuple[str, str]:
    """Return the (group key, label) used to group receipts by category."""
    category = record.category
    if category is None:
        return OTHER_CATEGORY_ID, OTHER_CATEGORY_LABEL
    name = normalize_label(category.name)
    key = normalize_label(category.id) or (name.lower() if name else None)
    if key is None:
        return OTHER_CATEGORY_ID, OTHER_CATEGORY_LABEL
    return key, name or OTHER_CATEGORY_LABEL


def category_name(record: ReceiptRecord) -> str:
    """Return the category label of a receipt."""
    return category_key(record)[1]


def merchant_name(record: ReceiptRecord) -> str:
    """Return the merchant label, preferring the canonical name."""
    merchant = record.merchant
    if merchant is None:
        return UNKNOWN_MERCHANT_LABEL
    return (
        normalize_label(merchant.canonical_name)
        or normalize_label(merchant.raw_name)
        or UNKNOWN_MERCHANT_LABEL
    )


def merchant_key(record: ReceiptRecord) -> tuple[str, str]:
    """Return the (group key, label) used to group receipts by merchant."""
    name = merchant_name(record)
    return name, name


__all__ = [
    "normalize_label",
    "category_key",
    "category_name",
    "merchant_name",
    "merchant_key",
]
