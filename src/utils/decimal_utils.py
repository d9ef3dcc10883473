"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize an optional amount, keeping missing values as None.

    Args:
        value: Raw amount from a receipt row or payload.

    Returns:
        Decimal | None: Parsed amount, or None when missing or unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return None


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


__all__ = ["coerce_optional_decimal", "round_half_up"]
