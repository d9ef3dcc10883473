"""Domain constants for receipt spending analytics."""

RECEIPT_STATUSES = (
    "uploaded",
    "processing",
    "extracted",
    "needs_review",
    "final",
)

DEFAULT_TOP_N = 5

OTHER_CATEGORY_ID = "other"
OTHER_CATEGORY_LABEL = "Other"
UNKNOWN_MERCHANT_LABEL = "Unknown"


__all__ = [
    "RECEIPT_STATUSES",
    "DEFAULT_TOP_N",
    "OTHER_CATEGORY_ID",
    "OTHER_CATEGORY_LABEL",
    "UNKNOWN_MERCHANT_LABEL",
]
