"""Domain models for receipt records read from the receipt store."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class CategoryRef:
    """Category assigned to a receipt."""

    id: str
    name: str


@dataclass(frozen=True)
class MerchantRef:
    """Normalized merchant attached to a receipt.

    Attributes:
        canonical_name: Display name after merchant matching.
        raw_name: Supplier name as printed on the receipt.
    """

    canonical_name: str | None
    raw_name: str | None


@dataclass(frozen=True)
class ReceiptRecord:
    """Receipt as stored by the external receipt store.

    Attributes:
        id: Opaque receipt identifier.
        total_amount: Final amount, missing until extraction succeeds.
        date: Transaction date as an ISO string or a date.
        created_at: Upload timestamp in whatever form the store returns.
        category: Optional category reference.
        merchant: Optional merchant reference.
        status: Processing status, informational only.
        currency: Optional ISO currency code.
        file_name: Original name of the uploaded file.
    """

    id: str
    total_amount: Decimal | None = None
    date: str | date | None = None
    created_at: Any = None
    category: CategoryRef | None = None
    merchant: MerchantRef | None = None
    status: str = "uploaded"
    currency: str | None = None
    file_name: str | None = None


__all__ = ["CategoryRef", "MerchantRef", "ReceiptRecord"]
