"""Port for reading receipt snapshots."""

from typing import Protocol

from src.domain.models import ReceiptRecord


class ReceiptSnapshotSourcePort(Protocol):
    """Port returning the full, materialized set of active receipts."""

    def fetch_receipts(self, limit: int | None = None) -> list[ReceiptRecord]:
        """Return receipts ordered from most to least recently created."""


__all__ = ["ReceiptSnapshotSourcePort"]
