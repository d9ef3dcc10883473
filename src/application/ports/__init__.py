"""Application ports package."""

from .database import DatabaseEnginePort
from .receipts_source import ReceiptSnapshotSourcePort

__all__ = [
    "DatabaseEnginePort",
    "ReceiptSnapshotSourcePort",
]
