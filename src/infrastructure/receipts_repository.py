"""SQLAlchemy-backed repository reading receipt snapshots."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.receipts_source import ReceiptSnapshotSourcePort
from src.domain.models import CategoryRef, MerchantRef, ReceiptRecord
from src.domain.services.normalization import normalize_label
from src.utils.decimal_utils import coerce_optional_decimal


DEFAULT_SNAPSHOT_LIMIT = 100


class SqlAlchemyReceiptsRepository(ReceiptSnapshotSourcePort):
    """Repository backed by SQLAlchemy for the receipts table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        default_limit: int = DEFAULT_SNAPSHOT_LIMIT,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the receipts engine.
            default_limit: Receipts read when no limit is requested.
        """
        self._db_port = db_port
        self._default_limit = default_limit

    def fetch_receipts(self, limit: int | None = None) -> list[ReceiptRecord]:
        """Return the most recently created receipts."""
        query = text(
            """
            SELECT id, total_amount, receipt_date, created_at,
                   category_id, category_name,
                   merchant_canonical_name, merchant_raw_name,
                   status, currency, file_name
            FROM receipts
            ORDER BY created_at DESC
            LIMIT :limit
            """
        )
        engine = self._db_port.get_receipts_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"limit": limit or self._default_limit},
            ).all()
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row) -> ReceiptRecord:
        category = None
        if row.category_id or row.category_name:
            category = CategoryRef(
                id=row.category_id or "",
                name=row.category_name or "",
            )
        merchant = None
        if row.merchant_canonical_name or row.merchant_raw_name:
            merchant = MerchantRef(
                canonical_name=row.merchant_canonical_name,
                raw_name=row.merchant_raw_name,
            )
        return ReceiptRecord(
            id=str(row.id),
            total_amount=coerce_optional_decimal(row.total_amount),
            date=row.receipt_date,
            created_at=row.created_at,
            category=category,
            merchant=merchant,
            status=normalize_label(row.status) or "uploaded",
            currency=row.currency,
            file_name=row.file_name,
        )


__all__ = ["SqlAlchemyReceiptsRepository", "DEFAULT_SNAPSHOT_LIMIT"]
