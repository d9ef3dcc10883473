"""Use case to compute spending views for one month from the receipt store."""

from datetime import date
from typing import Callable

from src.application.ports.receipts_source import ReceiptSnapshotSourcePort
from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import DerivedViews, TimeWindowCursor
from src.domain.services.dates import cursor_for
from src.domain.services.spending import compute_derived_views
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlySpendingUseCase:
    """Load the latest receipt snapshot and derive a month's views."""

    def __init__(
        self,
        receipts_source: ReceiptSnapshotSourcePort,
        logger=None,
        top_n: int = DEFAULT_TOP_N,
        snapshot_limit: int | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            receipts_source: Port returning the receipt snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            top_n: Maximum groups in the category and merchant breakdowns.
            snapshot_limit: Optional cap on receipts read from the store.
            today: Optional clock used when no month is requested.
        """
        self._receipts_source = receipts_source
        self._logger = logger or get_app_logger()
        self._top_n = top_n
        self._snapshot_limit = snapshot_limit
        self._today = today or date.today

    def execute(self, cursor: TimeWindowCursor | None = None) -> DerivedViews:
        """Return the spending views of a month.

        Args:
            cursor: Month to summarize; defaults to the current month.

        Returns:
            DerivedViews: Views computed from the fetched snapshot.
        """
        resolved_cursor = cursor or cursor_for(self._today())
        receipts = self._receipts_source.fetch_receipts(
            limit=self._snapshot_limit
        )
        self._logger.info(f"Fetched {len(receipts)} receipts from the store")

        views = compute_derived_views(
            receipts,
            resolved_cursor,
            top_n=self._top_n,
        )
        self._logger.info(
            f"Monthly spending computed for {views.month_label}: "
            f"spend={views.selected_month_spend}, "
            f"previous={views.previous_month_spend}"
        )
        return views


__all__ = ["GetMonthlySpendingUseCase", "DerivedViews"]
