"""Reactive engine keeping spending views in sync with receipts."""

from collections.abc import Callable, Iterable

from src.application.use_cases.time_window import TimeWindowNavigator
from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import DerivedViews, InsightData, ReceiptRecord
from src.domain.services.dates import resolve_date
from src.domain.services.insights import build_insight_data
from src.domain.services.spending import compute_derived_views
from src.infrastructure.logging.logger import get_app_logger


ViewsListener = Callable[[DerivedViews], None]


class SpendingAggregationEngine:
    """Cache derived views for the latest snapshot and cursor.

    A snapshot push or a cursor move marks the cache dirty. With
    subscribers attached the views are recomputed right away and published;
    otherwise they are recomputed on the next read of ``views``.
    """

    def __init__(
        self,
        navigator: TimeWindowNavigator,
        logger=None,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        """Initialize the engine.

        Args:
            navigator: Navigator owning the selected month.
            logger: Optional logger compatible with logging.Logger-like API.
            top_n: Maximum groups in the category and merchant breakdowns.
        """
        self._navigator = navigator
        self._logger = logger or get_app_logger()
        self._top_n = top_n
        self._snapshot: tuple[ReceiptRecord, ...] = ()
        self._views: DerivedViews | None = None
        self._dirty = True
        self._version = 0
        self._listeners: list[ViewsListener] = []
        self._detach_navigator = navigator.subscribe(self._on_cursor_changed)

    @property
    def navigator(self) -> TimeWindowNavigator:
        return self._navigator

    @property
    def snapshot(self) -> tuple[ReceiptRecord, ...]:
        return self._snapshot

    @property
    def views(self) -> DerivedViews:
        """Return views for the latest snapshot and cursor."""
        if self._dirty or self._views is None:
            self._recompute()
        return self._views

    def apply_snapshot(self, receipts: Iterable[ReceiptRecord]) -> None:
        """Replace the receipt snapshot with a new full set.

        Args:
            receipts: Every active receipt, in store order.
        """
        self._snapshot = tuple(receipts)
        self._logger.info(
            f"Received receipt snapshot with {len(self._snapshot)} records"
        )
        undated = sum(
            1 for record in self._snapshot if resolve_date(record) is None
        )
        if undated:
            self._logger.warning(
                f"{undated} receipts have no usable date and were excluded"
            )
        self._invalidate()

    def insight_data(self) -> InsightData:
        """Return the AI insight context for the selected month."""
        return build_insight_data(self.views, top_n=self._top_n)

    def subscribe(self, listener: ViewsListener) -> Callable[[], None]:
        """Register a listener called with each new set of views.

        Args:
            listener: Callable receiving the recomputed views.

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def close(self) -> None:
        """Stop following the navigator and drop every listener."""
        self._detach_navigator()
        self._listeners.clear()

    def _on_cursor_changed(self, _cursor) -> None:
        self._invalidate()

    def _invalidate(self) -> None:
        self._dirty = True
        self._version += 1
        if not self._listeners:
            return
        version = self._version
        views = self.views
        for listener in list(self._listeners):
            # A listener moved the cursor or pushed a snapshot.
            if version != self._version:
                return
            listener(views)

    def _recompute(self) -> None:
        self._views = compute_derived_views(
            self._snapshot,
            self._navigator.cursor,
            top_n=self._top_n,
        )
        self._dirty = False
        self._logger.info(
            f"Spending views computed for {self._views.month_label}: "
            f"receipts={self._views.receipt_count}, "
            f"spend={self._views.selected_month_spend}"
        )


__all__ = ["SpendingAggregationEngine", "ViewsListener"]
