"""Tests for the SpendingAggregationEngine."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.spending_engine import SpendingAggregationEngine
from src.application.use_cases.time_window import TimeWindowNavigator
from src.domain.models import ReceiptRecord, TimeWindowCursor


def _engine() -> tuple[SpendingAggregationEngine, MagicMock]:
    navigator = TimeWindowNavigator(today=lambda: date(2024, 5, 20))
    logger = MagicMock()
    return SpendingAggregationEngine(navigator, logger=logger), logger


def _receipt(receipt_id: str, amount: str, day: str) -> ReceiptRecord:
    return ReceiptRecord(
        id=receipt_id,
        total_amount=Decimal(amount),
        date=day,
    )


def test_views_follow_latest_snapshot() -> None:
    """Each snapshot replaces the previous one entirely."""
    engine, _ = _engine()
    engine.apply_snapshot([_receipt("a", "10", "2024-05-01")])
    assert engine.views.selected_month_spend == Decimal("10")

    engine.apply_snapshot(
        [
            _receipt("a", "12", "2024-05-01"),
            _receipt("b", "3", "2024-05-02"),
        ]
    )

    assert engine.views.selected_month_spend == Decimal("15")
    assert engine.views.receipt_count == 2


def test_views_are_cached_until_inputs_change() -> None:
    engine, _ = _engine()
    engine.apply_snapshot([_receipt("a", "10", "2024-05-01")])

    first = engine.views

    assert engine.views is first
    engine.navigator.previous_month()
    assert engine.views is not first
    assert engine.views.cursor == TimeWindowCursor(2024, 3)


def test_navigation_recomputes_views() -> None:
    engine, _ = _engine()
    engine.apply_snapshot(
        [
            _receipt("may", "40", "2024-05-03"),
            _receipt("april", "20", "2024-04-03"),
        ]
    )

    engine.navigator.previous_month()

    assert engine.views.selected_month_spend == Decimal("20")
    assert engine.views.month_over_month_change is None
    engine.navigator.reset_to_current()
    assert engine.views.month_over_month_change.percent_absolute == 100


def test_subscribers_receive_eager_recomputations() -> None:
    """Listeners get fresh views on every snapshot push or cursor move."""
    engine, _ = _engine()
    published = []
    engine.subscribe(published.append)

    engine.apply_snapshot([_receipt("a", "5", "2024-05-05")])
    engine.navigator.next_month()

    assert [views.cursor for views in published] == [
        TimeWindowCursor(2024, 4),
        TimeWindowCursor(2024, 5),
    ]
    assert published[0].selected_month_spend == Decimal("5")
    assert published[1].selected_month_spend == Decimal("0")


def test_superseded_views_are_not_published() -> None:
    """A listener moving the cursor supersedes the views being published."""
    engine, _ = _engine()
    received_by_second = []

    def _first(views) -> None:
        if views.cursor == TimeWindowCursor(2024, 4):
            engine.navigator.next_month()

    engine.subscribe(_first)
    engine.subscribe(received_by_second.append)

    engine.apply_snapshot([_receipt("a", "5", "2024-05-05")])

    assert [views.cursor for views in received_by_second] == [
        TimeWindowCursor(2024, 5),
    ]


def test_unsubscribe_and_close_stop_publication() -> None:
    engine, _ = _engine()
    published = []
    unsubscribe = engine.subscribe(published.append)

    unsubscribe()
    engine.apply_snapshot([_receipt("a", "5", "2024-05-05")])
    first = engine.views
    engine.close()
    engine.navigator.next_month()

    assert published == []
    assert first.cursor == TimeWindowCursor(2024, 4)
    assert engine.views is first


def test_undated_receipts_are_logged_and_excluded() -> None:
    engine, logger = _engine()

    engine.apply_snapshot(
        [
            ReceiptRecord(id="x", total_amount=Decimal("9")),
            _receipt("a", "1", "2024-05-01"),
        ]
    )

    assert engine.views.selected_month_spend == Decimal("1")
    logger.warning.assert_called_once()
    assert "1 receipts" in logger.warning.call_args.args[0]


def test_undated_warning_is_not_repeated_on_navigation() -> None:
    """Cursor moves over an unchanged snapshot do not warn again."""
    engine, logger = _engine()
    engine.apply_snapshot([ReceiptRecord(id="x", total_amount=Decimal("9"))])

    engine.views
    engine.navigator.previous_month()
    engine.views
    engine.navigator.reset_to_current()
    engine.views

    logger.warning.assert_called_once()


def test_insight_data_uses_current_views() -> None:
    engine, _ = _engine()
    engine.apply_snapshot([_receipt("a", "5", "2024-05-05")])

    insight = engine.insight_data()

    assert insight.total_spend == Decimal("5")
    assert insight.month_label == "May 2024"
