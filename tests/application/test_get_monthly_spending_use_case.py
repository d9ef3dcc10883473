"""Tests for the GetMonthlySpendingUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_monthly_spending import (
    GetMonthlySpendingUseCase,
)
from src.domain.models import CategoryRef, ReceiptRecord, TimeWindowCursor


def _repository(receipts: list[ReceiptRecord]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_receipts.return_value = receipts
    return repository


def test_execute_computes_views_for_requested_month() -> None:
    """Use case should fetch the snapshot and derive the month's views."""
    receipts = [
        ReceiptRecord(
            id="a",
            total_amount=Decimal("25.00"),
            date="2024-02-29",
            category=CategoryRef(id="travel", name="Travel"),
        ),
        ReceiptRecord(id="b", total_amount=Decimal("5.00"), date="2024-01-31"),
    ]
    repository = _repository(receipts)
    use_case = GetMonthlySpendingUseCase(
        receipts_source=repository,
        logger=MagicMock(),
        snapshot_limit=50,
    )

    views = use_case.execute(TimeWindowCursor(year=2024, month=1))

    assert len(views.daily_series) == 29
    assert views.daily_series[28].amount == Decimal("25.00")
    assert views.selected_month_spend == Decimal("25.00")
    assert views.previous_month_spend == Decimal("5.00")
    assert views.category_breakdown[0].name == "Travel"
    repository.fetch_receipts.assert_called_once_with(limit=50)


def test_execute_defaults_to_current_month() -> None:
    repository = _repository([])
    use_case = GetMonthlySpendingUseCase(
        receipts_source=repository,
        logger=MagicMock(),
        today=lambda: date(2024, 12, 3),
    )

    views = use_case.execute()

    assert views.cursor == TimeWindowCursor(2024, 11)
    assert views.selected_month_spend == Decimal("0")
    assert len(views.daily_series) == 31
