"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.receipts_source import ReceiptSnapshotSourcePort
from src.application.use_cases.get_monthly_spending import (
    GetMonthlySpendingUseCase,
)
from src.application.use_cases.spending_engine import (
    SpendingAggregationEngine,
)
from src.application.use_cases.time_window import TimeWindowNavigator
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.receipts_repository import (
    SqlAlchemyReceiptsRepository,
)
from src.infrastructure.settings import SpendingSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_receipts_source(
    db_port: DatabaseEnginePort | None = None,
) -> ReceiptSnapshotSourcePort:
    """Return the repository reading receipt snapshots."""
    resolved_db = db_port or build_database_adapter()
    settings = SpendingSettings.from_env()
    return SqlAlchemyReceiptsRepository(
        resolved_db,
        default_limit=settings.snapshot_limit,
    )


def build_monthly_spending_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetMonthlySpendingUseCase:
    """Return the use case computing one month of spending views."""
    settings = SpendingSettings.from_env()
    return GetMonthlySpendingUseCase(
        build_receipts_source(db_port),
        logger=get_app_logger(),
        top_n=settings.top_n,
    )


def build_spending_engine(
    navigator: TimeWindowNavigator | None = None,
) -> SpendingAggregationEngine:
    """Return a reactive engine bound to a navigator."""
    settings = SpendingSettings.from_env()
    return SpendingAggregationEngine(
        navigator or TimeWindowNavigator(),
        logger=get_app_logger(),
        top_n=settings.top_n,
    )


__all__ = [
    "build_database_adapter",
    "build_receipts_source",
    "build_monthly_spending_use_case",
    "build_spending_engine",
]
