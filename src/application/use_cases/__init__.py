"""Application use cases package."""

from .get_monthly_spending import DerivedViews, GetMonthlySpendingUseCase
from .spending_engine import SpendingAggregationEngine
from .time_window import TimeWindowNavigator

__all__ = [
    "GetMonthlySpendingUseCase",
    "DerivedViews",
    "SpendingAggregationEngine",
    "TimeWindowNavigator",
]
