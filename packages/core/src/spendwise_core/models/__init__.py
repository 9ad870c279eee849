"""Data models for spendwise-core.

This package provides:
- Transaction, draft and category structures (financial.py)
- Derived analytics: aggregates, insights, recommendations, forecasts (analytics.py)
"""

from spendwise_core.models.financial import (
    Category,
    DraftTransaction,
    Origin,
    Transaction,
    TransactionType,
    to_decimal,
)
from spendwise_core.models.analytics import (
    # Enumerations
    Confidence,
    InsightKind,
    Priority,
    RecommendationKind,
    Trend,
    # Aggregates
    MonthlyAggregate,
    MonthlySummary,
    SpendingPattern,
    BudgetStatus,
    # Derived outputs
    Insight,
    Recommendation,
    Forecast,
    DerivedState,
)

__all__ = [
    # Financial
    "Category",
    "DraftTransaction",
    "Origin",
    "Transaction",
    "TransactionType",
    "to_decimal",
    # Enumerations
    "Confidence",
    "InsightKind",
    "Priority",
    "RecommendationKind",
    "Trend",
    # Aggregates
    "MonthlyAggregate",
    "MonthlySummary",
    "SpendingPattern",
    "BudgetStatus",
    # Derived outputs
    "Insight",
    "Recommendation",
    "Forecast",
    "DerivedState",
]
