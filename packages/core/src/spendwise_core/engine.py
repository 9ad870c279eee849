"""Derived state recomputation.

``recompute`` is the single entry point the surrounding application calls
after any change to the transaction collection or the budget limits. It is
a pure function: the same transactions, limits and reference date always
produce an equal DerivedState, so the caller can replace its previous
state wholesale.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional

import structlog

from .aggregator import (
    aggregate,
    budget_status,
    build_spending_pattern,
    monthly_expense_history,
    monthly_trend,
    previous_month,
)
from .forecast import WINDOW_MONTHS, forecast
from .insights import generate_insights
from .models import DerivedState, Transaction, to_decimal
from .recommendations import generate_recommendations

logger = structlog.get_logger()


TREND_MONTHS = 6


def recompute(
    transactions: Iterable[Transaction],
    budget_limits: Optional[Mapping[str, Decimal]] = None,
    today: Optional[date] = None,
) -> DerivedState:
    """
    Recompute all derived analytics.

    Args:
        transactions: The full transaction collection
        budget_limits: Category id to monthly ceiling
        today: Reference date; its month is the "current" month
               (default: today)

    Returns:
        DerivedState for the month containing ``today``
    """
    txns = list(transactions)
    limits = {
        category: to_decimal(limit)
        for category, limit in (budget_limits or {}).items()
    }
    today = today or date.today()

    month, year = today.month, today.year
    prev_month, prev_year = previous_month(month, year)

    current = aggregate(txns, month, year)
    previous = aggregate(txns, prev_month, prev_year)
    pattern = build_spending_pattern(current, previous)

    history = monthly_expense_history(txns, month, year, months=WINDOW_MONTHS)

    state = DerivedState(
        reference_date=today,
        current=current,
        previous=previous,
        pattern=pattern,
        insights=generate_insights(current, previous, limits),
        recommendations=generate_recommendations(current, pattern.savings_rate, limits),
        forecast=forecast(history, len(txns)),
        budget_status=budget_status(current, limits),
        trend=monthly_trend(txns, month, year, months=TREND_MONTHS),
    )

    logger.debug(
        "derived_state_recomputed",
        month=current.label,
        transactions=len(txns),
        insights=len(state.insights),
        recommendations=len(state.recommendations),
        has_forecast=state.forecast is not None,
    )
    return state
