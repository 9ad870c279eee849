"""Next-month spending forecast.

A moving average of the last three monthly expense totals, shifted by
half the change across the window.
"""

from decimal import Decimal
from typing import Optional, Sequence

import structlog

from .models import Confidence, Forecast, Trend

logger = structlog.get_logger()


MIN_TRANSACTIONS = 10
WINDOW_MONTHS = 3


def forecast(
    monthly_totals: Sequence[Decimal],
    total_transaction_count: int,
) -> Optional[Forecast]:
    """
    Project next month's spending.

    Args:
        monthly_totals: Monthly expense totals, oldest first; only the last
                        three are used
        total_transaction_count: Number of transactions in the whole ledger

    Returns:
        Forecast, or None when there is too little data
    """
    if total_transaction_count < MIN_TRANSACTIONS:
        logger.debug(
            "forecast_skipped",
            reason="insufficient_transactions",
            count=total_transaction_count,
        )
        return None

    history = [Decimal(v) for v in monthly_totals][-WINDOW_MONTHS:]
    if not history:
        logger.debug("forecast_skipped", reason="empty_history")
        return None

    average = sum(history, Decimal("0")) / len(history)
    trend_value = (history[-1] - history[0]) / 2
    projected = max(Decimal("0"), average + trend_value)

    if trend_value > 0:
        trend = Trend.INCREASING
    elif trend_value < 0:
        trend = Trend.DECREASING
    else:
        trend = Trend.STABLE

    return Forecast(
        projected_amount=projected,
        confidence=Confidence.MEDIUM if len(history) == WINDOW_MONTHS else Confidence.LOW,
        trend=trend,
        average=average,
        trend_value=trend_value,
        data_points=len(history),
    )
