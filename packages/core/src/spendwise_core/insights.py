"""Insight generation from monthly aggregates.

Insights are rebuilt from scratch on every recomputation and carry no
identity. The list is grouped: overspend warnings first, then month over
month trend insights, then concentration warnings. Within each group
categories follow the aggregate's order.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Mapping, Optional

from .categories import display_name
from .models import Insight, InsightKind, MonthlyAggregate


TREND_THRESHOLD = Decimal("20")
CONCENTRATION_THRESHOLD = Decimal("30")

ONE_PLACE = Decimal("0.1")


def round_percent(value: Decimal) -> Decimal:
    """Round a percentage to one decimal place, halves rounding up.

    Precision is widened to fit the integer digits, so percentages of very
    large amounts round instead of raising ``InvalidOperation``.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    """Percent change from previous to current; 0 when previous is not positive."""
    if previous <= 0:
        return Decimal("0")
    return (current - previous) / previous * Decimal("100")


def _overspend_insights(
    current: MonthlyAggregate,
    budget_limits: Mapping[str, Decimal],
) -> list[Insight]:
    insights = []
    for category, spent in current.by_category.items():
        limit = budget_limits.get(category)
        if not limit or spent <= limit:
            continue

        over = round_percent((spent - limit) / limit * Decimal("100"))
        insights.append(Insight(
            kind=InsightKind.WARNING,
            title="Budget Overspending",
            message=f"You've exceeded your {display_name(category)} budget by {over}%",
            category=category,
            value=over,
        ))
    return insights


def _trend_insights(
    current: MonthlyAggregate,
    previous: MonthlyAggregate,
) -> list[Insight]:
    insights = []
    for category, amount in current.by_category.items():
        last = previous.by_category.get(category, Decimal("0"))
        change = percent_change(amount, last)

        if change > TREND_THRESHOLD:
            pct = round_percent(change)
            insights.append(Insight(
                kind=InsightKind.INFO,
                title="Spending Increase",
                message=(
                    f"{display_name(category)} spending increased by {pct}% "
                    "compared to last month"
                ),
                category=category,
                value=pct,
            ))
        elif change < -TREND_THRESHOLD:
            pct = round_percent(change)
            insights.append(Insight(
                kind=InsightKind.SUCCESS,
                title="Spending Decrease",
                message=(
                    f"{display_name(category)} spending decreased by {abs(pct)}% "
                    "compared to last month"
                ),
                category=category,
                value=pct,
            ))
    return insights


def _concentration_insights(current: MonthlyAggregate) -> list[Insight]:
    total = current.total_expense
    if total <= 0:
        return []

    insights = []
    for category, amount in current.by_category.items():
        share = round_percent(amount / total * Decimal("100"))
        if share > CONCENTRATION_THRESHOLD:
            insights.append(Insight(
                kind=InsightKind.WARNING,
                title="High Category Spending",
                message=(
                    f"{display_name(category)} accounts for {share}% "
                    "of your total spending this month"
                ),
                category=category,
                value=share,
            ))
    return insights


def generate_insights(
    current: MonthlyAggregate,
    previous: MonthlyAggregate,
    budget_limits: Optional[Mapping[str, Decimal]] = None,
) -> list[Insight]:
    """
    Generate insights for the current month.

    Args:
        current: Aggregate for the month being analyzed
        previous: Aggregate for the month before it
        budget_limits: Category id to monthly ceiling

    Returns:
        Overspend warnings, then trend insights, then concentration warnings
    """
    limits = budget_limits or {}
    return (
        _overspend_insights(current, limits)
        + _trend_insights(current, previous)
        + _concentration_insights(current)
    )
