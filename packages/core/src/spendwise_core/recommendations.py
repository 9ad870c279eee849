"""Actionable recommendations from monthly aggregates."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Mapping, Optional

from .categories import display_name
from .models import MonthlyAggregate, Priority, Recommendation, RecommendationKind


TARGET_SAVINGS_RATE = Decimal("20")

CENTS = Decimal("0.01")

# Static heuristics: (category, monthly threshold, priority, advice)
CATEGORY_RULES: list[tuple[str, Decimal, Priority, str]] = [
    (
        "food",
        Decimal("600"),
        Priority.MEDIUM,
        "Try meal planning and cooking at home to reduce food expenses",
    ),
    (
        "entertainment",
        Decimal("300"),
        Priority.LOW,
        "Look for free or low-cost entertainment options",
    ),
]


def _format_money(value: Decimal) -> str:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def generate_recommendations(
    current: MonthlyAggregate,
    savings_rate: Decimal,
    budget_limits: Optional[Mapping[str, Decimal]] = None,
) -> list[Recommendation]:
    """
    Generate prioritized suggestions for the current month.

    Args:
        current: Aggregate for the month being analyzed
        savings_rate: Percent of income saved this month
        budget_limits: Category id to monthly ceiling

    Returns:
        Budget cuts (high), then the savings nudge (medium), then the
        fixed category rules
    """
    limits = budget_limits or {}
    recommendations = []

    for category, spent in current.by_category.items():
        limit = limits.get(category)
        if not limit or spent <= limit:
            continue

        cut = spent - limit
        recommendations.append(Recommendation(
            kind=RecommendationKind.REDUCE,
            category=category,
            message=(
                f"Consider reducing {display_name(category)} expenses by "
                f"${_format_money(cut)} to stay within budget"
            ),
            priority=Priority.HIGH,
            suggested_amount=cut,
        ))

    if savings_rate < TARGET_SAVINGS_RATE:
        recommendations.append(Recommendation(
            kind=RecommendationKind.SAVE,
            message=(
                "Consider increasing your savings rate. "
                f"Aim for at least {TARGET_SAVINGS_RATE}% of your income."
            ),
            priority=Priority.MEDIUM,
        ))

    for category, threshold, priority, advice in CATEGORY_RULES:
        if current.by_category.get(category, Decimal("0")) > threshold:
            recommendations.append(Recommendation(
                kind=RecommendationKind.REDUCE,
                category=category,
                message=advice,
                priority=priority,
            ))

    return recommendations
