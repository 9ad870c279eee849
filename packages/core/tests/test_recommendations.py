"""Tests for recommendation generation."""

from decimal import Decimal

import pytest

from spendwise_core.models import MonthlyAggregate, Priority, RecommendationKind
from spendwise_core.recommendations import generate_recommendations


def month(**by_category: str) -> MonthlyAggregate:
    totals = {k: Decimal(v) for k, v in by_category.items()}
    return MonthlyAggregate(
        year=2025,
        month=5,
        by_category=totals,
        total_expense=sum(totals.values(), Decimal("0")),
    )


HEALTHY_SAVINGS = Decimal("50")


class TestOverspendRecommendations:
    """Tests for budget cut suggestions."""

    def test_reduce_by_exact_overspend(self):
        recs = generate_recommendations(month(food="600"), HEALTHY_SAVINGS, {"food": Decimal("500")})

        assert len(recs) == 1
        assert recs[0].kind == RecommendationKind.REDUCE
        assert recs[0].priority == Priority.HIGH
        assert recs[0].category == "food"
        assert recs[0].suggested_amount == Decimal("100")
        assert "$100.00" in recs[0].message

    def test_huge_overspend_formats_in_cents(self):
        recs = generate_recommendations(
            month(food="1" + "0" * 29), HEALTHY_SAVINGS, {"food": Decimal("500")}
        )

        assert recs[0].suggested_amount == Decimal("9" * 26 + "500")
        assert "$" + "9" * 26 + "500.00 " in recs[0].message

    def test_within_budget(self):
        recs = generate_recommendations(month(food="450"), HEALTHY_SAVINGS, {"food": Decimal("500")})
        assert recs == []

    def test_without_limits(self):
        recs = generate_recommendations(month(food="450"), HEALTHY_SAVINGS)
        assert recs == []


class TestSavingsRecommendation:
    """Tests for the savings nudge."""

    @pytest.mark.parametrize("rate", ["0", "19.99", "-40"])
    def test_low_savings(self, rate: str):
        recs = generate_recommendations(month(), Decimal(rate))

        assert len(recs) == 1
        assert recs[0].kind == RecommendationKind.SAVE
        assert recs[0].priority == Priority.MEDIUM

    def test_twenty_percent_is_enough(self):
        assert generate_recommendations(month(), Decimal("20")) == []


class TestCategoryRules:
    """Tests for the fixed category thresholds."""

    def test_food_over_600(self):
        recs = generate_recommendations(month(food="600.01"), HEALTHY_SAVINGS)

        assert len(recs) == 1
        assert recs[0].category == "food"
        assert recs[0].priority == Priority.MEDIUM
        assert recs[0].suggested_amount is None

    def test_food_at_600(self):
        assert generate_recommendations(month(food="600"), HEALTHY_SAVINGS) == []

    def test_entertainment_over_300(self):
        recs = generate_recommendations(month(entertainment="301"), HEALTHY_SAVINGS)

        assert len(recs) == 1
        assert recs[0].category == "entertainment"
        assert recs[0].priority == Priority.LOW


class TestOrdering:
    def test_overspend_then_savings_then_rules(self):
        current = month(food="700", entertainment="350")
        limits = {"food": Decimal("500"), "entertainment": Decimal("200")}

        recs = generate_recommendations(current, Decimal("5"), limits)

        assert [(r.kind, r.priority, r.category) for r in recs] == [
            (RecommendationKind.REDUCE, Priority.HIGH, "food"),
            (RecommendationKind.REDUCE, Priority.HIGH, "entertainment"),
            (RecommendationKind.SAVE, Priority.MEDIUM, None),
            (RecommendationKind.REDUCE, Priority.MEDIUM, "food"),
            (RecommendationKind.REDUCE, Priority.LOW, "entertainment"),
        ]
        assert recs[0].suggested_amount == Decimal("200")
        assert recs[1].suggested_amount == Decimal("150")
