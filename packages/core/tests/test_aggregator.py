"""Tests for monthly aggregation."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from spendwise_core.aggregator import (
    aggregate,
    budget_status,
    build_spending_pattern,
    monthly_expense_history,
    monthly_trend,
    previous_month,
    savings_rate,
)
from spendwise_core.models import Transaction, TransactionType


def make_txn(
    amount: str,
    category: str,
    on: date,
    type: TransactionType = TransactionType.EXPENSE,
    description: str = "test",
) -> Transaction:
    return Transaction(
        id=uuid4().hex,
        type=type,
        description=description,
        amount=Decimal(amount),
        category=category,
        date=on,
    )


@pytest.fixture
def transactions() -> list[Transaction]:
    """Two months of mixed transactions around a year boundary."""
    return [
        make_txn("3000", "income", date(2025, 1, 1), TransactionType.INCOME),
        make_txn("120.50", "food", date(2025, 1, 3)),
        make_txn("79.50", "food", date(2025, 1, 20)),
        make_txn("60", "transport", date(2025, 1, 9)),
        make_txn("45", "mystery", date(2025, 1, 11)),
        make_txn("15", "shopping", date(2025, 1, 31)),
        make_txn("2800", "income", date(2024, 12, 1), TransactionType.INCOME),
        make_txn("300", "food", date(2024, 12, 5)),
        make_txn("999", "food", date(2024, 1, 5)),
    ]


class TestPreviousMonth:
    """Tests for month arithmetic."""

    def test_mid_year(self):
        assert previous_month(6, 2025) == (5, 2025)

    def test_wraps_year(self):
        assert previous_month(1, 2025) == (12, 2024)


class TestAggregate:
    """Tests for aggregate()."""

    def test_filters_by_month_and_year(self, transactions):
        agg = aggregate(transactions, 1, 2025)

        assert agg.transaction_count == 6
        assert agg.by_category["food"] == Decimal("200.00")

    def test_same_month_other_year_excluded(self, transactions):
        """January 2024 must not leak into January 2025."""
        agg = aggregate(transactions, 1, 2024)

        assert agg.by_category == {"food": Decimal("999")}
        assert agg.total_income == Decimal("0")

    def test_income_separate_from_categories(self, transactions):
        agg = aggregate(transactions, 1, 2025)

        assert agg.total_income == Decimal("3000")
        assert agg.total_expense == Decimal("320.00")
        assert "income" not in agg.by_category
        assert agg.balance == Decimal("2680.00")

    def test_category_order_follows_table(self, transactions):
        """Known categories in table order, unknown ids last."""
        agg = aggregate(transactions, 1, 2025)
        assert list(agg.by_category) == ["food", "transport", "shopping", "mystery"]

    def test_previous_month_across_year(self, transactions):
        month, year = previous_month(1, 2025)
        agg = aggregate(transactions, month, year)

        assert agg.month == 12
        assert agg.year == 2024
        assert agg.by_category == {"food": Decimal("300")}

    def test_empty_collection(self):
        agg = aggregate([], 3, 2025)

        assert agg.by_category == {}
        assert agg.total_income == Decimal("0")
        assert agg.total_expense == Decimal("0")
        assert agg.balance == Decimal("0")

    def test_idempotent(self, transactions):
        """Aggregating twice gives identical output."""
        assert aggregate(transactions, 1, 2025) == aggregate(transactions, 1, 2025)

    def test_label(self, transactions):
        assert aggregate(transactions, 1, 2025).label == "January 2025"


class TestSavingsRate:
    """Tests for savings_rate()."""

    def test_basic(self):
        assert savings_rate(Decimal("1000"), Decimal("750")) == Decimal("25")

    def test_zero_income(self):
        assert savings_rate(Decimal("0"), Decimal("500")) == Decimal("0")

    def test_negative_when_overspending(self):
        assert savings_rate(Decimal("1000"), Decimal("1500")) == Decimal("-50")


class TestSpendingPattern:
    def test_pattern(self, transactions):
        current = aggregate(transactions, 1, 2025)
        previous = aggregate(transactions, 12, 2024)
        pattern = build_spending_pattern(current, previous)

        assert pattern.current_month_by_category["food"] == Decimal("200.00")
        assert pattern.last_month_by_category == {"food": Decimal("300")}
        assert pattern.total_spending == Decimal("320.00")
        assert pattern.total_income == Decimal("3000")
        assert pattern.savings_rate == savings_rate(Decimal("3000"), Decimal("320.00"))


class TestHistory:
    """Tests for multi-month series."""

    def test_expense_history_oldest_first(self, transactions):
        history = monthly_expense_history(transactions, 1, 2025, months=3)
        assert history == [Decimal("0"), Decimal("300"), Decimal("320.00")]

    def test_trend_series(self, transactions):
        trend = monthly_trend(transactions, 1, 2025, months=6)

        assert len(trend) == 6
        assert (trend[0].month, trend[0].year) == (8, 2024)
        assert (trend[-1].month, trend[-1].year) == (1, 2025)
        assert trend[-1].income == Decimal("3000")
        assert trend[-2].spending == Decimal("300")
        assert trend[-1].label == "Jan 2025"


class TestBudgetStatus:
    """Tests for budget_status()."""

    def test_utilization(self, transactions):
        agg = aggregate(transactions, 1, 2025)
        statuses = {s.category: s for s in budget_status(agg, {"food": Decimal("100")})}

        assert statuses["food"].utilization == Decimal("200")
        assert statuses["food"].over_budget is True

    def test_float_limit_keeps_decimal_value(self, transactions):
        agg = aggregate(transactions, 1, 2025)
        statuses = {s.category: s for s in budget_status(agg, {"food": 0.1})}

        assert statuses["food"].limit == Decimal("0.1")

    def test_no_limit(self, transactions):
        agg = aggregate(transactions, 1, 2025)
        statuses = {s.category: s for s in budget_status(agg, {})}

        assert statuses["transport"].limit == Decimal("0")
        assert statuses["transport"].utilization == Decimal("0")
        assert statuses["transport"].over_budget is False

    def test_excludes_income_category(self, transactions):
        agg = aggregate(transactions, 1, 2025)
        categories = [s.category for s in budget_status(agg)]

        assert "income" not in categories
        assert categories[0] == "food"
        assert categories[-1] == "other"
