"""Monthly spending aggregation.

Groups transactions by calendar month and sums them per category. Amounts
are stored unsigned; direction is applied here and only here.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from .categories import category_sort_key, expense_categories
from .models import (
    BudgetStatus,
    MonthlyAggregate,
    MonthlySummary,
    SpendingPattern,
    Transaction,
    TransactionType,
    to_decimal,
)


def previous_month(month: int, year: int) -> tuple[int, int]:
    """Return (month, year) of the month before, wrapping January to December."""
    if month == 1:
        return 12, year - 1
    return month - 1, year


def _in_month(txn: Transaction, month: int, year: int) -> bool:
    return txn.date.month == month and txn.date.year == year


def aggregate(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
) -> MonthlyAggregate:
    """
    Aggregate one calendar month of transactions.

    Args:
        transactions: Transactions to aggregate (any months)
        month: Month number (1-12)
        year: Calendar year

    Returns:
        MonthlyAggregate with expense totals per category, ordered by the
        category table, and income summed separately
    """
    by_category: dict[str, Decimal] = defaultdict(Decimal)
    total_income = Decimal("0")
    total_expense = Decimal("0")
    count = 0

    for txn in transactions:
        if not _in_month(txn, month, year):
            continue
        count += 1

        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        else:
            total_expense += txn.amount
            by_category[txn.category] += txn.amount

    # sorted() is stable, so unknown categories keep first-seen order
    ordered = {
        cat: by_category[cat]
        for cat in sorted(by_category, key=category_sort_key)
    }

    return MonthlyAggregate(
        year=year,
        month=month,
        by_category=ordered,
        total_income=total_income,
        total_expense=total_expense,
        transaction_count=count,
    )


def savings_rate(total_income: Decimal, total_expense: Decimal) -> Decimal:
    """Savings rate as a percentage of income; 0 when there is no income."""
    if total_income == 0:
        return Decimal("0")
    return (total_income - total_expense) / total_income * Decimal("100")


def build_spending_pattern(
    current: MonthlyAggregate,
    previous: MonthlyAggregate,
) -> SpendingPattern:
    """Summarize the current month against the previous one."""
    return SpendingPattern(
        current_month_by_category=dict(current.by_category),
        last_month_by_category=dict(previous.by_category),
        total_spending=current.total_expense,
        total_income=current.total_income,
        savings_rate=savings_rate(current.total_income, current.total_expense),
    )


def _month_window(month: int, year: int, months: int) -> list[tuple[int, int]]:
    """The ``months`` calendar months ending at (month, year), oldest first."""
    window = [(month, year)]
    for _ in range(months - 1):
        month, year = previous_month(month, year)
        window.append((month, year))
    window.reverse()
    return window


def monthly_expense_history(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
    months: int = 3,
) -> list[Decimal]:
    """
    Expense totals for consecutive months ending at (month, year).

    Returns:
        One total per month, oldest first; months without spending are 0
    """
    txns = list(transactions)
    return [
        aggregate(txns, m, y).total_expense
        for m, y in _month_window(month, year, months)
    ]


def monthly_trend(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
    months: int = 6,
) -> list[MonthlySummary]:
    """Spending and income per month for the trend chart, oldest first."""
    txns = list(transactions)
    summaries = []
    for m, y in _month_window(month, year, months):
        agg = aggregate(txns, m, y)
        summaries.append(MonthlySummary(
            year=y,
            month=m,
            spending=agg.total_expense,
            income=agg.total_income,
        ))
    return summaries


def budget_status(
    current: MonthlyAggregate,
    budget_limits: Optional[Mapping[str, Decimal]] = None,
) -> list[BudgetStatus]:
    """
    Compare each expense category's spending with its budget.

    Args:
        current: Aggregate for the month being checked
        budget_limits: Category id to monthly ceiling

    Returns:
        One BudgetStatus per expense category, in category table order
    """
    limits = budget_limits or {}
    statuses = []

    for category in expense_categories():
        spent = current.by_category.get(category.id, Decimal("0"))
        limit = to_decimal(limits.get(category.id, 0))
        utilization = spent / limit * Decimal("100") if limit > 0 else Decimal("0")
        statuses.append(BudgetStatus(
            category=category.id,
            spent=spent,
            limit=limit,
            utilization=utilization,
        ))

    return statuses
