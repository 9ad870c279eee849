"""Derived analytics models.

Nothing here is persisted. Every model is rebuilt from the transaction
collection and budget limits on each recomputation.
"""

import datetime as dt
from calendar import month_name
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class InsightKind(str, Enum):
    """Severity of an insight."""

    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class RecommendationKind(str, Enum):
    REDUCE = "reduce"
    SAVE = "save"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Trend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class MonthlyAggregate(BaseModel):
    """Per-category expense totals and income/expense totals for one month."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(description="Calendar year")
    month: int = Field(ge=1, le=12, description="Month number (1-12)")
    by_category: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Expense totals keyed by category id",
    )
    total_income: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    total_expense: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    transaction_count: int = Field(default=0, ge=0)

    @computed_field
    @property
    def balance(self) -> Decimal:
        """Income minus expenses."""
        return self.total_income - self.total_expense

    @computed_field
    @property
    def label(self) -> str:
        """Human-readable label for the month (e.g., 'January 2025')."""
        return f"{month_name[self.month]} {self.year}"


class SpendingPattern(BaseModel):
    """Snapshot of the current month compared with the previous one."""

    current_month_by_category: dict[str, Decimal] = Field(default_factory=dict)
    last_month_by_category: dict[str, Decimal] = Field(default_factory=dict)
    total_spending: Decimal = Decimal("0")
    total_income: Decimal = Decimal("0")
    savings_rate: Decimal = Field(
        default=Decimal("0"),
        description="Percent of income left after expenses; 0 without income",
    )


class Insight(BaseModel):
    """A qualitative observation about the current month."""

    kind: InsightKind
    title: str
    message: str
    category: Optional[str] = None
    value: Optional[Decimal] = Field(
        default=None,
        description="Numeric context, e.g. the percentage quoted in the message",
    )


class Recommendation(BaseModel):
    """An actionable suggestion derived from the current month."""

    kind: RecommendationKind
    message: str
    priority: Priority
    category: Optional[str] = None
    suggested_amount: Optional[Decimal] = Field(
        default=None,
        description="Amount to cut to get back within budget",
    )


class Forecast(BaseModel):
    """Projected spending for next month."""

    projected_amount: Decimal = Field(ge=Decimal("0"))
    confidence: Confidence
    trend: Trend
    average: Decimal = Field(description="Mean of the monthly totals used")
    trend_value: Decimal = Field(description="Half the change from oldest to newest month")
    data_points: int = Field(ge=1)


class BudgetStatus(BaseModel):
    """How much of a category's monthly budget has been used."""

    category: str
    spent: Decimal = Decimal("0")
    limit: Decimal = Decimal("0")
    utilization: Decimal = Field(
        default=Decimal("0"),
        description="Spent as a percentage of the limit; 0 when there is no limit",
    )

    @computed_field
    @property
    def over_budget(self) -> bool:
        return self.limit > 0 and self.spent > self.limit


class MonthlySummary(BaseModel):
    """Spending and income for one month of a trend series."""

    year: int
    month: int = Field(ge=1, le=12)
    spending: Decimal = Decimal("0")
    income: Decimal = Decimal("0")

    @computed_field
    @property
    def label(self) -> str:
        """Short label for charts (e.g., 'Jan 2025')."""
        return f"{month_name[self.month][:3]} {self.year}"


class DerivedState(BaseModel):
    """Everything recomputed after a change to transactions or budgets."""

    reference_date: dt.date
    current: MonthlyAggregate
    previous: MonthlyAggregate
    pattern: SpendingPattern
    insights: list[Insight] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    forecast: Optional[Forecast] = None
    budget_status: list[BudgetStatus] = Field(default_factory=list)
    trend: list[MonthlySummary] = Field(default_factory=list)
