"""Static category reference table.

Declaration order matters: aggregates, insights and budget status all list
categories in this order.
"""

from decimal import Decimal
from typing import Optional

from .models import Category


INCOME_CATEGORY = "income"
DEFAULT_CATEGORY = "other"

CATEGORIES: tuple[Category, ...] = (
    Category(id="food", display_name="Food & Dining", color_token="#ef4444", icon_token="🍽️"),
    Category(id="transport", display_name="Transportation", color_token="#3b82f6", icon_token="🚗"),
    Category(id="entertainment", display_name="Entertainment", color_token="#8b5cf6", icon_token="🎬"),
    Category(id="shopping", display_name="Shopping", color_token="#f59e0b", icon_token="🛍️"),
    Category(id="health", display_name="Healthcare", color_token="#10b981", icon_token="🏥"),
    Category(id="education", display_name="Education", color_token="#06b6d4", icon_token="📚"),
    Category(id="utilities", display_name="Utilities", color_token="#84cc16", icon_token="⚡"),
    Category(id=INCOME_CATEGORY, display_name="Income", color_token="#22c55e", icon_token="💰"),
    Category(id=DEFAULT_CATEGORY, display_name="Other", color_token="#6b7280", icon_token="📝"),
)

CATEGORY_IDS: tuple[str, ...] = tuple(c.id for c in CATEGORIES)

_BY_ID: dict[str, Category] = {c.id: c for c in CATEGORIES}

# Monthly ceilings a fresh ledger starts with
DEFAULT_BUDGET_LIMITS: dict[str, Decimal] = {
    "food": Decimal("500"),
    "transport": Decimal("300"),
    "entertainment": Decimal("200"),
    "shopping": Decimal("400"),
    "health": Decimal("300"),
    "education": Decimal("500"),
    "utilities": Decimal("200"),
    "other": Decimal("300"),
}


def get_category(category_id: str) -> Optional[Category]:
    """Look up a category by id, returning None for unknown ids."""
    return _BY_ID.get(category_id)


def display_name(category_id: str) -> str:
    """Display name for a category id, falling back to the id itself."""
    category = _BY_ID.get(category_id)
    return category.display_name if category else category_id


def expense_categories() -> list[Category]:
    """All categories an expense can be filed under."""
    return [c for c in CATEGORIES if c.id != INCOME_CATEGORY]


def category_sort_key(category_id: str) -> int:
    """Sort key placing known categories in declaration order, unknown ones last."""
    try:
        return CATEGORY_IDS.index(category_id)
    except ValueError:
        return len(CATEGORY_IDS)
