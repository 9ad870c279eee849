"""Transaction and category models.

This module provides the structures exchanged between the extraction
pipeline and the surrounding application:
- Categories from the static reference table
- Draft transactions produced from raw text, awaiting confirmation
- Accepted transactions held in the ledger

Amounts are always non-negative Decimals. Direction lives in
``TransactionType`` and is applied only when aggregating.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Origin(str, Enum):
    """Source modality of the raw text handed to the extractor."""

    UTTERANCE = "utterance"
    DOCUMENT = "document"


class Category(BaseModel):
    """An entry of the static category reference table."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable category identifier, e.g. 'food'")
    display_name: str = Field(description="Human-readable category name")
    color_token: str = Field(description="Color used by charts for this category")
    icon_token: str = Field(description="Icon shown next to the category")


def to_decimal(v):
    """Convert str, int or float to Decimal through its string form; pass anything else through."""
    if isinstance(v, (str, int, float)) and not isinstance(v, bool):
        return Decimal(str(v))
    return v


class DraftTransaction(BaseModel):
    """A transaction extracted from text, not yet confirmed by the user.

    Every field is populated: the extractor substitutes a default for
    anything it cannot find, so a draft may carry a zero amount. The
    caller is expected to let the user edit it before acceptance.
    """

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "type": "expense",
                    "description": "lunch",
                    "amount": "25",
                    "category": "food",
                    "date": "2025-01-15",
                    "date_detected": False,
                    "origin": "utterance",
                    "raw_text": "Spent $25 on lunch",
                }
            ]
        }
    }

    type: TransactionType = Field(
        default=TransactionType.EXPENSE,
        description="Income or expense",
    )
    description: str = Field(
        min_length=1,
        description="Short description extracted from the text",
    )
    amount: Decimal = Field(
        default=Decimal("0"),
        ge=Decimal("0"),
        description="Extracted amount, zero when none was found",
    )
    category: str = Field(
        default="other",
        description="Category id from the reference table",
    )
    date: dt.date = Field(
        description="Extracted date, or the extraction day when none was found",
    )
    date_detected: bool = Field(
        default=False,
        description="True when the date came from the text itself",
    )
    origin: Origin = Field(description="Where the raw text came from")
    raw_text: str = Field(
        default="",
        description="The text the draft was extracted from",
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount_to_decimal(cls, v):
        """Coerce string and numeric amounts to Decimal."""
        return to_decimal(v)


class Transaction(BaseModel):
    """An accepted transaction.

    Immutable; an edit produces a new instance carrying the same ``id``.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "3f2a9c4e1b7d4e0f9a6c2b8d5e1f7a3c",
                    "type": "expense",
                    "description": "Corner Cafe",
                    "amount": "18.40",
                    "category": "food",
                    "date": "2025-01-15",
                }
            ]
        },
    )

    id: str = Field(description="Identifier assigned at acceptance, never reused")
    type: TransactionType = Field(description="Income or expense")
    description: str = Field(min_length=1, description="What the money was for")
    amount: Decimal = Field(gt=Decimal("0"), description="Positive amount")
    category: str = Field(description="Category id from the reference table")
    date: dt.date = Field(description="The calendar date of the transaction")

    @property
    def signed_amount(self) -> Decimal:
        """Amount with direction applied: negative for expenses."""
        if self.type == TransactionType.EXPENSE:
            return -self.amount
        return self.amount

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount_to_decimal(cls, v):
        """Coerce string and numeric amounts to Decimal."""
        return to_decimal(v)
