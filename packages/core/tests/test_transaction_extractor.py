"""Tests for the transaction extractor."""

from datetime import date
from decimal import Decimal

import pytest

from spendwise_core import TransactionExtractor, extract_transaction
from spendwise_core.categories import CATEGORY_IDS
from spendwise_core.models import DraftTransaction, Origin, TransactionType


TODAY = date(2025, 6, 10)


@pytest.fixture
def extractor() -> TransactionExtractor:
    """Extractor with a fixed clock."""
    return TransactionExtractor(clock=lambda: TODAY)


RECEIPT = """
GREEN LEAF CAFE
455 Market Street
03/15/24 12:41

Latte            $4.50
Bagel            $3.25
Subtotal         $7.75
Tax              $0.69
TOTAL            $8.44
Card             $8.44
"""


class TestUtteranceExtraction:
    """Tests for voice transcripts."""

    def test_spent_on_lunch(self, extractor: TransactionExtractor):
        draft = extractor.extract("Spent $25 on lunch", Origin.UTTERANCE)

        assert draft.type == TransactionType.EXPENSE
        assert draft.amount == Decimal("25")
        assert draft.category == "food"
        assert "25" not in draft.description
        assert "spent" not in draft.description.lower().split()
        assert "on" not in draft.description.lower().split()

    def test_salary_is_income(self, extractor: TransactionExtractor):
        draft = extractor.extract("Received $2000 salary", Origin.UTTERANCE)

        assert draft.type == TransactionType.INCOME
        assert draft.amount == Decimal("2000")
        assert draft.category == "income"

    @pytest.mark.parametrize("word", ["income", "earned", "salary", "payment"])
    def test_income_keywords(self, extractor: TransactionExtractor, word: str):
        draft = extractor.extract(f"{word} of 100", Origin.UTTERANCE)
        assert draft.type == TransactionType.INCOME

    def test_no_date_uses_clock(self, extractor: TransactionExtractor):
        draft = extractor.extract("Spent $25 on lunch", Origin.UTTERANCE)

        assert draft.date == TODAY
        assert draft.date_detected is False

    def test_string_origin_accepted(self, extractor: TransactionExtractor):
        draft = extractor.extract("coffee 4", "utterance")
        assert draft.origin == Origin.UTTERANCE

    def test_empty_utterance(self, extractor: TransactionExtractor):
        draft = extractor.extract("", Origin.UTTERANCE)

        assert draft.amount == Decimal("0")
        assert draft.category == "other"
        assert draft.description == "Voice transaction"
        assert draft.date == TODAY


class TestDocumentExtraction:
    """Tests for receipt text."""

    def test_full_receipt(self, extractor: TransactionExtractor):
        draft = extractor.extract(RECEIPT, Origin.DOCUMENT)

        assert draft.type == TransactionType.EXPENSE
        assert draft.amount == Decimal("8.44")
        assert draft.category == "food"
        assert draft.description == "GREEN LEAF CAFE"
        assert draft.date == date(2024, 3, 15)
        assert draft.date_detected is True
        assert draft.origin == Origin.DOCUMENT

    def test_receipt_never_income(self, extractor: TransactionExtractor):
        """Income keywords only apply to speech."""
        draft = extractor.extract("Salary Payment Office\nTotal $50", Origin.DOCUMENT)
        assert draft.type == TransactionType.EXPENSE

    def test_day_past_month_end_rolls_over(self):
        draft = extract_transaction("Receipt 02/30/24 Total $5", Origin.DOCUMENT, today=date(2025, 6, 1))

        assert draft.date == date(2024, 3, 1)
        assert draft.date_detected is True

    def test_unreadable_receipt_defaults(self, extractor: TransactionExtractor):
        draft = extractor.extract("@@@\n###", Origin.DOCUMENT)

        assert draft.amount == Decimal("0")
        assert draft.category == "other"
        assert draft.description == "Receipt scan"
        assert draft.date == TODAY
        assert draft.date_detected is False


class TestExtractTransaction:
    """Tests for the functional entry point."""

    def test_returns_draft(self):
        draft = extract_transaction("Spent $25 on lunch", Origin.UTTERANCE, today=TODAY)

        assert isinstance(draft, DraftTransaction)
        assert draft.amount == Decimal("25")
        assert draft.date == TODAY

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "\n\n\n",
            "$$$",
            "Total: $-5",
            "99999999999999999999",
            "13/40/24 00/00/00 9999-99-99",
            "ünïcödé ☕ receipt",
            "a " * 500,
        ],
    )
    @pytest.mark.parametrize("origin", [Origin.UTTERANCE, Origin.DOCUMENT])
    def test_never_fails(self, text: str, origin: Origin):
        """Any text yields a usable draft."""
        draft = extract_transaction(text, origin, today=TODAY)

        assert draft.amount >= 0
        assert draft.category in CATEGORY_IDS
        assert draft.description
