"""Transaction extractor for voice transcripts and receipt text.

Combines the field heuristics into a single draft transaction. Extraction
is best effort: malformed or sparse text degrades to defaults (amount 0,
category ``other``, a placeholder description, today's date) instead of
failing, and the caller lets the user correct the draft before accepting it.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union

import structlog

from .categories import INCOME_CATEGORY
from .field_extractors import (
    classify_category,
    describe_document,
    describe_utterance,
    extract_date,
    extract_document_amount,
    extract_utterance_amount,
)
from .models import DraftTransaction, Origin, TransactionType

logger = structlog.get_logger()


DEFAULT_AMOUNT = Decimal("0")

# Any of these in a spoken sentence marks it as income
INCOME_KEYWORDS = ('income', 'earned', 'salary', 'payment')


class TransactionExtractor:
    """
    Extract draft transactions from raw text.

    The same extractor serves both intake paths; ``origin`` selects the
    amount, category and description rules.
    """

    def __init__(self, clock: Optional[Callable[[], date]] = None):
        """
        Initialize the extractor.

        Args:
            clock: Returns today's date. Used when the text carries no date.
                   Defaults to ``date.today``.
        """
        self._clock = clock or date.today

    def extract(
        self,
        raw_text: str,
        origin: Union[Origin, str] = Origin.UTTERANCE,
    ) -> DraftTransaction:
        """
        Build a draft transaction from raw text.

        Args:
            raw_text: Speech transcript or OCR text
            origin: ``utterance`` or ``document``

        Returns:
            DraftTransaction with every field populated
        """
        origin = Origin(origin)
        text = raw_text or ""

        if origin == Origin.DOCUMENT:
            draft = self._extract_document(text)
        else:
            draft = self._extract_utterance(text)

        logger.info(
            "transaction_extracted",
            origin=origin.value,
            type=draft.type.value,
            amount=str(draft.amount),
            category=draft.category,
            date_detected=draft.date_detected,
        )
        return draft

    def _extract_document(self, text: str) -> DraftTransaction:
        """Parse OCR text from a photographed receipt."""
        amount_match = extract_document_amount(text)
        if amount_match is None:
            logger.debug("amount_not_found", origin=Origin.DOCUMENT.value)

        txn_date = extract_date(text)

        return DraftTransaction(
            type=TransactionType.EXPENSE,
            description=describe_document(text),
            amount=amount_match.amount if amount_match else DEFAULT_AMOUNT,
            category=classify_category(text, Origin.DOCUMENT),
            date=txn_date or self._clock(),
            date_detected=txn_date is not None,
            origin=Origin.DOCUMENT,
            raw_text=text,
        )

    def _extract_utterance(self, text: str) -> DraftTransaction:
        """Parse a spoken sentence such as "spent $25 on lunch"."""
        text_lower = text.lower()

        amount_match = extract_utterance_amount(text)
        if amount_match is None:
            logger.debug("amount_not_found", origin=Origin.UTTERANCE.value)

        is_income = any(kw in text_lower for kw in INCOME_KEYWORDS)
        if is_income:
            txn_type = TransactionType.INCOME
            category = INCOME_CATEGORY
        else:
            txn_type = TransactionType.EXPENSE
            category = classify_category(text, Origin.UTTERANCE)

        txn_date = extract_date(text)

        return DraftTransaction(
            type=txn_type,
            description=describe_utterance(text, amount_match),
            amount=amount_match.amount if amount_match else DEFAULT_AMOUNT,
            category=category,
            date=txn_date or self._clock(),
            date_detected=txn_date is not None,
            origin=Origin.UTTERANCE,
            raw_text=text,
        )


def extract_transaction(
    raw_text: str,
    origin: Union[Origin, str] = Origin.UTTERANCE,
    today: Optional[date] = None,
) -> DraftTransaction:
    """
    Extract a draft transaction from raw text.

    Args:
        raw_text: Speech transcript or OCR text
        origin: ``utterance`` or ``document``
        today: Date to use when the text has none (default: today)

    Returns:
        DraftTransaction; never raises for string input
    """
    clock = (lambda: today) if today else None
    return TransactionExtractor(clock=clock).extract(raw_text, origin)
