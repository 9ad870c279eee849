"""Field heuristics for turning raw text into transaction fields.

Each extractor is a pure function of the input text. None of them raise:
an extractor that finds nothing returns None (or its documented default)
and the TransactionExtractor substitutes the fallback value.

Two kinds of text reach these functions:
- Receipt text recovered by OCR (``Origin.DOCUMENT``), which lists many
  dollar amounts and usually names the total explicitly.
- Speech transcripts (``Origin.UTTERANCE``), short sentences with a single
  amount such as "spent 25 dollars on lunch".
"""

import re
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from typing import NamedTuple, Optional

from .categories import DEFAULT_CATEGORY
from .models import Origin


DEFAULT_RECEIPT_DESCRIPTION = "Receipt scan"
DEFAULT_VOICE_DESCRIPTION = "Voice transaction"

# Receipts outside this range are almost always OCR noise (phone numbers,
# store ids, card digits).
MIN_DOCUMENT_AMOUNT = Decimal("0")
MAX_DOCUMENT_AMOUNT = Decimal("10000")


# =============================================================================
# AMOUNT
# =============================================================================

class AmountMatch(NamedTuple):
    """An extracted amount together with the exact text it came from."""

    amount: Decimal
    matched: str


_NUMBER = r'(\d[\d,]*(?:\.\d+)?)'

# Labeled totals, tried in this order. The label must be a whole word so
# "Subtotal" does not count as a total.
LABELED_AMOUNT_PATTERNS = [
    re.compile(rf'\b{label}\b[^\d\n]*?\$?\s?{_NUMBER}', re.IGNORECASE)
    for label in ('total', 'amount', 'sum', 'due')
]

# Any dollar-prefixed number; the last one on the receipt wins
BARE_AMOUNT_PATTERN = re.compile(rf'\${_NUMBER}')

UTTERANCE_AMOUNT_PATTERN = re.compile(r'\$?(\d+(?:,\d{3})*(?:\.\d{1,2})?)')


def _parse_amount(amount_str: str) -> Optional[Decimal]:
    """Parse a matched number into a Decimal, dropping thousands separators."""
    clean = amount_str.replace(',', '')
    try:
        return Decimal(clean)
    except InvalidOperation:
        return None


def _in_range(amount: Optional[Decimal]) -> bool:
    return amount is not None and MIN_DOCUMENT_AMOUNT < amount < MAX_DOCUMENT_AMOUNT


def extract_document_amount(text: str) -> Optional[AmountMatch]:
    """
    Find the most reliable amount on a receipt.

    Labeled totals (``total``, ``amount``, ``sum``, ``due``) are tried
    first, in that order, and the first in-range occurrence of a label
    wins. Failing that, the last ``$``-prefixed number anywhere in the text
    is used, since the grand total tends to be printed last.

    Args:
        text: Raw OCR text

    Returns:
        AmountMatch, or None when no in-range amount was found
    """
    for pattern in LABELED_AMOUNT_PATTERNS:
        for match in pattern.finditer(text):
            amount = _parse_amount(match.group(1))
            if _in_range(amount):
                return AmountMatch(amount, match.group(0))

    bare = None
    for match in BARE_AMOUNT_PATTERN.finditer(text):
        amount = _parse_amount(match.group(1))
        if _in_range(amount):
            bare = AmountMatch(amount, match.group(0))
    return bare


def extract_utterance_amount(text: str) -> Optional[AmountMatch]:
    """Return the first number in a spoken sentence, with or without a ``$``."""
    match = UTTERANCE_AMOUNT_PATTERN.search(text)
    if not match:
        return None
    amount = _parse_amount(match.group(1))
    if amount is None:
        return None
    return AmountMatch(amount, match.group(0))


# =============================================================================
# DATE
# =============================================================================

# (pattern, field order). Priority order is preserved even when a later
# pattern would also validate.
# Slash and dash dates are read month first (US receipts): 03/15/24 is
# March 15, and a day-first 15/03/24 is rejected as month 15.
DATE_PATTERNS = [
    (re.compile(r'\b(\d{1,2})/(\d{1,2})/(\d{2,4})\b'), 'mdy'),  # 03/15/24
    (re.compile(r'\b(\d{1,2})-(\d{1,2})-(\d{2,4})\b'), 'mdy'),  # 03-15-2024
    (re.compile(r'\b(\d{4})-(\d{1,2})-(\d{1,2})\b'), 'ymd'),    # 2024-03-15
]


def _build_date(year: int, month: int, day: int) -> Optional[date]:
    if year < 100:
        year += 2000
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    # Days past the end of the month roll into the next one: 02/30/24 is 2024-03-01
    return date(year, month, 1) + timedelta(days=day - 1)


def extract_date(text: str) -> Optional[date]:
    """
    Find a calendar date in the text.

    Each pattern is tried once, in priority order. A match whose month or day
    is out of range is skipped and the next pattern is tried.

    Args:
        text: Raw text

    Returns:
        The first valid date, or None so the caller can fall back to today
    """
    for pattern, order in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        first, second, third = (int(g) for g in match.groups())
        if order == 'ymd':
            parsed = _build_date(first, second, third)
        else:
            parsed = _build_date(third, first, second)

        if parsed:
            return parsed

    return None


# =============================================================================
# CATEGORY
# =============================================================================

# Ordered (category, keywords) tables. The first category with any
# substring hit wins, so overlapping keywords ("gas") resolve to the
# earlier entry.
RECEIPT_CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ('food', ('restaurant', 'cafe', 'diner', 'pizza', 'burger', 'coffee', 'food', 'meal')),
    ('transport', ('gas', 'fuel', 'uber', 'taxi', 'parking', 'transport')),
    ('shopping', ('store', 'shop', 'mall', 'retail', 'clothing', 'shoes')),
    ('health', ('pharmacy', 'medical', 'drug', 'health', 'doctor')),
    ('entertainment', ('movie', 'cinema', 'theater', 'concert', 'game')),
    ('utilities', ('electric', 'water', 'gas', 'internet', 'phone', 'utility')),
]

UTTERANCE_CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ('food', ('food', 'restaurant', 'dinner', 'lunch', 'breakfast', 'meal', 'groceries', 'coffee')),
    ('transport', ('transport', 'gas', 'fuel', 'uber', 'taxi', 'bus', 'train', 'parking')),
    ('entertainment', ('entertainment', 'movie', 'concert', 'game', 'fun', 'party')),
    ('shopping', ('shopping', 'clothes', 'shoes', 'store', 'mall', 'purchase')),
    ('health', ('health', 'medical', 'doctor', 'pharmacy', 'medicine', 'hospital')),
    ('education', ('education', 'school', 'course', 'book', 'tuition', 'training')),
    ('utilities', ('utility', 'electricity', 'water', 'gas', 'internet', 'phone')),
    ('other', ('other', 'misc', 'miscellaneous')),
]

_KEYWORD_TABLES = {
    Origin.DOCUMENT: RECEIPT_CATEGORY_KEYWORDS,
    Origin.UTTERANCE: UTTERANCE_CATEGORY_KEYWORDS,
}


def classify_category(text: str, origin: Origin) -> str:
    """
    Categorize text using the keyword table for its origin.

    Args:
        text: Raw text
        origin: Selects the receipt or the speech keyword table

    Returns:
        Category id, ``other`` when no keyword matches
    """
    text_lower = text.lower()

    for category, keywords in _KEYWORD_TABLES[origin]:
        if any(keyword in text_lower for keyword in keywords):
            return category

    return DEFAULT_CATEGORY


# =============================================================================
# DESCRIPTION
# =============================================================================

RECEIPT_HEADER_LINES = 3

STOP_WORDS = ('dollars', 'dollar', 'spent', 'paid', 'cost', 'price', 'for', 'on', 'the', 'a', 'an')

_STOP_WORDS_PATTERN = re.compile(
    r'\b(?:' + '|'.join(STOP_WORDS) + r')\b',
    re.IGNORECASE,
)


def describe_document(text: str) -> str:
    """Use the merchant header of a receipt as its description."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    for line in lines[:RECEIPT_HEADER_LINES]:
        if 3 < len(line) < 50 and not re.match(r'\d', line):
            return line

    return DEFAULT_RECEIPT_DESCRIPTION


def describe_utterance(text: str, amount_match: Optional[AmountMatch] = None) -> str:
    """Strip the amount and filler words from a spoken sentence."""
    description = text
    if amount_match:
        description = description.replace(amount_match.matched, '', 1)

    description = _STOP_WORDS_PATTERN.sub('', description)
    description = re.sub(r'\s+', ' ', description).strip()

    return description or DEFAULT_VOICE_DESCRIPTION
