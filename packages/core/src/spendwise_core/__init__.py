"""Spendwise Core - Transaction extraction and spending analytics."""

__version__ = "0.1.0"

from .aggregator import aggregate, previous_month, savings_rate
from .engine import recompute
from .forecast import forecast
from .insights import generate_insights
from .ledger import TransactionLedger
from .models import DraftTransaction, Origin, Transaction, TransactionType
from .recommendations import generate_recommendations
from .transaction_extractor import TransactionExtractor, extract_transaction

__all__ = [
    "aggregate",
    "previous_month",
    "savings_rate",
    "recompute",
    "forecast",
    "generate_insights",
    "generate_recommendations",
    "extract_transaction",
    "TransactionExtractor",
    "TransactionLedger",
    "DraftTransaction",
    "Origin",
    "Transaction",
    "TransactionType",
]
