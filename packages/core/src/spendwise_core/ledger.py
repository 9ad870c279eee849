"""In-memory transaction ledger.

Holds the accepted transactions and budget limits for a session and keeps
the derived analytics current. Every mutation runs a full ``recompute``
before returning, so ``ledger.state`` never mixes stale and fresh values.
Persistence is the embedding application's job.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, Mapping, Optional, Union
from uuid import uuid4

import structlog

from .config import SpendwiseConfig
from .engine import recompute
from .exceptions import TransactionNotFoundError, ValidationError
from .models import DerivedState, DraftTransaction, Transaction, TransactionType, to_decimal

logger = structlog.get_logger()


class TransactionLedger:
    """
    The transaction collection plus budget limits, with derived state.

    Transactions are immutable; ``update`` swaps in a new instance with
    the same id.
    """

    def __init__(
        self,
        transactions: Iterable[Transaction] = (),
        budget_limits: Optional[Mapping[str, Decimal]] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        """
        Initialize the ledger.

        Args:
            transactions: Previously accepted transactions to load
            budget_limits: Category id to monthly ceiling. Defaults to the
                           configured default limits.
            clock: Returns today's date (default: ``date.today``)
        """
        if budget_limits is None:
            budget_limits = SpendwiseConfig().budget.default_limits

        self._clock = clock or date.today
        self._transactions: list[Transaction] = list(transactions)
        self._budget_limits: dict[str, Decimal] = {
            category: to_decimal(limit) for category, limit in budget_limits.items()
        }
        self._state = recompute(self._transactions, self._budget_limits, today=self._clock())

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def state(self) -> DerivedState:
        """Derived analytics as of the last mutation."""
        return self._state

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def budget_limits(self) -> dict[str, Decimal]:
        return dict(self._budget_limits)

    def __len__(self) -> int:
        return len(self._transactions)

    def get(self, transaction_id: str) -> Transaction:
        """Return the transaction with this id."""
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn
        raise TransactionNotFoundError(
            f"No transaction with id {transaction_id!r}",
            transaction_id=transaction_id,
        )

    def recent(self, n: int = 5) -> list[Transaction]:
        """The ``n`` most recent transactions, newest first."""
        ordered = sorted(self._transactions, key=lambda t: t.date, reverse=True)
        return ordered[:n]

    def by_category(self, category: str) -> list[Transaction]:
        return [t for t in self._transactions if t.category == category]

    def total_by_category(self, category: str) -> Decimal:
        """Net total for a category: income counts positive, expenses negative."""
        return sum(
            (t.signed_amount for t in self._transactions if t.category == category),
            Decimal("0"),
        )

    def monthly_transactions(self, month: int, year: int) -> list[Transaction]:
        return [
            t for t in self._transactions
            if t.date.month == month and t.date.year == year
        ]

    def total_income(self) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.type == TransactionType.INCOME),
            Decimal("0"),
        )

    def total_expenses(self) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.type == TransactionType.EXPENSE),
            Decimal("0"),
        )

    def balance(self) -> Decimal:
        """All-time income minus expenses."""
        return self.total_income() - self.total_expenses()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def accept_draft(self, draft: DraftTransaction) -> Transaction:
        """
        Confirm a draft and add it to the ledger.

        The draft's date is kept when it was read from the text; otherwise
        the transaction is dated on acceptance.

        Args:
            draft: Draft returned by the extractor, possibly edited

        Returns:
            The accepted Transaction with a fresh id
        """
        txn_date = draft.date if draft.date_detected else self._clock()
        return self.add(
            type=draft.type,
            description=draft.description,
            amount=draft.amount,
            category=draft.category,
            date=txn_date,
        )

    def add(
        self,
        *,
        type: Union[TransactionType, str],
        description: str,
        amount: Decimal,
        category: str,
        date: Optional[date] = None,
    ) -> Transaction:
        """Add a transaction entered directly or from a confirmed draft."""
        self._check_amount(amount)
        txn = Transaction(
            id=uuid4().hex,
            type=TransactionType(type),
            description=description,
            amount=amount,
            category=category,
            date=date or self._clock(),
        )
        self._commit(transactions=[*self._transactions, txn])
        logger.info(
            "transaction_added",
            transaction_id=txn.id,
            type=txn.type.value,
            amount=str(txn.amount),
            category=txn.category,
        )
        return txn

    def update(self, transaction: Transaction) -> Transaction:
        """Replace the transaction that has the same id."""
        self._check_amount(transaction.amount)
        self.get(transaction.id)
        self._commit(transactions=[
            transaction if t.id == transaction.id else t
            for t in self._transactions
        ])
        logger.info("transaction_updated", transaction_id=transaction.id)
        return transaction

    def delete(self, transaction_id: str) -> None:
        """Remove a transaction by id."""
        self.get(transaction_id)
        self._commit(transactions=[t for t in self._transactions if t.id != transaction_id])
        logger.info("transaction_deleted", transaction_id=transaction_id)

    def set_budget_limit(self, category: str, amount: Decimal) -> None:
        """Set the monthly ceiling for a category."""
        amount = to_decimal(amount)
        if amount <= 0:
            raise ValidationError(
                "Budget limit must be positive",
                field="amount",
                value=str(amount),
                constraint="amount > 0",
            )
        self._commit(budget_limits={**self._budget_limits, category: amount})
        logger.info("budget_limit_set", category=category, amount=str(amount))

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _check_amount(self, amount: Decimal) -> None:
        if to_decimal(amount) <= 0:
            raise ValidationError(
                "Transaction amount must be positive",
                field="amount",
                value=str(amount),
                constraint="amount > 0",
            )

    def _commit(
        self,
        transactions: Optional[list[Transaction]] = None,
        budget_limits: Optional[dict[str, Decimal]] = None,
    ) -> None:
        """Recompute from the new values, then swap them in together.

        If ``recompute`` raises, the ledger keeps its previous transactions,
        limits and state.
        """
        if transactions is None:
            transactions = self._transactions
        if budget_limits is None:
            budget_limits = self._budget_limits
        state = recompute(transactions, budget_limits, today=self._clock())
        self._transactions = transactions
        self._budget_limits = budget_limits
        self._state = state
