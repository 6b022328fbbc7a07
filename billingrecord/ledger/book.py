"""Mini README: In-memory ledger of income and expense transactions.

Structure:
    * DisplayOrder - enum selecting how ``list_transactions`` orders records.
    * EventType / LedgerEvent - notifications emitted after each mutation.
    * LedgerView - lazy, restartable iterable over the current contents.
    * Ledger - owns the transactions and derives the running balance.

The ledger never caches derived state: the display order is re-sorted on
every iteration and the balance is re-summed on every call, so removals
between reads cannot leave a stale view behind. Interfaces that need to
refresh after a change subscribe to ``LedgerEvent`` notifications instead of
polling.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Union

from ..logging_utils import get_logger
from .transaction import (
    UNSPECIFIED_DESCRIPTION,
    AmountInput,
    Transaction,
    TransactionKind,
    create_transaction,
)

LOGGER = get_logger(__name__)


class DisplayOrder(str, Enum):
    """Orderings supported by :meth:`Ledger.list_transactions`."""

    MOST_RECENT_FIRST = "most_recent_first"
    INSERTION = "insertion"


class EventType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class LedgerEvent:
    """Mutation notification delivered to ledger subscribers."""

    event_type: EventType
    transaction: Transaction


Listener = Callable[[LedgerEvent], None]


class LedgerView:
    """Iterable over a ledger's transactions in a chosen order.

    Nothing is computed until iteration starts, and every new iteration
    reflects the ledger as it is at that moment.
    """

    def __init__(self, ledger: "Ledger", order_by: DisplayOrder) -> None:
        self._ledger = ledger
        self._order_by = order_by

    def __iter__(self) -> Iterator[Transaction]:
        transactions = list(self._ledger._transactions.values())
        if self._order_by is DisplayOrder.MOST_RECENT_FIRST:
            # sorted() is stable with reverse=True, so equal timestamps keep insertion order.
            transactions = sorted(transactions, key=lambda item: item.timestamp, reverse=True)
        return iter(transactions)

    def __len__(self) -> int:
        return len(self._ledger)

    def snapshot(self) -> List[Transaction]:
        """Materialise the current order into a list."""

        return list(self)


class Ledger:
    """Manage a session's transactions and derive their balance."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        placeholder: str = UNSPECIFIED_DESCRIPTION,
    ) -> None:
        self._transactions: Dict[str, Transaction] = {}
        self._listeners: List[Listener] = []
        self._placeholder = placeholder
        for transaction in transactions or ():
            self.add(transaction)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._transactions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for mutation events and return an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event_type: EventType, transaction: Transaction) -> None:
        event = LedgerEvent(event_type=event_type, transaction=transaction)
        for listener in list(self._listeners):
            listener(event)

    def add(self, transaction: Transaction) -> None:
        """Append a transaction built by :func:`create_transaction`."""

        if transaction.transaction_id in self._transactions:
            raise ValueError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions[transaction.transaction_id] = transaction
        LOGGER.info(
            "Added %s %s (%s)",
            transaction.kind.value,
            transaction.amount,
            transaction.transaction_id,
        )
        self._notify(EventType.ADDED, transaction)

    def record(
        self,
        kind: Union[TransactionKind, str],
        amount: AmountInput,
        description: Optional[str] = "",
        timestamp: Optional[datetime] = None,
    ) -> Transaction:
        """Create a transaction with this ledger's placeholder and add it."""

        transaction = create_transaction(
            kind, amount, description, timestamp, placeholder=self._placeholder
        )
        self.add(transaction)
        return transaction

    def remove(self, transaction_id: str) -> Optional[Transaction]:
        """Remove a transaction if present; unknown identifiers are ignored."""

        transaction = self._transactions.pop(transaction_id, None)
        if transaction is None:
            LOGGER.debug("Ignoring removal of unknown transaction %s", transaction_id)
            return None
        LOGGER.info("Removed transaction %s", transaction_id)
        self._notify(EventType.REMOVED, transaction)
        return transaction

    def remove_displayed(self, positions: Iterable[int]) -> List[Transaction]:
        """Remove transactions by their position in the current display order."""

        displayed = self.list_transactions().snapshot()
        targets = [displayed[position] for position in positions if 0 <= position < len(displayed)]
        removed: List[Transaction] = []
        for transaction in targets:
            if self.remove(transaction.transaction_id) is not None:
                removed.append(transaction)
        return removed

    def get(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        if transaction_id not in self._transactions:
            raise KeyError(f"Transaction {transaction_id} not found")
        return self._transactions[transaction_id]

    def list_transactions(
        self, order_by: DisplayOrder = DisplayOrder.MOST_RECENT_FIRST
    ) -> LedgerView:
        """Return a restartable view, most recent first unless asked otherwise."""

        return LedgerView(self, DisplayOrder(order_by))

    def balance(self) -> Decimal:
        """Income minus expenses over the current contents."""

        return sum(
            (transaction.signed_amount for transaction in self._transactions.values()),
            Decimal("0"),
        )

    def is_empty(self) -> bool:
        return not self._transactions
