"""Mini README: Core ledger domain for BillingRecord.

This package holds everything that survives a change of presentation
framework: the immutable ``Transaction`` record with its validating factory,
the in-memory ``Ledger`` with its derived balance and display order, and
formatting helpers used by the interfaces.
"""

from .book import DisplayOrder, EventType, Ledger, LedgerEvent, LedgerView
from .formatting import balance_tone, format_amount, format_signed
from .transaction import (
    MAX_AMOUNT,
    UNSPECIFIED_DESCRIPTION,
    InvalidAmount,
    Transaction,
    TransactionKind,
    create_transaction,
    is_valid_amount,
    parse_amount,
)

__all__ = [
    "DisplayOrder",
    "EventType",
    "InvalidAmount",
    "Ledger",
    "LedgerEvent",
    "LedgerView",
    "MAX_AMOUNT",
    "Transaction",
    "TransactionKind",
    "UNSPECIFIED_DESCRIPTION",
    "balance_tone",
    "create_transaction",
    "format_amount",
    "format_signed",
    "is_valid_amount",
    "parse_amount",
]
