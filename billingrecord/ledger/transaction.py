"""Mini README: Transaction value records and the validating factory.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * InvalidAmount - the single domain error, raised for unusable amounts.
    * parse_amount / is_valid_amount - explicit amount validation.
    * Transaction - frozen dataclass describing one recorded event.
    * create_transaction - factory assigning identity and normalising input.

Amounts are kept as ``Decimal`` so balances never accumulate binary rounding
error. Validation happens exactly once, inside the factory, before the
dataclass is built; the ledger trusts the records it receives.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Optional, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

UNSPECIFIED_DESCRIPTION = "unspecified"

# Largest single amount accepted; keeps balances well inside Decimal's default precision.
MAX_AMOUNT = Decimal("1000000000000")

AmountInput = Union[Decimal, int, float, str]


class TransactionKind(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error

    @property
    def sign(self) -> int:
        return 1 if self is TransactionKind.INCOME else -1


class InvalidAmount(ValueError):
    """Raised when an amount is not a positive, finite number."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__(f"Invalid amount {value!r}: {reason}")
        self.value = value
        self.reason = reason


def parse_amount(value: object) -> Decimal:
    """Convert user or API input into a positive finite ``Decimal``.

    Floats are converted through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion. Booleans are refused
    even though Python treats them as integers, and amounts above
    ``MAX_AMOUNT`` are rejected.
    """

    if isinstance(value, bool) or value is None:
        raise InvalidAmount(value, "a number is required")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidAmount(value, "a number is required")
        try:
            amount = Decimal(text)
        except InvalidOperation as error:
            raise InvalidAmount(value, "not a number") from error
    else:
        raise InvalidAmount(value, f"unsupported type {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmount(value, "must be finite")
    if amount <= 0:
        raise InvalidAmount(value, "must be greater than zero")
    if amount > MAX_AMOUNT:
        raise InvalidAmount(value, f"must not exceed {MAX_AMOUNT}")
    return amount


def is_valid_amount(value: object) -> bool:
    """Return whether ``value`` would be accepted by :func:`parse_amount`."""

    try:
        parse_amount(value)
    except InvalidAmount:
        return False
    return True


def normalise_description(description: Optional[str], placeholder: str = UNSPECIFIED_DESCRIPTION) -> str:
    """Replace empty or whitespace-only descriptions with ``placeholder``."""

    if description is None or not description.strip():
        return placeholder
    return description


def _normalise_timestamp(timestamp: Optional[datetime]) -> datetime:
    if timestamp is None:
        return datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


@dataclass(frozen=True, slots=True)
class Transaction:
    """Immutable ledger entry for a single income or expense event."""

    transaction_id: str
    kind: TransactionKind
    amount: Decimal
    description: str
    timestamp: datetime

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance."""

        return self.amount * self.kind.sign

    def as_dict(self) -> Dict[str, str]:
        """Export the transaction with JSON-serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "kind": self.kind.value,
            "amount": str(self.amount),
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
        }


def create_transaction(
    kind: Union[TransactionKind, str],
    amount: AmountInput,
    description: Optional[str] = "",
    timestamp: Optional[datetime] = None,
    *,
    placeholder: str = UNSPECIFIED_DESCRIPTION,
) -> Transaction:
    """Validate input and build a new transaction with a fresh identifier.

    Raises:
        InvalidAmount: ``amount`` is zero, negative, non-finite, not numeric
            or above ``MAX_AMOUNT``.
        ValueError: ``kind`` is text naming neither income nor expense.
    """

    if not isinstance(kind, TransactionKind):
        kind = TransactionKind.from_str(kind)
    try:
        validated_amount = parse_amount(amount)
    except InvalidAmount as error:
        LOGGER.warning("Rejected %s transaction: %s", kind.value, error)
        raise
    transaction = Transaction(
        transaction_id=str(uuid.uuid4()),
        kind=kind,
        amount=validated_amount,
        description=normalise_description(description, placeholder),
        timestamp=_normalise_timestamp(timestamp),
    )
    LOGGER.debug("Created transaction %s", transaction.transaction_id)
    return transaction
