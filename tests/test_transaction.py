"""Mini README: Tests for the transaction factory and amount validation.

Structure:
    * Valid input keeps every field, with blank descriptions defaulted.
    * Zero, negative, non-finite and non-numeric amounts raise InvalidAmount.
    * Kind parsing accepts any casing and rejects unknown labels.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from billingrecord.ledger import (
    MAX_AMOUNT,
    InvalidAmount,
    TransactionKind,
    create_transaction,
    is_valid_amount,
    parse_amount,
)


@pytest.mark.parametrize(
    "kind, amount, expected",
    [
        (TransactionKind.INCOME, Decimal("100"), Decimal("100")),
        (TransactionKind.EXPENSE, 30, Decimal("30")),
        (TransactionKind.EXPENSE, 0.1, Decimal("0.1")),
        (TransactionKind.INCOME, " 12.50 ", Decimal("12.50")),
    ],
)
def test_create_transaction_keeps_inputs(kind, amount, expected) -> None:
    """Valid input produces a record whose fields equal the inputs."""

    moment = datetime(2025, 6, 24, 9, 30, tzinfo=timezone.utc)

    transaction = create_transaction(kind, amount, "salary", moment)

    assert transaction.kind is kind
    assert transaction.amount == expected
    assert transaction.description == "salary"
    assert transaction.timestamp == moment
    assert transaction.transaction_id


@pytest.mark.parametrize(
    "amount",
    [
        0,
        -1,
        Decimal("0"),
        Decimal("-0.01"),
        float("nan"),
        float("inf"),
        "-5",
        "abc",
        "",
        "  ",
        None,
        True,
        "1e30",
        10**27,
        Decimal("1000000000000.01"),
    ],
)
def test_create_transaction_rejects_invalid_amounts(amount) -> None:
    """Amounts that are not positive finite numbers are refused."""

    with pytest.raises(InvalidAmount):
        create_transaction(TransactionKind.INCOME, amount, "x")


def test_zero_expense_is_rejected() -> None:
    with pytest.raises(InvalidAmount) as excinfo:
        create_transaction(TransactionKind.EXPENSE, 0, "x")

    assert excinfo.value.value == 0
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("description", ["", "   ", "\t\n", None])
def test_blank_description_becomes_placeholder(description) -> None:
    """Blank descriptions are stored as the placeholder label instead of failing."""

    transaction = create_transaction(TransactionKind.INCOME, 50, description)

    assert transaction.description == "unspecified"


def test_custom_placeholder_is_used() -> None:
    transaction = create_transaction("income", 50, "", placeholder="No note")

    assert transaction.description == "No note"


def test_identifiers_are_unique() -> None:
    """Every created transaction receives its own identifier."""

    identifiers = {create_transaction("expense", 1).transaction_id for _ in range(200)}

    assert len(identifiers) == 200


def test_naive_timestamp_is_treated_as_utc() -> None:
    transaction = create_transaction("income", 5, "tip", datetime(2025, 1, 1, 12, 0))

    assert transaction.timestamp == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_missing_timestamp_defaults_to_now() -> None:
    before = datetime.now(timezone.utc)
    transaction = create_transaction("income", 5)
    after = datetime.now(timezone.utc)

    assert before <= transaction.timestamp <= after


def test_transaction_is_immutable() -> None:
    transaction = create_transaction("income", 5)

    with pytest.raises(AttributeError):
        transaction.amount = Decimal("1")  # type: ignore[misc]


@pytest.mark.parametrize("label", ["income", "Income", " EXPENSE "])
def test_kind_from_str_accepts_any_casing(label) -> None:
    assert TransactionKind.from_str(label).value == label.strip().lower()


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        create_transaction("refund", 10)


def test_amount_helpers_agree() -> None:
    """The predicate mirrors parse_amount without raising."""

    assert parse_amount("7.25") == Decimal("7.25")
    assert is_valid_amount("7.25")
    assert not is_valid_amount("0")
    assert not is_valid_amount("NaN")


def test_as_dict_serialises_values() -> None:
    moment = datetime(2025, 6, 24, tzinfo=timezone.utc)
    transaction = create_transaction("expense", "30", "lunch", moment)

    assert transaction.as_dict() == {
        "transaction_id": transaction.transaction_id,
        "kind": "expense",
        "amount": "30",
        "description": "lunch",
        "timestamp": "2025-06-24T00:00:00+00:00",
    }
    assert transaction.signed_amount == Decimal("-30")


def test_maximum_amount_is_accepted() -> None:
    """The documented ceiling itself is a valid amount."""

    transaction = create_transaction("income", MAX_AMOUNT, "windfall")

    assert transaction.amount == Decimal("1000000000000")
    assert not is_valid_amount(MAX_AMOUNT + Decimal("0.01"))
