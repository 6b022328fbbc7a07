"""Mini README: Display helpers shared by the dashboard and console.

Amounts are rounded half-up to two decimals and prefixed with the configured
currency symbol. Negative values carry the sign before the symbol
(``-¥30.00``) so balances and expense rows read the same way.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from .transaction import Transaction, TransactionKind

DEFAULT_SYMBOL = "¥"
_CENTS = Decimal("0.01")


def format_amount(amount: Decimal, symbol: str = DEFAULT_SYMBOL) -> str:
    """Render ``amount`` with two decimals, e.g. ``¥100.00`` or ``-¥30.00``."""

    amount = Decimal(amount)
    with localcontext() as context:
        # quantize needs room for every integer digit plus the two cents digits.
        context.prec = max(context.prec, amount.adjusted() + 3)
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{symbol}{abs(rounded):.2f}"


def format_signed(transaction: Transaction, symbol: str = DEFAULT_SYMBOL) -> str:
    """Render a row amount with an explicit ``+`` or ``-`` prefix."""

    prefix = "+" if transaction.kind is TransactionKind.INCOME else "-"
    return f"{prefix}{format_amount(transaction.amount, symbol)}"


def balance_tone(balance: Decimal) -> str:
    """Return ``positive`` for a balance of zero or more, else ``negative``."""

    return "positive" if balance >= 0 else "negative"
