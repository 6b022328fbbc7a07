"""Mini README: Line-oriented console session over a ledger.

``LedgerConsole.execute`` interprets one command line and returns the text to
show, which keeps the command handling testable without a terminal. The
Typer ``session`` command in ``main_billing_record.py`` supplies the
prompt loop.

Commands:
    add <income|expense> <amount> [description...]
    remove <transaction id>
    list
    balance
    help
    quit
"""

from __future__ import annotations

import shlex
from typing import Callable, Dict, List, Optional

from ..ledger import MAX_AMOUNT, InvalidAmount, Ledger, format_amount, format_signed
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

HELP_TEXT = """Commands:
  add <income|expense> <amount> [description]  record a transaction
  remove <id>                                  delete a transaction
  list                                         show transactions, newest first
  balance                                      show the running balance
  quit                                         end the session"""


class SessionClosed(Exception):
    """Raised by ``quit`` to end the prompt loop."""


class LedgerConsole:
    """Translate console commands into ledger operations."""

    def __init__(self, ledger: Optional[Ledger] = None, *, symbol: str = "¥") -> None:
        self.ledger = ledger if ledger is not None else Ledger()
        self.symbol = symbol
        self._commands: Dict[str, Callable[[List[str]], str]] = {
            "add": self._add,
            "remove": self._remove,
            "list": self._list,
            "balance": self._balance,
            "help": lambda _args: HELP_TEXT,
        }

    def execute(self, line: str) -> str:
        """Run a single command line and return its output."""

        try:
            tokens = shlex.split(line)
        except ValueError as error:
            return f"Error: {error}"
        if not tokens:
            return ""
        command, args = tokens[0].lower(), tokens[1:]
        if command in {"quit", "exit"}:
            raise SessionClosed()
        handler = self._commands.get(command)
        if handler is None:
            return f"Unknown command '{command}'. Type 'help' for a list of commands."
        return handler(args)

    def _add(self, args: List[str]) -> str:
        if len(args) < 2:
            return "Usage: add <income|expense> <amount> [description]"
        kind, amount, description = args[0], args[1], " ".join(args[2:])
        try:
            transaction = self.ledger.record(kind, amount, description)
        except InvalidAmount:
            return (
                "Error: amount must be a number above zero and at most "
                f"{format_amount(MAX_AMOUNT, self.symbol)}."
            )
        except ValueError as error:
            return f"Error: {error}"
        return (
            f"Recorded {transaction.kind.value} {format_signed(transaction, self.symbol)}"
            f" [{transaction.transaction_id}]"
        )

    def _remove(self, args: List[str]) -> str:
        if len(args) != 1:
            return "Usage: remove <id>"
        removed = self.ledger.remove(args[0])
        if removed is None:
            return "Nothing to remove."
        return f"Removed {removed.description} {format_signed(removed, self.symbol)}"

    def _list(self, _args: List[str]) -> str:
        if self.ledger.is_empty():
            return "No transactions yet. Use 'add' to record one."
        lines = [
            f"{item.timestamp:%Y-%m-%d %H:%M}  {format_signed(item, self.symbol):>14}  "
            f"{item.description}  [{item.transaction_id}]"
            for item in self.ledger.list_transactions()
        ]
        return "\n".join(lines)

    def _balance(self, _args: List[str]) -> str:
        return f"Balance: {format_amount(self.ledger.balance(), self.symbol)}"
