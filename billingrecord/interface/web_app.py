"""Mini README: FastAPI service exposing a single-session ledger.

Structure:
    * create_application - application factory wiring routes and templates.
    * TransactionPayload - JSON body accepted by ``POST /transactions``.
    * Dashboard state - recent activity messages fed by ledger events.

Each application instance owns exactly one ``Ledger`` which lives as long as
the process. The JSON API mirrors the ledger operations one to one; the
dashboard at ``/`` renders the balance and the most-recent-first list and
posts plain HTML forms back to the ``/dashboard`` routes.
"""

from __future__ import annotations

from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Any, Deque, Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from ..configuration import BillingRecordSettings, get_settings
from ..ledger import (
    EventType,
    InvalidAmount,
    Ledger,
    MAX_AMOUNT,
    LedgerEvent,
    Transaction,
    balance_tone,
    format_amount,
    format_signed,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

RECENT_MESSAGE_LIMIT = 5


class TransactionPayload(BaseModel):
    """Body of ``POST /transactions``; amounts are validated by the ledger."""

    kind: str
    amount: Any = None
    description: str = ""
    timestamp: Optional[datetime] = None


def create_application(
    ledger: Optional[Ledger] = None,
    settings: Optional[BillingRecordSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes bound to one ledger."""

    settings = settings or get_settings()
    ledger = ledger if ledger is not None else Ledger(placeholder=settings.placeholder_description)
    symbol = settings.currency_symbol

    app = FastAPI(title="BillingRecord", version="0.1.0")
    app.state.ledger = ledger
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    messages: Deque[str] = deque(
        ["Record your first income or expense to get started."],
        maxlen=RECENT_MESSAGE_LIMIT,
    )

    def _on_ledger_event(event: LedgerEvent) -> None:
        verb = "Recorded" if event.event_type is EventType.ADDED else "Deleted"
        messages.appendleft(
            f"{verb} {event.transaction.kind.value} "
            f"{format_amount(event.transaction.amount, symbol)} - {event.transaction.description}"
        )

    ledger.subscribe(_on_ledger_event)

    def _serialise(transaction: Transaction) -> Dict[str, str]:
        payload = transaction.as_dict()
        payload["display_amount"] = format_signed(transaction, symbol)
        return payload

    def _render_dashboard(
        request: Request, error: Optional[str] = None, status_code: int = 200
    ) -> HTMLResponse:
        balance = ledger.balance()
        rows = [_serialise(transaction) for transaction in ledger.list_transactions()]
        LOGGER.debug("Rendering dashboard with %s transactions", len(rows))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "balance": format_amount(balance, symbol),
                "balance_tone": balance_tone(balance),
                "is_empty": ledger.is_empty(),
                "transactions": rows,
                "messages": list(messages),
                "error": error,
            },
            status_code=status_code,
        )

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the balance, transaction list and entry form."""

        return _render_dashboard(request)

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return transactions most recent first with the computed balance."""

        balance = ledger.balance()
        return JSONResponse(
            {
                "transactions": [_serialise(item) for item in ledger.list_transactions()],
                "balance": str(balance),
                "formatted_balance": format_amount(balance, symbol),
                "is_empty": ledger.is_empty(),
            }
        )

    @app.post("/transactions", status_code=status.HTTP_201_CREATED)
    async def create_transaction(payload: TransactionPayload) -> JSONResponse:
        """Validate and record a transaction."""

        try:
            transaction = ledger.record(
                payload.kind, payload.amount, payload.description, payload.timestamp
            )
        except ValueError as error:
            # InvalidAmount is a ValueError, as is an unknown kind.
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(_serialise(transaction), status_code=status.HTTP_201_CREATED)

    @app.get("/transactions/{transaction_id}")
    async def get_transaction(transaction_id: str) -> JSONResponse:
        try:
            transaction = ledger.get(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(_serialise(transaction))

    @app.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_transaction(transaction_id: str) -> Response:
        """Delete a transaction; unknown identifiers still succeed."""

        ledger.remove(transaction_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.post("/dashboard/transactions", response_class=HTMLResponse)
    async def submit_transaction(
        request: Request,
        kind: str = Form(...),
        amount: str = Form(""),
        description: str = Form(""),
    ) -> Response:
        """Handle the dashboard entry form and redirect back on success."""

        try:
            ledger.record(kind, amount, description)
        except InvalidAmount:
            return _render_dashboard(
                request,
                error=(
                    "Enter an amount above zero and at most "
                    f"{format_amount(MAX_AMOUNT, symbol)}."
                ),
                status_code=400,
            )
        except ValueError as error:
            return _render_dashboard(request, error=str(error), status_code=400)
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    @app.post("/dashboard/transactions/{transaction_id}/delete")
    async def submit_delete(transaction_id: str) -> RedirectResponse:
        ledger.remove(transaction_id)
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)

    return app
