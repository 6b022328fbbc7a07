"""Mini README: Entry point CLI for BillingRecord.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI service with configurable host, port, and production flags, and
``session`` opens an interactive console ledger in the terminal. Both read
defaults from environment-aware settings and share the same logging setup.
"""

from __future__ import annotations

import typer
import uvicorn

from billingrecord.configuration import get_settings
from billingrecord.interface import LedgerConsole, SessionClosed
from billingrecord.ledger import Ledger
from billingrecord.logging_utils import configure_root_logger

cli = typer.Typer(help="Record income and expenses and track the running balance.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to 0.0.0.0 or ::, so point at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting BillingRecord on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "billingrecord.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


@cli.command()
def session() -> None:
    """Open an interactive ledger; transactions are discarded on exit."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    console = LedgerConsole(
        Ledger(placeholder=settings.placeholder_description),
        symbol=settings.currency_symbol,
    )
    typer.echo("Type 'help' for commands.")
    while True:
        line = typer.prompt("ledger", default="", show_default=False)
        try:
            output = console.execute(line)
        except SessionClosed:
            typer.echo(console.execute("balance"))
            break
        if output:
            typer.echo(output)


if __name__ == "__main__":
    cli()
