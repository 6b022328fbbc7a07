"""Mini README: Interactive interfaces (web/console) for BillingRecord.

Exports the FastAPI application factory that serves the JSON API and
dashboard, and the console used by the ``session`` CLI command.
"""

from .console import LedgerConsole, SessionClosed
from .web_app import create_application

__all__ = ["LedgerConsole", "SessionClosed", "create_application"]
