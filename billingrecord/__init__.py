"""Mini README: Core package initializer for BillingRecord.

BillingRecord is a personal income and expense ledger. The ``ledger``
package holds the domain model; ``interface`` wraps it in a web service and
a console session. This file only re-exports the logging helper so it stays
free of heavy runtime dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
