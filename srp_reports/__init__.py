"""
SRP Reports - the Single Responsibility Principle in three small components.

An order reporter, a payment reporter and an order notification sender each
turn one record into a fixed block of console text. A driver builds two
literal records and runs the three in a fixed order:

- Order report (order id and product)
- Payment report (amount and method)
- Order notification (product only)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from srp_reports.config import Settings, get_settings
from srp_reports.domain.models import OrderRecord, PaymentRecord
from srp_reports.driver import report_sequence, run_reports, sample_order, sample_payment
from srp_reports.reporters import (
    AbstractRecordReporter,
    MissingFieldError,
    NotificationSender,
    OrderReporter,
    PaymentReporter,
    RecordReporter,
)
from srp_reports.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records
    "OrderRecord",
    "PaymentRecord",
    # Driver
    "report_sequence",
    "run_reports",
    "sample_order",
    "sample_payment",
    # Reporters
    "AbstractRecordReporter",
    "MissingFieldError",
    "NotificationSender",
    "OrderReporter",
    "PaymentReporter",
    "RecordReporter",
    # Logging
    "configure_logging",
    "get_logger",
]
