"""
Reporters package for SRP Reports.

Re-exports the reporter interfaces and the three concrete components so
downstream code can import from `srp_reports.reporters` directly.
"""

from srp_reports.reporters.abstract import (
    AbstractRecordReporter,
    MissingFieldError,
    RecordReporter,
)
from srp_reports.reporters.notification import NotificationSender
from srp_reports.reporters.order import OrderReporter
from srp_reports.reporters.payment import PaymentReporter

__all__ = [
    # Abstracts
    "AbstractRecordReporter",
    "MissingFieldError",
    "RecordReporter",
    # Concrete reporters
    "NotificationSender",
    "OrderReporter",
    "PaymentReporter",
]
