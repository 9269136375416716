"""
Driver for the three reporting components.

Usage (example from CLI):
    from srp_reports.driver import run_reports

    run_reports()

Builds one order and one payment from literal values and hands them to the
order reporter, the payment reporter and the notification sender, always in
that order. Nothing is kept between calls.
"""

from __future__ import annotations

from typing import Any, List, Optional, TextIO

from srp_reports.domain.models import OrderRecord, PaymentRecord
from srp_reports.reporters.notification import NotificationSender
from srp_reports.reporters.order import OrderReporter
from srp_reports.reporters.payment import PaymentReporter
from srp_reports.utils.logging import get_logger

log = get_logger(__name__)


def sample_order() -> OrderRecord:
    """The literal order printed by every run."""
    return OrderRecord(order_id=123, product="Laptop")


def sample_payment() -> PaymentRecord:
    """The literal payment printed by every run."""
    return PaymentRecord(amount=1000, method="Credit Card")


def report_sequence() -> List[str]:
    """Component names in the order the driver invokes them."""
    return [OrderReporter.name, PaymentReporter.name, NotificationSender.name]


def run_reports(
    order: Optional[Any] = None,
    payment: Optional[Any] = None,
    stream: Optional[TextIO] = None,
    strict: Optional[bool] = None,
) -> None:
    """
    Print the order report, the payment report and the order notification.

    Parameters
    ----------
    order : record | None
        Order to report and notify about. Defaults to `sample_order()`.
    payment : record | None
        Payment to report. Defaults to `sample_payment()`.
    stream : TextIO | None
        Destination for the report text. Defaults to standard output.
    strict : bool | None
        Missing-field policy for all three components. Defaults to settings.
    """
    order = sample_order() if order is None else order
    payment = sample_payment() if payment is None else payment

    log.debug("[DRIVER START]", extra={"sequence": report_sequence()})
    OrderReporter(strict=strict).report(order, stream)
    PaymentReporter(strict=strict).report(payment, stream)
    NotificationSender(strict=strict).notify(order, stream)
    log.debug("[DRIVER COMPLETE]")


__all__ = [
    "report_sequence",
    "run_reports",
    "sample_order",
    "sample_payment",
]
