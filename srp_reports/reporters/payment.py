from __future__ import annotations

from typing import Any, Optional, TextIO

from srp_reports.reporters.abstract import SEPARATOR, AbstractRecordReporter, join_lines


class PaymentReporter(AbstractRecordReporter):
    """Prints the processed-payment banner for one payment record."""

    name = "payment"
    fields = ("amount", "method")

    def render(self, payment: Any) -> str:
        return join_lines(
            "----Payment processed----",
            "Details:",
            f"amount: {self.field(payment, 'amount')}",
            f"method: {self.field(payment, 'method')}",
            SEPARATOR,
        )

    def report(self, payment: Any, stream: Optional[TextIO] = None) -> None:
        self.write(payment, stream)
