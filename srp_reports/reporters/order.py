from __future__ import annotations

from typing import Any, Optional, TextIO

from srp_reports.reporters.abstract import SEPARATOR, AbstractRecordReporter, join_lines


class OrderReporter(AbstractRecordReporter):
    """Prints the processed-order banner for one order record."""

    name = "order"
    fields = ("order_id", "product")

    def render(self, order: Any) -> str:
        return join_lines(
            "-----Order processed----- ",
            "Details:",
            f"orderId: {self.field(order, 'order_id')}",
            f"product: {self.field(order, 'product')}",
            SEPARATOR,
        )

    def report(self, order: Any, stream: Optional[TextIO] = None) -> None:
        self.write(order, stream)
