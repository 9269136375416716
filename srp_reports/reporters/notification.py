"""
Order notification sender.

There is no delivery channel: the acknowledgement printed here is the whole
effect. Only the order's `product` is read, so `order_id` never changes the
output.
"""
from __future__ import annotations

from typing import Any, Optional, TextIO

from srp_reports.reporters.abstract import AbstractRecordReporter, join_lines


class NotificationSender(AbstractRecordReporter):
    name = "notification"
    fields = ("product",)

    def render(self, order: Any) -> str:
        return join_lines(
            "Order notification sent. ",
            f"Product: {self.field(order, 'product')}",
        )

    def notify(self, order: Any, stream: Optional[TextIO] = None) -> None:
        self.write(order, stream)
