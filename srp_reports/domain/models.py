"""
Domain models for SRP Reports.

Two independent records: an order and a payment. Neither references the
other even though both are reported in the same run.
"""
from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field


class OrderRecord(BaseModel):
    """
    A single order as printed by the order reporter and the notification sender.
    """

    order_id: int = Field(..., description="Order identifier, printed as `orderId`.")
    product: str = Field(..., description="Product name.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


class PaymentRecord(BaseModel):
    """
    A single payment as printed by the payment reporter.
    """

    # int first so whole amounts print as `1000`, not `1000.0`
    amount: Union[int, float] = Field(..., description="Amount paid.")
    method: str = Field(..., description="Payment method label.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


__all__ = ["OrderRecord", "PaymentRecord"]
