"""
Domain package for SRP Reports.

Exports the record models consumed by the reporters and the driver.
Keep this package focused on data definitions.
"""

from srp_reports.domain.models import OrderRecord, PaymentRecord

__all__ = [
    "OrderRecord",
    "PaymentRecord",
]
