"""
Pytest configuration for SRP Reports.

Provides fixtures for:
- Settings isolation (environment and the cached settings instance)
- Root logging restored after tests that configure it
- The literal order and payment records
- The exact console output of a default run
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from srp_reports.config import get_settings
from srp_reports.domain.models import OrderRecord, PaymentRecord

_SETTINGS_ENV = ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "STRICT_RECORDS")

EXPECTED_OUTPUT = (
    "-----Order processed----- \n"
    "Details:\n"
    "orderId: 123\n"
    "product: Laptop\n"
    "------------------------- \n"
    "----Payment processed----\n"
    "Details:\n"
    "amount: 1000\n"
    "method: Credit Card\n"
    "------------------------- \n"
    "Order notification sent. \n"
    "Product: Laptop\n"
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Strip settings env vars and reset the settings cache around each test.
    """
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Undo root handler and level changes made by `configure_logging`.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def order() -> OrderRecord:
    return OrderRecord(order_id=123, product="Laptop")


@pytest.fixture
def payment() -> PaymentRecord:
    return PaymentRecord(amount=1000, method="Credit Card")


@pytest.fixture
def expected_output() -> str:
    return EXPECTED_OUTPUT
