import pytest
from pydantic import ValidationError

from srp_reports import config
from srp_reports.domain.models import OrderRecord, PaymentRecord


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.strict_records is False


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("STRICT_RECORDS", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    config.get_settings.cache_clear()

    settings = config.get_settings()
    assert settings.strict_records is True
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_payment_amount_keeps_integer_type():
    payment = PaymentRecord(amount=1000, method="Credit Card")
    assert payment.amount == 1000
    assert isinstance(payment.amount, int)


def test_payment_amount_accepts_float():
    payment = PaymentRecord(amount=12.5, method="Cash")
    assert payment.amount == 12.5


def test_records_are_frozen(order):
    with pytest.raises(ValidationError):
        order.product = "Phone"


def test_order_record_rejects_non_integer_id():
    with pytest.raises(ValidationError):
        OrderRecord(order_id="abc", product="Laptop")


def test_payment_record_requires_method():
    with pytest.raises(ValidationError):
        PaymentRecord(amount=10)
