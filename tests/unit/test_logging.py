from __future__ import annotations

import json
import logging

from srp_reports.utils.logging import _json_formatter, configure_logging, get_logger

EXPECTED_FIELD = "order_id"


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.component = "order"
    record.field = EXPECTED_FIELD

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["component"] == "order"
    assert payload["field"] == EXPECTED_FIELD
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"component": "payment"}

    payload = json.loads(_json_formatter(record))

    assert payload["component"] == "payment"


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG

    configure_logging(level="WARNING", json_logs=True)
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_without_force_keeps_existing_setup() -> None:
    configure_logging(level="ERROR")
    configure_logging(level="DEBUG", force=False)
    assert logging.getLogger().level == logging.ERROR
    configure_logging(level="WARNING")


def test_module_loggers_survive_configuration() -> None:
    log = get_logger("srp_reports.driver")
    configure_logging(level="WARNING")
    assert not log.disabled
