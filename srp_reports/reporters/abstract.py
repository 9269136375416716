"""
Reporter interfaces and field access for SRP Reports.

Each reporter owns exactly one record shape and one block of console text.
Concrete reporters subclass AbstractRecordReporter, declare the fields they
read, and implement `render`; writing to a stream is shared here as `write`.

Records are read duck-typed: a pydantic model, any object with matching
attributes, or a plain mapping. A missing field renders as empty text unless
the reporter is strict, in which case MissingFieldError is raised.
"""

from __future__ import annotations

import abc
import sys
from collections.abc import Mapping
from typing import Any, Optional, Protocol, TextIO, Tuple, runtime_checkable

from srp_reports.config import get_settings
from srp_reports.utils.logging import get_logger

log = get_logger(__name__)

SEPARATOR = "------------------------- "

_MISSING = object()


class MissingFieldError(ValueError):
    """Raised by a strict reporter when a record lacks a field it prints."""

    def __init__(self, component: str, field: str) -> None:
        super().__init__(f"{component}: record has no field '{field}'")
        self.component = component
        self.field = field


def _read_field(record: Any, name: str) -> Any:
    """
    Look up `name` on a record, returning the `_MISSING` sentinel when absent.
    """
    if isinstance(record, Mapping):
        return record.get(name, _MISSING)
    return getattr(record, name, _MISSING)


def _format_value(value: Any) -> str:
    """Render a field value the way it is interpolated into report lines."""
    if value is None or value is _MISSING:
        return ""
    return str(value)


@runtime_checkable
class RecordReporter(Protocol):
    """
    Common interface of the reporting components.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    fields : tuple[str, ...]
        Record fields the component prints, in output order.
    """

    name: str
    fields: Tuple[str, ...]

    def render(self, record: Any) -> str:
        """Return the exact text the component writes for `record`."""
        ...

    def write(self, record: Any, stream: Optional[TextIO] = None) -> None:
        """Write the rendered text of `record` to `stream` (default: stdout)."""
        ...


class AbstractRecordReporter(abc.ABC):
    """
    Base class for class-based reporters.

    Subclasses set `name` and `fields`, implement `render`, and expose `write`
    under the name of their operation (`report`, `notify`).
    """

    name: str
    fields: Tuple[str, ...]

    def __init__(self, strict: Optional[bool] = None) -> None:
        self.strict = get_settings().strict_records if strict is None else strict

    def field(self, record: Any, name: str) -> str:
        """Read and format one field, applying the missing-field policy."""
        value = _read_field(record, name)
        if value is _MISSING:
            if self.strict:
                raise MissingFieldError(self.name, name)
            log.warning(
                f"[{self.name.upper()}] record has no field '{name}', rendering empty",
                extra={"component": self.name, "field": name},
            )
        return _format_value(value)

    @abc.abstractmethod
    def render(self, record: Any) -> str:  # pragma: no cover - interface only
        """Format `record` into console text."""
        raise NotImplementedError

    def write(self, record: Any, stream: Optional[TextIO] = None) -> None:
        """Write `render(record)` unchanged; stdout is resolved at call time."""
        text = self.render(record)
        (stream or sys.stdout).write(text)
        log.debug(f"[{self.name.upper()}] written", extra={"component": self.name})


def join_lines(*lines: str) -> str:
    """Join report lines, terminating the last one."""
    return "\n".join(lines) + "\n"


__all__ = [
    "SEPARATOR",
    "MissingFieldError",
    "RecordReporter",
    "AbstractRecordReporter",
    "join_lines",
]
