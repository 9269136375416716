from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from srp_reports.config import Settings
from srp_reports.reporters import NotificationSender, OrderReporter, PaymentReporter

_COMPONENTS = {
    reporter.name: reporter for reporter in (OrderReporter, PaymentReporter, NotificationSender)
}


def print_info(settings: Settings, sequence: List[str], console: Optional[Console] = None) -> None:
    """
    Render the effective settings and the report sequence as rich tables.
    """
    console = console or Console()

    settings_table = Table(title="SRP Reports Settings", box=box.ROUNDED)
    settings_table.add_column("Setting", style="cyan", no_wrap=True)
    settings_table.add_column("Value", style="magenta")
    for key, value in settings.model_dump().items():
        settings_table.add_row(key, str(value))

    sequence_table = Table(
        title="Report Sequence",
        box=box.ROUNDED,
        caption="Invoked in this order on every run",
    )
    sequence_table.add_column("#", justify="right", style="blue")
    sequence_table.add_column("Component", style="cyan", no_wrap=True)
    sequence_table.add_column("Fields", style="green")
    for position, name in enumerate(sequence, start=1):
        sequence_table.add_row(str(position), name, ", ".join(_COMPONENTS[name].fields))

    console.print(settings_table)
    console.print(sequence_table)


__all__ = ["print_info"]
