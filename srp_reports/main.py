from __future__ import annotations

import sys

import typer

from srp_reports.config import get_settings
from srp_reports.console import print_info
from srp_reports.driver import report_sequence, run_reports
from srp_reports.reporters.abstract import MissingFieldError
from srp_reports.utils.logging import configure_logging

app = typer.Typer(help="SRP Reports CLI.")


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    """
    Print the order, payment and notification reports (same as `run`).
    """
    if ctx.invoked_subcommand is None:
        run()


@app.command()
def run() -> None:
    """
    Print the order report, the payment report and the order notification.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        run_reports(strict=settings.strict_records)
    except MissingFieldError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values and the report sequence.
    """
    print_info(get_settings(), report_sequence())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
