"""CLI commands for ledger reports."""

from __future__ import annotations

from datetime import datetime

import click

from backoffice.application.purchase_reports import DailyTotalsHandler, MonthlyTotalsHandler
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import purchase_repository, settings


@click.command("monthly")
@click.option("--months", default=12, show_default=True, type=int, help="Months back (1-36).")
@click.option("--fill-gaps", is_flag=True, default=False, help="Include months without purchases.")
def report_monthly(months: int, fill_gaps: bool) -> None:
    """Purchase count and total per month."""
    config = settings()
    handler = MonthlyTotalsHandler(purchase_repository(config), currency=config.currency)

    try:
        rows = handler.handle(months, fill_gaps=fill_gaps)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No purchases in range.")
        return

    click.echo(f"{'Month':<8} {'Count':>6} {'Total':>12}")
    click.echo("-" * 28)
    for row in rows:
        click.echo(f"{row.year:04d}-{row.month:02d} {row.count:>6} {row.total:>12.2f}")


@click.command("daily")
@click.option("--from", "start", required=True, type=click.DateTime(formats=["%Y-%m-%d"]), help="First day.")
@click.option("--to", "end", required=True, type=click.DateTime(formats=["%Y-%m-%d"]), help="Last day (inclusive).")
def report_daily(start: datetime, end: datetime) -> None:
    """Purchase count and total per day, one row per day."""
    config = settings()
    handler = DailyTotalsHandler(purchase_repository(config), currency=config.currency)

    try:
        rows = handler.handle(start.date(), end.date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Date':<10} {'Count':>6} {'Total':>12}")
    click.echo("-" * 30)
    for row in rows:
        click.echo(f"{row.date.isoformat():<10} {row.count:>6} {row.total:>12.2f}")
