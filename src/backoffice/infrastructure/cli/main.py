import click

from backoffice.infrastructure.bootstrap import settings
from backoffice.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_list,
    product_update,
)
from backoffice.infrastructure.cli.purchase_commands import (
    purchase_create,
    purchase_list,
    purchase_show,
)
from backoffice.infrastructure.cli.report_commands import report_daily, report_monthly
from backoffice.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override BACKOFFICE_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """Back office purchase ledger"""
    try:
        config = settings()
    except RuntimeError as exc:
        raise click.ClickException(str(exc))
    configure_logging(log_level or config.log_level)


@cli.group()
def purchase() -> None:
    """Record and inspect purchases."""


@cli.group()
def report() -> None:
    """Purchase totals over time."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
purchase.add_command(purchase_create)
purchase.add_command(purchase_list)
purchase.add_command(purchase_show)
report.add_command(report_monthly)
report.add_command(report_daily)
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_list)
product.add_command(product_update)
