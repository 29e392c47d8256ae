"""CLI commands for the purchase ledger."""

from __future__ import annotations

from datetime import datetime

import click

from backoffice.application.context import CREATE_PURCHASES, CallerContext
from backoffice.application.create_purchase import CreatePurchaseHandler
from backoffice.application.dto import PurchaseDetailDTO, PurchaseLineSpec
from backoffice.application.list_purchases import ListPurchasesHandler
from backoffice.application.show_purchase import ShowPurchaseHandler
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import product_repository, purchase_repository

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _parse_lines(raw: str) -> list[PurchaseLineSpec]:
    """Parse '1:3,2:1:gift wrap' into PurchaseLineSpec list."""
    specs: list[PurchaseLineSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if ":" not in entry:
            raise click.BadParameter(
                f"Invalid line format '{entry}'. Expected 'ProductId:Quantity[:Description]'."
            )
        product_id, qty_str, *rest = entry.split(":", 2)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(
            PurchaseLineSpec(
                product_id=product_id.strip(),
                quantity=qty,
                description=rest[0] if rest else None,
            )
        )
    return specs


def _display_purchase(dto: PurchaseDetailDTO) -> None:
    """Shared formatting for displaying a purchase."""
    click.echo(f"Purchase #{dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Date:     {dto.date.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        name = line.product_name or f"#{line.product_id}"
        click.echo(
            f"  {name:<20} {line.quantity:>5} {line.unit_price:>10.2f} {line.line_total:>10.2f}"
        )
        if line.description:
            click.echo(f"    {line.description}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Purchase Total':<27} {dto.total:>16.2f} {dto.currency}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--lines", required=True, help="Lines as 'ProductId:Qty[:Note],...'.")
@click.option(
    "--date",
    "when",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Purchase date (UTC). Defaults to now.",
)
@click.option("--user", default="cli", show_default=True, help="Operator recording the purchase.")
def purchase_create(customer: str, lines: str, when: datetime | None, user: str) -> None:
    """Record a new purchase at current catalog prices."""
    specs = _parse_lines(lines)

    handler = CreatePurchaseHandler(
        purchase_repo=purchase_repository(),
        product_repo=product_repository(),
    )
    context = CallerContext.with_permissions(user, CREATE_PURCHASES)

    try:
        dto = handler.handle(context, customer_name=customer, lines=specs, date=when)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Recorded.")
    _display_purchase(dto)


@click.command("show")
@click.option("--id", "purchase_id", required=True, type=int, help="Purchase ID to display.")
def purchase_show(purchase_id: int) -> None:
    """Show a recorded purchase."""
    handler = ShowPurchaseHandler(
        purchase_repo=purchase_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(purchase_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_purchase(dto)


@click.command("list")
def purchase_list() -> None:
    """List recorded purchases, newest first."""
    handler = ListPurchasesHandler(purchase_repo=purchase_repository())

    try:
        rows = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No purchases found.")
        return

    click.echo(f"{'ID':<6} {'Date':<17} {'Customer':<20} {'Total':>12}")
    click.echo("-" * 58)
    for row in rows:
        click.echo(
            f"{row.id:<6} {row.date.strftime('%Y-%m-%d %H:%M'):<17} "
            f"{row.customer_name:<20} {row.total:>12.2f}"
        )
