"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from backoffice.application.add_product import AddProductHandler
from backoffice.application.update_product import (
    ActivateProductHandler,
    DeactivateProductHandler,
    UpdateProductHandler,
)
from backoffice.domain.exceptions import DomainException
from backoffice.infrastructure.bootstrap import product_repository, settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
def product_add(name: str, price: str) -> None:
    """Add a new product to the catalog."""
    config = settings()
    handler = AddProductHandler(product_repo=product_repository(config), currency=config.currency)

    try:
        product = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--all", "show_all", is_flag=True, default=False, help="Include inactive products.")
def product_list(show_all: bool) -> None:
    """List products in the catalog."""
    try:
        products = product_repository().list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not show_all:
        products = [p for p in products if p.is_active]

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Active':>7}")
    click.echo("-" * 46)
    for p in products:
        active = "yes" if p.is_active else "no"
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10} {active:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's price. Recorded purchases keep their prices."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} price updated to {product.price}")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_deactivate(product_id: str) -> None:
    """Retire a product from sale."""
    handler = DeactivateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' deactivated")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_activate(product_id: str) -> None:
    """Put a retired product back on sale."""
    handler = ActivateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' activated")
