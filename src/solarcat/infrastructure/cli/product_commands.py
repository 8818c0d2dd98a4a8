"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from solarcat.application.add_product import AddProductHandler
from solarcat.application.list_products import ListProductsHandler
from solarcat.domain.exceptions import DomainException
from solarcat.infrastructure.bootstrap import catalog_unit_of_work
from solarcat.infrastructure.config import settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit.")
@click.option("--category", required=True, help="Category id or slug.")
@click.option("--price", default="0", help="Unit price (e.g. 4500.00).")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@click.option("--image-url", default=None)
def product_add(
    name: str,
    sku: str,
    category: str,
    price: str,
    stock: int,
    image_url: str | None,
) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(catalog_unit_of_work(), currency=settings.currency)
        product = handler.handle(
            name=name,
            sku=sku,
            category=category,
            price=price,
            stock=stock,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price} {product.currency}")


@click.command("list")
@click.option("--status", default=None)
@click.option("--category", default=None)
def product_list(status: str | None, category: str | None) -> None:
    """List products in the catalog."""
    try:
        products = ListProductsHandler(catalog_unit_of_work()).handle(
            status=status, category=category
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<18} {'Name':<30} {'Price':>12} {'Stock':>10}")
    click.echo("-" * 73)
    for p in products:
        click.echo(f"{p.id:<18} {p.name:<30} {p.price:>12} {p.stock_status:>10}")
