"""CLI commands for the SolarPackage aggregate."""

from __future__ import annotations

import click

from solarcat.application.create_package import CreatePackageHandler
from solarcat.application.delete_package import DeletePackageHandler
from solarcat.application.dto import LineItemSpec, PackageDTO, PackageSpec
from solarcat.application.list_packages import ListPackagesHandler
from solarcat.application.recommend_package import RecommendPackageHandler
from solarcat.application.show_package import ShowPackageHandler
from solarcat.application.update_package import UpdatePackageHandler
from solarcat.domain.exceptions import DomainException
from solarcat.infrastructure.bootstrap import catalog_unit_of_work
from solarcat.infrastructure.config import settings


def _parse_products(raw: str | None) -> list[LineItemSpec] | None:
    """Parse 'p1:10,p2:1' into LineItemSpec list; '' means an empty list."""
    if raw is None:
        return None
    specs: list[LineItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid product format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(LineItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _package_options(func):
    """Options shared by create and update (every field is replaced)."""
    options = [
        click.option("--name", required=True, help="Package name."),
        click.option("--min-bill", required=True, help="Lowest monthly bill served."),
        click.option("--max-bill", required=True, help="Highest monthly bill served."),
        click.option("--total-price", required=True, help="Bundle price."),
        click.option("--installation-cost", default=None, help="Installation cost (default 0)."),
        click.option("--description", default=None),
        click.option("--system-power", default=None, help="Capacity label, e.g. '5 kW'."),
        click.option("--image-url", default=None),
        click.option("--savings", default=None),
        click.option("--payback-period", default=None),
        click.option(
            "--status",
            type=click.Choice(["active", "inactive"]),
            default=None,
            help="Defaults to active.",
        ),
        click.option("--products", default=None, help="Line items as 'ProductId:Qty,ProductId:Qty'."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _spec_from_options(options: dict) -> PackageSpec:
    return PackageSpec(
        name=options["name"],
        min_bill=options["min_bill"],
        max_bill=options["max_bill"],
        total_price=options["total_price"],
        installation_cost=options["installation_cost"],
        description=options["description"],
        system_power=options["system_power"],
        image_url=options["image_url"],
        savings=options["savings"],
        payback_period=options["payback_period"],
        status=options["status"],
        products=_parse_products(options["products"]),
    )


def _display_package(dto: PackageDTO) -> None:
    """Shared formatting for displaying a package with its line items."""
    click.echo(f"Package {dto.id}  (status={dto.status})")
    click.echo(f"Name:     {dto.name}")
    click.echo(f"Band:     {dto.min_bill} - {dto.max_bill} {dto.currency}")
    if dto.system_power:
        click.echo(f"Power:    {dto.system_power}")
    click.echo(f"Price:    {dto.total_price} {dto.currency} (+{dto.installation_cost} installation)")
    click.echo(f"Created:  {dto.created_date}")
    click.echo()

    if not dto.products:
        click.echo("  No products.")
        return

    click.echo(f"  {'Product':<30} {'Qty':>5} {'Unit price':>12} {'Total':>12}")
    click.echo(f"  {'-'*62}")
    for line in dto.products:
        click.echo(
            f"  {line.product_name:<30} {line.quantity:>5} "
            f"{line.unit_price:>12} {line.line_total:>12}"
        )


@click.command("list")
@click.option("--status", type=click.Choice(["active", "inactive"]), default=None)
def package_list(status: str | None) -> None:
    """List packages ordered by minimum bill."""
    try:
        packages = ListPackagesHandler(catalog_unit_of_work()).handle(status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not packages:
        click.echo("No packages found.")
        return

    click.echo(f"{'ID':<18} {'Name':<30} {'Band':>20} {'Price':>12} {'Status':>9}")
    click.echo("-" * 93)
    for p in packages:
        band = f"{p.min_bill}-{p.max_bill}"
        click.echo(f"{p.id:<18} {p.name:<30} {band:>20} {p.total_price:>12} {p.status:>9}")


@click.command("show")
@click.option("--id", "package_id", required=True, help="Package ID to display.")
def package_show(package_id: str) -> None:
    """Show a package with its products."""
    try:
        dto = ShowPackageHandler(catalog_unit_of_work()).handle(package_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_package(dto)


@click.command("create")
@_package_options
def package_create(**options) -> None:
    """Create a new solar package."""
    spec = _spec_from_options(options)
    try:
        handler = CreatePackageHandler(catalog_unit_of_work(), currency=settings.currency)
        package_id = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Package {package_id} created.")


@click.command("update")
@click.option("--id", "package_id", required=True, help="Package ID to update.")
@_package_options
def package_update(package_id: str, **options) -> None:
    """Replace every field of a package (and its products if --products is given)."""
    spec = _spec_from_options(options)
    try:
        handler = UpdatePackageHandler(catalog_unit_of_work(), currency=settings.currency)
        handler.handle(package_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Package {package_id} updated.")


@click.command("delete")
@click.option("--id", "package_id", required=True, help="Package ID to delete.")
def package_delete(package_id: str) -> None:
    """Delete a package and its line items."""
    try:
        DeletePackageHandler(catalog_unit_of_work()).handle(package_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Package {package_id} deleted.")


@click.command("recommend")
@click.option("--bill", required=True, help="Monthly electricity bill.")
def package_recommend(bill: str) -> None:
    """Recommend the best package for a monthly bill."""
    try:
        handler = RecommendPackageHandler(catalog_unit_of_work(), currency=settings.currency)
        result = handler.handle(bill)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.matched:
        click.echo(f"No suitable package found for a bill of {result.bill_amount}.")
        return

    _display_package(result.package)
