import click

from solarcat.infrastructure.bootstrap import configure_logging
from solarcat.infrastructure.cli.package_commands import (
    package_create,
    package_delete,
    package_list,
    package_recommend,
    package_show,
    package_update,
)
from solarcat.infrastructure.cli.product_commands import product_add, product_list
from solarcat.infrastructure.config import settings


@click.group()
@click.option("--log-level", default=None, help="Override SOLARCAT_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """SolarCat — solar package catalog"""
    configure_logging(log_level)


@cli.group()
def package() -> None:
    """Manage solar packages."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command()
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", default=None, type=int, help="Bind port.")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from solarcat.infrastructure.api.app import create_app

    uvicorn.run(create_app(), host=host or settings.host, port=port or settings.port)


# Register subcommands
package.add_command(package_create)
package.add_command(package_delete)
package.add_command(package_list)
package.add_command(package_recommend)
package.add_command(package_show)
package.add_command(package_update)
product.add_command(product_add)
product.add_command(product_list)
