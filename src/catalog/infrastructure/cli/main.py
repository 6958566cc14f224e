import logging
from pathlib import Path

import click

from catalog.infrastructure.bootstrap import DEFAULT_DATA_DIR, NOTIFIER_KINDS
from catalog.infrastructure.cli.product_commands import product_upsert


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    envvar="CATALOG_DATA_DIR",
    help="Directory holding the product store and event outbox.",
)
@click.option(
    "--notifier",
    type=click.Choice(NOTIFIER_KINDS),
    default="log",
    show_default=True,
    envvar="CATALOG_NOTIFIER",
    help="Where product update events are sent.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, notifier: str, verbose: bool) -> None:
    """Catalog — product upserts with change notifications"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"data_dir": data_dir, "notifier": notifier}


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_upsert)
