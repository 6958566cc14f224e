"""CLI commands for products."""

from __future__ import annotations

import asyncio

import click

from catalog.application.upsert_product import UpsertProductCommand, upsert_product
from catalog.infrastructure.bootstrap import make_upsert_product_deps


@click.command("upsert")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price-pence", required=True, type=int, help="Price in pence (e.g. 999).")
@click.option("--description", default="", help="Free-text description.")
@click.pass_obj
def product_upsert(
    obj: dict,
    product_id: str,
    name: str,
    price_pence: int,
    description: str,
) -> None:
    """Create a product, or replace the one with the same ID."""
    deps = make_upsert_product_deps(obj["data_dir"], obj["notifier"])
    command = UpsertProductCommand(
        id=product_id,
        name=name,
        price_pence=price_pence,
        description=description,
    )

    result = asyncio.run(upsert_product(deps, command))
    if not result.success:
        raise click.ClickException(result.error or "Upsert failed")

    p = result.data
    click.echo(f"Product #{p.id} '{p.name}' saved at {p.price_pence}p")
