"""CLI commands for the box catalog."""

from __future__ import annotations

import click

from parcelfit.application.estimate_price import EstimatePriceHandler
from parcelfit.application.list_boxes import ListBoxesHandler
from parcelfit.application.list_packaging import ListPackagingHandler
from parcelfit.domain.exceptions import DomainException
from parcelfit.infrastructure.bootstrap import box_catalog_repository


@click.command("list")
@click.pass_context
def box_list(ctx: click.Context) -> None:
    """List all boxes in the catalog."""
    try:
        handler = ListBoxesHandler(box_catalog_repository(ctx.obj["catalog_path"]))
        boxes = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not boxes:
        click.echo("No boxes found.")
        return

    click.echo(
        f"{'ID':<22} {'Name':<22} {'Dimensions':<24} {'Max kg':>7} {'Parcel':>8} {'Express':>8}"
    )
    click.echo("-" * 96)
    for b in boxes:
        parcel = b.parcel_post_price or "by kg"
        express = b.express_post_price or "by kg"
        click.echo(
            f"{b.id:<22} {b.name:<22} {b.dimensions:<24} {b.max_weight:>7g} {parcel:>8} {express:>8}"
        )


@click.command("price")
@click.option("--id", "box_id", required=True, help="Box ID (see 'box list').")
@click.option("--weight", required=True, type=float, help="Weight in kg.")
@click.option("--express", is_flag=True, default=False, help="Price Express Post.")
@click.pass_context
def box_price(ctx: click.Context, box_id: str, weight: float, express: bool) -> None:
    """Price a single box for a given weight."""
    try:
        handler = EstimatePriceHandler(box_catalog_repository(ctx.obj["catalog_path"]))
        dto = handler.handle(box_id, weight, express_post=express)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.box_name} ({dto.service}, {dto.weight:g}kg): ${dto.price:.2f}")


@click.command("packaging")
def box_packaging() -> None:
    """List the packaging cartons charged on box quotes."""
    cartons = ListPackagingHandler().handle()

    click.echo(f"{'Code':<6} {'Name':<12} {'Dimensions':<26} {'Price':>7}")
    click.echo("-" * 54)
    for p in cartons:
        click.echo(f"{p.code:<6} {p.name:<12} {p.dimensions:<26} {p.price:>7}")
