"""CLI command for shipping quotes."""

from __future__ import annotations

import click

from parcelfit.application.dto import ProductSpec, QuoteDTO
from parcelfit.application.quote_shipping import QuoteShippingHandler
from parcelfit.domain.exceptions import DomainException
from parcelfit.domain.model.value_objects import GRAMS_PER_KG
from parcelfit.infrastructure.bootstrap import box_catalog_repository


def _display_quote(dto: QuoteDTO) -> None:
    if dto.custom_shipping_required:
        click.echo(f"Custom shipping required ({dto.service}).")
        click.echo(dto.message)
        return

    recommended = dto.recommended
    click.echo(f"Recommended: {recommended.box_name}  ({dto.service}, total {recommended.total})")
    if dto.packaging:
        click.echo(f"Packaging {dto.packaging} charged on box options; satchels are prepaid.")
    click.echo()
    click.echo(
        f"  {'Box':<22} {'Dimensions':<24} {'Postage':>9} {'Carton':>7} "
        f"{'GST':>7} {'Total':>9}"
    )
    click.echo(f"  {'-'*83}")
    for option in dto.options:
        click.echo(
            f"  {option.box_name:<22} {option.dimensions:<24} {option.postage:>9} "
            f"{option.box_price:>7} {option.gst:>7} {option.total:>9}"
        )


@click.command("quote")
@click.option("--length", required=True, type=float, help="Length in cm.")
@click.option("--width", required=True, type=float, help="Width in cm.")
@click.option("--height", required=True, type=float, help="Height in cm.")
@click.option("--weight", required=True, type=float, help="Weight in kg (grams with --grams).")
@click.option("--grams", is_flag=True, default=False, help="Read --weight as grams.")
@click.option("--express", is_flag=True, default=False, help="Quote Express Post.")
@click.option("--rotate", is_flag=True, default=False, help="Allow the item to be turned to fit.")
@click.option("--packaging", default=None, help="Packaging code to add to box options (see 'box packaging').")
@click.pass_context
def quote(
    ctx: click.Context,
    length: float,
    width: float,
    height: float,
    weight: float,
    grams: bool,
    express: bool,
    rotate: bool,
    packaging: str | None,
) -> None:
    """Quote shipping for a single product."""
    if grams:
        weight = weight / GRAMS_PER_KG

    try:
        handler = QuoteShippingHandler(box_catalog_repository(ctx.obj["catalog_path"]))
        dto = handler.handle(
            ProductSpec(length=length, width=width, height=height, weight=weight),
            express_post=express,
            allow_rotation=rotate,
            packaging_code=packaging,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_quote(dto)
