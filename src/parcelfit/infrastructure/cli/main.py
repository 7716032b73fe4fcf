import logging
from pathlib import Path

import click

from parcelfit.infrastructure.cli.box_commands import box_list, box_packaging, box_price
from parcelfit.infrastructure.cli.quote_commands import quote


@click.group()
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON box catalog (defaults to the built-in Australia Post table).",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, catalog: Path | None, verbose: bool) -> None:
    """parcelfit — parcel selection and postage estimates"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["catalog_path"] = catalog


@cli.group()
def box() -> None:
    """Inspect and price catalog boxes."""


# Register subcommands
box.add_command(box_list)
box.add_command(box_price)
box.add_command(box_packaging)
cli.add_command(quote)
