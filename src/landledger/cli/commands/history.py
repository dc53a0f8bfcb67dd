"""Location history commands."""

import click
from landledger.cli.error_handling import handle_domain_error
from landledger.cli.taxonomy_resolution import resolve_entry_or_exit
from landledger.domain.entities import HistoryAxis, TaxonomyKind
from landledger.domain.errors import DomainError
from landledger.domain.history import HistoryService
from landledger.domain.taxonomy import TaxonomyService


def print_history(title: str, records: list) -> None:
    """Print one axis of a location's history."""
    click.echo(f"\n{title}:")
    if not records:
        click.echo("  (no timesteps recorded)")
        return
    for record in records:
        click.echo(f"  {record}")


@click.group()
def history_group():
    """Record and show land-use and land-cover histories."""
    pass


@history_group.command("record-use")
@click.argument("location_id", type=int)
@click.argument("year", type=int)
@click.argument("category", metavar="CATEGORY")
@click.option("--timestep", type=int, help="Timestep number (defaults to the next one)")
@click.option(
    "--confirmed/--provisional",
    default=None,
    help="Mark the classification as confirmed or provisional (default: not asserted)",
)
@click.pass_context
def record_use(ctx, location_id: int, year: int, category: str, timestep: int | None, confirmed: bool | None):
    """Record the land-use category of a location for a year.

    CATEGORY can be a land-use category name or ID.

    Examples:
        landledger history record-use 12 2000 "Forest Land" --confirmed
        landledger history record-use 12 1990 1 --timestep 1
    """
    db = ctx.obj["db"]
    service = HistoryService(db)
    category_id = resolve_entry_or_exit(ctx, TaxonomyService(db), TaxonomyKind.LAND_USE_CATEGORY, category)

    try:
        record = service.record_land_use(
            location_id=location_id,
            year=year,
            land_use_category_id=category_id,
            confirmed=confirmed,
            item_number=timestep,
        )
        click.echo(f"Recorded land use for location {location_id}: {record}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@history_group.command("record-cover")
@click.argument("location_id", type=int)
@click.argument("year", type=int)
@click.argument("cover_type", metavar="COVER_TYPE")
@click.option("--timestep", type=int, help="Timestep number (defaults to the next one)")
@click.pass_context
def record_cover(ctx, location_id: int, year: int, cover_type: str, timestep: int | None):
    """Record the land-cover type of a location for a year.

    COVER_TYPE can be a cover type name or ID.
    """
    db = ctx.obj["db"]
    service = HistoryService(db)
    cover_type_id = resolve_entry_or_exit(ctx, TaxonomyService(db), TaxonomyKind.COVER_TYPE, cover_type)

    try:
        record = service.record_cover_type(
            location_id=location_id,
            year=year,
            cover_type_id=cover_type_id,
            item_number=timestep,
        )
        click.echo(f"Recorded land cover for location {location_id}: {record}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@history_group.command("correct-use")
@click.argument("location_id", type=int)
@click.argument("timestep", type=int)
@click.option("--category", help="New land-use category name or ID")
@click.option("--confirmed/--provisional", default=None, help="New confirmation state")
@click.option("--clear-confirmed", is_flag=True, help="Reset confirmation to not asserted")
@click.pass_context
def correct_use(
    ctx,
    location_id: int,
    timestep: int,
    category: str | None,
    confirmed: bool | None,
    clear_confirmed: bool,
):
    """Correct the land-use classification of an existing timestep."""
    db = ctx.obj["db"]
    service = HistoryService(db)

    if clear_confirmed and confirmed is not None:
        click.echo("Error: --clear-confirmed cannot be combined with --confirmed/--provisional", err=True)
        ctx.exit(1)

    category_id = None
    if category is not None:
        category_id = resolve_entry_or_exit(ctx, TaxonomyService(db), TaxonomyKind.LAND_USE_CATEGORY, category)

    try:
        record = service.correct_land_use(
            location_id=location_id,
            item_number=timestep,
            land_use_category_id=category_id,
            confirmed=confirmed,
            update_confirmed=clear_confirmed,
        )
        click.echo(f"Corrected land use for location {location_id}: {record}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@history_group.command("correct-cover")
@click.argument("location_id", type=int)
@click.argument("timestep", type=int)
@click.argument("cover_type", metavar="COVER_TYPE")
@click.pass_context
def correct_cover(ctx, location_id: int, timestep: int, cover_type: str):
    """Correct the cover type of an existing timestep."""
    db = ctx.obj["db"]
    service = HistoryService(db)
    cover_type_id = resolve_entry_or_exit(ctx, TaxonomyService(db), TaxonomyKind.COVER_TYPE, cover_type)

    try:
        record = service.correct_cover_type(location_id, timestep, cover_type_id)
        click.echo(f"Corrected land cover for location {location_id}: {record}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@history_group.command("show")
@click.argument("location_id", type=int)
@click.option(
    "--axis",
    type=click.Choice([axis.value for axis in HistoryAxis] + ["both"]),
    default="both",
    show_default=True,
    help="Which history to show",
)
@click.pass_context
def show_history(ctx, location_id: int, axis: str):
    """Show the history of a location in chronological order."""
    db = ctx.obj["db"]
    service = HistoryService(db)

    if axis in (HistoryAxis.LAND_USE.value, "both"):
        print_history(f"Land use history of location {location_id}", service.get_land_use_history(location_id))
    if axis in (HistoryAxis.LAND_COVER.value, "both"):
        print_history(f"Land cover history of location {location_id}", service.get_cover_type_history(location_id))


@history_group.command("locations")
@click.option(
    "--axis",
    type=click.Choice([axis.value for axis in HistoryAxis]),
    default=HistoryAxis.LAND_USE.value,
    show_default=True,
)
@click.pass_context
def list_locations(ctx, axis: str):
    """List locations that have history on an axis."""
    db = ctx.obj["db"]
    service = HistoryService(db)

    locations = service.list_locations(HistoryAxis(axis))
    if not locations:
        click.echo("No locations found.")
        return
    for location_id in locations:
        click.echo(f"Location {location_id}")


def register_commands(cli):
    """Register history commands with main CLI."""
    cli.add_command(history_group, name="history")
