"""Date reference commands."""

import click
from landledger.cli.error_handling import handle_domain_error
from landledger.domain.dates import DateService
from landledger.domain.errors import DomainError


@click.group()
def date_group():
    """Manage calendar-year references."""
    pass


@date_group.command("add")
@click.argument("year", type=int)
@click.pass_context
def add_date(ctx, year: int):
    """Add the date reference of a year."""
    db = ctx.obj["db"]
    service = DateService(db)

    try:
        date = service.create_date(year)
        click.echo(f"Created date for year {date.year} (ID: {date.id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@date_group.command("list")
@click.pass_context
def list_dates(ctx):
    """List date references by year."""
    db = ctx.obj["db"]
    service = DateService(db)

    dates = service.list_dates()
    if not dates:
        click.echo("No dates found.")
        return

    for date in dates:
        click.echo(str(date))


def register_commands(cli):
    """Register date commands with main CLI."""
    cli.add_command(date_group, name="date")
