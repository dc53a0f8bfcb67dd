"""Reporting variable / emission type association commands."""

import click
from landledger.cli.error_handling import handle_domain_error
from landledger.domain import errors
from landledger.domain.emission_types import EmissionTypeService


@click.group()
def emission_group():
    """Manage reporting variable / emission type associations."""
    pass


@emission_group.command("link")
@click.argument("reporting_variable_id", type=int)
@click.argument("emission_type_id", type=int)
@click.pass_context
def link(ctx, reporting_variable_id: int, emission_type_id: int):
    """Associate a reporting variable with an emission type."""
    db = ctx.obj["db"]
    service = EmissionTypeService(db)

    try:
        association = service.create_association(reporting_variable_id, emission_type_id)
        click.echo(f"Created association {association}")
    except errors.DomainError as e:
        handle_domain_error(ctx, e)


@emission_group.command("revise")
@click.argument("reporting_variable_id", type=int)
@click.argument("emission_type_id", type=int)
@click.option("--expected-version", type=int, required=True, help="Version the revision is based on")
@click.pass_context
def revise(ctx, reporting_variable_id: int, emission_type_id: int, expected_version: int):
    """Record a new revision of an association."""
    db = ctx.obj["db"]
    service = EmissionTypeService(db)

    try:
        association = service.revise_association(reporting_variable_id, emission_type_id, expected_version)
        click.echo(f"Revised association {association}")
    except errors.DomainError as e:
        handle_domain_error(ctx, e)


@emission_group.command("show")
@click.argument("reporting_variable_id", type=int)
@click.argument("emission_type_id", type=int)
@click.option("--revisions", is_flag=True, help="Show every revision, oldest first")
@click.pass_context
def show(ctx, reporting_variable_id: int, emission_type_id: int, revisions: bool):
    """Show the authoritative revision of an association."""
    db = ctx.obj["db"]
    service = EmissionTypeService(db)

    if revisions:
        rows = service.list_revisions(reporting_variable_id, emission_type_id)
    else:
        latest = service.get_association(reporting_variable_id, emission_type_id)
        rows = [] if latest is None else [latest]

    if not rows:
        handle_domain_error(
            ctx,
            errors.NotFoundError(errors.association_not_found(reporting_variable_id, emission_type_id)),
        )
    for row in rows:
        click.echo(str(row))


@emission_group.command("list")
@click.option("--reporting-variable", "reporting_variable_id", type=int, help="Filter by reporting variable ID")
@click.pass_context
def list_associations(ctx, reporting_variable_id: int | None):
    """List authoritative associations."""
    db = ctx.obj["db"]
    service = EmissionTypeService(db)

    associations = service.list_associations(reporting_variable_id=reporting_variable_id)
    if not associations:
        click.echo("No associations found.")
        return

    for association in associations:
        click.echo(str(association))


def register_commands(cli):
    """Register association commands with main CLI."""
    cli.add_command(emission_group, name="emission")
