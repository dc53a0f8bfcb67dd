"""Flux to UNFCCC variable mapping commands."""

import click
from landledger.cli.error_handling import handle_domain_error
from landledger.domain import errors
from landledger.domain.flux_mapping import FluxMappingService


@click.group()
def flux_group():
    """Manage flux to UNFCCC variable mapping rules."""
    pass


@flux_group.command("create")
@click.option("--start-pool", "start_pool_id", type=int, help="Start pool ID")
@click.option("--end-pool", "end_pool_id", type=int, help="End pool ID")
@click.option("--variable", "unfccc_variable_id", type=int, help="UNFCCC reporting variable ID")
@click.option("--rule", help="How the flux contributes to the variable (e.g. 'ignore')")
@click.pass_context
def create_mapping(
    ctx,
    start_pool_id: int | None,
    end_pool_id: int | None,
    unfccc_variable_id: int | None,
    rule: str | None,
):
    """Create a mapping rule.

    Examples:
        landledger flux create --start-pool 2 --end-pool 5 --variable 3 --rule ignore
    """
    db = ctx.obj["db"]
    service = FluxMappingService(db)

    try:
        mapping = service.create_mapping(start_pool_id, end_pool_id, unfccc_variable_id, rule)
        click.echo(f"Created mapping {mapping}")
    except errors.DomainError as e:
        handle_domain_error(ctx, e)


@flux_group.command("list")
@click.option("--start-pool", "start_pool_id", type=int, help="Filter by start pool ID")
@click.option("--end-pool", "end_pool_id", type=int, help="Filter by end pool ID")
@click.option("--variable", "unfccc_variable_id", type=int, help="Filter by reporting variable ID")
@click.pass_context
def list_mappings(ctx, start_pool_id: int | None, end_pool_id: int | None, unfccc_variable_id: int | None):
    """List mapping rules."""
    db = ctx.obj["db"]
    service = FluxMappingService(db)

    mappings = service.list_mappings(
        start_pool_id=start_pool_id,
        end_pool_id=end_pool_id,
        unfccc_variable_id=unfccc_variable_id,
    )
    if not mappings:
        click.echo("No mappings found.")
        return

    for mapping in mappings:
        click.echo(str(mapping))


@flux_group.command("show")
@click.argument("mapping_id", type=int)
@click.pass_context
def show_mapping(ctx, mapping_id: int):
    """Show one mapping rule."""
    db = ctx.obj["db"]
    service = FluxMappingService(db)

    mapping = service.get_mapping(mapping_id)
    if mapping is None:
        handle_domain_error(ctx, errors.NotFoundError(errors.mapping_not_found(mapping_id)))
    click.echo(str(mapping))


@flux_group.command("update")
@click.argument("mapping_id", type=int)
@click.option("--expected-version", type=int, required=True, help="Version the change is based on")
@click.option("--start-pool", "start_pool_id", type=int, help="New start pool ID")
@click.option("--end-pool", "end_pool_id", type=int, help="New end pool ID")
@click.option("--variable", "unfccc_variable_id", type=int, help="New reporting variable ID")
@click.option("--rule", help="New rule")
@click.pass_context
def update_mapping(
    ctx,
    mapping_id: int,
    expected_version: int,
    start_pool_id: int | None,
    end_pool_id: int | None,
    unfccc_variable_id: int | None,
    rule: str | None,
):
    """Update a mapping rule.

    The update is rejected if the rule changed since EXPECTED_VERSION was read;
    show the rule again and retry with its current version.

    Examples:
        landledger flux update 4 --expected-version 1 --rule allocate
    """
    db = ctx.obj["db"]
    service = FluxMappingService(db)

    try:
        mapping = service.update_mapping(
            mapping_id,
            expected_version,
            start_pool_id=start_pool_id,
            end_pool_id=end_pool_id,
            unfccc_variable_id=unfccc_variable_id,
            rule=rule,
        )
        click.echo(f"Updated mapping {mapping}")
    except errors.DomainError as e:
        handle_domain_error(ctx, e)


@flux_group.command("delete")
@click.argument("mapping_id", type=int)
@click.option("--expected-version", type=int, required=True, help="Version the deletion is based on")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_mapping(ctx, mapping_id: int, expected_version: int, yes: bool):
    """Delete a mapping rule."""
    db = ctx.obj["db"]
    service = FluxMappingService(db)

    if not yes and not click.confirm(f"Are you sure you want to delete mapping {mapping_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_mapping(mapping_id, expected_version)
        click.echo(f"Deleted mapping {mapping_id}")
    except errors.DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register flux mapping commands with main CLI."""
    cli.add_command(flux_group, name="flux")
