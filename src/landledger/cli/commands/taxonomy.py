"""Taxonomy management commands."""

import click
from landledger.cli.error_handling import handle_domain_error
from landledger.domain.entities import TaxonomyKind
from landledger.domain.errors import DomainError
from landledger.domain.taxonomy import TaxonomyService

KIND_CHOICE = click.Choice([kind.value for kind in TaxonomyKind], case_sensitive=False)


@click.group()
def taxonomy_group():
    """Manage land-use categories, cover types, pools, reporting variables and emission types."""
    pass


@taxonomy_group.command("add")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("name")
@click.option("--description", help="Optional description")
@click.pass_context
def add_entry(ctx, kind: str, name: str, description: str | None):
    """Add an entry to a taxonomy.

    Examples:
        landledger taxonomy add land-use-category "Forest Land"
        landledger taxonomy add pool "Aboveground Biomass"
    """
    db = ctx.obj["db"]
    service = TaxonomyService(db)
    taxonomy_kind = TaxonomyKind(kind.lower())

    try:
        entry_id = service.create_entry(taxonomy_kind, name=name, description=description)
        click.echo(f"Created {taxonomy_kind.label.lower()} '{name.strip()}' (ID: {entry_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@taxonomy_group.command("list")
@click.argument("kind", type=KIND_CHOICE)
@click.pass_context
def list_entries(ctx, kind: str):
    """List the entries of a taxonomy."""
    db = ctx.obj["db"]
    service = TaxonomyService(db)
    taxonomy_kind = TaxonomyKind(kind.lower())

    entries = service.list_entries(taxonomy_kind)
    if not entries:
        click.echo(f"No {taxonomy_kind.label.lower()} entries found.")
        return

    click.echo(f"\n{taxonomy_kind.label} entries:")
    click.echo("-" * 60)
    for entry in entries:
        description = f" | {entry.description}" if entry.description else ""
        click.echo(f"ID: {entry.id:3d} | {entry.name}{description}")


def register_commands(cli):
    """Register taxonomy commands with main CLI."""
    cli.add_command(taxonomy_group, name="taxonomy")
