"""Main CLI entry point."""

import click
from landledger.database.factories import create_sqlite_database
from landledger.utils.logging import configure_logging

# Import and register all commands at module level
from landledger.cli.commands import (
    taxonomy,
    history,
    dates,
    flux,
    emission,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LANDLEDGER_DB_PATH environment variable)",
    envvar="LANDLEDGER_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LANDLEDGER_LOG_LEVEL",
    help="Logging level for diagnostics written to stderr",
)
@click.option(
    "--json-logs",
    is_flag=True,
    envvar="LANDLEDGER_LOG_JSON",
    help="Write log lines as JSON",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str, json_logs: bool):
    """Landledger - land-use history and flux mapping records.

    Record, per location, the land-use categories and land-cover types
    occupied over annual timesteps, and maintain the versioned rules that
    map carbon fluxes to reporting variables.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        configure_logging(level=log_level, json_logs=json_logs)
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
taxonomy.register_commands(cli)
history.register_commands(cli)
dates.register_commands(cli)
flux.register_commands(cli)
emission.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
