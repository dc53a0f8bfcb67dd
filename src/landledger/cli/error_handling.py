"""CLI error handling helpers."""

import click

from landledger.domain import errors

# Distinct exit codes let scripts tell the outcomes apart
EXIT_CODES: dict[type, int] = {
    errors.NotFoundError: 3,
    errors.VersionConflictError: 4,
    errors.ConflictError: 5,
    errors.UnresolvedReferenceError: 6,
}


def exit_code_for(error: errors.DomainError | ValueError) -> int:
    """Return the exit code of the most specific matching error class."""
    for error_class in type(error).__mro__:
        if error_class in EXIT_CODES:
            return EXIT_CODES[error_class]
    return 1


def handle_domain_error(ctx: click.Context, error: errors.DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(exit_code_for(error))
