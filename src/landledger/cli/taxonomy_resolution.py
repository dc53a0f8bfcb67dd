"""CLI helpers for taxonomy resolution and error handling."""

from __future__ import annotations

import click
from landledger.cli.error_handling import handle_domain_error
from landledger.domain import errors
from landledger.domain.entities import TaxonomyKind
from landledger.domain.taxonomy import TaxonomyService
from landledger.utils.taxonomy_resolver import resolve_entry


def resolve_entry_or_exit(
    ctx: click.Context, taxonomy_service: TaxonomyService, kind: TaxonomyKind, entry: str | int
) -> int:
    """Resolve a taxonomy name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_entry(taxonomy_service, kind, entry)
    except errors.DomainError as exc:
        handle_domain_error(ctx, exc)
