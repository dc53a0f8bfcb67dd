"""Utility for resolving taxonomy names to IDs."""

from landledger.domain import errors
from landledger.domain.entities import TaxonomyKind
from landledger.domain.taxonomy import TaxonomyService


def resolve_entry(taxonomy_service: TaxonomyService, kind: TaxonomyKind, entry: str | int) -> int:
    """Resolve a taxonomy entry name or ID to its ID.

    Args:
        taxonomy_service: TaxonomyService instance
        kind: Which enumeration to look in
        entry: Entry name (str) or ID (int or string representation of int)

    Returns:
        Entry ID

    Raises:
        UnresolvedReferenceError: If the entry is not found
    """
    try:
        entry_id = int(entry)
    except (ValueError, TypeError):
        entry_id = None

    if entry_id is not None:
        return taxonomy_service.resolve(kind, entry_id).id

    found = taxonomy_service.get_entry_by_name(kind, str(entry))
    if found is None:
        raise errors.UnresolvedReferenceError(f"{kind.label} '{entry}' not found")
    return found.id
