"""Taxonomy domain service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from landledger.domain import errors
from landledger.domain.entities import TaxonomyKind, TaxonomyEntry

if TYPE_CHECKING:
    from landledger.database.base import Database


class TaxonomyService:
    """Service for the external enumerations (land uses, cover types, pools...)."""

    def __init__(self, db: Database):
        """Initialize taxonomy service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_entry(self, kind: TaxonomyKind, name: str, description: Optional[str] = None) -> int:
        """Create a taxonomy entry.

        Entries are immutable once defined.

        Args:
            kind: Which enumeration the entry belongs to
            name: Entry name, unique within the kind
            description: Optional free text

        Returns:
            Entry ID

        Raises:
            ValidationError: If name is blank
            ConflictError: If an entry with the same name already exists
        """
        name = (name or "").strip()
        if not name:
            raise errors.ValidationError(errors.missing_field("name"))

        if self.db.get_taxonomy_entry_by_name(kind, name) is not None:
            raise errors.ConflictError(errors.duplicate_entry_name(kind.label, name))

        return self.db.create_taxonomy_entry(kind, name=name, description=description)

    def get_entry(self, kind: TaxonomyKind, entry_id: int) -> Optional[TaxonomyEntry]:
        """Get entry by ID, or None if not found."""
        return self.db.get_taxonomy_entry(kind, entry_id)

    def get_entry_by_name(self, kind: TaxonomyKind, name: str) -> Optional[TaxonomyEntry]:
        """Get entry by name, or None if not found."""
        return self.db.get_taxonomy_entry_by_name(kind, name)

    def list_entries(self, kind: TaxonomyKind) -> list[TaxonomyEntry]:
        """List entries of a kind ordered by name."""
        return self.db.list_taxonomy_entries(kind)

    def resolve(self, kind: TaxonomyKind, entry_id: int) -> TaxonomyEntry:
        """Resolve a foreign id that must exist.

        Raises:
            UnresolvedReferenceError: If the id does not resolve
        """
        entry = self.db.get_taxonomy_entry(kind, entry_id)
        if entry is None:
            raise errors.UnresolvedReferenceError(errors.entry_not_found(kind.label, entry_id))
        return entry
