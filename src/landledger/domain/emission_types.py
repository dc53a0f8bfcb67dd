"""Reporting variable / emission type association domain service.

An association is revised by appending a row whose version is one higher
than the current one. Readers treat the highest version as authoritative.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from landledger.domain import errors
from landledger.domain.entities import ReportingVariableEmissionType, TaxonomyKind
from landledger.domain.taxonomy import TaxonomyService

if TYPE_CHECKING:
    from landledger.database.base import Database

logger = logging.getLogger(__name__)

ENTITY_NAME = "Reporting variable emission type"


class EmissionTypeService:
    """Service for versioned reporting variable / emission type associations."""

    def __init__(self, db: Database, resolve_references: bool = True):
        """Initialize emission type service.

        Args:
            db: Database instance
            resolve_references: If True, the reporting variable and emission
                type must exist before they can be associated
        """
        self.db = db
        self.resolve_references = resolve_references
        self.taxonomy = TaxonomyService(db)

    def create_association(
        self, reporting_variable_id: int, emission_type_id: int
    ) -> ReportingVariableEmissionType:
        """Associate a reporting variable with an emission type at version 1.

        Raises:
            ConflictError: If the pair is already associated
            UnresolvedReferenceError: If either id does not resolve
        """
        if self.resolve_references:
            self.taxonomy.resolve(TaxonomyKind.REPORTING_VARIABLE, reporting_variable_id)
            self.taxonomy.resolve(TaxonomyKind.EMISSION_TYPE, emission_type_id)

        if self.db.get_latest_association(reporting_variable_id, emission_type_id) is not None:
            raise errors.ConflictError(
                errors.duplicate_association(reporting_variable_id, emission_type_id)
            )

        self.db.create_association_revision(reporting_variable_id, emission_type_id, version=1)
        association = self.db.get_latest_association(reporting_variable_id, emission_type_id)
        logger.info("Created association %s", association)
        return association

    def revise_association(
        self, reporting_variable_id: int, emission_type_id: int, expected_version: int
    ) -> ReportingVariableEmissionType:
        """Append a new revision if the current one is the expected version.

        Returns:
            The new authoritative revision (expected_version + 1)

        Raises:
            NotFoundError: If the pair has never been associated
            VersionConflictError: If another revision landed first
        """
        current = self.db.get_latest_association(reporting_variable_id, emission_type_id)
        if current is None:
            raise errors.NotFoundError(
                errors.association_not_found(reporting_variable_id, emission_type_id)
            )

        pair = (reporting_variable_id, emission_type_id)
        if current.version != expected_version:
            logger.warning("Rejected stale revision of %s at version %s", pair, expected_version)
            raise errors.VersionConflictError(ENTITY_NAME, pair, expected_version, current.version)

        try:
            self.db.create_association_revision(
                reporting_variable_id, emission_type_id, version=expected_version + 1
            )
        except errors.ConflictError as e:
            # A concurrent writer inserted the same version between read and insert
            latest = self.db.get_latest_association(reporting_variable_id, emission_type_id)
            actual = None if latest is None else latest.version
            logger.warning("Rejected stale revision of %s at version %s", pair, expected_version)
            raise errors.VersionConflictError(ENTITY_NAME, pair, expected_version, actual) from e

        association = self.db.get_latest_association(reporting_variable_id, emission_type_id)
        logger.info("Revised association %s", association)
        return association

    def get_association(
        self, reporting_variable_id: int, emission_type_id: int
    ) -> Optional[ReportingVariableEmissionType]:
        """Get the authoritative revision of a pair, or None."""
        return self.db.get_latest_association(reporting_variable_id, emission_type_id)

    def list_associations(
        self, reporting_variable_id: Optional[int] = None
    ) -> list[ReportingVariableEmissionType]:
        """List authoritative revisions, optionally for one reporting variable."""
        return self.db.list_latest_associations(reporting_variable_id=reporting_variable_id)

    def list_revisions(
        self, reporting_variable_id: int, emission_type_id: int
    ) -> list[ReportingVariableEmissionType]:
        """List every revision of a pair, oldest first."""
        return self.db.list_association_revisions(reporting_variable_id, emission_type_id)
