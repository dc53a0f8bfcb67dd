"""Flux to UNFCCC variable mapping domain service.

Mapping rules use optimistic versioning. Every update names the version it
expects to overwrite; the storage layer applies it only while that version is
still current. A stale version is rejected, never merged, and retrying is up
to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from landledger.domain import errors
from landledger.domain.entities import FluxToUnfcccVariable, TaxonomyKind
from landledger.domain.taxonomy import TaxonomyService

if TYPE_CHECKING:
    from landledger.database.base import Database

logger = logging.getLogger(__name__)


def _require_id(field_name: str, value: Optional[int]) -> None:
    if value is None:
        raise errors.ValidationError(errors.missing_field(field_name))
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise errors.ValidationError(f"'{field_name}' must be a positive integer, got {value!r}")


def _normalize_rule(rule: Optional[str]) -> str:
    if rule is None:
        raise errors.ValidationError(errors.missing_field("rule"))
    rule = rule.strip()
    if not rule:
        raise errors.ValidationError(errors.missing_field("rule"))
    return rule


class FluxMappingService:
    """Service for managing flux to UNFCCC variable mapping rules."""

    def __init__(self, db: Database, resolve_references: bool = True):
        """Initialize flux mapping service.

        Args:
            db: Database instance
            resolve_references: If True, pools and the reporting variable must
                exist before a rule can reference them
        """
        self.db = db
        self.resolve_references = resolve_references
        self.taxonomy = TaxonomyService(db)

    def _resolve(
        self,
        start_pool_id: Optional[int],
        end_pool_id: Optional[int],
        unfccc_variable_id: Optional[int],
    ) -> None:
        if not self.resolve_references:
            return
        for pool_id in (start_pool_id, end_pool_id):
            if pool_id is not None:
                self.taxonomy.resolve(TaxonomyKind.POOL, pool_id)
        if unfccc_variable_id is not None:
            self.taxonomy.resolve(TaxonomyKind.REPORTING_VARIABLE, unfccc_variable_id)

    def create_mapping(
        self,
        start_pool_id: Optional[int],
        end_pool_id: Optional[int],
        unfccc_variable_id: Optional[int],
        rule: Optional[str],
    ) -> FluxToUnfcccVariable:
        """Create a mapping rule.

        All four fields are required; nothing is defaulted.

        Returns:
            The stored rule, with its assigned ID and version 1

        Raises:
            ValidationError: If a field is missing or malformed
            UnresolvedReferenceError: If a pool or the variable does not exist
        """
        _require_id("start_pool_id", start_pool_id)
        _require_id("end_pool_id", end_pool_id)
        _require_id("unfccc_variable_id", unfccc_variable_id)
        rule = _normalize_rule(rule)
        self._resolve(start_pool_id, end_pool_id, unfccc_variable_id)

        mapping_id = self.db.create_flux_mapping(
            start_pool_id=start_pool_id,
            end_pool_id=end_pool_id,
            unfccc_variable_id=unfccc_variable_id,
            rule=rule,
        )
        mapping = self.db.get_flux_mapping(mapping_id)
        logger.info("Created flux mapping %s", mapping)
        return mapping

    def get_mapping(self, mapping_id: int) -> Optional[FluxToUnfcccVariable]:
        """Get mapping rule by ID, or None if not found."""
        return self.db.get_flux_mapping(mapping_id)

    def list_mappings(
        self,
        start_pool_id: Optional[int] = None,
        end_pool_id: Optional[int] = None,
        unfccc_variable_id: Optional[int] = None,
    ) -> list[FluxToUnfcccVariable]:
        """List mapping rules, optionally filtered by flux or variable."""
        return self.db.list_flux_mappings(
            start_pool_id=start_pool_id,
            end_pool_id=end_pool_id,
            unfccc_variable_id=unfccc_variable_id,
        )

    def update_mapping(
        self,
        mapping_id: int,
        expected_version: int,
        start_pool_id: Optional[int] = None,
        end_pool_id: Optional[int] = None,
        unfccc_variable_id: Optional[int] = None,
        rule: Optional[str] = None,
    ) -> FluxToUnfcccVariable:
        """Update a mapping rule if it is still at the expected version.

        Args:
            mapping_id: Mapping ID
            expected_version: Version the caller read before editing
            start_pool_id, end_pool_id, unfccc_variable_id, rule: Fields to
                change; None leaves a field as it is

        Returns:
            The stored rule at version expected_version + 1

        Raises:
            ValidationError: If no field changes or a field is malformed
            NotFoundError: If the mapping does not exist
            VersionConflictError: If the mapping was changed since it was read
            UnresolvedReferenceError: If a new pool or variable does not exist
        """
        _require_id("expected_version", expected_version)
        changes = (start_pool_id, end_pool_id, unfccc_variable_id, rule)
        if all(value is None for value in changes):
            raise errors.ValidationError("No fields to update")
        for field_name, value in (
            ("start_pool_id", start_pool_id),
            ("end_pool_id", end_pool_id),
            ("unfccc_variable_id", unfccc_variable_id),
        ):
            if value is not None:
                _require_id(field_name, value)
        if rule is not None:
            rule = _normalize_rule(rule)
        self._resolve(start_pool_id, end_pool_id, unfccc_variable_id)

        try:
            self.db.update_flux_mapping(
                mapping_id,
                expected_version,
                start_pool_id=start_pool_id,
                end_pool_id=end_pool_id,
                unfccc_variable_id=unfccc_variable_id,
                rule=rule,
            )
        except errors.VersionConflictError as e:
            logger.warning("Rejected stale update: %s", e)
            raise

        mapping = self.db.get_flux_mapping(mapping_id)
        logger.info("Updated flux mapping %s", mapping)
        return mapping

    def delete_mapping(self, mapping_id: int, expected_version: int) -> None:
        """Delete a mapping rule if it is still at the expected version.

        Raises:
            NotFoundError: If the mapping does not exist
            VersionConflictError: If the mapping was changed since it was read
        """
        _require_id("expected_version", expected_version)
        try:
            self.db.delete_flux_mapping(mapping_id, expected_version)
        except errors.VersionConflictError as e:
            logger.warning("Rejected stale delete: %s", e)
            raise
        logger.info("Deleted flux mapping %s at version %s", mapping_id, expected_version)
