"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class VersionConflictError(ConflictError):
    """Expected version of a versioned row does not match the stored one.

    The caller must re-read the row and retry; the stored row is untouched.
    """

    def __init__(
        self,
        entity: str,
        entity_id: object,
        expected_version: int,
        actual_version: Optional[int],
    ):
        self.entity = entity
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            version_conflict(entity, entity_id, expected_version, actual_version)
        )


class UnresolvedReferenceError(DomainError):
    """A foreign id (category, pool, reporting variable...) does not resolve."""


def entry_not_found(kind: str, entry_id: int) -> str:
    """Return message for a taxonomy id that does not resolve."""
    return f"{kind} {entry_id} not found"


def duplicate_entry_name(kind: str, name: str) -> str:
    """Return message for a duplicate taxonomy name."""
    return f"{kind} with name '{name}' already exists"


def timestep_not_found(axis: str, location_id: int, item_number: int) -> str:
    """Return message for a missing history timestep."""
    return f"No {axis} timestep {item_number} recorded for location {location_id}"


def duplicate_timestep(axis: str, location_id: int, item_number: int) -> str:
    """Return message for a repeated timestep."""
    return f"Location {location_id} already has {axis} timestep {item_number}"


def duplicate_year(axis: str, location_id: int, year: int) -> str:
    """Return message for a repeated year on one axis."""
    return f"Location {location_id} already has {axis} history for year {year}"


def date_not_found(date_id: int) -> str:
    """Return message for missing date."""
    return f"Date {date_id} not found"


def duplicate_date_year(year: int) -> str:
    """Return message for a year that already has a date row."""
    return f"Date for year {year} already exists"


def mapping_not_found(mapping_id: int) -> str:
    """Return message for missing flux mapping."""
    return f"Flux to UNFCCC variable mapping {mapping_id} not found"


def association_not_found(reporting_variable_id: int, emission_type_id: int) -> str:
    """Return message for missing reporting variable / emission type pair."""
    return (
        f"No association between reporting variable {reporting_variable_id} "
        f"and emission type {emission_type_id}"
    )


def duplicate_association(reporting_variable_id: int, emission_type_id: int) -> str:
    """Return message when a pair is created twice."""
    return (
        f"Reporting variable {reporting_variable_id} is already associated "
        f"with emission type {emission_type_id}"
    )


def version_conflict(
    entity: str, entity_id: object, expected_version: int, actual_version: Optional[int]
) -> str:
    """Return message for a stale expected version."""
    return (
        f"{entity} {entity_id} was modified concurrently: expected version "
        f"{expected_version}, found {actual_version}. Reload and retry."
    )


def missing_field(field_name: str) -> str:
    """Return message for a required field that was not supplied."""
    return f"'{field_name}' is required"


def out_of_chronological_order(
    axis: str, item_number: int, year: int, other_item_number: int, other_year: int
) -> str:
    """Return message when timestep order would disagree with year order."""
    return (
        f"{axis.capitalize()} timestep {item_number} (year {year}) is out of "
        f"chronological order with timestep {other_item_number} (year {other_year})"
    )
