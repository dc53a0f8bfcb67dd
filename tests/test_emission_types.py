"""Tests for reporting variable / emission type associations."""

import pytest

from landledger.database.factories import create_sqlite_database
from landledger.domain.emission_types import EmissionTypeService
from landledger.domain.errors import (
    ConflictError,
    NotFoundError,
    UnresolvedReferenceError,
    VersionConflictError,
)


def test_create_association(emission_type_service, sample_taxonomy):
    """Test that a new association starts at version 1."""
    association = emission_type_service.create_association(3, 2)

    assert association.reporting_variable_id == 3
    assert association.emission_type_id == 2
    assert association.version == 1
    assert str(association) == "Reporting Variable Id: 3, Emission Type Id: 2, Version: 1"


def test_create_duplicate_association(emission_type_service, sample_taxonomy):
    """Test that a pair can only be created once."""
    emission_type_service.create_association(3, 2)

    with pytest.raises(ConflictError, match="already associated"):
        emission_type_service.create_association(3, 2)


def test_create_unresolved_association(emission_type_service, sample_taxonomy):
    """Test that both sides must exist."""
    with pytest.raises(UnresolvedReferenceError, match="Reporting variable 8"):
        emission_type_service.create_association(8, 1)
    with pytest.raises(UnresolvedReferenceError, match="Emission type 8"):
        emission_type_service.create_association(1, 8)


def test_revise_association(emission_type_service, sample_taxonomy):
    """Test that a revision appends the next version and keeps history."""
    emission_type_service.create_association(3, 2)

    revised = emission_type_service.revise_association(3, 2, expected_version=1)

    assert revised.version == 2
    assert emission_type_service.get_association(3, 2) == revised
    assert [r.version for r in emission_type_service.list_revisions(3, 2)] == [1, 2]


def test_revise_stale_version(emission_type_service, sample_taxonomy):
    """Test that revising from a stale version is rejected."""
    emission_type_service.create_association(3, 2)
    emission_type_service.revise_association(3, 2, expected_version=1)

    with pytest.raises(VersionConflictError) as exc_info:
        emission_type_service.revise_association(3, 2, expected_version=1)

    assert exc_info.value.actual_version == 2
    assert emission_type_service.get_association(3, 2).version == 2


def test_revise_missing_association(emission_type_service, sample_taxonomy):
    """Test revising a pair that was never associated."""
    with pytest.raises(NotFoundError):
        emission_type_service.revise_association(1, 1, expected_version=1)


def test_concurrent_revisions(temp_db, sample_taxonomy):
    """Test that two writers revising from the same version cannot both succeed."""
    EmissionTypeService(temp_db).create_association(3, 2)
    other_db = create_sqlite_database(database_path=temp_db.database_path)
    try:
        first = EmissionTypeService(temp_db)
        second = EmissionTypeService(other_db)

        first.revise_association(3, 2, expected_version=1)
        with pytest.raises(VersionConflictError):
            second.revise_association(3, 2, expected_version=1)
    finally:
        other_db.disconnect()

    assert len(EmissionTypeService(temp_db).list_revisions(3, 2)) == 2


def test_list_associations(emission_type_service, sample_taxonomy):
    """Test that listing returns only the authoritative revision of each pair."""
    emission_type_service.create_association(1, 1)
    emission_type_service.create_association(1, 2)
    emission_type_service.create_association(3, 2)
    emission_type_service.revise_association(1, 2, expected_version=1)

    associations = emission_type_service.list_associations()
    assert [(a.reporting_variable_id, a.emission_type_id, a.version) for a in associations] == [
        (1, 1, 1),
        (1, 2, 2),
        (3, 2, 1),
    ]
    assert len(emission_type_service.list_associations(reporting_variable_id=3)) == 1
