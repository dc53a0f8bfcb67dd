"""Tests for taxonomy service and name resolution."""

import pytest

from landledger.domain.entities import TaxonomyKind, ReportingVariable
from landledger.domain.errors import ConflictError, UnresolvedReferenceError, ValidationError
from landledger.utils.taxonomy_resolver import resolve_entry


def test_create_entry(taxonomy_service):
    """Test creating a taxonomy entry."""
    entry_id = taxonomy_service.create_entry(
        TaxonomyKind.REPORTING_VARIABLE, "  CO2 Removals  ", description="Net removals"
    )

    entry = taxonomy_service.get_entry(TaxonomyKind.REPORTING_VARIABLE, entry_id)
    assert isinstance(entry, ReportingVariable)
    assert entry.name == "CO2 Removals"
    assert entry.description == "Net removals"


def test_create_entry_blank_name(taxonomy_service):
    """Test that a blank name is rejected."""
    with pytest.raises(ValidationError, match="'name' is required"):
        taxonomy_service.create_entry(TaxonomyKind.POOL, "   ")


def test_create_duplicate_entry(taxonomy_service):
    """Test that names are unique within a kind."""
    taxonomy_service.create_entry(TaxonomyKind.POOL, "Litter")

    with pytest.raises(ConflictError, match="already exists"):
        taxonomy_service.create_entry(TaxonomyKind.POOL, "Litter")


def test_list_entries_sorted_by_name(taxonomy_service, sample_taxonomy):
    """Test listing entries of one kind."""
    names = [entry.name for entry in taxonomy_service.list_entries(TaxonomyKind.LAND_USE_CATEGORY)]
    assert names == ["Cropland", "Forest Land", "Grassland", "Settlements"]


def test_resolve_existing(taxonomy_service, sample_taxonomy):
    """Test resolving an existing id."""
    pool = taxonomy_service.resolve(TaxonomyKind.POOL, 2)
    assert pool.name == "Belowground Biomass"


def test_resolve_missing(taxonomy_service, sample_taxonomy):
    """Test that a dangling id raises UnresolvedReferenceError."""
    with pytest.raises(UnresolvedReferenceError, match="Pool 99 not found"):
        taxonomy_service.resolve(TaxonomyKind.POOL, 99)


class TestResolveEntry:
    """Tests for resolving taxonomy names or IDs."""

    def test_resolve_by_id(self, taxonomy_service, land_use_ids):
        """Test resolving an integer ID."""
        forest_id = land_use_ids["Forest Land"]
        assert resolve_entry(taxonomy_service, TaxonomyKind.LAND_USE_CATEGORY, forest_id) == forest_id

    def test_resolve_by_id_string(self, taxonomy_service, land_use_ids):
        """Test resolving an ID given as a string."""
        forest_id = land_use_ids["Forest Land"]
        assert resolve_entry(taxonomy_service, TaxonomyKind.LAND_USE_CATEGORY, str(forest_id)) == forest_id

    def test_resolve_by_name(self, taxonomy_service, land_use_ids):
        """Test resolving a name."""
        assert (
            resolve_entry(taxonomy_service, TaxonomyKind.LAND_USE_CATEGORY, "Grassland")
            == land_use_ids["Grassland"]
        )

    def test_resolve_unknown_name(self, taxonomy_service, sample_taxonomy):
        """Test that an unknown name raises UnresolvedReferenceError."""
        with pytest.raises(UnresolvedReferenceError, match="'Wetlands' not found"):
            resolve_entry(taxonomy_service, TaxonomyKind.LAND_USE_CATEGORY, "Wetlands")

    def test_resolve_unknown_id(self, taxonomy_service, sample_taxonomy):
        """Test that an unknown ID raises UnresolvedReferenceError."""
        with pytest.raises(UnresolvedReferenceError):
            resolve_entry(taxonomy_service, TaxonomyKind.COVER_TYPE, "42")
