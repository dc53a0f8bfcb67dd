"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from landledger.domain.entities import (
    TaxonomyKind,
    TaxonomyEntry,
    LandUseHistoryRecord,
    CoverTypeHistoryRecord,
    Date,
    ReportingVariableEmissionType,
    FluxToUnfcccVariable,
)


class Database(ABC):
    """Abstract database interface for landledger.

    Implementations own all state. Uniqueness and version checks that guard
    concurrent writers must be enforced here, atomically, at commit time.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Taxonomy operations
    @abstractmethod
    def create_taxonomy_entry(
        self, kind: TaxonomyKind, name: str, description: Optional[str] = None
    ) -> int:
        """Create a taxonomy entry of the given kind. Returns entry ID.

        Raises:
            ConflictError: If an entry with the same name already exists
        """
        pass

    @abstractmethod
    def get_taxonomy_entry(self, kind: TaxonomyKind, entry_id: int) -> Optional[TaxonomyEntry]:
        """Get taxonomy entry by ID."""
        pass

    @abstractmethod
    def get_taxonomy_entry_by_name(self, kind: TaxonomyKind, name: str) -> Optional[TaxonomyEntry]:
        """Get taxonomy entry by name."""
        pass

    @abstractmethod
    def list_taxonomy_entries(self, kind: TaxonomyKind) -> list[TaxonomyEntry]:
        """List all entries of a kind, ordered by name."""
        pass

    # Land-use history operations
    @abstractmethod
    def create_land_use_record(
        self,
        location_id: int,
        item_number: int,
        year: int,
        land_use_category_id: int,
        confirmed: Optional[bool] = None,
    ) -> None:
        """Insert a land-use timestep.

        Raises:
            ConflictError: If the location already has this item number or year
        """
        pass

    @abstractmethod
    def get_land_use_record(
        self, location_id: int, item_number: int
    ) -> Optional[LandUseHistoryRecord]:
        """Get one land-use timestep of a location."""
        pass

    @abstractmethod
    def list_land_use_history(self, location_id: int) -> list[LandUseHistoryRecord]:
        """List land-use timesteps of a location in storage order."""
        pass

    @abstractmethod
    def update_land_use_record(
        self,
        location_id: int,
        item_number: int,
        land_use_category_id: Optional[int] = None,
        confirmed: Optional[bool] = None,
        update_confirmed: bool = False,
    ) -> None:
        """Replace category and/or confirmed flag of a land-use timestep.

        Args:
            update_confirmed: If True, write confirmed even if it's None (to clear it)

        Raises:
            NotFoundError: If the timestep does not exist
        """
        pass

    @abstractmethod
    def list_land_use_locations(self) -> list[int]:
        """List distinct location IDs with land-use history."""
        pass

    # Cover-type history operations
    @abstractmethod
    def create_cover_type_record(
        self, location_id: int, item_number: int, year: int, cover_type_id: int
    ) -> None:
        """Insert a land-cover timestep.

        Raises:
            ConflictError: If the location already has this item number or year
        """
        pass

    @abstractmethod
    def get_cover_type_record(
        self, location_id: int, item_number: int
    ) -> Optional[CoverTypeHistoryRecord]:
        """Get one land-cover timestep of a location."""
        pass

    @abstractmethod
    def list_cover_type_history(self, location_id: int) -> list[CoverTypeHistoryRecord]:
        """List land-cover timesteps of a location in storage order."""
        pass

    @abstractmethod
    def update_cover_type_record(self, location_id: int, item_number: int, cover_type_id: int) -> None:
        """Replace the cover type of a land-cover timestep.

        Raises:
            NotFoundError: If the timestep does not exist
        """
        pass

    @abstractmethod
    def list_cover_type_locations(self) -> list[int]:
        """List distinct location IDs with land-cover history."""
        pass

    # Date operations
    @abstractmethod
    def create_date(self, year: int) -> int:
        """Create a date. Returns date ID.

        Raises:
            ConflictError: If a date for the year already exists
        """
        pass

    @abstractmethod
    def get_date(self, date_id: int) -> Optional[Date]:
        """Get date by ID."""
        pass

    @abstractmethod
    def get_date_by_year(self, year: int) -> Optional[Date]:
        """Get date by year."""
        pass

    @abstractmethod
    def list_dates(self) -> list[Date]:
        """List all dates."""
        pass

    # Reporting variable / emission type operations
    @abstractmethod
    def create_association_revision(
        self, reporting_variable_id: int, emission_type_id: int, version: int
    ) -> int:
        """Insert one revision of an association. Returns row ID.

        Raises:
            ConflictError: If the pair already has a row with this version
        """
        pass

    @abstractmethod
    def get_latest_association(
        self, reporting_variable_id: int, emission_type_id: int
    ) -> Optional[ReportingVariableEmissionType]:
        """Get the highest-version row of a pair."""
        pass

    @abstractmethod
    def list_association_revisions(
        self, reporting_variable_id: int, emission_type_id: int
    ) -> list[ReportingVariableEmissionType]:
        """List every revision of a pair, oldest first."""
        pass

    @abstractmethod
    def list_latest_associations(
        self, reporting_variable_id: Optional[int] = None
    ) -> list[ReportingVariableEmissionType]:
        """List the highest-version row of every pair, optionally for one reporting variable."""
        pass

    # Flux to UNFCCC variable operations
    @abstractmethod
    def create_flux_mapping(
        self, start_pool_id: int, end_pool_id: int, unfccc_variable_id: int, rule: str
    ) -> int:
        """Create a mapping rule with version 1. Returns mapping ID."""
        pass

    @abstractmethod
    def get_flux_mapping(self, mapping_id: int) -> Optional[FluxToUnfcccVariable]:
        """Get mapping rule by ID."""
        pass

    @abstractmethod
    def list_flux_mappings(
        self,
        start_pool_id: Optional[int] = None,
        end_pool_id: Optional[int] = None,
        unfccc_variable_id: Optional[int] = None,
    ) -> list[FluxToUnfcccVariable]:
        """List mapping rules with optional filters."""
        pass

    @abstractmethod
    def update_flux_mapping(
        self,
        mapping_id: int,
        expected_version: int,
        start_pool_id: Optional[int] = None,
        end_pool_id: Optional[int] = None,
        unfccc_variable_id: Optional[int] = None,
        rule: Optional[str] = None,
    ) -> int:
        """Apply changes only if the stored version equals expected_version.

        Returns:
            The new version (expected_version + 1)

        Raises:
            NotFoundError: If the mapping does not exist
            VersionConflictError: If the stored version differs
        """
        pass

    @abstractmethod
    def delete_flux_mapping(self, mapping_id: int, expected_version: int) -> None:
        """Delete a mapping only if the stored version equals expected_version.

        Raises:
            NotFoundError: If the mapping does not exist
            VersionConflictError: If the stored version differs
        """
        pass
