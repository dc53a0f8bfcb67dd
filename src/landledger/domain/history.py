"""Location history domain service.

Each location carries two independent classification tracks (axes): land
use and land cover. Within one location and one axis, ``item_number`` is the
canonical sort key and must follow the same order as ``year``. Timesteps are
never renumbered or moved once stored; only the classification of a
timestep (category, confirmed flag) can be corrected.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from landledger.domain import errors
from landledger.domain.entities import (
    HistoryAxis,
    HistoryRecord,
    TaxonomyKind,
    LandUseHistoryRecord,
    CoverTypeHistoryRecord,
)
from landledger.domain.ordering import sort_history
from landledger.domain.taxonomy import TaxonomyService

if TYPE_CHECKING:
    from landledger.database.base import Database

logger = logging.getLogger(__name__)


def _validate_timestep(item_number: Optional[int], year: int) -> None:
    if not isinstance(year, int) or year <= 0:
        raise errors.ValidationError(f"Invalid year: {year}")
    if item_number is not None and (not isinstance(item_number, int) or item_number <= 0):
        raise errors.ValidationError(f"Invalid timestep: {item_number}")


def next_item_number(history: Sequence[HistoryRecord]) -> int:
    """Return the timestep that follows the last stored one (1 for an empty history)."""
    assigned = [r.item_number for r in history if r.item_number is not None]
    return max(assigned, default=0) + 1


def check_chronology(
    axis: HistoryAxis,
    location_id: int,
    history: Sequence[HistoryRecord],
    item_number: int,
    year: int,
) -> None:
    """Verify a new timestep can join a location's history on one axis.

    Raises:
        ConflictError: If the timestep or the year is already recorded
        ValidationError: If timestep order would no longer match year order
    """
    for record in history:
        if record.item_number == item_number:
            raise errors.ConflictError(
                errors.duplicate_timestep(axis.label, location_id, item_number)
            )
        if record.year == year:
            raise errors.ConflictError(errors.duplicate_year(axis.label, location_id, year))
        if record.item_number is None:
            continue
        if (record.item_number < item_number) != (record.year < year):
            raise errors.ValidationError(
                errors.out_of_chronological_order(
                    axis.label, item_number, year, record.item_number, record.year
                )
            )


class HistoryService:
    """Service for recording and reading land-use and land-cover histories."""

    def __init__(self, db: Database):
        """Initialize history service.

        Args:
            db: Database instance
        """
        self.db = db
        self.taxonomy = TaxonomyService(db)

    # Land use
    def record_land_use(
        self,
        location_id: int,
        year: int,
        land_use_category_id: int,
        confirmed: Optional[bool] = None,
        item_number: Optional[int] = None,
    ) -> LandUseHistoryRecord:
        """Record the land-use category of a location for one timestep.

        Args:
            location_id: Location ID
            year: Calendar year the timestep represents
            land_use_category_id: Land-use category ID
            confirmed: True/False for a confirmed/provisional classification,
                None when not asserted
            item_number: Timestep. If None, the next timestep after the last
                recorded one is used, which requires year to be the latest.

        Returns:
            The stored record

        Raises:
            ValidationError: If year or timestep are invalid or out of order
            ConflictError: If the timestep or year is already recorded
            UnresolvedReferenceError: If the category does not exist
        """
        _validate_timestep(item_number, year)
        self.taxonomy.resolve(TaxonomyKind.LAND_USE_CATEGORY, land_use_category_id)

        history = self.db.list_land_use_history(location_id)
        if item_number is None:
            item_number = next_item_number(history)
        check_chronology(HistoryAxis.LAND_USE, location_id, history, item_number, year)

        self.db.create_land_use_record(
            location_id=location_id,
            item_number=item_number,
            year=year,
            land_use_category_id=land_use_category_id,
            confirmed=confirmed,
        )
        record = self.db.get_land_use_record(location_id, item_number)
        logger.info("Recorded land use for location %s: %s", location_id, record)
        return record

    def correct_land_use(
        self,
        location_id: int,
        item_number: int,
        land_use_category_id: Optional[int] = None,
        confirmed: Optional[bool] = None,
        update_confirmed: bool = False,
    ) -> LandUseHistoryRecord:
        """Correct the classification of an existing land-use timestep.

        Timestep and year are never changed.

        Args:
            update_confirmed: If True, write confirmed even if it's None
                (resets the flag to "not asserted")

        Raises:
            NotFoundError: If the timestep does not exist
            UnresolvedReferenceError: If the new category does not exist
            ValidationError: If nothing would change
        """
        if land_use_category_id is None and confirmed is None and not update_confirmed:
            raise errors.ValidationError("Nothing to correct")
        if land_use_category_id is not None:
            self.taxonomy.resolve(TaxonomyKind.LAND_USE_CATEGORY, land_use_category_id)

        self.db.update_land_use_record(
            location_id=location_id,
            item_number=item_number,
            land_use_category_id=land_use_category_id,
            confirmed=confirmed,
            update_confirmed=update_confirmed,
        )
        record = self.db.get_land_use_record(location_id, item_number)
        logger.info("Corrected land use for location %s: %s", location_id, record)
        return record

    def get_land_use_record(self, location_id: int, item_number: int) -> Optional[LandUseHistoryRecord]:
        """Get one land-use timestep, or None if not recorded."""
        return self.db.get_land_use_record(location_id, item_number)

    def get_land_use_history(self, location_id: int) -> list[LandUseHistoryRecord]:
        """Get a location's land-use history in chronological order.

        An unclassified location has an empty history.
        """
        return sort_history(self.db.list_land_use_history(location_id))

    # Land cover
    def record_cover_type(
        self,
        location_id: int,
        year: int,
        cover_type_id: int,
        item_number: Optional[int] = None,
    ) -> CoverTypeHistoryRecord:
        """Record the land-cover type of a location for one timestep.

        Follows the same rules as record_land_use.
        """
        _validate_timestep(item_number, year)
        self.taxonomy.resolve(TaxonomyKind.COVER_TYPE, cover_type_id)

        history = self.db.list_cover_type_history(location_id)
        if item_number is None:
            item_number = next_item_number(history)
        check_chronology(HistoryAxis.LAND_COVER, location_id, history, item_number, year)

        self.db.create_cover_type_record(
            location_id=location_id,
            item_number=item_number,
            year=year,
            cover_type_id=cover_type_id,
        )
        record = self.db.get_cover_type_record(location_id, item_number)
        logger.info("Recorded land cover for location %s: %s", location_id, record)
        return record

    def correct_cover_type(
        self, location_id: int, item_number: int, cover_type_id: int
    ) -> CoverTypeHistoryRecord:
        """Replace the cover type of an existing land-cover timestep.

        Raises:
            NotFoundError: If the timestep does not exist
            UnresolvedReferenceError: If the cover type does not exist
        """
        self.taxonomy.resolve(TaxonomyKind.COVER_TYPE, cover_type_id)
        self.db.update_cover_type_record(location_id, item_number, cover_type_id)
        record = self.db.get_cover_type_record(location_id, item_number)
        logger.info("Corrected land cover for location %s: %s", location_id, record)
        return record

    def get_cover_type_record(
        self, location_id: int, item_number: int
    ) -> Optional[CoverTypeHistoryRecord]:
        """Get one land-cover timestep, or None if not recorded."""
        return self.db.get_cover_type_record(location_id, item_number)

    def get_cover_type_history(self, location_id: int) -> list[CoverTypeHistoryRecord]:
        """Get a location's land-cover history in chronological order."""
        return sort_history(self.db.list_cover_type_history(location_id))

    def list_locations(self, axis: HistoryAxis) -> list[int]:
        """List locations that have at least one timestep on an axis."""
        if axis is HistoryAxis.LAND_USE:
            return self.db.list_land_use_locations()
        return self.db.list_cover_type_locations()
