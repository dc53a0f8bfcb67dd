"""Date domain service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from landledger.domain import errors
from landledger.domain.entities import Date as DateEntity
from landledger.domain.ordering import sort_dates

if TYPE_CHECKING:
    from landledger.database.base import Database

logger = logging.getLogger(__name__)


class DateService:
    """Service for the shared calendar-year references."""

    def __init__(self, db: Database):
        """Initialize date service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_date(self, year: int) -> DateEntity:
        """Create the date row of a year.

        Args:
            year: Calendar year

        Returns:
            The stored date

        Raises:
            ValidationError: If year is not a positive integer
            ConflictError: If the year already has a date
        """
        if not isinstance(year, int) or year <= 0:
            raise errors.ValidationError(f"Invalid year: {year}")

        if self.db.get_date_by_year(year) is not None:
            raise errors.ConflictError(errors.duplicate_date_year(year))

        date_id = self.db.create_date(year)
        date = self.db.get_date(date_id)
        logger.info("Created %s", date)
        return date

    def get_date(self, date_id: int) -> Optional[DateEntity]:
        """Get date by ID, or None if not found."""
        return self.db.get_date(date_id)

    def get_date_by_year(self, year: int) -> Optional[DateEntity]:
        """Get date by year, or None if not found."""
        return self.db.get_date_by_year(year)

    def list_dates(self) -> list[DateEntity]:
        """List dates ordered by year."""
        return sort_dates(self.db.list_dates())
