"""Domain layer for landledger application."""

from landledger.domain.taxonomy import TaxonomyService
from landledger.domain.history import HistoryService
from landledger.domain.dates import DateService
from landledger.domain.flux_mapping import FluxMappingService
from landledger.domain.emission_types import EmissionTypeService

__all__ = [
    "TaxonomyService",
    "HistoryService",
    "DateService",
    "FluxMappingService",
    "EmissionTypeService",
]
