"""Domain model entities for landledger.

These are pure data classes representing land-accounting concepts,
independent of database schema. Relations between entities are carried by
id; the only embedded values are resolved taxonomy entries on history
records, which are themselves immutable.

Each entity renders a stable audit form through ``__str__``. Rendering is
for logs and diagnostics only and never raises on partially loaded data.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TaxonomyKind(Enum):
    """External enumerations referenced by history and mapping records."""

    LAND_USE_CATEGORY = "land-use-category"
    COVER_TYPE = "cover-type"
    POOL = "pool"
    REPORTING_VARIABLE = "reporting-variable"
    EMISSION_TYPE = "emission-type"

    @property
    def label(self) -> str:
        """Human readable name used in messages."""
        return self.value.replace("-", " ").capitalize()


class HistoryAxis(Enum):
    """The two independent classification tracks of a location."""

    LAND_USE = "land-use"
    LAND_COVER = "land-cover"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ")


@dataclass(frozen=True)
class LandUseCategory:
    """Land-use category taxonomy entry (e.g. Forest Land, Cropland)."""

    id: int
    name: str
    description: Optional[str] = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CoverType:
    """Land-cover type taxonomy entry."""

    id: int
    name: str
    description: Optional[str] = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Pool:
    """Carbon pool taxonomy entry."""

    id: int
    name: str
    description: Optional[str] = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ReportingVariable:
    """Reporting variable taxonomy entry (e.g. a UNFCCC category)."""

    id: int
    name: str
    description: Optional[str] = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EmissionType:
    """Emission type taxonomy entry."""

    id: int
    name: str
    description: Optional[str] = None

    def __str__(self) -> str:
        return self.name


TaxonomyEntry = Union[LandUseCategory, CoverType, Pool, ReportingVariable, EmissionType]

TAXONOMY_ENTITIES: dict[TaxonomyKind, type] = {
    TaxonomyKind.LAND_USE_CATEGORY: LandUseCategory,
    TaxonomyKind.COVER_TYPE: CoverType,
    TaxonomyKind.POOL: Pool,
    TaxonomyKind.REPORTING_VARIABLE: ReportingVariable,
    TaxonomyKind.EMISSION_TYPE: EmissionType,
}


@dataclass(frozen=True)
class LandUseHistoryRecord:
    """One land-use timestep of a location.

    ``item_number`` is None only before storage assigns it. ``confirmed`` is
    None when the classification was neither confirmed nor marked provisional.
    """

    location_id: int
    item_number: Optional[int]
    year: int
    land_use_category: Optional[LandUseCategory]
    confirmed: Optional[bool] = None

    def __str__(self) -> str:
        category = None if self.land_use_category is None else self.land_use_category.name
        return (
            f"Timestep: {self.item_number}, Year: {self.year}, "
            f"Land Use: {category}, Confirmed: {self.confirmed}"
        )


@dataclass(frozen=True)
class CoverTypeHistoryRecord:
    """One land-cover timestep of a location."""

    location_id: int
    item_number: Optional[int]
    year: int
    cover_type: Optional[CoverType]

    def __str__(self) -> str:
        cover_type = None if self.cover_type is None else str(self.cover_type)
        return f"Timestep: {self.item_number}, Year: {self.year}, Cover Type: {cover_type}"


HistoryRecord = Union[LandUseHistoryRecord, CoverTypeHistoryRecord]


@dataclass(frozen=True)
class Date:
    """Shared temporal reference, one per calendar year."""

    id: Optional[int]
    year: Optional[int]

    def __str__(self) -> str:
        return f"Date Id: {self.id}, Year: {self.year}"


@dataclass(frozen=True)
class ReportingVariableEmissionType:
    """Versioned association of a reporting variable with an emission type.

    Every revision is stored as its own row; the highest version of a pair is
    the authoritative one.
    """

    id: int
    reporting_variable_id: int
    emission_type_id: int
    version: int

    def __str__(self) -> str:
        return (
            f"Reporting Variable Id: {self.reporting_variable_id}, "
            f"Emission Type Id: {self.emission_type_id}, "
            f"Version: {self.version}"
        )


@dataclass(frozen=True)
class FluxToUnfcccVariable:
    """Rule mapping a carbon flux (start pool -> end pool) to a reporting variable."""

    id: int
    start_pool_id: int
    end_pool_id: int
    unfccc_variable_id: int
    rule: str
    version: int

    def __str__(self) -> str:
        return (
            f"Id: {self.id}, Start Pool Id: {self.start_pool_id}, "
            f"End Pool Id: {self.end_pool_id}, "
            f"UNFCCC Variable Id: {self.unfccc_variable_id}, "
            f"Rule: {self.rule}, Version: {self.version}"
        )
