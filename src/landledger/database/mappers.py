"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so column names can change without
touching the domain entities.
"""

from typing import Any

from landledger.domain import entities as domain
from landledger.database.models import (
    LocationLandUseHistory as ORMLandUseHistory,
    LocationCoverTypeHistory as ORMCoverTypeHistory,
    Date as ORMDate,
    ReportingVariableEmissionType as ORMReportingVariableEmissionType,
    FluxToUnfcccVariable as ORMFluxToUnfcccVariable,
)


def taxonomy_entry_to_domain(kind: domain.TaxonomyKind, orm_entry: Any) -> domain.TaxonomyEntry:
    """Convert a SQLAlchemy taxonomy row to the domain entity of its kind."""
    entity_class = domain.TAXONOMY_ENTITIES[kind]
    return entity_class(
        id=orm_entry.id,
        name=orm_entry.name,
        description=orm_entry.description,
    )


def land_use_history_to_domain(orm_record: ORMLandUseHistory) -> domain.LandUseHistoryRecord:
    """Convert SQLAlchemy land-use history row to domain LandUseHistoryRecord."""
    category = orm_record.land_use_category
    return domain.LandUseHistoryRecord(
        location_id=orm_record.location_id,
        item_number=orm_record.item_number,
        year=orm_record.year,
        land_use_category=(
            None
            if category is None
            else taxonomy_entry_to_domain(domain.TaxonomyKind.LAND_USE_CATEGORY, category)
        ),
        confirmed=orm_record.confirmed,
    )


def cover_type_history_to_domain(orm_record: ORMCoverTypeHistory) -> domain.CoverTypeHistoryRecord:
    """Convert SQLAlchemy cover-type history row to domain CoverTypeHistoryRecord."""
    cover_type = orm_record.cover_type
    return domain.CoverTypeHistoryRecord(
        location_id=orm_record.location_id,
        item_number=orm_record.item_number,
        year=orm_record.year,
        cover_type=(
            None
            if cover_type is None
            else taxonomy_entry_to_domain(domain.TaxonomyKind.COVER_TYPE, cover_type)
        ),
    )


def date_to_domain(orm_date: ORMDate) -> domain.Date:
    """Convert SQLAlchemy Date model to domain Date entity."""
    return domain.Date(id=orm_date.id, year=orm_date.year)


def reporting_variable_emission_type_to_domain(
    orm_association: ORMReportingVariableEmissionType,
) -> domain.ReportingVariableEmissionType:
    """Convert SQLAlchemy association revision to domain entity."""
    return domain.ReportingVariableEmissionType(
        id=orm_association.id,
        reporting_variable_id=orm_association.reporting_variable_id,
        emission_type_id=orm_association.emission_type_id,
        version=orm_association.version,
    )


def flux_to_unfccc_variable_to_domain(
    orm_mapping: ORMFluxToUnfcccVariable,
) -> domain.FluxToUnfcccVariable:
    """Convert SQLAlchemy mapping rule to domain FluxToUnfcccVariable entity."""
    return domain.FluxToUnfcccVariable(
        id=orm_mapping.id,
        start_pool_id=orm_mapping.start_pool_id,
        end_pool_id=orm_mapping.end_pool_id,
        unfccc_variable_id=orm_mapping.unfccc_variable_id,
        rule=orm_mapping.rule,
        version=orm_mapping.version,
    )
