"""SQLAlchemy models for landledger database."""

from datetime import datetime, UTC
from typing import Any
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class LandUseCategory(Base):
    """Land-use category taxonomy model."""

    __tablename__ = "land_use_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)


class CoverType(Base):
    """Land-cover type taxonomy model."""

    __tablename__ = "cover_types"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)


class Pool(Base):
    """Carbon pool taxonomy model."""

    __tablename__ = "pools"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)


class ReportingVariable(Base):
    """Reporting variable taxonomy model."""

    __tablename__ = "reporting_variables"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)


class EmissionType(Base):
    """Emission type taxonomy model."""

    __tablename__ = "emission_types"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)


class LocationLandUseHistory(Base):
    """Land-use timestep of a location."""

    __tablename__ = "location_land_uses_history"

    id = Column(Integer, primary_key=True)
    location_id = Column(Integer, nullable=False, index=True)
    item_number = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    land_use_category_id = Column(Integer, ForeignKey("land_use_categories.id"), nullable=False)
    confirmed = Column(Boolean, nullable=True)
    recorded_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint("location_id", "item_number", name="uq_land_use_location_item"),
        UniqueConstraint("location_id", "year", name="uq_land_use_location_year"),
    )

    land_use_category = relationship("LandUseCategory")


class LocationCoverTypeHistory(Base):
    """Land-cover timestep of a location."""

    __tablename__ = "location_cover_types_history"

    id = Column(Integer, primary_key=True)
    location_id = Column(Integer, nullable=False, index=True)
    item_number = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    cover_type_id = Column(Integer, ForeignKey("cover_types.id"), nullable=False)
    recorded_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint("location_id", "item_number", name="uq_cover_type_location_item"),
        UniqueConstraint("location_id", "year", name="uq_cover_type_location_year"),
    )

    cover_type = relationship("CoverType")


class Date(Base):
    """Calendar year reference model."""

    __tablename__ = "dates"

    id = Column(Integer, primary_key=True)
    year = Column(Integer, unique=True, nullable=False)


class ReportingVariableEmissionType(Base):
    """One revision of a reporting variable / emission type association."""

    __tablename__ = "reporting_variables_emission_types"

    id = Column(Integer, primary_key=True)
    reporting_variable_id = Column(Integer, nullable=False, index=True)
    emission_type_id = Column(Integer, nullable=False)
    version = Column(Integer, nullable=False, default=1)

    # Two revisions racing for the same version cannot both be inserted
    __table_args__ = (
        UniqueConstraint(
            "reporting_variable_id",
            "emission_type_id",
            "version",
            name="uq_reporting_variable_emission_type_version",
        ),
    )


class FluxToUnfcccVariable(Base):
    """Flux to UNFCCC variable mapping rule."""

    __tablename__ = "fluxes_to_unfccc_variables"

    id = Column(Integer, primary_key=True)
    start_pool_id = Column(Integer, nullable=False)
    end_pool_id = Column(Integer, nullable=False)
    unfccc_variable_id = Column(Integer, nullable=False)
    rule = Column(String, nullable=False)
    version = Column(Integer, nullable=False, default=1)


def create_session_factory(database_url: str, **engine_options: Any) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory and the tables it needs."""
    engine = create_engine(database_url, echo=False, **engine_options)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
