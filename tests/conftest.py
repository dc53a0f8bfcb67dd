"""Shared pytest fixtures for landledger tests."""

import logging
import tempfile
import os
import pytest

from landledger.database.factories import create_sqlite_database
from landledger.domain.entities import TaxonomyKind
from landledger.domain.taxonomy import TaxonomyService
from landledger.domain.history import HistoryService
from landledger.domain.dates import DateService
from landledger.domain.flux_mapping import FluxMappingService
from landledger.domain.emission_types import EmissionTypeService

LAND_USE_CATEGORIES = ["Forest Land", "Cropland", "Grassland", "Settlements"]
COVER_TYPES = ["Closed Forest", "Open Forest", "Bare Ground"]
POOLS = [
    "Aboveground Biomass",
    "Belowground Biomass",
    "Dead Wood",
    "Litter",
    "Soil Organic Carbon",
    "Atmosphere",
]
REPORTING_VARIABLES = ["CO2 Removals", "CO2 Emissions", "CH4 Emissions"]
EMISSION_TYPES = ["CO2", "CH4"]


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def taxonomy_service(temp_db):
    """Create a TaxonomyService with a temporary database."""
    return TaxonomyService(temp_db)


@pytest.fixture
def history_service(temp_db):
    """Create a HistoryService with a temporary database."""
    return HistoryService(temp_db)


@pytest.fixture
def date_service(temp_db):
    """Create a DateService with a temporary database."""
    return DateService(temp_db)


@pytest.fixture
def flux_mapping_service(temp_db):
    """Create a FluxMappingService with a temporary database."""
    return FluxMappingService(temp_db)


@pytest.fixture
def emission_type_service(temp_db):
    """Create an EmissionTypeService with a temporary database."""
    return EmissionTypeService(temp_db)


@pytest.fixture
def sample_taxonomy(taxonomy_service):
    """Create taxonomy entries and return their IDs by kind and name.

    Entries are created in list order, so in a fresh database pool IDs are
    1..6, reporting variable IDs 1..3 and emission type IDs 1..2.
    """
    entries = {
        TaxonomyKind.LAND_USE_CATEGORY: LAND_USE_CATEGORIES,
        TaxonomyKind.COVER_TYPE: COVER_TYPES,
        TaxonomyKind.POOL: POOLS,
        TaxonomyKind.REPORTING_VARIABLE: REPORTING_VARIABLES,
        TaxonomyKind.EMISSION_TYPE: EMISSION_TYPES,
    }
    ids = {}
    for kind, names in entries.items():
        ids[kind] = {name: taxonomy_service.create_entry(kind, name) for name in names}
    return ids


@pytest.fixture
def land_use_ids(sample_taxonomy):
    """Land-use category IDs by name."""
    return sample_taxonomy[TaxonomyKind.LAND_USE_CATEGORY]


@pytest.fixture
def cover_type_ids(sample_taxonomy):
    """Cover type IDs by name."""
    return sample_taxonomy[TaxonomyKind.COVER_TYPE]


@pytest.fixture
def sample_mapping(flux_mapping_service, sample_taxonomy):
    """Create the mapping 2 -> 5 on variable 3 with rule 'ignore'."""
    return flux_mapping_service.create_mapping(
        start_pool_id=2, end_pool_id=5, unfccc_variable_id=3, rule="ignore"
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
