"""Tests for taxonomy and history commands."""

from landledger.cli.main import cli


def test_taxonomy_add(cli_runner, temp_db):
    """Test adding a taxonomy entry."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "taxonomy", "add", "land-use-category", "Forest Land"]
    )

    assert result.exit_code == 0
    assert "Created land use category 'Forest Land' (ID: 1)" in result.output


def test_taxonomy_add_duplicate(cli_runner, temp_db, sample_taxonomy):
    """Test that a duplicate name exits with the conflict code."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "taxonomy", "add", "pool", "Litter"]
    )

    assert result.exit_code == 5
    assert "already exists" in result.output


def test_taxonomy_list(cli_runner, temp_db, sample_taxonomy):
    """Test listing a taxonomy."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "taxonomy", "list", "cover-type"])

    assert result.exit_code == 0
    assert "Cover type entries:" in result.output
    assert "Closed Forest" in result.output
    assert "Bare Ground" in result.output


def test_taxonomy_list_empty(cli_runner, temp_db):
    """Test listing an empty taxonomy."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "taxonomy", "list", "pool"])

    assert result.exit_code == 0
    assert "No pool entries found." in result.output


def test_record_use_by_name(cli_runner, temp_db, sample_taxonomy):
    """Test recording land use with a category name."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "history", "record-use", "12", "1990", "Forest Land", "--confirmed"],
    )

    assert result.exit_code == 0
    assert (
        "Recorded land use for location 12: Timestep: 1, Year: 1990, Land Use: Forest Land, Confirmed: True"
        in result.output
    )


def test_record_use_by_id(cli_runner, temp_db, land_use_ids):
    """Test recording land use with a category ID."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "history", "record-use", "12", "1990", str(land_use_ids["Cropland"])],
    )

    assert result.exit_code == 0
    assert "Land Use: Cropland, Confirmed: None" in result.output


def test_record_use_unknown_category(cli_runner, temp_db, sample_taxonomy):
    """Test that an unknown category exits with the unresolved reference code."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "history", "record-use", "12", "1990", "Wetlands"]
    )

    assert result.exit_code == 6
    assert "'Wetlands' not found" in result.output


def test_record_use_out_of_order(cli_runner, temp_db, history_service, land_use_ids):
    """Test that chronology violations exit with the validation code."""
    history_service.record_land_use(12, 2000, land_use_ids["Cropland"])

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "history", "record-use", "12", "1990", "Forest Land"]
    )

    assert result.exit_code == 1
    assert "out of chronological order" in result.output


def test_record_cover(cli_runner, temp_db, sample_taxonomy):
    """Test recording land cover."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "history", "record-cover", "12", "2000", "Open Forest", "--timestep", "3"],
    )

    assert result.exit_code == 0
    assert "Timestep: 3, Year: 2000, Cover Type: Open Forest" in result.output


def test_correct_use(cli_runner, temp_db, history_service, land_use_ids):
    """Test correcting a land-use timestep."""
    history_service.record_land_use(12, 1990, land_use_ids["Forest Land"], confirmed=True)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "history", "correct-use", "12", "1", "--category", "Grassland"],
    )

    assert result.exit_code == 0
    assert "Land Use: Grassland, Confirmed: True" in result.output


def test_correct_use_clear_confirmed(cli_runner, temp_db, history_service, land_use_ids):
    """Test resetting the confirmed flag."""
    history_service.record_land_use(12, 1990, land_use_ids["Forest Land"], confirmed=True)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "history", "correct-use", "12", "1", "--clear-confirmed"]
    )

    assert result.exit_code == 0
    assert "Confirmed: None" in result.output


def test_correct_use_conflicting_flags(cli_runner, temp_db, sample_taxonomy):
    """Test that --clear-confirmed cannot be combined with --confirmed."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "history", "correct-use", "12", "1", "--clear-confirmed", "--confirmed"],
    )

    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_correct_use_missing_timestep(cli_runner, temp_db, sample_taxonomy):
    """Test correcting a missing timestep exits with the not found code."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "history", "correct-use", "12", "4", "--provisional"]
    )

    assert result.exit_code == 3
    assert "No land use timestep 4" in result.output


def test_show_history(cli_runner, temp_db, history_service, land_use_ids, cover_type_ids):
    """Test showing both axes in chronological order."""
    history_service.record_land_use(12, 2000, land_use_ids["Cropland"], item_number=2)
    history_service.record_land_use(12, 1990, land_use_ids["Forest Land"], item_number=1)
    history_service.record_cover_type(12, 1995, cover_type_ids["Bare Ground"])

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "history", "show", "12"])

    assert result.exit_code == 0
    assert "Land use history of location 12:" in result.output
    assert "Land cover history of location 12:" in result.output
    assert result.output.index("Year: 1990") < result.output.index("Year: 2000")
    assert "Cover Type: Bare Ground" in result.output


def test_show_history_empty(cli_runner, temp_db):
    """Test showing a location with no history."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "history", "show", "404", "--axis", "land-use"]
    )

    assert result.exit_code == 0
    assert "(no timesteps recorded)" in result.output
    assert "Land cover history" not in result.output


def test_locations(cli_runner, temp_db, history_service, land_use_ids):
    """Test listing locations with land-use history."""
    history_service.record_land_use(7, 1990, land_use_ids["Forest Land"])

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "history", "locations"])

    assert result.exit_code == 0
    assert "Location 7" in result.output


def test_db_path_from_environment(cli_runner, temp_db, sample_taxonomy, monkeypatch):
    """Test that LANDLEDGER_DB_PATH selects the database."""
    monkeypatch.setenv("LANDLEDGER_DB_PATH", temp_db.database_path)

    result = cli_runner.invoke(cli, ["taxonomy", "list", "land-use-category"])

    assert result.exit_code == 0
    assert "Forest Land" in result.output


def test_help(cli_runner):
    """Test that top-level help does not need a database."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "Usage:" in result.output
