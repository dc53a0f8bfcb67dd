"""Database factory functions.

The database file is taken from, in order: an explicit path, the
LANDLEDGER_DB_PATH environment variable, then ~/.landledger/landledger.db.
"""

import os
from pathlib import Path
from typing import Optional

from landledger.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV_VAR = "LANDLEDGER_DB_PATH"

# Seconds a writer waits for another connection's lock before failing
SQLITE_BUSY_TIMEOUT = 30.0


def default_database_path() -> Path:
    """Return the per-user database file."""
    return Path.home() / ".landledger" / "landledger.db"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the database file and make sure its directory exists.

    An empty LANDLEDGER_DB_PATH counts as unset.
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR) or None

    path = default_database_path() if database_path is None else Path(database_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(
    database_path: Optional[str] = None, busy_timeout: float = SQLITE_BUSY_TIMEOUT
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Several instances may share one file; each opens its own connection, and
    version-guarded writes decide which of them wins.

    Args:
        database_path: Path to SQLite database file, see resolve_database_path
        busy_timeout: Seconds to wait on a locked database file

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    return SQLAlchemyDatabase(f"sqlite:///{path}", connect_args={"timeout": busy_timeout})
