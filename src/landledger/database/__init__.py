"""Database layer for landledger application."""

from landledger.database.base import Database
from landledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
