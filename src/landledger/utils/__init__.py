"""Utility functions for landledger."""

from landledger.utils.logging import configure_logging
from landledger.utils.taxonomy_resolver import resolve_entry

__all__ = ["configure_logging", "resolve_entry"]
