"""Three-way ordering for history records and dates.

Comparisons are nullable-safe: whenever either key is None the comparison
reports "equal" instead of failing. Callers must not rely on the relative
order of records whose key has not been assigned yet.
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, Optional, TypeVar

from landledger.domain.entities import Date, HistoryRecord

T = TypeVar("T")


def compare_nullable(a: Optional[Any], b: Optional[Any]) -> int:
    """Compare two keys, returning -1, 0 or 1.

    Returns 0 when either key is None.
    """
    if a is None or b is None:
        return 0
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def comparator(key: Callable[[T], Optional[Any]]) -> Callable[[T, T], int]:
    """Build a nullable-safe three-way comparator from a key accessor."""

    def compare(left: T, right: T) -> int:
        return compare_nullable(key(left), key(right))

    return compare


compare_history_records: Callable[[HistoryRecord, HistoryRecord], int] = comparator(
    lambda record: record.item_number
)
compare_dates: Callable[[Date, Date], int] = comparator(lambda date: date.year)


def sort_history(records: Iterable[HistoryRecord]) -> list[HistoryRecord]:
    """Sort one location's history of one axis by timestep."""
    return sorted(records, key=cmp_to_key(compare_history_records))


def sort_dates(dates: Iterable[Date]) -> list[Date]:
    """Sort dates chronologically."""
    return sorted(dates, key=cmp_to_key(compare_dates))
