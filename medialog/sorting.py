"""Display ordering for records.

Catalog order is a total order: dated records first, latest completion
timestamp first; undated records after them, highest numeric year first.
Python's sort is stable, so ties keep the order of the data file.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from medialog.records import Record


def catalog_sort_key(record: Record) -> tuple[int, Any]:
    completed = record.completed_at
    if completed is not None:
        # ascending distance from the far future is descending time
        return (0, datetime.max - completed)
    return (1, -record.year_value)


def sort_records(records: Iterable[Record]) -> list[Record]:
    """Return *records* in catalog display order as a new list."""
    return sorted(records, key=catalog_sort_key)


def sort_by_date_desc(records: Iterable[Record]) -> list[Record]:
    """Order dated records latest first, by full completion timestamp.

    Records without a completion date are skipped; callers pass sequences
    that were already restricted to dated records.
    """
    dated = [r for r in records if r.completed_at is not None]
    return sorted(dated, key=lambda r: r.completed_at, reverse=True)
