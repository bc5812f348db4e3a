"""Selectable option lists derived from the full record collection.

Tag and status options are the deduplicated, non-empty trimmed values found
across every record, sorted with a collation key supplied by the caller
(see ``utils.strings.collation_key_for``).  Year options for the report
view come from dated records only.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Sequence

from medialog.filters import ALL
from medialog.records import KNOWN_TYPE_VALUES, Record
from utils.strings import collation_key_for

CollationKey = Callable[[str], Any]


def _sorted_unique(values: Iterable[str], collation_key: CollationKey | None) -> list[str]:
    unique = {v for v in values if v}
    return sorted(unique, key=collation_key or collation_key_for(None))


def tag_values(records: Iterable[Record], collation_key: CollationKey | None = None) -> list[str]:
    """Distinct tags across *records*, collated."""
    return _sorted_unique(
        (t.strip() for r in records for t in r.tags),
        collation_key,
    )


def status_values(records: Iterable[Record], collation_key: CollationKey | None = None) -> list[str]:
    """Distinct statuses across *records*, collated."""
    return _sorted_unique((r.status_value for r in records), collation_key)


def year_values(records: Iterable[Record], today: date | None = None) -> list[int]:
    """Distinct completion years, newest first.

    Falls back to the current calendar year when no record has a date.
    """
    years = {d.year for d in (r.completed_on for r in records) if d is not None}
    if not years:
        return [(today or date.today()).year]
    return sorted(years, reverse=True)


def with_all_sentinel(values: Sequence[str]) -> list[str]:
    return [ALL, *values]


@dataclass(frozen=True)
class FilterOptions:
    """Option lists for the catalog and report selectors.

    ``types``, ``statuses`` and ``tags`` start with the "all" sentinel;
    ``years`` is never empty.
    """

    types: list[str]
    statuses: list[str]
    tags: list[str]
    years: list[int]


def build_options(
    records: Sequence[Record],
    collation_key: CollationKey | None = None,
    today: date | None = None,
) -> FilterOptions:
    return FilterOptions(
        types=with_all_sentinel(KNOWN_TYPE_VALUES),
        statuses=with_all_sentinel(status_values(records, collation_key)),
        tags=with_all_sentinel(tag_values(records, collation_key)),
        years=year_values(records, today),
    )
