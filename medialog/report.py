"""
Periodic (monthly / yearly) report aggregation.

Only records with a resolvable completion date take part.  A window is a
year plus either every month or a single calendar month; an empty window
produces zero counts and sentinel labels rather than an error.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable

from medialog.filters import ALL
from medialog.records import KNOWN_TYPE_VALUES, Record
from medialog.sorting import sort_by_date_desc
from utils.formatting import format_minutes, format_rating, range_label
from utils.patterns import MONTH_VALUE
from utils.strings import safe_text

TOP_TAG_LIMIT = 18


def parse_month(value: Any) -> int | None:
    """Parse a month selector value.

    "all", None and "" mean every month; otherwise 1-12 given as an int or
    as a string with optional zero padding.

    Raises:
        ValueError: For anything else.
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        if 1 <= value <= 12:
            return value
        raise ValueError(f"month must be 'all' or 1-12, got {value!r}")
    text = safe_text(value).strip()
    if not text or text == ALL:
        return None
    if not MONTH_VALUE.match(text):
        raise ValueError(f"month must be 'all' or 1-12, got {value!r}")
    return int(text)


@dataclass(frozen=True)
class ReportWindow:
    """A report period: one year, optionally narrowed to one month."""

    year: int
    month: int | None = None

    def __post_init__(self) -> None:
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"month must be 1-12, got {self.month}")

    @classmethod
    def parse(cls, year: Any, month: Any = ALL) -> "ReportWindow":
        try:
            year_num = int(safe_text(year).strip())
        except ValueError:
            raise ValueError(f"year must be an integer, got {year!r}") from None
        return cls(year=year_num, month=parse_month(month))

    @property
    def is_yearly(self) -> bool:
        return self.month is None

    @property
    def month_value(self) -> str:
        """Selector value: "all" or a zero-padded month."""
        return ALL if self.month is None else f"{self.month:02d}"

    @property
    def label(self) -> str:
        return range_label(self.year, self.month)

    def contains(self, day: date) -> bool:
        if day.year != self.year:
            return False
        return self.month is None or day.month == self.month


def _zero_by_type() -> dict[str, int]:
    return {t: 0 for t in KNOWN_TYPE_VALUES}


def _zero_sum_by_type() -> dict[str, float]:
    return {t: 0.0 for t in KNOWN_TYPE_VALUES}


@dataclass
class ReportResult:
    """Aggregated statistics for one report window.

    ``records`` holds the window's dated records, newest first.  Records of
    unknown categories count toward ``total``, minutes and tags but not
    toward the per-type counts or the average rating.
    """

    window: ReportWindow
    records: list[Record] = field(default_factory=list)
    count_by_type: dict[str, int] = field(default_factory=_zero_by_type)
    rating_sum_by_type: dict[str, float] = field(default_factory=_zero_sum_by_type)
    rating_count_by_type: dict[str, int] = field(default_factory=_zero_by_type)
    total_minutes: float = 0.0
    top_tags: list[tuple[str, int]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def rating_count(self) -> int:
        return sum(self.rating_count_by_type.values())

    @property
    def average_rating(self) -> float | None:
        """Mean of all numeric ratings in the window, or None if there are none."""
        count = self.rating_count
        if not count:
            return None
        return sum(self.rating_sum_by_type.values()) / count

    @property
    def average_rating_label(self) -> str:
        return format_rating(self.average_rating)

    @property
    def total_minutes_label(self) -> str:
        return format_minutes(self.total_minutes)


def records_in_window(records: Iterable[Record], window: ReportWindow) -> list[Record]:
    """Dated records falling inside *window*, newest first."""
    in_window = [
        r for r in records
        if r.completed_on is not None and window.contains(r.completed_on)
    ]
    return sort_by_date_desc(in_window)


def rank_tags(records: Iterable[Record], limit: int = TOP_TAG_LIMIT) -> list[tuple[str, int]]:
    """Tag frequencies, most frequent first, ties in first-seen order."""
    counts: Counter[str] = Counter()
    for record in records:
        counts.update(record.clean_tags)
    return counts.most_common(limit)


def compute_report(records: Iterable[Record], window: ReportWindow) -> ReportResult:
    """Aggregate the records that fall inside *window*."""
    result = ReportResult(window=window, records=records_in_window(records, window))

    for record in result.records:
        kind = record.type
        if kind in result.count_by_type:
            result.count_by_type[kind] += 1
            # null, "" and text ratings are left out of the average, not read as 0
            if record.rating is not None:
                result.rating_sum_by_type[kind] += record.rating
                result.rating_count_by_type[kind] += 1
        result.total_minutes += record.duration_min

    result.top_tags = rank_tags(result.records)
    return result
