"""Quick statistics over the whole catalog (sidebar of the catalog page)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from medialog.records import KNOWN_TYPE_VALUES, Record
from utils.formatting import NOT_RECORDED_LABEL, format_number

# Statuses such as 已读 / 已看 / 已听 mark an item as finished.
COMPLETED_STATUS_MARKER = "已"


def _zero_by_type() -> dict[str, int]:
    return {t: 0 for t in KNOWN_TYPE_VALUES}


@dataclass
class CatalogSummary:
    total: int = 0
    completed: int = 0
    count_by_type: dict[str, int] = field(default_factory=_zero_by_type)
    total_minutes: float = 0.0

    @property
    def total_minutes_label(self) -> str:
        if not self.total_minutes:
            return NOT_RECORDED_LABEL
        return f"{format_number(self.total_minutes)} 分钟"


def is_completed(record: Record) -> bool:
    """Finished items carry a completion marker in the status and a valid date."""
    return COMPLETED_STATUS_MARKER in record.status and record.completed_on is not None


def summarize(records: Iterable[Record]) -> CatalogSummary:
    summary = CatalogSummary()
    for record in records:
        summary.total += 1
        if is_completed(record):
            summary.completed += 1
        if record.type in summary.count_by_type:
            summary.count_by_type[record.type] += 1
        summary.total_minutes += record.duration_min
    return summary
