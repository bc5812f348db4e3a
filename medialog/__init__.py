"""
Media log core -- records, filtering, sorting, option sets and reports.

Re-exports key entry points so callers can do::

    from medialog import FilterState, apply_filter, compute_report

Nothing in this package depends on the web layer.
"""

from medialog.errors import DataLoadError
from medialog.filters import ALL, FilterState, apply_filter, matches
from medialog.loader import Snapshot, load_snapshot
from medialog.options import FilterOptions, build_options
from medialog.records import KNOWN_TYPES, MediaType, Record, parse_date, parse_timestamp
from medialog.report import ReportResult, ReportWindow, compute_report
from medialog.sorting import sort_records
from medialog.summary import CatalogSummary, summarize

__all__ = [
    "ALL",
    "CatalogSummary",
    "DataLoadError",
    "FilterOptions",
    "FilterState",
    "KNOWN_TYPES",
    "MediaType",
    "Record",
    "ReportResult",
    "ReportWindow",
    "Snapshot",
    "apply_filter",
    "build_options",
    "compute_report",
    "load_snapshot",
    "matches",
    "parse_date",
    "parse_timestamp",
    "sort_records",
    "summarize",
]
