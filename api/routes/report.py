"""
GET /api/v1/report endpoint.

Aggregates dated records for one year, optionally narrowed to one month:
total, per-category counts, average rating, total minutes, top tags and
the window's records newest first.  When no year is given the newest year
with dated records is used (or the current year if there are none).
"""

from fastapi import APIRouter, Depends
from fastapi import Query as FQuery

from api.datastore import get_snapshot
from api.models import ErrorResponse, RecordOut, ReportResponse, TagCountOut
from medialog.filters import ALL
from medialog.loader import Snapshot
from medialog.options import year_values
from medialog.report import ReportResult, ReportWindow, compute_report

router = APIRouter(prefix="/report", tags=["report"])


def report_response(result: ReportResult) -> ReportResponse:
    window = result.window
    return ReportResponse(
        year=window.year,
        month=window.month_value,
        range_label=window.label,
        total=result.total,
        count_by_type=result.count_by_type,
        average_rating=result.average_rating,
        average_rating_label=result.average_rating_label,
        total_minutes=result.total_minutes,
        total_minutes_label=result.total_minutes_label,
        top_tags=[TagCountOut(tag=t, count=c) for t, c in result.top_tags],
        records=[RecordOut.from_record(r) for r in result.records],
    )


@router.get(
    "",
    response_model=ReportResponse,
    summary="Monthly or yearly report",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid year or month", "content": {"application/json": {"example": {"error": "Bad request", "detail": "month must be 'all' or 1-12, got '13'", "status_code": 400}}}},
        503: {"model": ErrorResponse, "description": "Data file could not be loaded"},
    },
)
def get_report(
    year: int | None = FQuery(None, description="Calendar year; defaults to the newest year with data"),
    month: str = FQuery(ALL, description="'all' or 1-12"),
    snapshot: Snapshot = Depends(get_snapshot),
) -> ReportResponse:
    """Aggregate the records completed inside the selected window."""
    if year is None:
        year = year_values(snapshot.records)[0]
    window = ReportWindow.parse(year, month)
    return report_response(compute_report(snapshot.records, window))
