"""Dashboard summary endpoint for the catalog sidebar."""

from fastapi import APIRouter, Depends

from api.datastore import get_snapshot
from api.models import ErrorResponse, SummaryResponse
from medialog.loader import Snapshot
from medialog.summary import summarize

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/summary",
    response_model=SummaryResponse,
    summary="Catalog quick statistics",
    responses={503: {"model": ErrorResponse, "description": "Data file could not be loaded"}},
)
def dashboard_summary(snapshot: Snapshot = Depends(get_snapshot)) -> SummaryResponse:
    """Return totals over the whole collection.

    Includes:
    - Record count and finished count (status marked 已 and dated)
    - Counts per category
    - Recorded minutes
    """
    summary = summarize(snapshot.records)
    return SummaryResponse(
        total=summary.total,
        completed=summary.completed,
        count_by_type=summary.count_by_type,
        total_minutes=summary.total_minutes,
        total_minutes_label=summary.total_minutes_label,
    )
