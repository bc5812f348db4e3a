"""
GET /api/v1/catalog endpoint.

Filters the current snapshot by type, status, tag and keyword and returns
the matches in catalog order (dated records newest first, then undated
records by year).  Every request recomputes from the full collection.
"""

from fastapi import APIRouter, Depends
from fastapi import Query as FQuery

from api.datastore import get_snapshot
from api.models import CatalogResponse, ErrorResponse, FilterStateOut, RecordOut
from medialog.filters import ALL, FilterState, apply_filter
from medialog.loader import Snapshot

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get(
    "",
    response_model=CatalogResponse,
    summary="Filter and sort the catalog",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown type", "content": {"application/json": {"example": {"error": "Bad request", "detail": "type must be one of: ['all', 'book', 'movie', 'podcast', 'song'], got 'game'", "status_code": 400}}}},
        503: {"model": ErrorResponse, "description": "Data file could not be loaded"},
    },
)
def list_catalog(
    type_: str = FQuery(ALL, alias="type", description="all | book | movie | podcast | song"),
    status: str = FQuery(ALL, description="Exact status, or 'all'"),
    tag: str = FQuery(ALL, description="Exact tag, or 'all'"),
    q: str = FQuery("", description="Case-insensitive keyword"),
    snapshot: Snapshot = Depends(get_snapshot),
) -> CatalogResponse:
    """Return records matching every active criterion."""
    state = FilterState(type=type_, status=status, tag=tag, keyword=q)
    items = apply_filter(snapshot.records, state)
    return CatalogResponse(
        filters=FilterStateOut(
            type=state.type, status=state.status, tag=state.tag, keyword=state.keyword,
        ),
        count=len(items),
        items=[RecordOut.from_record(r) for r in items],
    )
