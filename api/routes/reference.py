"""
Reference data endpoint.

GET /api/v1/reference/options  → type, status, tag and year option lists

Status and tag lists are derived from the whole collection on every
request, so they always reflect the current snapshot.
"""

from fastapi import APIRouter, Depends

from api.datastore import SnapshotStore, get_snapshot, get_store
from api.models import ErrorResponse, OptionsResponse, TypeOptionOut
from medialog.loader import Snapshot
from medialog.options import build_options
from utils.formatting import type_label

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get(
    "/options",
    response_model=OptionsResponse,
    summary="List filter and report options",
    responses={503: {"model": ErrorResponse, "description": "Data file could not be loaded"}},
)
def list_options(
    snapshot: Snapshot = Depends(get_snapshot),
    store: SnapshotStore = Depends(get_store),
) -> OptionsResponse:
    """Return selectable values, each list prefixed with 'all' except years."""
    options = build_options(snapshot.records, collation_key=store.collation_key)
    return OptionsResponse(
        types=[TypeOptionOut(value=t, label=type_label(t)) for t in options.types],
        statuses=options.statuses,
        tags=options.tags,
        years=options.years,
    )
