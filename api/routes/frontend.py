"""
Frontend HTML routes.

Serves the Jinja2 templates for the catalog page, its results partial, and
the report page.

Routes:
    GET /                  → index.html (tabs, filters, tag cloud, quick stats)
    GET /partials/results  → partials/results.html (results list only)
    GET /report            → report.html (monthly / yearly report, printable)

Full page loads re-read the data source, so editing the data file and
reloading the page shows the new data.  A failed load renders the page
with the load-failure message instead of a list.
"""

from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.datastore import get_store
from medialog.filters import ALL, FilterState, apply_filter
from medialog.loader import Snapshot
from medialog.options import build_options, year_values
from medialog.records import KNOWN_TYPE_VALUES
from medialog.report import ReportWindow, compute_report
from medialog.summary import summarize

router = APIRouter(tags=["frontend"])

# Templates instance is set by create_app() after mounting.
_templates: Jinja2Templates | None = None

MONTH_CHOICES = [ALL] + [f"{m:02d}" for m in range(1, 13)]


def set_templates(t: Jinja2Templates) -> None:
    global _templates
    _templates = t


def _tmpl() -> Jinja2Templates:
    if _templates is None:
        raise RuntimeError("Templates not initialised; call set_templates() first")
    return _templates


def _parse_filters(request: Request) -> FilterState:
    """Build the filter state from the query string.

    Unknown categories fall back to "all" so a hand-edited URL still
    renders a page.
    """
    params = request.query_params
    media_type = params.get("type", ALL)
    if media_type not in KNOWN_TYPE_VALUES:
        media_type = ALL
    return FilterState(
        type=media_type,
        status=params.get("status", ALL),
        tag=params.get("tag", ALL),
        keyword=params.get("q", ""),
    )


def _catalog_context(snapshot: Snapshot, state: FilterState) -> dict[str, Any]:
    items = apply_filter(snapshot.records, state)
    return {
        "filters": state,
        "items": items,
        "count": len(items),
    }


def _parse_window(request: Request, years: list[int]) -> ReportWindow:
    """Read year/month from the query string, defaulting to the newest year.

    Invalid values fall back to the defaults instead of failing the page.
    """
    params = request.query_params
    try:
        return ReportWindow.parse(params.get("year", years[0]), params.get("month", ALL))
    except ValueError:
        return ReportWindow(year=years[0])


# ── Routes ────────────────────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request) -> HTMLResponse:
    """Catalog page."""
    store = get_store(request)
    snapshot = store.refresh()
    state = _parse_filters(request)
    context: dict[str, Any] = {
        "request": request,
        "snapshot": snapshot,
        "filters": state,
        "types": [ALL, *KNOWN_TYPE_VALUES],
    }
    if snapshot.available:
        context.update(
            options=build_options(snapshot.records, collation_key=store.collation_key),
            summary=summarize(snapshot.records),
            **_catalog_context(snapshot, state),
        )
    return _tmpl().TemplateResponse(request, "index.html", context)


@router.get("/partials/results", response_class=HTMLResponse, include_in_schema=False)
def results_partial(request: Request) -> HTMLResponse:
    """Results list for the current filter state."""
    snapshot = get_store(request).current()
    context: dict[str, Any] = {"request": request, "snapshot": snapshot}
    if snapshot.available:
        context.update(_catalog_context(snapshot, _parse_filters(request)))
    return _tmpl().TemplateResponse(request, "partials/results.html", context)


@router.get("/report", response_class=HTMLResponse, include_in_schema=False)
def report(request: Request) -> HTMLResponse:
    """Monthly / yearly report page."""
    snapshot = get_store(request).refresh()
    context: dict[str, Any] = {
        "request": request,
        "snapshot": snapshot,
        "months": MONTH_CHOICES,
    }
    if snapshot.available:
        years = year_values(snapshot.records)
        window = _parse_window(request, years)
        context.update(
            years=years,
            window=window,
            result=compute_report(snapshot.records, window),
        )
    return _tmpl().TemplateResponse(request, "report.html", context)


def register_error_handlers(app: FastAPI) -> None:
    """Render 404s for page routes as HTML; API paths keep JSON bodies."""
    from fastapi.responses import JSONResponse
    from starlette.exceptions import HTTPException as StarletteHTTPException

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and not request.url.path.startswith("/api/"):
            return _tmpl().TemplateResponse(
                request, "errors/404.html", {"request": request}, status_code=404,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "status_code": exc.status_code},
        )
