"""
FastAPI application factory for the media log.

Usage:
    python -m api.app                          # Dev server on port 8000
    APP_DATA_PATH=/data/media.json python -m api.app

OpenAPI docs available at http://localhost:8000/docs after starting.

Logging: plain text by default, newline-delimited JSON when
APP_LOG_FORMAT=json.  Every request is logged with its duration and an
X-Request-ID header.
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from api.datastore import DataUnavailableError, SnapshotStore
from api.routes import catalog, dashboard, reference, report
from api.routes import frontend as frontend_routes
from utils.config import AppConfig
from utils.formatting import (
    EMPTY_CATALOG_MESSAGE,
    EMPTY_REPORT_MESSAGE,
    NO_TAGS_LABEL,
    format_minutes,
    stars,
    status_label,
    title_label,
    type_label,
)

# ── Configuration ─────────────────────────────────────────────────────────────
_cfg = AppConfig.from_env()

# ── Structured JSON logging ───────────────────────────────────────────────────


class _JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Merge extra fields added via logger.info("...", extra={...})
        for key in ("method", "path", "status", "duration_ms", "request_id"):
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


_logger = logging.getLogger("medialog_api")
_handler = logging.StreamHandler()
if _cfg.log_format == "json":
    _handler.setFormatter(_JsonFormatter())
else:
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
logging.basicConfig(handlers=[_handler], level=logging.INFO, force=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the data snapshot on startup."""
    snapshot = app.state.store.refresh()
    if not snapshot.available:
        _logger.warning(
            "starting in degraded mode source=%s error=%s",
            snapshot.source, snapshot.error,
        )
    yield


def _unavailable_body(exc: DataUnavailableError) -> dict:
    return {
        "error": "Data unavailable",
        "detail": exc.snapshot.message,
        "reason": exc.snapshot.error,
        "status_code": 503,
    }


def create_app(data_path: str | Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        data_path: Override the data source (useful for testing).

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Media Log API",
        summary="Filterable catalog and monthly/yearly reports for a personal media log.",
        description=(
            "## Media Log API\n\n"
            "Serves a personal log of books, movies, podcasts and songs read "
            "from a single JSON data file.\n\n"
            "### Key concepts\n"
            "- **Catalog** filters combine type, status, tag and keyword; "
            "every active filter must match.\n"
            "- **Completion date** is the record's `date` field; records "
            "without a parseable date are listed after dated ones and are "
            "left out of reports.\n"
            "- **Report window** is a year, optionally narrowed to a month.\n\n"
            "When the data file cannot be read every data endpoint answers "
            "`503` with a user-facing message."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "catalog", "description": "Filtered, sorted record lists."},
            {"name": "reference", "description": "Option lists for filters and report selectors."},
            {"name": "report", "description": "Monthly and yearly aggregates."},
            {"name": "dashboard", "description": "Quick statistics over the whole catalog."},
            {"name": "meta", "description": "Health check."},
        ],
    )
    app.state.store = SnapshotStore(
        str(data_path) if data_path is not None else _cfg.data_path,
        timeout=_cfg.fetch_timeout,
        collation_locale=_cfg.collation_locale,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cfg.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    # ── Request logging middleware ────────────────────────────────────────────

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log each request and tag the response with a request ID."""
        request_id = str(uuid.uuid4())[:8]
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-ID"] = request_id

        if _cfg.log_format == "json":
            _logger.info(
                "request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round(duration_ms, 1),
                    "request_id": request_id,
                },
            )
        else:
            _logger.info(
                "method=%s path=%s status=%d duration_ms=%.1f rid=%s",
                request.method, request.url.path, response.status_code,
                duration_ms, request_id,
            )
        return response

    # ── Error handling ────────────────────────────────────────────────────────

    @app.exception_handler(DataUnavailableError)
    async def data_unavailable_handler(request: Request, exc: DataUnavailableError):
        return JSONResponse(status_code=503, content=_unavailable_body(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(
            status_code=400,
            content={"error": "Bad request", "detail": str(exc), "status_code": 400},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Catch unhandled exceptions and return JSON instead of HTML traceback."""
        _logger.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc),
                "status_code": 500,
            },
        )

    # ── Health check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"], summary="Health check")
    def health(request: Request):
        """Return 200 OK when the data snapshot is loaded, 503 when degraded."""
        store: SnapshotStore = request.app.state.store
        snapshot = store.current()
        if snapshot.available:
            return {
                "status": "ok",
                "data_source": store.source,
                "records": len(snapshot),
                "loaded_at": snapshot.loaded_at.isoformat(),
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "degraded",
                "data_source": store.source,
                "error": snapshot.error,
            },
        )

    # ── Register routers ──────────────────────────────────────────────────────

    prefix = "/api/v1"
    app.include_router(catalog.router,   prefix=prefix)
    app.include_router(reference.router, prefix=prefix)
    app.include_router(report.router,    prefix=prefix)
    app.include_router(dashboard.router, prefix=prefix)

    # ── Static files + Jinja2 templates ───────────────────────────────────────
    _here = Path(__file__).parent.parent  # project root

    static_dir = _here / "static"
    templates_dir = _here / "templates"

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    if templates_dir.exists():
        templates = Jinja2Templates(directory=str(templates_dir))

        templates.env.filters["stars"] = stars
        templates.env.filters["type_label"] = type_label
        templates.env.filters["title_label"] = title_label
        templates.env.filters["status_label"] = status_label
        templates.env.filters["fmt_minutes"] = format_minutes
        templates.env.globals["current_year"] = lambda: date.today().year
        templates.env.globals["empty_catalog_message"] = EMPTY_CATALOG_MESSAGE
        templates.env.globals["empty_report_message"] = EMPTY_REPORT_MESSAGE
        templates.env.globals["no_tags_label"] = NO_TAGS_LABEL

        # Wire templates into the frontend router
        frontend_routes.set_templates(templates)
        app.include_router(frontend_routes.router)
        frontend_routes.register_error_handlers(app)

    return app


# Singleton instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.app:app",
        host=_cfg.api_host,
        port=_cfg.api_port,
        reload=True,
        log_level="info",
    )
