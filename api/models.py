"""
Pydantic response models for the API.

Optional fields default to None so that records with missing or malformed
values still serialize; the core has already coerced every field.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from medialog.records import Record
from utils.formatting import stars, type_label


# ── Record models ─────────────────────────────────────────────────────────────

class RecordOut(BaseModel):
    """One logged media item as shown on a card."""
    type: str = Field(..., description="Category: book | movie | podcast | song (other values pass through)", examples=["book"])
    type_label: str = Field(..., description="Display label for the category", examples=["书"])
    title: str = Field("", description="Title; empty when absent", examples=["三体"])
    creator: str = Field("", description="Author, director, host or artist", examples=["刘慈欣"])
    note: str = Field("", description="Free-text note")
    status: str = Field("", description="Status text as written in the data file", examples=["已读"])
    date: str = Field("", description="Completion date as written in the data file", examples=["2024-01-05"])
    completed_on: str | None = Field(None, description="Parsed completion date (ISO 8601), null when unparseable", examples=["2024-01-05"])
    year: str = Field("", description="Release year marker", examples=["2008"])
    rating: float | None = Field(None, description="Numeric rating, null when not numeric", examples=[4.0])
    stars: str = Field(..., description="Rating clamped to 0-5 and drawn as stars", examples=["★★★★☆"])
    duration_min: float = Field(0.0, description="Minutes invested (0 when absent)", examples=[600.0])
    tags: list[str] = Field(default_factory=list, description="Tags in original order")
    link: str = Field("", description="External link")
    cover: str = Field("", description="Cover image URL")

    @classmethod
    def from_record(cls, record: Record) -> "RecordOut":
        completed = record.completed_on
        return cls(
            type=record.type,
            type_label=type_label(record.type),
            title=record.title,
            creator=record.creator,
            note=record.note,
            status=record.status,
            date=record.date,
            completed_on=completed.isoformat() if completed else None,
            year=record.year,
            rating=record.rating,
            stars=stars(record.rating),
            duration_min=record.duration_min,
            tags=list(record.tags),
            link=record.link,
            cover=record.cover,
        )


# ── Catalog models ────────────────────────────────────────────────────────────

class FilterStateOut(BaseModel):
    """The filter selection a catalog response was computed for."""
    type: str = Field("all", examples=["book"])
    status: str = Field("all", examples=["已读"])
    tag: str = Field("all", examples=["科幻"])
    keyword: str = Field("", description="Trimmed, case-folded keyword", examples=["dune"])


class CatalogResponse(BaseModel):
    """Response body for GET /api/v1/catalog."""
    filters: FilterStateOut
    count: int = Field(..., description="Number of matching records", examples=[12])
    items: list[RecordOut] = Field(..., description="Matching records in display order")


# ── Reference models ──────────────────────────────────────────────────────────

class TypeOptionOut(BaseModel):
    value: str = Field(..., examples=["movie"])
    label: str = Field(..., examples=["电影"])


class OptionsResponse(BaseModel):
    """Selectable values for the catalog and report selectors."""
    types: list[TypeOptionOut] = Field(..., description="'all' followed by the fixed categories")
    statuses: list[str] = Field(..., description="'all' followed by distinct statuses, collated")
    tags: list[str] = Field(..., description="'all' followed by distinct tags, collated")
    years: list[int] = Field(..., description="Report years, newest first; never empty")


# ── Report models ─────────────────────────────────────────────────────────────

class TagCountOut(BaseModel):
    tag: str = Field(..., examples=["科幻"])
    count: int = Field(..., examples=[3])


class ReportResponse(BaseModel):
    """Response body for GET /api/v1/report."""
    year: int = Field(..., examples=[2024])
    month: str = Field(..., description="'all' or a zero-padded month", examples=["all", "03"])
    range_label: str = Field(..., examples=["2024 年（年报）"])
    total: int = Field(..., description="Dated records in the window", examples=[2])
    count_by_type: dict[str, int] = Field(..., description="Counts for book, movie, podcast, song")
    average_rating: float | None = Field(None, description="Mean numeric rating; null when no ratings", examples=[4.5])
    average_rating_label: str = Field(..., examples=["4.50", "—"])
    total_minutes: float = Field(..., examples=[0.0])
    total_minutes_label: str = Field(..., examples=["—"])
    top_tags: list[TagCountOut] = Field(..., description="Up to 18 tags, most frequent first")
    records: list[RecordOut] = Field(..., description="Window records, newest first")


# ── Dashboard models ──────────────────────────────────────────────────────────

class SummaryResponse(BaseModel):
    """Quick statistics over the whole catalog."""
    total: int = Field(..., examples=[120])
    completed: int = Field(..., description="Finished (status marked 已) and dated", examples=[80])
    count_by_type: dict[str, int]
    total_minutes: float = Field(..., examples=[5400.0])
    total_minutes_label: str = Field(..., examples=["5400 分钟", "（未填写）"])


# ── Error model ───────────────────────────────────────────────────────────────

class ErrorResponse(BaseModel):
    """Standard error response body."""
    error: str = Field(..., description="Short error category", examples=["Bad request"])
    detail: str | None = Field(None, description="Extended error detail")
    status_code: int = Field(..., ge=400, le=599, description="HTTP status code", examples=[400])
