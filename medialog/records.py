"""
Record model for the media log.

A record is one consumed item (book, movie, podcast, song) read from the
data file.  Construction never fails: each field is coerced on its own, so a
record with missing or malformed fields still appears in the collection with
blanks and zeros in place of the bad values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from utils.patterns import SEPARATED_DATE, YEAR_MONTH, YEAR_ONLY
from utils.strings import parse_number, safe_float, safe_text


class MediaType(str, Enum):
    """Record category.  Unrecognized values resolve to ``UNKNOWN``."""

    BOOK = "book"
    MOVIE = "movie"
    PODCAST = "podcast"
    SONG = "song"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "MediaType":
        return cls.UNKNOWN


# Categories that take part in per-type aggregation, in display order.
KNOWN_TYPES: tuple[MediaType, ...] = (
    MediaType.BOOK,
    MediaType.MOVIE,
    MediaType.PODCAST,
    MediaType.SONG,
)
KNOWN_TYPE_VALUES: tuple[str, ...] = tuple(t.value for t in KNOWN_TYPES)


def _parse_written(value: Any) -> datetime | None:
    """Parse a completion value as written, keeping any UTC offset.

    Accepted forms:
        "2024-01-05T21:30:00", "2024-01-05T21:30:00Z"   ISO 8601 datetime
        "2024-01-05"                                   ISO 8601 date, at midnight
        "2024/1/5", "2024.01.05"                       separated calendar date
        "2024-01", "2024/1"                            first day of that month
        "2024"                                         January 1st of that year

    Anything else, including impossible dates like "2024-02-30", is None.
    """
    text = safe_text(value).strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    try:
        m = SEPARATED_DATE.match(text)
        if m:
            return datetime(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        m = YEAR_MONTH.match(text)
        if m:
            return datetime(int(m.group(1)), int(m.group(2)), 1)
        m = YEAR_ONLY.match(text)
        if m:
            return datetime(int(m.group(1)), 1, 1)
    except ValueError:
        return None
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a completion timestamp for ordering, returning None instead of raising.

    Date-only forms resolve to midnight.  Offset-aware values are converted
    to naive UTC so every timestamp compares with every other.
    """
    parsed = _parse_written(value)
    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_date(value: Any) -> date | None:
    """Calendar date as written (offsets are not applied), or None."""
    parsed = _parse_written(value)
    return parsed.date() if parsed is not None else None


def _coerce_tags(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(safe_text(t) for t in value)


@dataclass(frozen=True)
class Record:
    """One logged media item.

    ``type`` keeps the raw category string so unknown categories pass
    through to display; ``media_type`` is the resolved enum value.
    ``rating`` is None when the source value is not numeric.
    """

    type: str = ""
    title: str = ""
    creator: str = ""
    note: str = ""
    status: str = ""
    date: str = ""
    link: str = ""
    cover: str = ""
    year: str = ""
    rating: float | None = None
    duration_min: float = 0.0
    tags: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, raw: Any) -> "Record":
        """Build a record from one element of the data array.

        Non-dict elements become an all-blank record rather than being
        dropped.
        """
        if not isinstance(raw, dict):
            return cls()
        return cls(
            type=safe_text(raw.get("type")),
            title=safe_text(raw.get("title")),
            creator=safe_text(raw.get("creator")),
            note=safe_text(raw.get("note")),
            status=safe_text(raw.get("status")),
            date=safe_text(raw.get("date")),
            link=safe_text(raw.get("link")),
            cover=safe_text(raw.get("cover")),
            year=safe_text(raw.get("year")),
            rating=parse_number(raw.get("rating")),
            duration_min=safe_float(raw.get("duration_min")),
            tags=_coerce_tags(raw.get("tags")),
        )

    @property
    def media_type(self) -> MediaType:
        return MediaType(self.type)

    @property
    def completed_at(self) -> datetime | None:
        """Parsed completion timestamp, or None when ``date`` is blank or invalid."""
        return parse_timestamp(self.date)

    @property
    def completed_on(self) -> date | None:
        """Calendar day as written in ``date``; used for year and month bucketing."""
        return parse_date(self.date)

    @property
    def year_value(self) -> float:
        return safe_float(self.year.strip())

    @property
    def status_value(self) -> str:
        return self.status.strip()

    @property
    def display_rating(self) -> float:
        """Rating clamped into [0, 5]; non-numeric ratings show as 0."""
        return max(0.0, min(5.0, self.rating or 0.0))

    @property
    def clean_tags(self) -> list[str]:
        """Trimmed, non-empty tags in original order (duplicates kept)."""
        return [t.strip() for t in self.tags if t.strip()]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "creator": self.creator,
            "note": self.note,
            "status": self.status,
            "date": self.date,
            "link": self.link,
            "cover": self.cover,
            "year": self.year,
            "rating": self.rating,
            "duration_min": self.duration_min,
            "tags": list(self.tags),
        }


def records_from_payload(payload: list[Any]) -> tuple[Record, ...]:
    """Convert a decoded JSON array into records, one per element."""
    return tuple(Record.from_dict(item) for item in payload)
