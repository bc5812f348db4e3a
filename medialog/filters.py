"""
Catalog filter state and predicate.

The filter state is an immutable value.  UI events do not mutate it; they
call one of the ``with_*`` transitions (or ``reset``) and get a new state
back.  ``apply_filter`` is a pure function of the record collection and the
state, so the same inputs always yield the same ordered output.

Matching is a conjunction over the active criteria:

    type     exact category match        ("all" disables)
    status   exact match on the trimmed record status
    tag      exact membership in the record's trimmed tags, never a substring
    keyword  case-folded substring of title | creator | note | status | tags
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from medialog.records import KNOWN_TYPE_VALUES, Record
from medialog.sorting import sort_records
from utils.strings import normalize, safe_text

ALL = "all"


def _selection(value: str | None) -> str:
    text = safe_text(value).strip()
    return text if text else ALL


@dataclass(frozen=True)
class FilterState:
    """Current type/status/tag/keyword selection.

    Empty selections are read as ``"all"``; the keyword is stored trimmed
    and case-folded.

    Raises:
        ValueError: If ``type`` is neither "all" nor a known category.
    """

    type: str = ALL
    status: str = ALL
    tag: str = ALL
    keyword: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", _selection(self.type))
        object.__setattr__(self, "status", _selection(self.status))
        object.__setattr__(self, "tag", _selection(self.tag))
        object.__setattr__(self, "keyword", normalize(self.keyword))
        if self.type != ALL and self.type not in KNOWN_TYPE_VALUES:
            raise ValueError(
                f"type must be one of: {[ALL, *KNOWN_TYPE_VALUES]}, got {self.type!r}"
            )

    @property
    def is_identity(self) -> bool:
        """True when every criterion is inactive."""
        return (
            self.type == ALL and self.status == ALL
            and self.tag == ALL and not self.keyword
        )

    # ── transitions ───────────────────────────────────────────────────────

    def with_type(self, value: str | None) -> "FilterState":
        return replace(self, type=value)

    def with_status(self, value: str | None) -> "FilterState":
        return replace(self, status=value)

    def with_tag(self, value: str | None) -> "FilterState":
        """Select a tag, e.g. from the tag cloud; other criteria are kept."""
        return replace(self, tag=value)

    def with_keyword(self, value: str | None) -> "FilterState":
        return replace(self, keyword=value)

    def reset(self) -> "FilterState":
        return FilterState()


def keyword_haystack(record: Record) -> str:
    """Case-folded text searched by the keyword criterion."""
    parts = [
        record.title,
        record.creator,
        record.note,
        record.status,
        " ".join(record.tags),
    ]
    return " | ".join(normalize(p) for p in parts)


def matches(record: Record, state: FilterState) -> bool:
    """Return True if *record* satisfies every active criterion in *state*."""
    if state.type != ALL and record.type != state.type:
        return False

    if state.status != ALL and record.status_value != state.status:
        return False

    if state.tag != ALL and state.tag not in record.clean_tags:
        return False

    if not state.keyword:
        return True

    return state.keyword in keyword_haystack(record)


def apply_filter(records: Iterable[Record], state: FilterState) -> list[Record]:
    """Return the matching records in catalog display order."""
    return sort_records(r for r in records if matches(r, state))
