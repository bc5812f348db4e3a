"""
Data loading: read the JSON data file into an immutable snapshot.

The source is either a local path or an http(s) URL and is always read in
full; every load replaces the previous snapshot.  A failed read, invalid
JSON or a payload that is not an array yields a degraded snapshot with no
records and a user-facing message.  No partial or previously loaded data is
substituted.

Usage::

    from medialog.loader import load_snapshot

    snapshot = load_snapshot("data.json")
    if not snapshot.available:
        print(snapshot.message)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import requests

from medialog.errors import DataLoadError
from medialog.records import Record, records_from_payload

logger = logging.getLogger(__name__)

LOAD_FAILURE_MESSAGE = "data.json 读取失败：请确认 JSON 格式正确，并且数据文件路径配置正确。"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Snapshot:
    """The record collection from one load, or the reason it is missing."""

    source: str
    records: tuple[Record, ...] = ()
    error: str | None = None
    loaded_at: datetime = field(default_factory=_now)

    @property
    def available(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """User-facing explanation for the degraded state ("" when available)."""
        return "" if self.available else LOAD_FAILURE_MESSAGE

    def __len__(self) -> int:
        return len(self.records)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str | Path, timeout: float = 10.0) -> str:
    """Return the raw text of *source*.

    Raises:
        DataLoadError: If the file or URL cannot be read.
    """
    source_str = str(source)
    if is_url(source_str):
        try:
            resp = requests.get(
                source_str,
                timeout=timeout,
                headers={"Cache-Control": "no-store"},
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise DataLoadError(source_str, f"fetch failed: {exc}") from exc
        resp.encoding = resp.encoding or "utf-8"
        return resp.text

    try:
        return Path(source_str).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(source_str, f"read failed: {exc}") from exc


def parse_payload(text: str, source: str = "<data>") -> tuple[Record, ...]:
    """Decode *text* as a JSON array of records.

    Raises:
        DataLoadError: On invalid JSON or a non-array document.
    """
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(source, f"invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise DataLoadError(
            source, f"expected a JSON array, got {type(payload).__name__}"
        )
    return records_from_payload(payload)


def load_snapshot(source: str | Path, timeout: float = 10.0) -> Snapshot:
    """Load *source* into a snapshot; never raises for data problems."""
    source_str = str(source)
    try:
        records = parse_payload(read_source(source_str, timeout), source_str)
    except DataLoadError as exc:
        logger.warning("data load failed source=%s reason=%s", source_str, exc.reason)
        return Snapshot(source=source_str, error=exc.reason)
    logger.info("data loaded source=%s records=%d", source_str, len(records))
    return Snapshot(source=source_str, records=records)
