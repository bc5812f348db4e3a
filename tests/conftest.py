"""
Pytest fixtures for media log tests.

Provides reusable record payloads, the parsed records, and temporary data
files for the loader and the FastAPI app.
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from medialog.records import Record, records_from_payload  # noqa: E402


# ── Payloads ──────────────────────────────────────────────────────────────────

# Three-record collection used throughout the catalog and report scenarios.
SCENARIO_PAYLOAD = [
    {"type": "book", "title": "Foundation", "date": "2024-01-05", "rating": 4, "tags": ["sci-fi"]},
    {"type": "movie", "title": "Arrival", "date": "2024-02-10", "rating": 5},
    {"type": "book", "title": "Solaris", "year": "2023"},
]

# A broader collection covering every category, statuses, minutes,
# unknown categories and malformed fields.
SAMPLE_PAYLOAD = [
    {
        "type": "book", "title": "三体", "creator": "刘慈欣", "year": "2008",
        "status": "已读", "date": "2024-01-05", "rating": 5, "duration_min": 900,
        "tags": ["scifi", "novel"], "note": "first of the trilogy",
    },
    {
        "type": "movie", "title": "Dune Part Two", "creator": "Denis Villeneuve",
        "year": "2024", "status": "已看", "date": "2024-03-10", "rating": 4,
        "duration_min": 166, "tags": ["scifi", "cinema"],
    },
    {
        "type": "podcast", "title": "Episode 100", "creator": "Host",
        "year": "2023", "status": "已听", "date": "2023-11-20", "rating": "4.5",
        "duration_min": "75", "tags": ["culture"],
    },
    {
        "type": "song", "title": "Hills", "creator": "Jonathan Lee",
        "year": "2013", "status": " 单曲循环 ", "date": "", "rating": "",
        "tags": ["mandarin", "  "],
    },
    {
        "type": "book", "title": "", "creator": "Anonymous", "year": "1967",
        "status": "在读", "date": "not a date", "rating": None,
        "tags": ["novel"],
    },
    {
        "type": "game", "title": "Outer Wilds", "status": "已玩",
        "date": "2024-03-02", "rating": 5, "duration_min": 1200,
        "tags": ["space"],
    },
]


@pytest.fixture()
def scenario_records() -> tuple[Record, ...]:
    return records_from_payload(SCENARIO_PAYLOAD)


@pytest.fixture()
def sample_records() -> tuple[Record, ...]:
    return records_from_payload(SAMPLE_PAYLOAD)


# ── Data files ────────────────────────────────────────────────────────────────

def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def scenario_file(tmp_path) -> Path:
    return write_json(tmp_path / "scenario.json", SCENARIO_PAYLOAD)


@pytest.fixture()
def sample_file(tmp_path) -> Path:
    return write_json(tmp_path / "data.json", SAMPLE_PAYLOAD)


@pytest.fixture()
def broken_file(tmp_path) -> Path:
    path = tmp_path / "broken.json"
    path.write_text("[{\"type\": \"book\",", encoding="utf-8")
    return path
