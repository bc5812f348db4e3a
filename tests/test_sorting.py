"""
Unit tests for medialog/sorting.py -- catalog display order.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from medialog.records import Record
from medialog.sorting import catalog_sort_key, sort_by_date_desc, sort_records


def _titles(records):
    return [r.title for r in records]


def test_dated_newest_first():
    records = [
        Record(title="a", date="2023-05-01"),
        Record(title="b", date="2024-01-05"),
        Record(title="c", date="2023-12-31"),
    ]
    assert _titles(sort_records(records)) == ["b", "c", "a"]


def test_dated_before_undated():
    records = [
        Record(title="undated", year="2030"),
        Record(title="dated", date="1999-01-01"),
    ]
    assert _titles(sort_records(records)) == ["dated", "undated"]


def test_undated_by_year_descending():
    records = [
        Record(title="old", year="1967"),
        Record(title="new", year="2013"),
        Record(title="none"),
        Record(title="mid", year="2008"),
    ]
    assert _titles(sort_records(records)) == ["new", "mid", "old", "none"]


def test_unparseable_date_counts_as_undated():
    records = [
        Record(title="bad", date="someday", year="2024"),
        Record(title="good", date="2020-01-01"),
    ]
    assert _titles(sort_records(records)) == ["good", "bad"]


def test_ties_keep_input_order():
    records = [
        Record(title="first", date="2024-01-05"),
        Record(title="second", date="2024-01-05"),
        Record(title="x", year="2000"),
        Record(title="y", year="2000"),
    ]
    assert _titles(sort_records(records)) == ["first", "second", "x", "y"]


def test_sort_returns_new_list():
    records = [Record(title="a", year="1"), Record(title="b", year="2")]
    result = sort_records(records)
    assert result is not records
    assert _titles(records) == ["a", "b"]


def test_sort_key_shape():
    assert catalog_sort_key(Record(date="2024-01-05"))[0] == 0
    assert catalog_sort_key(Record(year="2024"))[0] == 1


def test_sort_by_date_desc_skips_undated():
    records = [
        Record(title="u"),
        Record(title="a", date="2024-01-01"),
        Record(title="b", date="2024-06-01"),
    ]
    assert _titles(sort_by_date_desc(records)) == ["b", "a"]


def test_same_day_ordered_by_time_of_day():
    records = [
        Record(title="early", date="2024-01-05T08:00:00"),
        Record(title="late", date="2024-01-05T21:30:00"),
    ]
    assert _titles(sort_records(records)) == ["late", "early"]
    assert _titles(sort_by_date_desc(records)) == ["late", "early"]


def test_timestamp_after_midnight_date_form():
    records = [
        Record(title="date-only", date="2024-01-05"),
        Record(title="evening", date="2024-01-05T19:00:00"),
        Record(title="next-day", date="2024/1/6"),
    ]
    assert _titles(sort_records(records)) == ["next-day", "evening", "date-only"]


def test_offset_timestamps_compare_as_instants():
    records = [
        Record(title="utc-10", date="2024-01-05T10:00:00Z"),
        # 09:00 UTC
        Record(title="utc-09", date="2024-01-05T17:00:00+08:00"),
        Record(title="naive-11", date="2024-01-05T11:00:00"),
    ]
    assert _titles(sort_records(records)) == ["naive-11", "utc-10", "utc-09"]
