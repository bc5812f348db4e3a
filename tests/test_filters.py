"""
Unit tests for medialog/filters.py

FilterState normalization and transitions, the matching predicate's
conjunction law, and apply_filter ordering/idempotence.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from medialog.filters import ALL, FilterState, apply_filter, keyword_haystack, matches
from medialog.records import Record


# ── FilterState ───────────────────────────────────────────────────────────────

class TestFilterState:
    def test_defaults_are_identity(self):
        state = FilterState()
        assert state.type == ALL
        assert state.status == ALL
        assert state.tag == ALL
        assert state.keyword == ""
        assert state.is_identity

    def test_blank_selections_read_as_all(self):
        state = FilterState(type="", status="  ", tag=None)
        assert (state.type, state.status, state.tag) == (ALL, ALL, ALL)

    def test_keyword_is_trimmed_and_casefolded(self):
        assert FilterState(keyword="  DUNE ").keyword == "dune"

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="type must be one of"):
            FilterState(type="game")

    def test_state_is_immutable(self):
        state = FilterState()
        with pytest.raises(AttributeError):
            state.type = "book"

    def test_transitions_return_new_values(self):
        base = FilterState()
        changed = base.with_type("book").with_status("已读").with_tag("scifi").with_keyword("Dune")
        assert base.is_identity
        assert changed == FilterState(type="book", status="已读", tag="scifi", keyword="dune")

    def test_with_tag_keeps_other_criteria(self):
        state = FilterState(type="movie", keyword="dune").with_tag("scifi")
        assert state.type == "movie"
        assert state.keyword == "dune"
        assert state.tag == "scifi"

    def test_reset_returns_identity(self):
        state = FilterState(type="song", status="x", tag="y", keyword="z")
        assert state.reset() == FilterState()
        assert state.reset().is_identity

    def test_with_type_validates(self):
        with pytest.raises(ValueError):
            FilterState().with_type("podcasts")


# ── matches ───────────────────────────────────────────────────────────────────

@pytest.fixture()
def record():
    return Record(
        type="book", title="The Three-Body Problem", creator="Liu Cixin",
        note="first of the trilogy", status=" 已读 ",
        tags=("scifi", " novel "),
    )


class TestMatches:
    def test_identity_matches_everything(self, record):
        assert matches(record, FilterState())
        assert matches(Record(), FilterState())

    def test_type(self, record):
        assert matches(record, FilterState(type="book"))
        assert not matches(record, FilterState(type="movie"))

    def test_status_compares_trimmed(self, record):
        assert matches(record, FilterState(status="已读"))
        assert not matches(record, FilterState(status="已"))

    def test_tag_is_exact_membership(self, record):
        assert matches(record, FilterState(tag="scifi"))
        assert matches(record, FilterState(tag="novel"))
        assert not matches(record, FilterState(tag="sci"))

    def test_tag_on_record_without_tags(self):
        assert not matches(Record(type="book"), FilterState(tag="scifi"))

    @pytest.mark.parametrize("keyword", ["three-body", "CIXIN", "trilogy", "已读", "novel"])
    def test_keyword_fields(self, record, keyword):
        assert matches(record, FilterState(keyword=keyword))

    def test_keyword_miss(self, record):
        assert not matches(record, FilterState(keyword="dune"))

    def test_keyword_does_not_search_year_or_link(self):
        r = Record(title="x", year="2008", link="https://example.org")
        assert not matches(r, FilterState(keyword="2008"))
        assert not matches(r, FilterState(keyword="example"))

    def test_conjunction(self, record):
        full = FilterState(type="book", status="已读", tag="scifi", keyword="liu")
        assert matches(record, full)
        # Any single failing criterion rejects the record
        assert not matches(record, full.with_type("song"))
        assert not matches(record, full.with_status("在读"))
        assert not matches(record, full.with_tag("poetry"))
        assert not matches(record, full.with_keyword("dune"))

    def test_haystack_joins_fields(self, record):
        hay = keyword_haystack(record)
        assert "the three-body problem" in hay
        assert "liu cixin" in hay
        assert " | " in hay


# ── apply_filter ──────────────────────────────────────────────────────────────

class TestApplyFilter:
    def test_type_book_scenario(self, scenario_records):
        result = apply_filter(scenario_records, FilterState(type="book"))
        assert [r.title for r in result] == ["Foundation", "Solaris"]

    def test_tag_scenario(self, scenario_records):
        result = apply_filter(scenario_records, FilterState(tag="sci-fi"))
        assert result == [scenario_records[0]]

    def test_identity_returns_all_sorted(self, scenario_records):
        result = apply_filter(scenario_records, FilterState())
        assert [r.title for r in result] == ["Arrival", "Foundation", "Solaris"]

    def test_idempotent(self, sample_records):
        state = FilterState(keyword="scifi")
        once = apply_filter(sample_records, state)
        twice = apply_filter(once, state)
        assert once == twice

    def test_no_match_returns_empty(self, sample_records):
        assert apply_filter(sample_records, FilterState(keyword="zzz")) == []

    def test_every_record_matches_its_own_tags(self, sample_records):
        for r in sample_records:
            for tag in r.clean_tags:
                assert r in apply_filter(sample_records, FilterState(tag=tag))
