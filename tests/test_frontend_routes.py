"""
End-to-end frontend route tests.

Tests for the Jinja2 frontend routes served by api/routes/frontend.py:
    GET /                  : tabs, filters, tag cloud, quick stats, results
    GET /partials/results  : results list only
    GET /report            : monthly / yearly report

All tests use FastAPI TestClient with temporary data files from conftest.py.
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient
from api.app import create_app


@pytest.fixture()
def app_client(sample_file):
    with TestClient(create_app(data_path=sample_file)) as c:
        yield c


# ── Catalog page ──────────────────────────────────────────────────────────────

class TestIndexPage:
    def test_renders(self, app_client):
        resp = app_client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        html = resp.text
        assert "我的媒体记录" in html
        assert 'id="count">6<' in html

    def test_type_tabs(self, app_client):
        html = app_client.get("/").text
        for label in ("全部", "书", "电影", "播客", "歌曲"):
            assert label in html

    def test_quick_stats(self, app_client):
        html = app_client.get("/").text
        assert "2341 分钟" in html
        assert "<b>4</b>" in html

    def test_tag_cloud_links_select_tag(self, app_client):
        html = app_client.get("/").text
        assert "tag=scifi" in html

    def test_type_filter(self, app_client):
        html = app_client.get("/?type=book").text
        assert 'id="count">2<' in html
        assert "（未命名）" in html
        assert "Dune Part Two" not in html

    def test_unknown_type_falls_back_to_all(self, app_client):
        resp = app_client.get("/?type=game")
        assert resp.status_code == 200
        assert 'id="count">6<' in resp.text

    def test_tag_filter(self, app_client):
        html = app_client.get("/?tag=space").text
        assert 'id="count">1<' in html
        assert "Outer Wilds" in html

    def test_blank_status_label(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps([{"type": "book", "title": "x"}]), encoding="utf-8")
        with TestClient(create_app(data_path=path)) as c:
            assert "未标注" in c.get("/").text

    def test_empty_result_message(self, app_client):
        html = app_client.get("/?q=nothing-matches-this").text
        assert 'id="count">0<' in html
        assert "没有匹配的记录" in html

    def test_reset_link(self, app_client):
        assert 'href="/">重置<' in app_client.get("/?tag=scifi").text

    def test_page_load_rereads_data(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps([{"type": "book", "title": "one"}]), encoding="utf-8")
        with TestClient(create_app(data_path=path)) as c:
            assert 'id="count">1<' in c.get("/").text
            path.write_text(
                json.dumps([{"type": "book", "title": "one"}, {"type": "song", "title": "two"}]),
                encoding="utf-8",
            )
            assert 'id="count">2<' in c.get("/").text

    def test_degraded_page_shows_message(self, broken_file):
        with TestClient(create_app(data_path=broken_file)) as c:
            resp = c.get("/")
        assert resp.status_code == 200
        assert "data.json 读取失败" in resp.text
        assert 'id="count"' not in resp.text


# ── Results partial ───────────────────────────────────────────────────────────

class TestResultsPartial:
    def test_partial_has_no_layout(self, app_client):
        html = app_client.get("/partials/results?type=movie").text
        assert "<html" not in html
        assert 'id="count">1<' in html
        assert "Dune Part Two" in html

    def test_partial_keyword(self, app_client):
        html = app_client.get("/partials/results", params={"q": "episode"}).text
        assert "Episode 100" in html
        assert "播客" in html


# ── Report page ───────────────────────────────────────────────────────────────

class TestReportPage:
    def test_defaults_to_newest_year(self, app_client):
        html = app_client.get("/report").text
        assert "2024 年（年报）" in html
        assert "window.print()" in html

    def test_monthly(self, app_client):
        html = app_client.get("/report?year=2023&month=11").text
        assert "2023-11（月报）" in html
        assert "Episode 100" in html
        assert "4.50" in html

    def test_empty_window(self, app_client):
        html = app_client.get("/report?year=2024&month=07").text
        assert "本期没有带 date 的记录。" in html
        assert "（暂无）" in html

    def test_invalid_params_fall_back(self, app_client):
        resp = app_client.get("/report?year=abc&month=13")
        assert resp.status_code == 200
        assert "2024 年（年报）" in resp.text

    def test_degraded(self, broken_file):
        with TestClient(create_app(data_path=broken_file)) as c:
            assert "读取失败" in c.get("/report").text


# ── Errors ────────────────────────────────────────────────────────────────────

class TestNotFound:
    def test_page_404_is_html(self, app_client):
        resp = app_client.get("/no-such-page")
        assert resp.status_code == 404
        assert "text/html" in resp.headers["content-type"]

    def test_api_404_is_json(self, app_client):
        resp = app_client.get("/api/v1/no-such-endpoint")
        assert resp.status_code == 404
        assert resp.json()["status_code"] == 404
