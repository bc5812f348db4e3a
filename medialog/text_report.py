"""
Plain-text rendering of a periodic report.

The printable counterpart of the report page, for terminals and cron mail::

    python main.py --report 2024 --month 03
"""

from __future__ import annotations

from medialog.records import KNOWN_TYPE_VALUES
from medialog.report import ReportResult
from utils.formatting import (
    EMPTY_REPORT_MESSAGE,
    NO_TAGS_LABEL,
    ReportFormatter,
    TableFormatter,
    format_count,
    stars,
    status_label,
    title_label,
    truncate_text,
    type_label,
)


def _record_table(result: ReportResult) -> TableFormatter:
    table = TableFormatter(["日期", "分类", "标题", "状态", "评分"])
    for record in result.records:
        table.add_row([
            record.completed_on.isoformat(),
            type_label(record.type),
            truncate_text(title_label(record.title), 40),
            status_label(record.status),
            stars(record.rating),
        ])
    return table


def render_report(result: ReportResult) -> str:
    """Render *result* as a sectioned text report."""
    report = ReportFormatter(title=f"媒体记录报告 {result.window.label}")

    report.add_section("概览", {
        "总数": format_count(result.total),
        "平均评分": result.average_rating_label,
        "总时长（分钟）": result.total_minutes_label,
    })
    report.add_section("分类", {
        type_label(t): format_count(result.count_by_type[t]) for t in KNOWN_TYPE_VALUES
    })

    if result.top_tags:
        tags = [f"{tag} ×{count}" for tag, count in result.top_tags]
    else:
        tags = NO_TAGS_LABEL
    report.add_section("热门标签", tags)

    if result.records:
        report.add_section("记录", _record_table(result))
    else:
        report.add_section("记录", EMPTY_REPORT_MESSAGE)

    return report.to_string()
