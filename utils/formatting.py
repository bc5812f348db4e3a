"""Output formatting utilities for the media log.

Provides reusable functions for:
- Star ratings and category labels shown on record cards
- Minutes, counts and report range labels
- Tabular and sectioned plain-text report output
"""

from typing import Any, Dict, List, Optional

from utils.strings import parse_number, safe_text

# Display labels for the fixed categories plus the "all" tab.
TYPE_LABELS: Dict[str, str] = {
    "all": "全部",
    "book": "书",
    "movie": "电影",
    "podcast": "播客",
    "song": "歌曲",
}

UNTITLED_LABEL = "（未命名）"
UNSTATED_STATUS_LABEL = "未标注"
NOT_RECORDED_LABEL = "（未填写）"
EMPTY_VALUE = "—"

EMPTY_CATALOG_MESSAGE = "没有匹配的记录。试试换个分类/标签/状态或清空搜索词。"
EMPTY_REPORT_MESSAGE = "本期没有带 date 的记录。"
NO_TAGS_LABEL = "（暂无）"


def stars(rating: Any, scale: int = 5) -> str:
    """Render a rating as filled and empty stars.

    Non-numeric ratings count as 0; values are clamped into [0, scale] and
    fractional values are floored.

    Examples:
        stars(4) -> "★★★★☆"
        stars(7) -> "★★★★★"
        stars("n/a") -> "☆☆☆☆☆"
    """
    num = parse_number(rating) or 0.0
    filled = int(max(0.0, min(float(scale), num)))
    return "★" * filled + "☆" * (scale - filled)


def type_label(media_type: Any) -> str:
    """Return the display label for a category, or the raw value if unknown."""
    raw = safe_text(media_type)
    return TYPE_LABELS.get(raw, raw)


def title_label(title: Any) -> str:
    return safe_text(title) or UNTITLED_LABEL


def status_label(status: Any) -> str:
    return safe_text(status).strip() or UNSTATED_STATUS_LABEL


def format_number(value: Optional[float]) -> str:
    """Format a number without a trailing ".0" for whole values.

    Examples:
        format_number(150.0) -> "150"
        format_number(12.5) -> "12.5"
        format_number(None) -> "-"
    """
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_minutes(value: Optional[float], empty: str = EMPTY_VALUE) -> str:
    """Format a total of minutes, using *empty* when nothing was recorded.

    Examples:
        format_minutes(150) -> "150"
        format_minutes(0) -> "—"
    """
    if not value:
        return empty
    return format_number(value)


def format_count(value: Optional[int]) -> str:
    """Format a count with thousands separator.

    Examples:
        format_count(1234) -> "1,234"
        format_count(None) -> "-"
    """
    if value is None:
        return "-"
    return f"{value:,d}"


def format_rating(value: Optional[float]) -> str:
    """Format an average rating with two decimals, or the empty sentinel."""
    if value is None:
        return EMPTY_VALUE
    return f"{value:.2f}"


def range_label(year: int, month: Optional[int]) -> str:
    """Describe a report window.

    Examples:
        range_label(2024, None) -> "2024 年（年报）"
        range_label(2024, 3) -> "2024-03（月报）"
    """
    if month is None:
        return f"{year} 年（年报）"
    return f"{year}-{month:02d}（月报）"


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to maximum length with ellipsis.

    Examples:
        truncate_text("Long text here", 10) -> "Long te..."
        truncate_text("Short", 10) -> "Short"
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


class TableFormatter:
    """Formats data as aligned tabular output."""

    def __init__(self, columns: List[str], column_widths: Optional[List[int]] = None):
        """Initialize table formatter.

        Args:
            columns: List of column headers
            column_widths: Optional list of column widths (auto-calculated if None)
        """
        self.columns = columns
        self.column_widths = column_widths or [len(col) for col in columns]
        self.rows: List[List[str]] = []

    def add_row(self, values: List[Any]) -> None:
        """Add a row to the table.

        Raises:
            ValueError: If value count doesn't match column count
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        str_values = []
        for i, val in enumerate(values):
            str_val = safe_text(val) if val is not None else "-"
            str_values.append(str_val)
            if len(str_val) > self.column_widths[i]:
                self.column_widths[i] = len(str_val)

        self.rows.append(str_values)

    def _format_row(self, values: List[str], is_header: bool = False) -> str:
        cells = []
        for i, val in enumerate(values):
            width = self.column_widths[i]
            # numbers right-aligned, text and headers left-aligned
            if not is_header and parse_number(val) is not None:
                cells.append(val.rjust(width))
            else:
                cells.append(val.ljust(width))
        return "  ".join(cells).rstrip()

    def to_string(self, show_header: bool = True, show_separator: bool = True) -> str:
        """Format table as multi-line string."""
        lines = []

        if show_header:
            lines.append(self._format_row(self.columns, is_header=True))
            if show_separator:
                lines.append("  ".join("-" * w for w in self.column_widths))

        for row in self.rows:
            lines.append(self._format_row(row))

        return "\n".join(lines)


class ReportFormatter:
    """Formats data as a structured plain-text report with sections."""

    def __init__(self, title: str = ""):
        self.title = title
        self.sections: List[Dict[str, Any]] = []

    def add_section(self, heading: str, content: Any, level: int = 1) -> None:
        """Add a section to the report.

        Args:
            heading: Section heading
            content: Section content (string, list, dict, or TableFormatter)
            level: Heading level (1-2)
        """
        self.sections.append({
            "heading": heading,
            "content": content,
            "level": level,
        })

    def _format_content(self, content: Any) -> List[str]:
        if isinstance(content, str):
            return [content]

        if isinstance(content, TableFormatter):
            return content.to_string().splitlines()

        if isinstance(content, (list, tuple)):
            return [f"  • {item}" for item in content]

        if isinstance(content, dict):
            return [f"  {key}: {value}" for key, value in content.items()]

        return [safe_text(content)]

    def to_string(self) -> str:
        """Format report as multi-line string."""
        lines = []

        if self.title:
            lines.append(self.title)
            lines.append("=" * len(self.title))
            lines.append("")

        for section in self.sections:
            heading = section["heading"]
            if section["level"] == 1:
                lines.append(heading)
                lines.append("-" * len(heading))
            else:
                lines.append(f"  {heading}")

            lines.extend(self._format_content(section["content"]))
            lines.append("")

        return "\n".join(lines)
