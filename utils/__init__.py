"""Shared utilities for the media log: coercion, patterns, formatting, config."""

# Pattern definitions
from utils.patterns import (
    WHITESPACE,
    SEPARATED_DATE,
    YEAR_MONTH,
    YEAR_ONLY,
    MONTH_VALUE,
)

# String utilities
from utils.strings import (
    safe_text,
    safe_float,
    parse_number,
    normalize,
    normalize_whitespace,
    collation_key_for,
)

# Output formatting
from utils.formatting import (
    TYPE_LABELS,
    stars,
    type_label,
    title_label,
    status_label,
    format_number,
    format_minutes,
    format_count,
    format_rating,
    range_label,
    truncate_text,
    TableFormatter,
    ReportFormatter,
)

# Configuration
from utils.config import AppConfig

__all__ = [
    # Patterns
    "WHITESPACE",
    "SEPARATED_DATE",
    "YEAR_MONTH",
    "YEAR_ONLY",
    "MONTH_VALUE",
    # Strings
    "safe_text",
    "safe_float",
    "parse_number",
    "normalize",
    "normalize_whitespace",
    "collation_key_for",
    # Formatting
    "TYPE_LABELS",
    "stars",
    "type_label",
    "title_label",
    "status_label",
    "format_number",
    "format_minutes",
    "format_count",
    "format_rating",
    "range_label",
    "truncate_text",
    "TableFormatter",
    "ReportFormatter",
    # Config
    "AppConfig",
]
