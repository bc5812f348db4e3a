"""Pre-compiled regex patterns for the media log.

All patterns are compiled once at module import.

Usage:
    from utils.patterns import SEPARATED_DATE, YEAR_MONTH

    m = SEPARATED_DATE.match(text)
"""

import re

# Whitespace normalization: multiple spaces/tabs/newlines
WHITESPACE = re.compile(r'\s+')

# Calendar dates with "/", "." or "-" separators and optional zero padding
# Matches: "2024-01-05", "2024/1/5", "2024.01.05"
SEPARATED_DATE = re.compile(r'^(\d{4})[/.\-](\d{1,2})[/.\-](\d{1,2})$')

# Year and month only, read as the first day of that month
# Matches: "2024-01", "2024/1"
YEAR_MONTH = re.compile(r'^(\d{4})[/\-](\d{1,2})$')

# A bare four-digit year, read as January 1st
YEAR_ONLY = re.compile(r'^(\d{4})$')

# Report month selector values: "1".."12" with optional zero padding
MONTH_VALUE = re.compile(r'^(0?[1-9]|1[0-2])$')
