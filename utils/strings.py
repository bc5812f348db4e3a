"""String and number coercion utilities for the media log.

Every record field goes through these helpers, so a malformed field never
raises: missing text becomes "", non-numeric values become a default, and
collation falls back to case-folded code point order when the configured
locale is not installed.
"""

import locale
import logging
import math
import threading
from functools import lru_cache
from typing import Any, Callable

from utils.patterns import WHITESPACE

logger = logging.getLogger(__name__)

_locale_lock = threading.Lock()
_active_locale: str | None = None


def safe_text(val: Any) -> str:
    """Return *val* as a string, with None mapped to ""."""
    if val is None:
        return ""
    if isinstance(val, bool):
        return "true" if val else "false"
    if isinstance(val, float) and val.is_integer():
        return str(int(val))
    return str(val)


def normalize(val: Any) -> str:
    """Trim and case-fold *val* for keyword comparison.

    Example:
        "  Dune PART Two " -> "dune part two"
    """
    return safe_text(val).strip().casefold()


def normalize_whitespace(s: str) -> str:
    """Collapse runs of whitespace into single spaces and trim."""
    return WHITESPACE.sub(" ", s).strip()


def parse_number(val: Any) -> float | None:
    """Parse *val* as a finite number, or return None.

    Handles:
    - int / float -> float (NaN and infinities rejected)
    - numeric strings with surrounding whitespace -> float
    - None, "", bools, lists, non-numeric strings -> None
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        num = float(val)
    elif isinstance(val, str):
        s = val.strip()
        if not s:
            return None
        try:
            num = float(s)
        except ValueError:
            return None
    else:
        return None
    return num if math.isfinite(num) else None


def safe_float(val: Any, default: float = 0.0) -> float:
    """Safely convert value to float with fallback default.

    Args:
        val: Value to convert (any type)
        default: Value to return when *val* is not numeric (default: 0.0)

    Returns:
        float: Parsed value or default
    """
    num = parse_number(val)
    return default if num is None else num


def _fallback_key(s: str) -> tuple[str, str]:
    return (s.casefold(), s)


@lru_cache(maxsize=8)
def collation_key_for(locale_name: str | None) -> Callable[[str], Any]:
    """Return a sort key implementing locale-aware collation.

    LC_COLLATE is process-wide, so one collation locale per process is
    supported.  The first call for a locale switches the category, and every
    strxfrm key handed out earlier follows the switch; a warning is logged
    when that happens.  When the locale is not available the case-folded
    fallback is returned and a warning is logged once.

    Args:
        locale_name: e.g. "zh_CN.UTF-8"; None or "" selects the fallback.
    """
    global _active_locale
    if not locale_name:
        return _fallback_key
    with _locale_lock:
        try:
            locale.setlocale(locale.LC_COLLATE, locale_name)
        except locale.Error:
            logger.warning(
                "collation locale %r not available; using code point order",
                locale_name,
            )
            return _fallback_key
        if _active_locale is not None and _active_locale != locale_name:
            logger.warning(
                "collation locale switched from %r to %r; earlier sort keys now use %r",
                _active_locale, locale_name, locale_name,
            )
        _active_locale = locale_name
    return locale.strxfrm
