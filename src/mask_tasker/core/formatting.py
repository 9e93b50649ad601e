"""Display helpers for dates and text."""

from __future__ import annotations

import html
from datetime import date, datetime
from typing import Optional

INVALID_DATE = "Invalid Date"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Tried in order after ISO 8601.
_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%d %B %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %b %Y",
    "%Y-%m",
    "%B %Y",
    "%b %Y",
)


def parse_date(date_string: Optional[str]) -> Optional[date]:
    """Parse a date string, returning None when it is not recognised."""
    if not date_string:
        return None
    s = date_string.strip()
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def format_date(date_string: Optional[str]) -> str:
    """Format a date the British long way, e.g. ``'5 March 2024'``.

    Unparseable input gives ``'Invalid Date'``.
    """
    d = parse_date(date_string)
    if d is None:
        return INVALID_DATE
    return f"{d.day} {MONTH_NAMES[d.month - 1]} {d.year}"


def escape_html(text: Optional[str]) -> str:
    """Escape ``&``, ``<`` and ``>`` so text can be dropped into markup."""
    if text is None:
        return ""
    return html.escape(str(text), quote=False)
