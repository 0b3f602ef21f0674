"""Utility functions for the books API."""

from datetime import date, datetime

# Layouts accepted for dates in request bodies, tried in order
BODY_DATE_FORMATS = (
    "%Y-%m-%d",
    "%d-%m-%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
)


def parse_flexible_date(value: str) -> date | None:
    """
    Parse a calendar date written in any of the accepted layouts.

    Accepts ``2025-11-24``, ``24-11-2025``, ``2025/11/24``, ``November 24, 2025``,
    ``Nov 24, 2025`` and RFC 3339 timestamps (only the date part is kept).
    An empty string means "no date" and returns None.

    Raises:
        ValueError: If no layout matches
    """
    value = value.strip()
    if not value:
        return None

    for fmt in BODY_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    if "T" in value:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            pass

    raise ValueError(f"cannot parse date: {value}")
