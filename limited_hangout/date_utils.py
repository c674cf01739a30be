"""Shared date and time parsing utilities."""

import re
from datetime import datetime
from typing import Optional

# Date(2025, 10, 5) or Date(2025, 10, 5, 19, 30, 0); month is zero-based
STRUCTURED_DATE_RE = re.compile(r'^Date\((\d{4}),\s*(\d{1,2}),\s*(\d{1,2})')
STRUCTURED_DATETIME_RE = re.compile(
    r'^Date\((\d{4}),\s*(\d{1,2}),\s*(\d{1,2}),\s*(\d{1,2}),\s*(\d{1,2})(?:,\s*(\d{1,2}))?\)'
)
MDY_RE = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')

CANONICAL_DATE_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')
CANONICAL_TIME_RE = re.compile(r'^(\d{1,2}):(\d{2})\s*([AP]M)$', re.IGNORECASE)


def normalize_date_text(text: str) -> str:
    """Canonicalize a sheet date to YYYY-MM-DD where the shape is known.

    Unknown shapes come back trimmed but otherwise untouched.
    """
    if not text:
        return ""
    text = text.strip()

    match = STRUCTURED_DATE_RE.match(text)
    if match:
        year, month, day = match.groups()
        return f"{year}-{int(month) + 1:02d}-{int(day):02d}"

    match = MDY_RE.match(text)
    if match:
        month, day, year = match.groups()
        return f"{year}-{int(month):02d}-{int(day):02d}"

    return text


def normalize_time_text(text: str) -> str:
    """Turn a structured datetime token into "H:MM AM/PM"; pass anything else through."""
    if not text:
        return ""
    text = text.strip()

    match = STRUCTURED_DATETIME_RE.match(text)
    if match:
        hour, minute = int(match.group(4)), int(match.group(5))
        suffix = "PM" if hour >= 12 else "AM"
        return f"{hour % 12 or 12}:{minute:02d} {suffix}"

    return text


def parse_instant(date_text: str, time_text: Optional[str]) -> Optional[datetime]:
    """Combine a canonical date and time into a naive local datetime.

    Returns None unless the date is exactly YYYY-MM-DD and the time is
    exactly H:MM AM/PM.
    """
    if not date_text or not time_text:
        return None

    date_match = CANONICAL_DATE_RE.match(date_text.strip())
    time_match = CANONICAL_TIME_RE.match(time_text.strip())
    if not date_match or not time_match:
        return None

    year, month, day = (int(part) for part in date_match.groups())
    hour, minute = int(time_match.group(1)), int(time_match.group(2))
    meridiem = time_match.group(3).upper()

    if hour > 12 or minute > 59:
        return None
    if meridiem == "PM" and hour != 12:
        hour += 12
    if meridiem == "AM" and hour == 12:
        hour = 0

    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        return None


def month_key(instant: Optional[datetime]) -> str:
    """YYYY-MM for an instant, empty string for none."""
    if instant is None:
        return ""
    return instant.strftime("%Y-%m")


def month_label(key: str) -> str:
    """'2025-11' -> 'November 2025'."""
    try:
        return datetime.strptime(key, "%Y-%m").strftime("%B %Y")
    except ValueError:
        return key
