"""Data models for the live shows schedule."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from .date_utils import month_key, parse_instant

RawRow = Dict[str, str]

SOLD_OUT_RE = re.compile(r'sold\s*out', re.IGNORECASE)

# Sentinel for "no filter" in either facet
ALL = "all"


class Performer(str, Enum):
    """The group's members. Each has a tab in the schedule sheet."""
    DEVIN = "Devin"
    PAT = "Pat"
    MATT = "Matt"

    def __str__(self) -> str:
        return self.value


def is_sold_out(status: str) -> bool:
    """True when the status says "sold out", however it is spaced or cased."""
    return bool(SOLD_OUT_RE.search(status or ""))


@dataclass(frozen=True)
class Show:
    """One upcoming live date for a performer."""
    performer: Performer
    date: str  # "2025-11-05" once normalized, raw text otherwise
    time: Optional[str] = None  # "7:30 PM"
    city: str = ""
    venue: str = ""
    ticket_url: Optional[str] = None
    status: str = ""

    @property
    def instant(self) -> Optional[datetime]:
        """Date and time combined, or None if either is not in canonical form."""
        return parse_instant(self.date, self.time)

    @property
    def month_key(self) -> str:
        return month_key(self.instant)

    @property
    def sold(self) -> bool:
        return is_sold_out(self.status)

    @property
    def display_when(self) -> str:
        """'Sat, Nov 1, 8:00 PM', or the raw date if it couldn't be parsed."""
        instant = self.instant
        if instant is None:
            return self.date
        return instant.strftime("%a, %b %-d, %-I:%M %p")

    def to_dict(self) -> dict:
        return {
            "performer": self.performer.value,
            "date": self.date,
            "time": self.time,
            "city": self.city,
            "venue": self.venue,
            "ticketUrl": self.ticket_url,
            "status": self.status,
            "sold": self.sold,
            "when": self.display_when,
        }


@dataclass(frozen=True)
class FilterFacets:
    """Distinct months and cities across everything currently loaded."""
    months: List[str] = field(default_factory=list)
    cities: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FilterSelection:
    month: str = ALL
    city: str = ALL


@dataclass
class TabResult:
    """Result from fetching a single performer's tab."""
    tab: str
    rows: List[RawRow] = field(default_factory=list)
    success: bool = True
    error_message: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def status_line(self) -> str:
        if not self.success:
            return f"{self.tab}: ERROR — {self.error_message}"
        return f"{self.tab}: {len(self.rows)} row(s)"
