"""Row normalization.

Maps raw sheet rows, whose headers drift between revisions ("Ticket" vs
"Tickets" vs "Buy Link"), onto Show records with canonical date and time text.
"""

import logging
from typing import Iterable, List, Mapping, Sequence

from .config import VENUE_FALLBACK
from .date_utils import normalize_date_text, normalize_time_text
from .models import Performer, RawRow, Show

logger = logging.getLogger("limited-hangout.normalize")

# Column labels accepted for each field, highest priority first
FIELD_ALIASES = {
    "date": ["Date", "date"],
    "time": ["Time", "time"],
    "city": ["City", "city"],
    "venue": ["Venue", "venue", "Venue/Show Name"],
    "ticket": ["Ticket", "Tickets", "ticket", "tickets", "Link", "Ticket Link", "Buy Link"],
    "status": ["Status", "status"],
}


def resolve_field(row: Mapping[str, str], aliases: Sequence[str]) -> str:
    """Value of the first alias present in the row, or "".

    Exact labels are tried first; only if none match is the same list tried
    again ignoring case.
    """
    for name in aliases:
        if name in row:
            return (row[name] or "").strip()

    lowered = {key.strip().lower(): key for key in row}
    for name in aliases:
        key = lowered.get(name.lower())
        if key is not None:
            return (row[key] or "").strip()

    return ""


def normalize_row(row: RawRow, performer: Performer) -> Show:
    """Build a Show from one raw sheet row."""
    fields = {name: resolve_field(row, aliases) for name, aliases in FIELD_ALIASES.items()}

    return Show(
        performer=performer,
        date=normalize_date_text(fields["date"]),
        time=normalize_time_text(fields["time"]) or None,
        city=fields["city"],
        venue=fields["venue"] or VENUE_FALLBACK,
        ticket_url=fields["ticket"] or None,
        status=fields["status"],
    )


def normalize_rows(rows: Iterable[RawRow], performer: Performer) -> List[Show]:
    shows = [normalize_row(row, performer) for row in rows]
    unparsed = sum(1 for show in shows if show.date and show.instant is None)
    if unparsed:
        logger.debug(f"  {performer}: {unparsed} show(s) without a parsable date/time")
    return shows
