"""Past-show filtering, chronological sort, and filter facets."""

from datetime import datetime, time
from typing import Iterable, List, Mapping, Optional

from .config import SITE_TZ
from .models import FilterFacets, Show


def start_of_today(now: Optional[datetime] = None) -> datetime:
    """Local midnight for the site's timezone, as a naive datetime."""
    if now is None:
        now = datetime.now(SITE_TZ)
    elif now.tzinfo is not None:
        now = now.astimezone(SITE_TZ)
    return datetime.combine(now.date(), time.min)


def is_past(show: Show, cutoff: datetime) -> bool:
    """Only shows we can place in time are ever considered past."""
    instant = show.instant
    return instant is not None and instant < cutoff


def _sort_key(show: Show) -> datetime:
    return show.instant or datetime.min


def process(shows: Iterable[Show], now: Optional[datetime] = None) -> List[Show]:
    """Drop dateless and past shows, then sort by date and time.

    Shows whose date/time can't be parsed are kept and sort ahead of the
    rest, in the order they arrived.
    """
    cutoff = start_of_today(now)
    kept = [show for show in shows if show.date and not is_past(show, cutoff)]
    return sorted(kept, key=_sort_key)


def derive_facets(partitions: Mapping[object, Iterable[Show]]) -> FilterFacets:
    """Distinct months (from parsable shows) and non-empty cities, sorted."""
    months = set()
    cities = set()
    for shows in partitions.values():
        for show in shows:
            if show.instant is not None:
                months.add(show.month_key)
            if show.city:
                cities.add(show.city)

    return FilterFacets(
        months=sorted(months),
        cities=sorted(cities, key=lambda c: (c.casefold(), c)),
    )
