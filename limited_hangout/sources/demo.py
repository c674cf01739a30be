"""Built-in sample schedule for previews and local development."""

from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from ..config import SITE_TZ, SourceConfig
from ..models import RawRow, TabResult
from .base import TabularSource

# (days from today, time, city, venue, ticket, status)
DEMO_SHOWS = {
    "Devin": [
        (12, "8:00 PM", "Washington, DC", "DC Improv", "https://tickets.example.com/devin1", ""),
        (19, "7:30 PM", "Washington, DC", "Hotbed DC", "https://tickets.example.com/devin2", "Sold Out"),
    ],
    "Matt": [
        (14, "7:30 PM", "Washington, DC", "Hotbed DC", "https://tickets.example.com/matt1", ""),
    ],
    "Pat": [
        (16, "9:00 PM", "Arlington, VA", "Arlington Drafthouse", "https://tickets.example.com/pat1", ""),
    ],
}


def demo_rows(today: date) -> Dict[str, List[RawRow]]:
    """Sample rows dated a couple of weeks after today, so they never go stale."""
    return {
        tab: [
            {
                "Date": (today + timedelta(days=offset)).isoformat(),
                "Time": time,
                "City": city,
                "Venue": venue,
                "Ticket": ticket,
                "Status": status,
            }
            for offset, time, city, venue, ticket, status in shows
        ]
        for tab, shows in DEMO_SHOWS.items()
    }


class DemoSource(TabularSource):
    """Serves demo_rows() instead of touching the network."""
    encoding = "demo"

    def __init__(self, config: SourceConfig, today: Optional[date] = None):
        super().__init__(config)
        self.today = today  # None means the current date in SITE_TZ

    async def fetch_result(self, tab: str) -> TabResult:
        today = self.today or datetime.now(SITE_TZ).date()
        return TabResult(tab=str(tab), rows=demo_rows(today).get(str(tab), []))
