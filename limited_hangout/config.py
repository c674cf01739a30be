"""Configuration for the Limited Hangout live shows page."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote
from zoneinfo import ZoneInfo

from .models import Performer

# ---------------------------------------------------------------------------
# Roster: one sheet tab per member, in page column order
# ---------------------------------------------------------------------------
ROSTER = (Performer.DEVIN, Performer.PAT, Performer.MATT)

# ---------------------------------------------------------------------------
# "Past" means before local midnight in the group's home timezone
# ---------------------------------------------------------------------------
SITE_TZ = ZoneInfo("America/New_York")

# ---------------------------------------------------------------------------
# Display fallbacks
# ---------------------------------------------------------------------------
VENUE_FALLBACK = "Venue TBA"
LOAD_ERROR_MESSAGE = "Could not load shows."

# ---------------------------------------------------------------------------
# Upstream sheet: one URL template per encoding, {tab} is the member name.
# Publish the sheet: File → Share → Publish to web → pick the format.
# ---------------------------------------------------------------------------
PUBLISHED_SHEET_ID = (
    "2PACX-1vRVtnWrYtSM5a5KMeb_k7qIukbJbnkoMqRhFDgJ60I2obN1pycbQo4E-"
    "SchhDDhZL3UqCU9N_A_LNFM"
)
DEFAULT_RANGE = "Shows!A:E"

# {sheet_id}, {published_id}, {api_key} and {range} come from SourceConfig
URL_TEMPLATES = {
    "csv": "https://docs.google.com/spreadsheets/d/e/{published_id}/pub?output=csv&sheet={tab}",
    "gviz": "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:json&sheet={tab}",
    "api": "https://opensheet.elk.sh/{sheet_id}/{tab}",
    # One range holds every member; rows are grouped by its "member" column
    "values": "https://sheets.googleapis.com/v4/spreadsheets/{sheet_id}/values/{range}?key={api_key}",
}

DEFAULT_ENCODING = "csv"
DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class SourceConfig:
    """Which encoding to read the sheet in, and where from."""
    encoding: str = DEFAULT_ENCODING
    url_template: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    demo: bool = False
    sheet_id: str = ""
    published_id: str = PUBLISHED_SHEET_ID
    api_key: str = ""
    range: str = DEFAULT_RANGE

    @property
    def resolved_url_template(self) -> str:
        if self.url_template:
            return self.url_template
        return URL_TEMPLATES.get(self.encoding, "")

    def url_for(self, tab: str) -> str:
        """The tab's URL with every placeholder filled and URL-quoted."""
        return self.resolved_url_template.format(
            tab=quote(str(tab)),
            sheet_id=quote(self.sheet_id),
            published_id=quote(self.published_id),
            api_key=quote(self.api_key),
            range=quote(self.range, safe=""),
        )


def load_config(env: Optional[Mapping[str, str]] = None) -> SourceConfig:
    """Build a SourceConfig from environment variables.

    SHOWS_SOURCE               csv | gviz | api | values (default csv)
    SHOWS_URL_TEMPLATE         overrides the template for that encoding
    SHOWS_TIMEOUT              request timeout in seconds
    DEMO_MODE                  "true" serves the built-in sample schedule
    GOOGLE_SHEETS_SHEET_ID     sheet id for gviz, api and values
    GOOGLE_SHEETS_PUBLISHED_ID published-to-web id for csv
    GOOGLE_SHEETS_API_KEY      Sheets API key for values
    GOOGLE_SHEETS_RANGE        values range (default "Shows!A:E")
    """
    if env is None:
        env = os.environ

    encoding = (env.get("SHOWS_SOURCE") or DEFAULT_ENCODING).strip().lower()
    try:
        timeout = float(env.get("SHOWS_TIMEOUT") or DEFAULT_TIMEOUT)
    except ValueError:
        timeout = DEFAULT_TIMEOUT

    return SourceConfig(
        encoding=encoding,
        url_template=env.get("SHOWS_URL_TEMPLATE") or None,
        timeout=timeout,
        demo=(env.get("DEMO_MODE") or "false").strip().lower() == "true",
        sheet_id=(env.get("GOOGLE_SHEETS_SHEET_ID") or "").strip(),
        published_id=(env.get("GOOGLE_SHEETS_PUBLISHED_ID") or "").strip() or PUBLISHED_SHEET_ID,
        api_key=(env.get("GOOGLE_SHEETS_API_KEY") or "").strip(),
        range=(env.get("GOOGLE_SHEETS_RANGE") or "").strip() or DEFAULT_RANGE,
    )
