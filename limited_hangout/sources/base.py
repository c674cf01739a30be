"""Base class for schedule sources.

Every encoding of the sheet (CSV export, gviz JSON, key/value API, Sheets
values range) shares the same fetch → sniff → parse flow. Subclasses implement parse(),
and override rows_for() when one response holds more than one tab.
"""

import asyncio
import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from ..config import USER_AGENT, SourceConfig
from ..models import RawRow, TabResult
from .errors import SourceError, SourceUnavailable

logger = logging.getLogger("limited-hangout.sources")


class TabularSource:
    """Reads one performer tab from the upstream sheet."""

    encoding: str = ""

    def __init__(self, config: SourceConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session

    def build_url(self, tab: str) -> str:
        return self.config.url_for(tab)

    def parse(self, text: str) -> List[RawRow]:
        """Turn a response body into rows. Raise MalformedEncoding on bad input."""
        raise NotImplementedError

    def rows_for(self, text: str, tab: str) -> List[RawRow]:
        """Rows belonging to tab. Most encodings fetch one tab per request."""
        return self.parse(text)

    def download(self, tab: str) -> str:
        """Blocking GET of the tab's URL. Runs in a worker thread."""
        url = self.build_url(tab)
        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(
                url,
                headers={"User-Agent": USER_AGENT},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise SourceUnavailable(str(e)[:100]) from e
        return response.text

    async def fetch_result(self, tab: str) -> TabResult:
        """Fetch and parse a tab. Failures come back as an empty, failed result."""
        result = TabResult(tab=str(tab))
        try:
            text = await asyncio.to_thread(self.download, tab)
            logger.debug(f"  {tab}: got {text[:200]!r}")
            _reject_markup(text)
            result.rows = self.rows_for(text, tab)
        except SourceError as e:
            result.success = False
            result.error_message = str(e)
            result.rows = []
            logger.warning(f"  {tab}: {self.encoding} fetch failed — {e}")
            return result

        logger.info(f"  {tab}: {len(result.rows)} row(s) from {self.encoding}")
        return result

    async def fetch(self, tab: str) -> List[RawRow]:
        """Rows for a tab, or an empty list if anything went wrong."""
        result = await self.fetch_result(tab)
        return result.rows


def _reject_markup(text: str) -> None:
    """Google answers with a sign-in page when a sheet isn't public."""
    if "<html" not in text.lower():
        return
    soup = BeautifulSoup(text, "html.parser")
    title = soup.title.get_text(strip=True) if soup.title else "untitled page"
    raise SourceUnavailable(f"got an HTML page ({title[:60]}) instead of data")


def clean_header(labels) -> List[str]:
    return [str(label).strip() for label in labels]


def zip_row(header: List[str], cells) -> RawRow:
    """Map cells onto header labels. Missing cells become "", extras are dropped."""
    cells = list(cells)
    row = {}
    for i, label in enumerate(header):
        value = cells[i] if i < len(cells) else ""
        row[label] = "" if value is None else str(value).strip()
    return row
