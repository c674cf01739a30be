"""The live shows board: everything the page needs to render.

Fetches every roster tab at once, normalizes and sorts each performer's
shows, and keeps the loading/error flags and filter selection the page
reads from. Data is swapped in only after every tab has answered.
"""

import asyncio
import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from .config import LOAD_ERROR_MESSAGE, ROSTER
from .date_utils import month_label
from .filters import FilterEngine
from .models import FilterFacets, Performer, Show, TabResult
from .normalize import normalize_rows
from .schedule import derive_facets, process
from .sources import TabularSource

logger = logging.getLogger("limited-hangout.board")


class ShowBoard:
    def __init__(
        self,
        source: TabularSource,
        roster: Sequence[Performer] = ROSTER,
        engine: Optional[FilterEngine] = None,
        now: Optional[datetime] = None,
    ):
        self.source = source
        self.roster = tuple(roster)
        self.engine = engine or FilterEngine()
        self.now = now  # pinned clock for tests; None means "now"

        self.shows: Dict[Performer, List[Show]] = {p: [] for p in self.roster}
        self.facets = FilterFacets()
        self.results: List[TabResult] = []
        self.loading = False
        self.error: Optional[str] = None

        self._task: Optional[asyncio.Task] = None
        self._generation = 0
        self._closed = False

    async def refresh(self) -> bool:
        """Reload every tab. Returns False if the results were discarded."""
        self._generation += 1
        generation = self._generation
        self.loading = True
        logger.info(f"Fetching {len(self.roster)} tab(s) via {self.source.encoding}")

        try:
            outcomes = await asyncio.gather(
                *(self.source.fetch_result(p.value) for p in self.roster),
                return_exceptions=True,
            )
        except asyncio.CancelledError:
            if generation == self._generation:
                self.loading = False
            raise

        if self._closed or generation != self._generation:
            logger.debug("Discarding results from a superseded refresh")
            return False

        results = [
            _as_result(performer, outcome)
            for performer, outcome in zip(self.roster, outcomes)
        ]
        partitions = {
            performer: process(normalize_rows(result.rows, performer), now=self.now)
            for performer, result in zip(self.roster, results)
        }

        self.results = results
        self.shows = partitions
        self.facets = derive_facets(partitions)
        failures = [r for r in results if not r.success]
        self.error = LOAD_ERROR_MESSAGE if failures else None
        self.loading = False

        for result in results:
            logger.info(f"  {result.status_line}")
        return True

    def start(self) -> asyncio.Task:
        """Kick off a refresh in the background (needs a running loop)."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.ensure_future(self.refresh())
        return self._task

    def close(self) -> None:
        """Tear down: cancel any refresh in flight and ignore what it returns."""
        self._closed = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self.loading = False

    # ------------------------------------------------------------------
    # What the page reads
    # ------------------------------------------------------------------

    def visible(self) -> Dict[Performer, List[Show]]:
        """Each performer's shows under the current month/city selection."""
        return self.engine.apply_all(self.shows)

    def to_payload(self) -> dict:
        visible = self.visible()
        return {
            "members": [
                {"name": p.value, "shows": [s.to_dict() for s in visible[p]]}
                for p in self.roster
            ],
            "months": [{"value": m, "label": month_label(m)} for m in self.facets.months],
            "cities": list(self.facets.cities),
            "selection": {
                "month": self.engine.selection.month,
                "city": self.engine.selection.city,
            },
            "loading": self.loading,
            "error": self.error,
        }


def _as_result(performer: Performer, outcome) -> TabResult:
    """Sources report their own failures, but a crash in one tab stays in that tab."""
    if isinstance(outcome, TabResult):
        return outcome
    logger.error(f"  {performer}: unexpected error — {outcome!r}")
    return TabResult(
        tab=performer.value,
        success=False,
        error_message=f"Unhandled exception: {str(outcome)[:100]}",
    )
