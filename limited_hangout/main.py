#!/usr/bin/env python3
"""Limited Hangout Live Shows — Page Builder

Fetches every member's tab from the schedule sheet, drops past shows,
and writes the static Live Shows page plus a JSON copy of the schedule.

Usage:
    python -m limited_hangout.main                      # Normal run
    python -m limited_hangout.main --dry-run            # Print schedule, write nothing
    python -m limited_hangout.main --month 2025-11 --city "Washington, DC"
"""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .board import ShowBoard
from .config import SITE_TZ, load_config
from .generate_html import generate_html
from .sources import make_source

DOCS_DIR = Path(__file__).resolve().parent.parent / "docs"

logger = logging.getLogger("limited-hangout")


def build_board(month: Optional[str] = None, city: Optional[str] = None) -> ShowBoard:
    """Fetch the schedule once and apply any filters asked for."""
    config = load_config()
    board = ShowBoard(make_source(config))
    asyncio.run(board.refresh())
    if month:
        board.engine.select_month(month)
    if city:
        board.engine.select_city(city)
    return board


def run(dry_run: bool = False, month: Optional[str] = None, city: Optional[str] = None) -> int:
    """Main pipeline: fetch → normalize → filter → render → save."""
    run_timestamp = datetime.now(SITE_TZ)
    logger.info("=" * 60)
    logger.info(f"LIMITED HANGOUT LIVE SHOWS — {run_timestamp.strftime('%Y-%m-%d %H:%M')}")
    logger.info("=" * 60)

    board = build_board(month, city)

    if dry_run:
        logger.info("DRY RUN — Not writing files")
        _print_summary(board)
        return 0

    DOCS_DIR.mkdir(parents=True, exist_ok=True)

    html_path = DOCS_DIR / "shows.html"
    html_path.write_text(generate_html(board, run_timestamp), encoding="utf-8")
    logger.info(f"Wrote {html_path}")

    json_path = DOCS_DIR / "shows.json"
    payload = board.to_payload()
    payload["generated_at"] = run_timestamp.isoformat()
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Wrote {json_path}")

    _print_summary(board)

    if board.error:
        failures = [r for r in board.results if not r.success]
        logger.warning(f"{len(failures)} tab(s) had errors:")
        for result in failures:
            logger.warning(f"   - {result.status_line}")
    return 0


def _print_summary(board: ShowBoard) -> None:
    """Print a text summary of the visible shows."""
    for performer, shows in board.visible().items():
        print(f"\n━━━ {performer.value.upper()} ━━━")
        if not shows:
            print("  No upcoming shows.")
        for show in shows:
            line = f"  {show.display_when} — {show.venue}"
            if show.city:
                line += f", {show.city}"
            if show.sold:
                line += " [SOLD OUT]"
            print(line)
    print()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Build the Limited Hangout Live Shows page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--dry-run", action="store_true", help="Print results without writing files")
    parser.add_argument("--month", help="Only shows in this month (YYYY-MM)")
    parser.add_argument("--city", help="Only shows in this city (exact match)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return run(dry_run=args.dry_run, month=args.month, city=args.city)


if __name__ == "__main__":
    sys.exit(main())
