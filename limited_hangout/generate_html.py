"""Generate the static Live Shows page."""

from datetime import datetime
from typing import List

from .board import ShowBoard
from .date_utils import month_label
from .models import ALL, Show


def generate_html(board: ShowBoard, run_timestamp: datetime) -> str:
    """Render the board's current (filtered) state as a standalone page."""
    visible = board.visible()

    columns = ""
    for performer in board.roster:
        columns += _column(performer.value, visible[performer])

    status = ""
    if board.loading:
        status = '<span class="status">Loading…</span>'
    if board.error:
        status += f'<span class="status error">{_esc(board.error)}</span>'

    selection = board.engine.selection
    month_options = _option(ALL, "All months", selection.month)
    for key in board.facets.months:
        month_options += _option(key, month_label(key), selection.month)
    city_options = _option(ALL, "All cities", selection.city)
    for city in board.facets.cities:
        city_options += _option(city, city, selection.city)

    run_time_str = run_timestamp.strftime("%B %-d, %Y at %-I:%M %p")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Limited Hangout — Live Shows</title>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
            max-width: 1100px;
            margin: 0 auto;
            padding: 24px 16px;
            color: #1a1a1a;
            line-height: 1.5;
        }}
        header {{ display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; gap: 12px; margin-bottom: 16px; }}
        h1 {{ font-size: 1.8em; font-weight: 800; letter-spacing: -0.01em; }}
        .status {{ font-size: 0.9em; color: #666; margin-left: 8px; }}
        .status.error {{ color: #c00; }}
        .filters {{ display: flex; gap: 12px; flex-wrap: wrap; margin-bottom: 24px; }}
        .filters select {{ border: 1px solid #ccc; border-radius: 12px; padding: 8px; }}
        .grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); gap: 24px; }}
        h2 {{ font-size: 1.2em; font-weight: 700; margin-bottom: 12px; }}
        .card {{ position: relative; border: 1px solid #e5e5e5; border-radius: 16px; padding: 16px; margin-bottom: 12px; }}
        .card.sold {{ opacity: 0.8; }}
        .badge {{ position: absolute; top: 12px; right: 12px; font-size: 11px; font-weight: 600; text-transform: uppercase; border: 1px solid #ccc; border-radius: 999px; padding: 2px 8px; background: #f3f3f3; }}
        .when {{ font-size: 0.85em; color: #777; }}
        .venue {{ font-weight: 600; margin-top: 4px; }}
        .city {{ font-size: 0.85em; color: #555; }}
        .tickets {{ display: inline-block; margin-top: 8px; font-size: 0.85em; }}
        .muted {{ margin-top: 8px; font-size: 0.85em; color: #999; }}
        .empty {{ font-size: 0.85em; color: #777; font-style: italic; }}
        footer {{ margin-top: 40px; font-size: 0.8em; color: #aaa; text-align: center; }}
    </style>
</head>
<body>
    <header>
        <h1>Live Shows</h1>
        <div>{status}</div>
    </header>

    <form class="filters" method="get">
        <label>Month <select name="month">{month_options}</select></label>
        <label>City <select name="city">{city_options}</select></label>
        <a href="?">Reset filters</a>
    </form>

    <main class="grid">
        {columns}
    </main>

    <footer>Updated {run_time_str}</footer>
</body>
</html>"""


def _column(title: str, shows: List[Show]) -> str:
    if shows:
        cards = "\n".join(_card(show) for show in shows)
    else:
        cards = '<p class="empty">No upcoming shows match your filters.</p>'
    return f"""
        <section>
            <h2>{_esc(title)}</h2>
            {cards}
        </section>
        """


def _card(show: Show) -> str:
    """One show. Sold-out shows stay listed, with a badge and no ticket link."""
    sold = show.sold
    badge = '<div class="badge">Sold Out</div>' if sold else ""

    if show.ticket_url and not sold:
        action = (
            f'<a class="tickets" href="{_esc(show.ticket_url)}" '
            f'target="_blank" rel="noopener noreferrer">Buy tickets</a>'
        )
    elif sold:
        action = '<div class="muted">No tickets available</div>'
    else:
        action = '<div class="muted">Details coming soon</div>'

    return (
        f'<div class="card{" sold" if sold else ""}">{badge}'
        f'<div class="when">{_esc(show.display_when)}</div>'
        f'<div class="venue">{_esc(show.venue)}</div>'
        f'<div class="city">{_esc(show.city)}</div>'
        f'{action}</div>'
    )


def _option(value: str, label: str, selected: str) -> str:
    attr = " selected" if value == selected else ""
    return f'<option value="{_esc(value)}"{attr}>{_esc(label)}</option>'


def _esc(text: str) -> str:
    """HTML-escape text."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
