import asyncio
from datetime import datetime

from limited_hangout.board import ShowBoard
from limited_hangout.config import SourceConfig
from limited_hangout.generate_html import generate_html
from limited_hangout.models import Performer, Show
from limited_hangout.sources import DemoSource

from conftest import NOW


def _demo_board():
    board = ShowBoard(DemoSource(SourceConfig(demo=True), today=NOW.date()), now=NOW)
    asyncio.run(board.refresh())
    return board


def test_page_lists_every_member_and_filters():
    html = generate_html(_demo_board(), datetime(2025, 10, 20, 9, 0))

    for name in ("Devin", "Pat", "Matt"):
        assert f"<h2>{name}</h2>" in html
    assert '<option value="2025-11">November 2025</option>' in html
    assert '<option value="Arlington, VA">Arlington, VA</option>' in html
    assert "Updated October 20, 2025 at 9:00 AM" in html


def test_sold_out_show_has_badge_and_no_link():
    html = generate_html(_demo_board(), NOW)
    assert '<div class="badge">Sold Out</div>' in html
    assert "No tickets available" in html
    assert "https://tickets.example.com/devin2" not in html
    assert 'href="https://tickets.example.com/devin1"' in html


def test_empty_column_message_and_selected_option():
    board = _demo_board()
    board.engine.select_city("Arlington, VA")

    html = generate_html(board, NOW)

    assert html.count("No upcoming shows match your filters.") == 2
    assert '<option value="Arlington, VA" selected>' in html


def test_text_is_escaped_and_missing_link_noted():
    board = _demo_board()
    board.shows[Performer.MATT] = [
        Show(Performer.MATT, "2025-11-09", "8:00 PM", venue='<b>"Loud"</b> & Co')
    ]

    html = generate_html(board, NOW)

    assert "&lt;b&gt;&quot;Loud&quot;&lt;/b&gt; &amp; Co" in html
    assert "Details coming soon" in html


def test_error_banner():
    board = _demo_board()
    board.error = "Could not load shows."
    assert '<span class="status error">Could not load shows.</span>' in generate_html(board, NOW)
