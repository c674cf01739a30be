from datetime import datetime, timezone

from limited_hangout.models import Performer, Show
from limited_hangout.schedule import derive_facets, process, start_of_today

from conftest import NOW


def _show(date, time=None, city="", venue="Venue", performer=Performer.DEVIN):
    return Show(performer=performer, date=date, time=time, city=city, venue=venue)


def test_past_shows_dropped_today_kept():
    past = _show("2025-10-19", "9:00 PM")
    earlier_today = _show("2025-10-20", "12:30 AM")
    future = _show("2025-11-05", "7:30 PM")

    assert process([past, earlier_today, future], now=NOW) == [earlier_today, future]


def test_unparsable_or_timeless_shows_survive():
    no_time = _show("2024-01-01")
    bad_date = _show("last spring", "8:00 PM")
    assert process([no_time, bad_date], now=NOW) == [no_time, bad_date]


def test_empty_date_dropped():
    assert process([_show(""), _show("", "8:00 PM")], now=NOW) == []


def test_sorted_chronologically():
    t1 = _show("2025-11-01", "8:00 PM")
    t2 = _show("2025-11-01", "9:30 PM")
    t3 = _show("2025-12-01", "7:00 PM")
    assert process([t3, t1, t2], now=NOW) == [t1, t2, t3]


def test_unparsable_sink_to_front_in_input_order():
    a = _show("TBD", venue="A")
    dated = _show("2025-11-01", "8:00 PM")
    b = _show("2025-11-20", venue="B")

    result = process([dated, a, b], now=NOW)

    assert result == [a, b, dated]
    assert process([dated, a, b], now=NOW) == result


def test_start_of_today_from_aware_now():
    # 02:00 UTC on the 21st is still the 20th in New York
    aware = datetime(2025, 10, 21, 2, 0, tzinfo=timezone.utc)
    assert start_of_today(aware) == datetime(2025, 10, 20)


def test_start_of_today_default_is_local_midnight():
    cutoff = start_of_today()
    assert (cutoff.hour, cutoff.minute, cutoff.tzinfo) == (0, 0, None)


def test_derive_facets():
    partitions = {
        Performer.DEVIN: [
            _show("2025-12-01", "8:00 PM", city="washington, DC"),
            _show("2025-11-01", "8:00 PM", city="Arlington, VA"),
        ],
        Performer.PAT: [
            _show("2025-11-20", "8:00 PM", city="Richmond, VA"),
            _show("sometime", city="Baltimore, MD"),
            _show("2026-01-03", city=""),  # no time, no month
        ],
        Performer.MATT: [],
    }

    facets = derive_facets(partitions)

    assert facets.months == ["2025-11", "2025-12"]
    assert facets.cities == ["Arlington, VA", "Baltimore, MD", "Richmond, VA", "washington, DC"]


def test_derive_facets_empty():
    facets = derive_facets({Performer.DEVIN: []})
    assert facets.months == []
    assert facets.cities == []
