from datetime import datetime

import pytest

from limited_hangout.date_utils import (
    month_key,
    month_label,
    normalize_date_text,
    normalize_time_text,
    parse_instant,
)


@pytest.mark.parametrize("raw, expected", [
    ("Date(2025,10,5)", "2025-11-05"),
    ("Date(2025, 0, 31)", "2025-01-31"),
    ("Date(2025,11,24,20,0,0)", "2025-12-24"),
    ("11/5/2025", "2025-11-05"),
    ("1/09/2026", "2026-01-09"),
    ("2025-11-05", "2025-11-05"),
    ("  2025-11-05 ", "2025-11-05"),
    ("Nov 5", "Nov 5"),
    ("TBD", "TBD"),
    ("", ""),
])
def test_normalize_date_text(raw, expected):
    assert normalize_date_text(raw) == expected


def test_normalize_date_text_is_idempotent():
    once = normalize_date_text("11/5/2025")
    assert normalize_date_text(once) == once


@pytest.mark.parametrize("raw, expected", [
    ("Date(1899,11,30,19,30,0)", "7:30 PM"),
    ("Date(1899,11,30,0,5,0)", "12:05 AM"),
    ("Date(1899,11,30,12,0,0)", "12:00 PM"),
    ("Date(1899,11,30,9,0,0)", "9:00 AM"),
    ("Date(1899,11,30,23,45)", "11:45 PM"),
    ("7:30 PM", "7:30 PM"),
    ("doors 7 / show 8", "doors 7 / show 8"),
    ("", ""),
])
def test_normalize_time_text(raw, expected):
    assert normalize_time_text(raw) == expected


def test_normalize_time_text_is_idempotent():
    assert normalize_time_text(normalize_time_text("Date(1899,11,30,20,0,0)")) == "8:00 PM"


def test_parse_instant_canonical():
    instant = parse_instant("2025-11-05", "7:30 PM")
    assert instant == datetime(2025, 11, 5, 19, 30)
    assert month_key(instant) == "2025-11"


@pytest.mark.parametrize("time_text, hour", [
    ("12:00 AM", 0),
    ("12:15 PM", 12),
    ("9:00 am", 9),
    ("11:59pm", 23),
])
def test_parse_instant_meridiem(time_text, hour):
    assert parse_instant("2025-11-05", time_text).hour == hour


@pytest.mark.parametrize("date_text, time_text", [
    ("2025-11-05", None),
    ("2025-11-05", ""),
    ("", "7:30 PM"),
    ("11/5/2025", "7:30 PM"),
    ("2025-11-05", "19:30"),
    ("2025-11-05", "7 PM"),
    ("2025-11-05", "7:3 PM"),
    ("2025-11-05", "7:30 PM ET"),
    ("2025-02-30", "7:30 PM"),
    ("2025-13-01", "7:30 PM"),
])
def test_parse_instant_rejects_non_canonical(date_text, time_text):
    assert parse_instant(date_text, time_text) is None


def test_month_key_empty_for_none():
    assert month_key(None) == ""


def test_month_label():
    assert month_label("2025-11") == "November 2025"
    assert month_label("garbage") == "garbage"
