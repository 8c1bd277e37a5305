"""Month Navigation — tests for query-param parsing and day-detail helpers."""

from dataclasses import dataclass
from datetime import date

import pytest

from wardsite.core.month_navigation import (
    event_covers_date, event_dates, events_on_date, format_date_range,
    month_key, next_month, parse_date_param, parse_month_param, previous_month,
)

TODAY = date(2026, 3, 10)


@dataclass(frozen=True)
class Ev:
    title: str
    starts_on: date
    ends_on: date | None = None


# ─── parse_month_param / parse_date_param ────────────────────────

def test_parse_month_param_returns_first_of_month():
    assert parse_month_param("2026-07", TODAY) == date(2026, 7, 1)


@pytest.mark.parametrize("value", [None, "", "2026-13", "July", "2026-7-1"])
def test_parse_month_param_falls_back_to_today(value):
    assert parse_month_param(value, TODAY) == TODAY


@pytest.mark.parametrize("value", ["0001-01", "9999-12"])
def test_parse_month_param_falls_back_at_calendar_bounds(value):
    assert parse_month_param(value, TODAY) == TODAY


def test_parse_month_param_accepts_months_next_to_bounds():
    assert parse_month_param("0001-02", TODAY) == date(1, 2, 1)
    assert parse_month_param("9999-11", TODAY) == date(9999, 11, 1)


def test_parse_date_param():
    assert parse_date_param("2026-03-06") == date(2026, 3, 6)
    assert parse_date_param("2026-02-30") is None
    assert parse_date_param(None) is None


# ─── month keys ──────────────────────────────────────────────────

def test_month_key_formats_year_and_month():
    assert month_key(date(2026, 3, 31)) == "2026-03"


def test_month_key_zero_pads_early_years():
    assert month_key(date(1, 2, 1)) == "0001-02"
    assert previous_month(date(1, 2, 1)) == "0001-01"
    assert next_month(date(9999, 11, 1)) == "9999-12"


def test_previous_month_crosses_year_boundary():
    assert previous_month(date(2026, 1, 15)) == "2025-12"
    assert previous_month(date(2026, 3, 31)) == "2026-02"


def test_next_month_crosses_year_boundary():
    assert next_month(date(2026, 12, 31)) == "2027-01"
    assert next_month(date(2026, 1, 31)) == "2026-02"


# ─── day detail ──────────────────────────────────────────────────

def test_event_covers_date_is_inclusive():
    ev = Ev("Camp", date(2026, 3, 6), date(2026, 3, 9))
    assert event_covers_date(ev, date(2026, 3, 6))
    assert event_covers_date(ev, date(2026, 3, 9))
    assert not event_covers_date(ev, date(2026, 3, 10))


def test_single_day_event_covers_only_its_day():
    ev = Ev("Meeting", date(2026, 3, 6))
    assert event_covers_date(ev, date(2026, 3, 6))
    assert not event_covers_date(ev, date(2026, 3, 7))


def test_events_on_date_preserves_order():
    a = Ev("A", date(2026, 3, 1), date(2026, 3, 8))
    b = Ev("B", date(2026, 3, 8))
    c = Ev("C", date(2026, 3, 9))
    assert events_on_date([a, b, c], date(2026, 3, 8)) == [a, b]


def test_event_dates_expands_ranges():
    dates = event_dates([
        Ev("A", date(2026, 3, 6), date(2026, 3, 8)),
        Ev("B", date(2026, 3, 8)),
    ])
    assert dates == {date(2026, 3, 6), date(2026, 3, 7), date(2026, 3, 8)}


def test_format_date_range():
    assert format_date_range(Ev("A", date(2026, 3, 6))) == "Mar 6"
    assert format_date_range(Ev("A", date(2026, 3, 6), date(2026, 3, 6))) == "Mar 6"
    assert format_date_range(Ev("A", date(2026, 3, 6), date(2026, 3, 9))) == "Mar 6 – Mar 9"
