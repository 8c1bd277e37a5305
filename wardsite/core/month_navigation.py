"""Month Navigation — query-param parsing and day-detail helpers for the calendar page.

Invariants:
    - parse_month_param never raises: bad, missing or unrenderable input
      (0001-01, 9999-12) falls back to `today`
    - parse_date_param never raises: bad or missing input yields None
    - A missing ends_on means the event covers only starts_on

Design Decisions:
    - `today` is a parameter, never read from the clock here (core stays pure)
"""

from datetime import date, timedelta
from typing import Iterable

from wardsite.core.calendar_layout import EventLike, supports_month


def parse_month_param(value: str | None, today: date) -> date:
    """'YYYY-MM' -> first day of that month; fallback `today`."""
    if not value:
        return today
    try:
        month = date.fromisoformat(f"{value}-01")
    except ValueError:
        return today
    return month if supports_month(month) else today


def parse_date_param(value: str | None) -> date | None:
    """'YYYY-MM-DD' -> date; fallback None."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def month_key(day: date) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{day.year:04d}-{day.month:02d}"


def previous_month(day: date) -> str:
    return month_key(day.replace(day=1) - timedelta(days=1))


def next_month(day: date) -> str:
    # day 28 + 4 always lands in the following month
    return month_key(day.replace(day=28) + timedelta(days=4))


def event_covers_date(event: EventLike, day: date) -> bool:
    return event.starts_on <= day <= (event.ends_on or event.starts_on)


def events_on_date(events: Iterable[EventLike], day: date) -> list:
    """Events covering `day`, in input order."""
    return [e for e in events if event_covers_date(e, day)]


def event_dates(events: Iterable[EventLike]) -> set[date]:
    """Every date covered by at least one event."""
    dates: set[date] = set()
    for event in events:
        current = event.starts_on
        end = event.ends_on or event.starts_on
        while current <= end:
            dates.add(current)
            current += timedelta(days=1)
    return dates


def _short_date(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def format_date_range(event: EventLike) -> str:
    """'Mar 6' for single-day events, 'Mar 6 – Mar 9' otherwise."""
    start = _short_date(event.starts_on)
    if event.ends_on and event.ends_on != event.starts_on:
        return f"{start} – {_short_date(event.ends_on)}"
    return start
