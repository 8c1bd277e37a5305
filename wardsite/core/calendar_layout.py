"""Calendar Layout — turns a month's events into Sunday-aligned week rows.

Invariants:
    - Every WeekLayout.days has exactly 7 consecutive dates, Sunday first
    - Weeks cover the first and last day of the month (4 to 6 weeks)
    - A multi-week event yields exactly one Segment per week it overlaps
    - Within a week, two segments share a row only if their columns don't overlap
    - max_lanes == number of distinct rows used in the week (0 if none)
    - Row 1 is the day-number header; the first event lane is row 2
    - Inputs are never mutated; output is rebuilt on every call

Design Decisions:
    - Greedy first-fit lane packing per week over a plain list of lane ends:
      a week never holds more than a handful of segments
    - Ties on (col_start, col_end) keep input order
    - ends_on < starts_on raises InvalidDateRangeError instead of silently
      dropping the event
    - Months whose padded grid or neighbouring months fall outside
      date.min..date.max (0001-01, 9999-12) raise ValidationError
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Iterable, Protocol

from wardsite.core.errors import InvalidDateRangeError, ValidationError

DAYS_PER_WEEK = 7
FIRST_LANE_ROW = 2


class EventLike(Protocol):
    """Anything with a title and a date range (ORM row, schema, dataclass)."""
    title: str
    starts_on: date
    ends_on: date | None


@dataclass(frozen=True)
class Segment:
    """The clipped, single-week visible portion of one event."""
    event: Any
    col_start: int
    col_span: int
    row: int
    continues_before: bool
    continues_after: bool


@dataclass(frozen=True)
class WeekLayout:
    """One Sunday-to-Saturday row of the month grid."""
    days: list[date]
    segments: list[Segment] = field(default_factory=list)
    max_lanes: int = 0


def day_column(day: date) -> int:
    """Grid column for a date: Sunday=1 ... Saturday=7."""
    # date.weekday() is Monday=0 ... Sunday=6
    return (day.weekday() + 1) % DAYS_PER_WEEK + 1


def week_start_for(day: date) -> date:
    """The Sunday on or before `day`."""
    return day - timedelta(days=day_column(day) - 1)


def month_bounds(month_date: date) -> tuple[date, date]:
    """First and last day of the month containing `month_date`."""
    first = month_date.replace(day=1)
    return first, first.replace(day=calendar.monthrange(first.year, first.month)[1])


def supports_month(month_date: date) -> bool:
    """Whether the month's padded weeks and both neighbouring months are representable."""
    first, last = month_bounds(month_date)
    # at least one day either side for previous/next month navigation
    days_before = max(day_column(first) - 1, 1)
    days_after = max(DAYS_PER_WEEK - day_column(last), 1)
    return (
        (first - date.min).days >= days_before
        and (date.max - last).days >= days_after
    )


def build_weeks(month_date: date) -> list[list[date]]:
    """7-day lists (Sun–Sat) covering the whole month of `month_date`."""
    if not supports_month(month_date):
        raise ValidationError(
            f"Month {month_date.year:04d}-{month_date.month:02d} "
            "is outside the supported calendar range",
            "month",
        )
    first, last = month_bounds(month_date)

    weeks = []
    week_start = week_start_for(first)
    while week_start <= last:
        weeks.append([week_start + timedelta(days=i) for i in range(DAYS_PER_WEEK)])
        week_start += timedelta(days=DAYS_PER_WEEK)
    return weeks


def build(events: Iterable[EventLike], month_date: date) -> list[WeekLayout]:
    """Build the week layout for the month containing `month_date`.

    Events spanning several weeks are clipped to each week row, then every
    week's segments are packed into lanes independently. Only year and
    month of `month_date` are used.
    """
    events = list(events)
    for event in events:
        if event.ends_on is not None and event.ends_on < event.starts_on:
            raise InvalidDateRangeError(event.title)

    layout = []
    for days in build_weeks(month_date):
        clipped = [
            placement
            for event in events
            if (placement := _clip_to_week(event, days[0], days[-1])) is not None
        ]
        clipped.sort(key=lambda p: (p["col_start"], p["col_end"]))
        segments, max_lanes = _assign_lanes(clipped)
        layout.append(WeekLayout(days=days, segments=segments, max_lanes=max_lanes))
    return layout


def _clip_to_week(event: EventLike, week_start: date, week_end: date) -> dict | None:
    """Visible part of `event` inside [week_start, week_end], or None."""
    event_end = event.ends_on or event.starts_on
    visible_start = max(event.starts_on, week_start)
    visible_end = min(event_end, week_end)
    if visible_start > visible_end:
        return None

    col_start = day_column(visible_start)
    col_span = (visible_end - visible_start).days + 1
    return {
        "event": event,
        "col_start": col_start,
        "col_span": col_span,
        "col_end": col_start + col_span - 1,
        "continues_before": event.starts_on < week_start,
        "continues_after": event_end > week_end,
    }


def _assign_lanes(placements: list[dict]) -> tuple[list[Segment], int]:
    """First-fit lane packing over pre-sorted placements.

    `lane_ends[i]` is the rightmost column occupied in lane i.
    """
    lane_ends: list[int] = []
    segments = []
    for p in placements:
        lane = next(
            (i for i, end in enumerate(lane_ends) if end < p["col_start"]),
            None,
        )
        if lane is None:
            lane = len(lane_ends)
            lane_ends.append(p["col_end"])
        else:
            lane_ends[lane] = p["col_end"]

        segments.append(Segment(
            event=p["event"],
            col_start=p["col_start"],
            col_span=p["col_span"],
            row=lane + FIRST_LANE_ROW,
            continues_before=p["continues_before"],
            continues_after=p["continues_after"],
        ))
    return segments, len(lane_ends)
