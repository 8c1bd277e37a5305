"""Calendar Schemas — layout data shaped for a CSS-grid renderer.

Invariants:
    - SegmentOut.label is the event title only when continues_before is False
    - WeekOut.days always has 7 dates, Sunday first
    - Grid placement comes from col_start/col_span/row, never from list order

Design Decisions:
    - Separate from event schemas: the renderer consumes placement data,
      admin forms consume event data
"""

from datetime import date, time

from pydantic import BaseModel

from wardsite.core.calendar_layout import Segment, WeekLayout
from wardsite.schemas.event import UpcomingEvent
from wardsite.schemas.post import PostResponse


class SegmentEvent(BaseModel):
    """The slice of an event a calendar bar needs."""
    id: int | None = None
    title: str
    starts_on: date
    ends_on: date | None = None
    start_time: time | None = None


class SegmentOut(BaseModel):
    event: SegmentEvent
    label: str
    col_start: int
    col_span: int
    row: int
    continues_before: bool
    continues_after: bool

    @classmethod
    def from_segment(cls, segment: Segment) -> "SegmentOut":
        ev = segment.event
        return cls(
            event=SegmentEvent(
                id=getattr(ev, "id", None),
                title=ev.title,
                starts_on=ev.starts_on,
                ends_on=ev.ends_on,
                start_time=getattr(ev, "start_time", None),
            ),
            label="" if segment.continues_before else ev.title,
            col_start=segment.col_start,
            col_span=segment.col_span,
            row=segment.row,
            continues_before=segment.continues_before,
            continues_after=segment.continues_after,
        )


class WeekOut(BaseModel):
    days: list[date]
    segments: list[SegmentOut]
    max_lanes: int

    @classmethod
    def from_week(cls, week: WeekLayout) -> "WeekOut":
        return cls(
            days=week.days,
            segments=[SegmentOut.from_segment(s) for s in week.segments],
            max_lanes=week.max_lanes,
        )


class AuxiliaryOut(BaseModel):
    name: str
    slug: str
    color: str
    members: list[str] | None = None


class BarStyleOut(BaseModel):
    bar_classes: str
    border_class: str


class SelectedDay(BaseModel):
    day: date
    events: list[SegmentEvent]


class CalendarPage(BaseModel):
    """Everything the public auxiliary page renders for one month."""
    auxiliary: AuxiliaryOut
    style: BarStyleOut
    month: str
    previous_month: str
    next_month: str
    weeks: list[WeekOut]
    event_dates: list[date]
    selected_day: SelectedDay | None = None
    upcoming_events: list[UpcomingEvent]
    recent_posts: list[PostResponse]
