"""Calendar Page — assembles the public auxiliary page around the pure layout engine.

Invariants:
    - Unknown slugs raise ResourceNotFoundError before any query runs
    - Bad month params fall back to `today`'s month; bad date params select nothing
    - The layout engine only ever sees events already filtered to the auxiliary
      and overlapping the requested month

Design Decisions:
    - Fetch (EventStore/PostStore) → compute (core) → shape (schemas): the
      impure steps stay at the edges
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from wardsite.core import auxiliary, calendar_layout, month_navigation
from wardsite.core.auxiliary import Auxiliary, CombinedAuxiliary
from wardsite.core.errors import ResourceNotFoundError
from wardsite.schemas.calendar import (
    AuxiliaryOut, BarStyleOut, CalendarPage, SegmentEvent, SelectedDay, WeekOut,
)
from wardsite.schemas.event import UpcomingEvent
from wardsite.schemas.post import PostResponse
from wardsite.services.event_store import EventStore
from wardsite.services.post_store import PostStore

logger = logging.getLogger(__name__)


def get_auxiliary_or_404(slug: str) -> Auxiliary | CombinedAuxiliary:
    aux = auxiliary.get_by_slug(slug)
    if aux is None:
        raise ResourceNotFoundError("Auxiliary", slug)
    return aux


def auxiliary_out(aux: Auxiliary | CombinedAuxiliary) -> AuxiliaryOut:
    return AuxiliaryOut(
        name=aux.name,
        slug=aux.slug,
        color=aux.color.value,
        members=list(aux.members) if isinstance(aux, CombinedAuxiliary) else None,
    )


def _segment_event(event) -> SegmentEvent:
    return SegmentEvent(
        id=event.id, title=event.title,
        starts_on=event.starts_on, ends_on=event.ends_on,
        start_time=event.start_time,
    )


async def build_calendar_page(
    db: AsyncSession,
    slug: str,
    today: date,
    month: str | None = None,
    selected: str | None = None,
    upcoming_limit: int = 8,
    posts_limit: int = 5,
) -> CalendarPage:
    """Load, lay out and shape one month of an auxiliary's calendar."""
    aux = get_auxiliary_or_404(slug)
    current_month = month_navigation.parse_month_param(month, today)
    selected_date = month_navigation.parse_date_param(selected)

    event_store = EventStore(db)
    events = await event_store.list_for_month(
        aux.slug, current_month.year, current_month.month,
    )
    weeks = calendar_layout.build(events, current_month)
    upcoming = await event_store.list_upcoming(aux.slug, upcoming_limit, today)
    posts = await PostStore(db).list_for_auxiliary(aux.slug, limit=posts_limit)

    selected_day = None
    if selected_date is not None:
        selected_day = SelectedDay(
            day=selected_date,
            events=[
                _segment_event(e)
                for e in month_navigation.events_on_date(events, selected_date)
            ],
        )

    logger.info(
        f"Built calendar with {len(weeks)} weeks and {len(events)} events",
        extra={"auxiliary": aux.slug, "month": month_navigation.month_key(current_month)},
    )
    style = auxiliary.style_for(aux.color)
    return CalendarPage(
        auxiliary=auxiliary_out(aux),
        style=BarStyleOut(bar_classes=style.bar_classes, border_class=style.border_class),
        month=month_navigation.month_key(current_month),
        previous_month=month_navigation.previous_month(current_month),
        next_month=month_navigation.next_month(current_month),
        weeks=[WeekOut.from_week(w) for w in weeks],
        event_dates=sorted(month_navigation.event_dates(events)),
        selected_day=selected_day,
        upcoming_events=[
            UpcomingEvent(
                id=e.id,
                title=e.title,
                date_range=month_navigation.format_date_range(e),
                location=e.location,
                start_time=e.start_time,
            )
            for e in upcoming
        ],
        recent_posts=[PostResponse.model_validate(p) for p in posts],
    )
