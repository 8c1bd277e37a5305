"""Event Store — persistence and month/upcoming queries for calendar events.

Invariants:
    - Queries accept any slug; combined slugs expand via auxiliary.resolve()
    - list_for_month returns every event overlapping the month, including
      events that start in an earlier month
    - Writes require a real auxiliary slug; auxiliary never changes on update
    - Merged date range is re-validated on update

Design Decisions:
    - Ordering: starts_on, then start_time with all-day (NULL) events last
"""

import calendar
import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wardsite.core import auxiliary
from wardsite.core.errors import (
    ErrorContext, InvalidDateRangeError, ResourceNotFoundError, UnknownAuxiliaryError,
)
from wardsite.models.event import Event
from wardsite.schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


class EventStore:
    """Calendar event persistence scoped by auxiliary."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _ordered(self, query):
        return query.order_by(
            Event.starts_on.asc(), Event.start_time.asc().nulls_last(), Event.id,
        )

    async def list_for_month(self, slug: str, year: int, month: int) -> list[Event]:
        """Events overlapping [first, last] of the month for `slug`."""
        slugs = auxiliary.resolve(slug)
        first_day = date(year, month, 1)
        last_day = date(year, month, calendar.monthrange(year, month)[1])

        query = self._ordered(
            select(Event)
            .where(Event.auxiliary.in_(slugs))
            .where(Event.starts_on <= last_day)
            .where(func.coalesce(Event.ends_on, Event.starts_on) >= first_day)
        )
        result = await self.db.execute(query)
        events = list(result.scalars().all())
        logger.debug(
            f"Loaded {len(events)} events for {slug} {year}-{month:02d}",
            extra={"auxiliary": slug},
        )
        return events

    async def list_upcoming(self, slug: str, limit: int, today: date) -> list[Event]:
        """Events starting on or after `today`, soonest first."""
        query = self._ordered(
            select(Event)
            .where(Event.auxiliary.in_(auxiliary.resolve(slug)))
            .where(Event.starts_on >= today)
        ).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, event_id: int) -> Event:
        event = await self.db.get(Event, event_id)
        if event is None:
            raise ResourceNotFoundError("Event", str(event_id))
        return event

    async def create(self, slug: str, data: EventCreate) -> Event:
        if not auxiliary.is_real_slug(slug):
            raise UnknownAuxiliaryError(slug)
        event = Event(auxiliary=slug, **data.model_dump())
        self.db.add(event)
        await self.db.commit()
        await self.db.refresh(event)
        logger.info(
            f"Created event '{event.title}'",
            extra={"auxiliary": slug, "event_id": event.id},
        )
        return event

    async def update(self, event_id: int, data: EventUpdate) -> Event:
        event = await self.get(event_id)
        changes = data.model_dump(exclude_unset=True)
        # required columns: an explicit null means "leave as is"
        for required in ("title", "starts_on"):
            if required in changes and changes[required] is None:
                del changes[required]
        starts_on = changes.get("starts_on", event.starts_on)
        ends_on = changes.get("ends_on", event.ends_on)
        if ends_on is not None and ends_on < starts_on:
            raise InvalidDateRangeError(
                changes.get("title") or event.title,
                ErrorContext(resource_id=str(event_id)),
            )
        for key, value in changes.items():
            setattr(event, key, value)
        await self.db.commit()
        await self.db.refresh(event)
        logger.info("Updated event", extra={"event_id": event_id})
        return event

    async def delete(self, event_id: int) -> None:
        event = await self.get(event_id)
        await self.db.delete(event)
        await self.db.commit()
        logger.info("Deleted event", extra={"event_id": event_id})
