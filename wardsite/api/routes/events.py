"""Event Routes — CRUD for calendar events.

Invariants:
    - Events are created under an auxiliary URL; the body never sets auxiliary
    - Listing by month accepts combined slugs (e.g. youth)
    - Missing events return 404; inverted date ranges return 400
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wardsite.infrastructure.database import get_db
from wardsite.schemas.event import EventCreate, EventResponse, EventUpdate
from wardsite.services.calendar_page import get_auxiliary_or_404
from wardsite.services.event_store import EventStore

router = APIRouter(prefix="/api/v1", tags=["events"])


@router.get("/auxiliaries/{slug}/events", response_model=list[EventResponse])
async def list_month_events(
    slug: str,
    year: int = Query(ge=1, le=9999),
    month: int = Query(ge=1, le=12),
    db: AsyncSession = Depends(get_db),
):
    """Events overlapping the given month."""
    get_auxiliary_or_404(slug)
    return await EventStore(db).list_for_month(slug, year, month)


@router.post(
    "/auxiliaries/{slug}/events", response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    slug: str, body: EventCreate, db: AsyncSession = Depends(get_db),
):
    get_auxiliary_or_404(slug)
    return await EventStore(db).create(slug, body)


@router.get("/events/{event_id}", response_model=EventResponse)
async def get_event(event_id: int, db: AsyncSession = Depends(get_db)):
    return await EventStore(db).get(event_id)


@router.patch("/events/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: int, body: EventUpdate, db: AsyncSession = Depends(get_db),
):
    return await EventStore(db).update(event_id, body)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: int, db: AsyncSession = Depends(get_db)):
    await EventStore(db).delete(event_id)
