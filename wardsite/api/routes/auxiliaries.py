"""Auxiliary Routes — registry listing and the public month calendar.

Invariants:
    - GET /auxiliaries lists real auxiliaries first, then combined ones
    - GET /auxiliaries/{slug}/calendar never fails on bad month/date params
    - Unknown slugs return 404

Design Decisions:
    - get_today is a dependency so tests can pin the clock
"""

from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wardsite.config import get_settings
from wardsite.core import auxiliary
from wardsite.infrastructure.database import get_db
from wardsite.schemas.calendar import AuxiliaryOut, CalendarPage
from wardsite.services.calendar_page import auxiliary_out, build_calendar_page

router = APIRouter(prefix="/api/v1/auxiliaries", tags=["auxiliaries"])


def get_today() -> date:
    return datetime.now(timezone.utc).date()


@router.get("", response_model=list[AuxiliaryOut])
async def list_auxiliaries():
    """All auxiliaries, including combined ones."""
    return [
        auxiliary_out(aux)
        for aux in (*auxiliary.all_auxiliaries(), *auxiliary.COMBINED)
    ]


@router.get("/{slug}/calendar", response_model=CalendarPage)
async def get_calendar(
    slug: str,
    month: str | None = Query(None, description="YYYY-MM"),
    selected: str | None = Query(None, alias="date", description="YYYY-MM-DD"),
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
):
    """Month calendar, selected-day detail and feeds for one auxiliary."""
    settings = get_settings()
    return await build_calendar_page(
        db, slug, today,
        month=month,
        selected=selected,
        upcoming_limit=settings.upcoming_events_limit,
        posts_limit=settings.recent_posts_limit,
    )
