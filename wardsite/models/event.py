"""Event ORM — a calendar event owned by one auxiliary.

Invariants:
    - starts_on is required; ends_on NULL means a single-day event
    - start_time/end_time NULL means all-day
    - auxiliary is a real slug, set from the URL on create and never updated
    - ends_on >= starts_on is enforced at the schema boundary, not in the DB
"""

from datetime import date, datetime, time, timezone

from sqlalchemy import String, Text, Integer, Date, Time, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from wardsite.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Event(Base):
    """Calendar event — consumed by the layout engine as an EventLike."""
    __tablename__ = "events"
    __table_args__ = (
        Index("ix_events_auxiliary_starts_on", "auxiliary", "starts_on"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    starts_on: Mapped[date] = mapped_column(Date, nullable=False)
    ends_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    end_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    auxiliary: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Event id={self.id} title={self.title!r} starts_on={self.starts_on}>"
