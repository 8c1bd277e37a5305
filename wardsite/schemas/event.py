"""Event Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - EventCreate.title: 1-255 chars, stripped, non-empty
    - ends_on, when present, is on or after starts_on; violations carry the
      `invalid_date_range` error type so the API reports INVALID_DATE_RANGE
    - EventUpdate only carries fields the caller sent (exclude_unset on dump)
"""

from datetime import date, time, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

DATE_RANGE_ERROR_TYPE = "invalid_date_range"


def _check_date_range(starts_on: date | None, ends_on: date | None) -> None:
    if starts_on and ends_on and ends_on < starts_on:
        raise PydanticCustomError(
            DATE_RANGE_ERROR_TYPE, "ends_on must be on or after the start date",
        )


class EventCreate(BaseModel):
    """Event creation — auxiliary comes from the URL, never the body."""
    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    location: str | None = Field(None, max_length=255)
    starts_on: date
    ends_on: date | None = None
    start_time: time | None = None
    end_time: time | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def validate_date_range(self):
        _check_date_range(self.starts_on, self.ends_on)
        return self


class EventUpdate(BaseModel):
    """Partial event update. The merged range is re-checked by the store."""
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=10_000)
    location: str | None = Field(None, max_length=255)
    starts_on: date | None = None
    ends_on: date | None = None
    start_time: time | None = None
    end_time: time | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def validate_date_range(self):
        _check_date_range(self.starts_on, self.ends_on)
        return self


class EventResponse(BaseModel):
    """Event response — public-facing event data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    location: str | None = None
    starts_on: date
    ends_on: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    auxiliary: str
    created_at: datetime | None = None


class UpcomingEvent(BaseModel):
    """Compact event for the upcoming-events feed."""
    id: int
    title: str
    date_range: str
    location: str | None = None
    start_time: time | None = None
