"""
Trip models - committed trip records and the drafts they are built from.
"""
from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime


def normalize_date(value):
    """Reduce a timestamp (object or ISO string) to its calendar date."""
    # Date pickers may hand over full timestamps; only the calendar day counts
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


class TripDraft(BaseModel):
    """Destination and date range as submitted by the form (no id yet)."""
    destination: str = Field(
        ...,
        description="Where the trip goes, e.g. 'Paris'"
    )
    start_date: date = Field(
        ...,
        description="First day of the trip"
    )
    end_date: date = Field(
        ...,
        description="Last day of the trip"
    )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return normalize_date(v)


class Trip(TripDraft):
    """A committed trip record."""
    id: str = Field(
        ...,
        description="Opaque unique identifier, fixed at creation"
    )

    def with_draft(self, draft: TripDraft) -> "Trip":
        """Return a copy carrying the draft's fields and this trip's id."""
        return self.model_copy(update=draft.model_dump())

    def to_display_dict(self) -> dict:
        """JSON-ready dict with ISO-8601 dates."""
        return self.model_dump(mode="json")
