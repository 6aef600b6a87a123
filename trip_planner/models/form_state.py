"""
Form State - the draft values behind the "Add Trip" / "Update Trip" form.
The form is either blank or mirrors the trip currently being edited.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date
from enum import Enum

from .trip import Trip, TripDraft, normalize_date


class FormMode(str, Enum):
    """What a submit of the form will do."""
    BLANK = "blank"  # Submit appends a new trip
    EDITING = "editing"  # Submit replaces the trip in editing_trip_id


# Fields the text input and date pickers may change
EDITABLE_FIELDS = ("destination", "start_date", "end_date")


class FormState(BaseModel):
    """Transient form values, never committed on their own."""
    destination: str = Field(
        default="",
        description="Destination text input"
    )
    start_date: date = Field(
        default_factory=date.today,
        description="Start date picker value"
    )
    end_date: date = Field(
        default_factory=date.today,
        description="End date picker value"
    )
    editing_trip_id: Optional[str] = Field(
        None,
        description="Id of the trip loaded for editing, if any"
    )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return normalize_date(v)

    @property
    def mode(self) -> FormMode:
        if self.editing_trip_id is None:
            return FormMode.BLANK
        return FormMode.EDITING

    @classmethod
    def blank(cls, today: date) -> "FormState":
        """A cleared form with both pickers on today."""
        return cls(start_date=today, end_date=today)

    @classmethod
    def from_trip(cls, trip: Trip) -> "FormState":
        """A form loaded with a trip's values for editing."""
        return cls(
            destination=trip.destination,
            start_date=trip.start_date,
            end_date=trip.end_date,
            editing_trip_id=trip.id,
        )

    def update_fields(self, updates: dict) -> "FormState":
        """Overwrite editable fields; unknown keys and the editing id are ignored."""
        current_data = self.model_dump()
        for key, value in updates.items():
            if key in EDITABLE_FIELDS and value is not None:
                current_data[key] = value
        return FormState(**current_data)

    def to_draft(self) -> TripDraft:
        return TripDraft(
            destination=self.destination,
            start_date=self.start_date,
            end_date=self.end_date,
        )
