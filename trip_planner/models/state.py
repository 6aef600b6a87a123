"""
Application state - the trip list and the form, owned by the app factory.
"""
from pydantic import BaseModel, Field
from typing import Callable, Optional
from datetime import date

from .form_state import FormState
from .trip import Trip


class AppState(BaseModel):
    """Everything the planner screen holds for the lifetime of the process."""
    trips: list[Trip] = Field(
        default_factory=list,
        description="Committed trips in insertion order"
    )
    form: FormState = Field(
        default_factory=FormState,
        description="Draft values behind the trip form"
    )
    clock: Callable[[], date] = Field(
        default=date.today,
        exclude=True,
        description="Supplies the date a cleared form starts from"
    )

    def model_post_init(self, __context):
        if "form" not in self.model_fields_set:
            self.reset_form()

    def reset_form(self):
        """Clear the form back to a blank draft."""
        self.form = FormState.blank(self.clock())

    def update_form(self, updates: dict):
        """Apply text input / date picker changes to the form."""
        self.form = self.form.update_fields(updates)

    def index_of(self, trip_id: str) -> Optional[int]:
        """Position of a trip in the list, or None."""
        for i, trip in enumerate(self.trips):
            if trip.id == trip_id:
                return i
        return None
