"""
Presenter - turns store state into what the planner screen shows.
"""
from pydantic import BaseModel
from datetime import date
from enum import Enum

from ..errors import TripPlannerError
from ..models.form_state import FormMode, FormState
from ..models.trip import Trip


EMPTY_LIST_TEXT = "No trips planned yet! Add one above."
LIST_HEADER = "My Trips"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class NotificationKind(str, Enum):
    """Outcome of a form action, used to pick the notification text."""
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"


NOTIFICATION_MESSAGES = {
    NotificationKind.ADDED: "Trip added!",
    NotificationKind.UPDATED: "Trip updated!",
    NotificationKind.DELETED: "Trip deleted!",
}


class Notification(BaseModel):
    """A blocking alert: title plus message."""
    title: str
    message: str

    @classmethod
    def success(cls, kind: NotificationKind) -> "Notification":
        return cls(title="Success", message=NOTIFICATION_MESSAGES[kind])

    @classmethod
    def error(cls, err: TripPlannerError) -> "Notification":
        return cls(title="Error", message=err.user_message)


def format_date(value: date) -> str:
    """Long US form, e.g. 'January 1, 2024'."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def format_date_range(trip: Trip) -> str:
    return f"{format_date(trip.start_date)} - {format_date(trip.end_date)}"


def submit_label(form: FormState) -> str:
    """Text of the form's submit button."""
    return "Update Trip" if form.mode == FormMode.EDITING else "Add Trip"


def render_trip(trip: Trip) -> dict:
    """One list item: the stored record plus its display dates."""
    item = trip.to_display_dict()
    item["dates"] = format_date_range(trip)
    return item


def render_form(form: FormState) -> dict:
    data = form.model_dump(mode="json")
    data["mode"] = form.mode.value
    data["start_date_label"] = f"Start Date: {format_date(form.start_date)}"
    data["end_date_label"] = f"End Date: {format_date(form.end_date)}"
    data["submit_label"] = submit_label(form)
    return data


def render_screen(title: str, trips: list[Trip], form: FormState) -> dict:
    """The whole planner screen: title, form, and trip list."""
    return {
        "title": title,
        "form": render_form(form),
        "list_header": LIST_HEADER,
        "trips": [render_trip(t) for t in trips],
        "empty_text": EMPTY_LIST_TEXT if not trips else None,
    }
