"""
Trip Store - create, update, edit and delete trips held in AppState.

Every operation runs to completion synchronously; the store is driven by
one UI event at a time and never shares its state with another thread.
"""
import logging
from typing import Optional

from ..errors import ErrorCode, TripNotFoundError, ValidationError
from ..models.form_state import FormState
from ..models.state import AppState
from ..models.trip import Trip, TripDraft
from .confirmation import Confirmer, never_confirm
from .id_generator import IdGenerator, uuid_id_generator

logger = logging.getLogger(__name__)


def validate_draft(draft: TripDraft):
    """
    Check the form rules for a draft.

    Raises:
        ValidationError: blank destination, or start date after end date.
            The destination is checked first.
    """
    if draft.destination.strip() == "":
        raise ValidationError(
            "Destination is empty or whitespace",
            code=ErrorCode.EMPTY_DESTINATION
        )
    if draft.start_date > draft.end_date:
        raise ValidationError(
            f"Start date {draft.start_date} is after end date {draft.end_date}",
            code=ErrorCode.END_BEFORE_START
        )


class TripStore:
    """
    Owns the trip lifecycle on top of an injected AppState.

    - upsert: validate a draft, then replace the edited trip or append a new one
    - remove: delete a trip once the confirmer accepts
    - begin_edit: load a trip into the form
    """

    def __init__(
        self,
        state: AppState,
        id_generator: Optional[IdGenerator] = None,
        confirmer: Confirmer = never_confirm,
    ):
        self.state = state
        self.id_generator = id_generator or uuid_id_generator()
        self.confirmer = confirmer

    def list_trips(self) -> list[Trip]:
        """Trips in insertion order (a copy; mutate through the store)."""
        return list(self.state.trips)

    def get(self, trip_id: str) -> Optional[Trip]:
        index = self.state.index_of(trip_id)
        return self.state.trips[index] if index is not None else None

    def upsert(self, draft: TripDraft, editing_id: Optional[str] = None) -> Trip:
        """
        Create or update a trip from a draft.

        Args:
            draft: Destination and date range from the form
            editing_id: Id of the trip being edited; when it matches nothing
                the draft is appended as a new trip

        Returns:
            The stored trip

        Raises:
            ValidationError: if the draft breaks a form rule. Nothing changes.
        """
        validate_draft(draft)

        index = self.state.index_of(editing_id) if editing_id is not None else None
        if index is not None:
            trip = self.state.trips[index].with_draft(draft)
            self.state.trips[index] = trip
            logger.info(f"Updated trip {trip.id} at position {index}")
        else:
            trip = Trip(id=self._new_id(), **draft.model_dump())
            self.state.trips.append(trip)
            logger.info(f"Added trip {trip.id} ({len(self.state.trips)} total)")

        self.state.reset_form()
        return trip

    def submit(self) -> Trip:
        """Submit the current form: update the edited trip or add a new one."""
        form = self.state.form
        return self.upsert(form.to_draft(), form.editing_trip_id)

    def remove(self, trip_id: str, confirm: Optional[Confirmer] = None) -> bool:
        """
        Delete a trip after confirmation.

        Returns:
            True if a trip was removed. False when the user cancelled or
            no trip has this id.
        """
        confirm = confirm or self.confirmer
        index = self.state.index_of(trip_id)
        target = self.state.trips[index] if index is not None else None

        if not confirm(target):
            logger.debug(f"Delete of trip {trip_id} cancelled")
            return False
        if index is None:
            logger.debug(f"Delete of unknown trip {trip_id} ignored")
            return False

        del self.state.trips[index]
        logger.info(f"Deleted trip {trip_id} ({len(self.state.trips)} left)")

        if self.state.form.editing_trip_id == trip_id:
            self.state.reset_form()
        return True

    def begin_edit(self, trip_id: str) -> FormState:
        """
        Load a trip into the form for editing.

        Raises:
            TripNotFoundError: if no trip has this id.
        """
        trip = self.get(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        self.state.form = FormState.from_trip(trip)
        return self.state.form

    def reset_form(self) -> FormState:
        self.state.reset_form()
        return self.state.form

    def update_form(self, updates: dict) -> FormState:
        self.state.update_form(updates)
        return self.state.form

    def _new_id(self) -> str:
        trip_id = self.id_generator()
        while self.state.index_of(trip_id) is not None:
            trip_id = self.id_generator()
        return trip_id
