"""
Delete confirmation.

A delete only happens once the user has accepted the "Delete Trip" prompt.
The prompt is modelled as a plain decision function: it receives the trip
about to be removed (None if the id is unknown) and answers True/False.
"""
from dataclasses import dataclass
from typing import Callable, Optional

from ..models.trip import Trip


Confirmer = Callable[[Optional[Trip]], bool]


@dataclass(frozen=True)
class ConfirmationPrompt:
    """Texts of the blocking confirmation dialog."""
    title: str = "Delete Trip"
    message: str = "Are you sure you want to delete this trip?"
    cancel_label: str = "Cancel"
    confirm_label: str = "Delete"


DELETE_PROMPT = ConfirmationPrompt()


def always_confirm(trip: Optional[Trip]) -> bool:
    return True


def never_confirm(trip: Optional[Trip]) -> bool:
    return False


def answer(accepted: bool) -> Confirmer:
    """Confirmer that replays a decision already taken by the user."""
    return always_confirm if accepted else never_confirm
