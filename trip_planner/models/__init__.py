"""Data models for the trip planner."""
from .trip import Trip, TripDraft
from .form_state import FormState, FormMode
from .state import AppState

__all__ = [
    "Trip",
    "TripDraft",
    "FormState",
    "FormMode",
    "AppState",
]
