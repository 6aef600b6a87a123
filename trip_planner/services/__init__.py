"""Services for the trip planner."""
from .trip_store import TripStore, validate_draft
from .id_generator import get_id_generator
from .confirmation import DELETE_PROMPT, ConfirmationPrompt

__all__ = [
    "TripStore",
    "validate_draft",
    "get_id_generator",
    "DELETE_PROMPT",
    "ConfirmationPrompt",
]
