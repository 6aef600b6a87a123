"""
Exceptions raised by the trip store.

Every error carries an ErrorCode so the HTTP layer can hand the client
both a stable code and the text shown in the error notification.

Usage:
    from trip_planner.errors import ValidationError, ErrorCode

    raise ValidationError("destination is blank", code=ErrorCode.EMPTY_DESTINATION)
"""
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Form validation
    EMPTY_DESTINATION = "EMPTY_DESTINATION"
    END_BEFORE_START = "END_BEFORE_START"

    # Lookups
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"

    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.EMPTY_DESTINATION: "Destination cannot be empty!",
    ErrorCode.END_BEFORE_START: "End date cannot be before start date!",
    ErrorCode.TRIP_NOT_FOUND: "This trip no longer exists.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripPlannerError(Exception):
    """Base exception for all trip planner errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(TripPlannerError):
    """A submitted trip draft broke one of the form rules."""

    pass


class TripNotFoundError(TripPlannerError):
    """No trip with the requested id is in the list."""

    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__(f"Trip {trip_id!r} not found", code=ErrorCode.TRIP_NOT_FOUND)
