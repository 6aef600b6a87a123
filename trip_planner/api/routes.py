"""
API Routes for the Trip Planner.

Each request is one UI event on the planner screen. Handlers are async so
they run one at a time on the event loop against the single AppState.
"""
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date

from ..config import Settings
from ..errors import TripNotFoundError, ValidationError
from ..models.trip import TripDraft, normalize_date
from ..services.confirmation import DELETE_PROMPT, answer
from ..services.presenter import (
    Notification,
    NotificationKind,
    render_form,
    render_screen,
    render_trip,
)
from ..services.trip_store import TripStore


router = APIRouter(prefix="/api", tags=["trip-planner"])


# Dependencies

def get_trip_store(request: Request) -> TripStore:
    return request.app.state.trip_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# Request/Response Models
class UpsertRequest(TripDraft):
    editing_id: Optional[str] = None


class FormUpdateRequest(BaseModel):
    destination: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return normalize_date(v)


class MutationResponse(BaseModel):
    notification: Notification
    trip: dict
    form: dict


class DeleteResponse(BaseModel):
    deleted: bool
    notification: Optional[Notification] = None
    form: dict


def _validation_failed(err: ValidationError) -> HTTPException:
    notification = Notification.error(err)
    return HTTPException(
        status_code=400,
        detail={**notification.model_dump(), "code": err.code.value}
    )


def _not_found(err: TripNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=err.user_message)


def _save(store: TripStore, draft: TripDraft, editing_id: Optional[str]) -> MutationResponse:
    updating = editing_id is not None and store.get(editing_id) is not None
    try:
        trip = store.upsert(draft, editing_id)
    except ValidationError as e:
        raise _validation_failed(e)

    kind = NotificationKind.UPDATED if updating else NotificationKind.ADDED
    return MutationResponse(
        notification=Notification.success(kind),
        trip=render_trip(trip),
        form=render_form(store.state.form)
    )


# Endpoints

@router.get("/trips")
async def get_screen(
    store: TripStore = Depends(get_trip_store),
    settings: Settings = Depends(get_settings),
):
    """Render the planner screen: form plus trip list."""
    return render_screen(settings.app_title, store.list_trips(), store.state.form)


@router.post("/trips", response_model=MutationResponse)
async def upsert_trip(request: UpsertRequest, store: TripStore = Depends(get_trip_store)):
    """Add a trip, or update the trip named by editing_id."""
    draft = TripDraft(**request.model_dump(exclude={"editing_id"}))
    return _save(store, draft, request.editing_id)


@router.patch("/form")
async def update_form(request: FormUpdateRequest, store: TripStore = Depends(get_trip_store)):
    """Change the destination input or either date picker."""
    form = store.update_form(request.model_dump(exclude_none=True))
    return render_form(form)


@router.post("/form/submit", response_model=MutationResponse)
async def submit_form(store: TripStore = Depends(get_trip_store)):
    """Press "Add Trip" / "Update Trip"."""
    form = store.state.form
    return _save(store, form.to_draft(), form.editing_trip_id)


@router.post("/form/reset")
async def reset_form(store: TripStore = Depends(get_trip_store)):
    """Clear the form."""
    return render_form(store.reset_form())


@router.post("/trips/{trip_id}/edit")
async def begin_edit(trip_id: str, store: TripStore = Depends(get_trip_store)):
    """Press "Edit" on a list item."""
    try:
        form = store.begin_edit(trip_id)
    except TripNotFoundError as e:
        raise _not_found(e)
    return render_form(form)


@router.get("/trips/{trip_id}/delete-prompt")
async def get_delete_prompt(trip_id: str, store: TripStore = Depends(get_trip_store)):
    """Texts of the confirmation dialog shown before a delete."""
    trip = store.get(trip_id)
    if trip is None:
        raise _not_found(TripNotFoundError(trip_id))
    return {
        "trip": render_trip(trip),
        "title": DELETE_PROMPT.title,
        "message": DELETE_PROMPT.message,
        "actions": [DELETE_PROMPT.cancel_label, DELETE_PROMPT.confirm_label],
    }


@router.delete("/trips/{trip_id}", response_model=DeleteResponse)
async def delete_trip(
    trip_id: str,
    confirm: Optional[bool] = None,
    store: TripStore = Depends(get_trip_store),
    settings: Settings = Depends(get_settings),
):
    """Press "Delete" and answer the prompt via ?confirm=true|false."""
    if confirm is None:
        confirm = settings.confirm_deletes_by_default

    deleted = store.remove(trip_id, answer(confirm))
    notification = Notification.success(NotificationKind.DELETED) if deleted else None
    return DeleteResponse(
        deleted=deleted,
        notification=notification,
        form=render_form(store.state.form)
    )
