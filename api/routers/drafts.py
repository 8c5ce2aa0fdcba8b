"""
Drafts router (workout composer).

A draft is an open ComposeWorkoutSession. Nothing is written to the object
store until POST /drafts/{session_id}/save succeeds.

This router contains endpoints for:
- POST /drafts - Open a composer
- GET /drafts/{session_id} - Composer state
- PATCH /drafts/{session_id} - Name, duration toggle/minutes, progressive overload
- GET /drafts/{session_id}/exercise-options - Selection sheet rows
- PUT /drafts/{session_id}/selection - Confirm the selection and sync drafts
- POST /drafts/{session_id}/exercises/{exercise_id}/sets - Add a set
- PATCH /drafts/{session_id}/exercises/{exercise_id}/sets/{index} - Edit a set
- DELETE /drafts/{session_id}/exercises/{exercise_id}/sets/{index} - Remove a set
- POST /drafts/{session_id}/save - Commit the workout
- DELETE /drafts/{session_id} - Cancel
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_compose_session_repo, get_object_store
from api.schemas import (
    MeasurementValues,
    ComposeSessionResponse,
    WorkoutSummaryResponse,
    compose_session_response,
    workout_summary_response,
)
from application.ports import ComposeSessionRepository, ObjectStore
from application.use_cases import (
    NO_EXERCISES_MESSAGE,
    ComposeWorkoutSession,
    DraftNotFoundError,
    SessionClosedError,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/drafts",
    tags=["Drafts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class UpdateDraftRequest(BaseModel):
    """Workout-level fields; fields left out are unchanged."""
    name: Optional[str] = None
    has_duration: Optional[bool] = None
    duration_minutes: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Clamped to 0-180 and snapped to 5-minute steps",
    )
    progressive_overload: Optional[bool] = None


class ExerciseOptionResponse(BaseModel):
    exercise_id: str
    title: str
    is_selected: bool


class ExerciseOptionsResponse(BaseModel):
    options: List[ExerciseOptionResponse]
    empty_message: Optional[str] = None


class SelectionRequest(BaseModel):
    exercise_ids: List[str] = Field(default_factory=list)


class UpdateDraftSetRequest(BaseModel):
    reps: Optional[int] = None
    values: Optional[MeasurementValues] = None


class SaveDraftResponse(BaseModel):
    success: bool
    workout: WorkoutSummaryResponse


# =============================================================================
# Helpers
# =============================================================================


def _session(
    session_id: str,
    sessions: ComposeSessionRepository,
) -> ComposeWorkoutSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Draft '{session_id}' not found")
    return session


def _edit_error(e: Exception) -> HTTPException:
    if isinstance(e, SessionClosedError):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, LookupError):
        return HTTPException(status_code=404, detail=str(e))
    return HTTPException(status_code=422, detail=str(e))


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=ComposeSessionResponse, status_code=201)
def open_draft_endpoint(
    store: ObjectStore = Depends(get_object_store),
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    session = ComposeWorkoutSession(store)
    sessions.add(session)
    logger.info(f"Opened workout composer {session.id}")
    return compose_session_response(session)


@router.get("/{session_id}", response_model=ComposeSessionResponse)
def get_draft_endpoint(
    session_id: str,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    return compose_session_response(_session(session_id, sessions))


@router.patch("/{session_id}", response_model=ComposeSessionResponse)
def update_draft_endpoint(
    session_id: str,
    request: UpdateDraftRequest,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    session = _session(session_id, sessions)
    try:
        session.update_details(
            name=request.name,
            has_duration=request.has_duration,
            duration_minutes=request.duration_minutes,
            progressive_overload=request.progressive_overload,
        )
    except (SessionClosedError, ValueError) as e:
        raise _edit_error(e)
    return compose_session_response(session)


@router.get("/{session_id}/exercise-options", response_model=ExerciseOptionsResponse)
def exercise_options_endpoint(
    session_id: str,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    """Selection sheet rows: every exercise sorted by name, flagged when selected."""
    session = _session(session_id, sessions)
    options = [
        ExerciseOptionResponse(
            exercise_id=o.exercise_id, title=o.title, is_selected=o.is_selected
        )
        for o in session.exercise_options()
    ]
    return ExerciseOptionsResponse(
        options=options,
        empty_message=None if options else NO_EXERCISES_MESSAGE,
    )


@router.put("/{session_id}/selection", response_model=ComposeSessionResponse)
def update_selection_endpoint(
    session_id: str,
    request: SelectionRequest,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    """
    Replace the selection and reconcile drafts (selection sheet dismissed).

    Drafts of exercises still selected keep their sets; newly selected
    exercises get one default set; deselected ones are dropped.
    """
    session = _session(session_id, sessions)
    try:
        session.select_exercises(request.exercise_ids)
        session.sync_drafts_to_selection()
    except (SessionClosedError, LookupError) as e:
        raise _edit_error(e)
    return compose_session_response(session)


@router.post(
    "/{session_id}/exercises/{exercise_id}/sets",
    response_model=ComposeSessionResponse,
    status_code=201,
)
def add_draft_set_endpoint(
    session_id: str,
    exercise_id: str,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    session = _session(session_id, sessions)
    try:
        session.add_set(exercise_id)
    except (SessionClosedError, DraftNotFoundError) as e:
        raise _edit_error(e)
    return compose_session_response(session)


@router.patch(
    "/{session_id}/exercises/{exercise_id}/sets/{index}",
    response_model=ComposeSessionResponse,
)
def update_draft_set_endpoint(
    session_id: str,
    exercise_id: str,
    index: int,
    request: UpdateDraftSetRequest,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    """
    Edit reps and/or values of a draft set.

    Raises:
        404 for an unknown draft or set, 422 for a measurement the exercise
        does not track or a read-only one, 409 when the draft is closed
    """
    session = _session(session_id, sessions)
    try:
        session.update_set(exercise_id, index, reps=request.reps, values=request.values)
    except (SessionClosedError, LookupError, ValueError) as e:
        raise _edit_error(e)
    return compose_session_response(session)


@router.delete(
    "/{session_id}/exercises/{exercise_id}/sets/{index}",
    response_model=ComposeSessionResponse,
)
def remove_draft_set_endpoint(
    session_id: str,
    exercise_id: str,
    index: int,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    session = _session(session_id, sessions)
    try:
        session.remove_set(exercise_id, index)
    except (SessionClosedError, LookupError) as e:
        raise _edit_error(e)
    return compose_session_response(session)


@router.post("/{session_id}/save", response_model=SaveDraftResponse, status_code=201)
def save_draft_endpoint(
    session_id: str,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    """
    Commit the composer as a Workout.

    Raises:
        422 while the name is blank or no exercise is selected; nothing is
        written and the draft stays open
    """
    session = _session(session_id, sessions)
    try:
        result = session.save()
    except SessionClosedError as e:
        raise _edit_error(e)

    if not result.success:
        raise HTTPException(
            status_code=422,
            detail={"message": result.error, "errors": result.validation_errors},
        )

    sessions.remove(session_id)
    return SaveDraftResponse(success=True, workout=workout_summary_response(result.workout))


@router.delete("/{session_id}")
def cancel_draft_endpoint(
    session_id: str,
    sessions: ComposeSessionRepository = Depends(get_compose_session_repo),
):
    """Cancel the composer; drafts are discarded and nothing is written."""
    session = _session(session_id, sessions)
    if not session.closed:
        session.cancel()
    sessions.remove(session_id)
    return {"success": True, "id": session_id, "message": "Draft discarded"}
