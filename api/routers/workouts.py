"""
Workouts router.

This router contains endpoints for:
- GET /workouts - Saved workouts in creation order
- GET /workouts/{workout_id} - One workout with its set rows
- DELETE /workouts/{workout_id} - Delete a workout
- DELETE /workouts - Remove all workouts
- PATCH /workouts/{workout_id}/sets/{set_id} - Edit a saved set in place
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.deps import get_manage_workouts, get_preferences
from api.schemas import (
    MeasurementValues,
    WorkoutExerciseResponse,
    WorkoutResponse,
    WorkoutSetResponse,
    WorkoutSummaryResponse,
    workout_set_response,
    workout_summary_response,
)
from application.use_cases import (
    ManageWorkoutsUseCase,
    PreferencesUseCase,
    SetNotFoundError,
    WorkoutNotFoundError,
    set_row,
)
from domain.models import Workout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request Models
# =============================================================================


class UpdateSetRequest(BaseModel):
    """Fields left out are unchanged."""
    reps: Optional[int] = None
    values: Optional[MeasurementValues] = None


def _workout_response(
    workout: Workout,
    workouts: ManageWorkoutsUseCase,
    body_weight: float,
) -> WorkoutResponse:
    entries = []
    for workout_exercise in workout.exercises:
        exercise = workouts.exercise_for(workout_exercise)
        entries.append(
            WorkoutExerciseResponse(
                id=workout_exercise.id,
                exercise_id=workout_exercise.exercise_id,
                exercise_name=exercise.name if exercise else None,
                sets=[
                    workout_set_response(set_row(exercise, s, body_weight=body_weight))
                    for s in workout_exercise.sets
                ],
            )
        )
    summary = workout_summary_response(workout)
    return WorkoutResponse(
        **summary.model_dump(),
        duration_seconds=workout.duration,
        exercises=entries,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=List[WorkoutSummaryResponse])
def list_workouts_endpoint(
    workouts: ManageWorkoutsUseCase = Depends(get_manage_workouts),
):
    return [workout_summary_response(w) for w in workouts.list()]


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout_endpoint(
    workout_id: str,
    workouts: ManageWorkoutsUseCase = Depends(get_manage_workouts),
    preferences: PreferencesUseCase = Depends(get_preferences),
):
    """
    Get a workout with its set rows.

    Reps are shown only for exercises that track Weight; the body weight row
    shows the current preference value and is read-only.
    """
    try:
        workout = workouts.get(workout_id)
    except WorkoutNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    body_weight = preferences.get_or_create().display_body_weight
    return _workout_response(workout, workouts, body_weight)


@router.delete("")
def delete_all_workouts_endpoint(
    workouts: ManageWorkoutsUseCase = Depends(get_manage_workouts),
):
    """Remove all workouts."""
    removed = workouts.delete_all()
    return {"success": True, "removed": removed}


@router.delete("/{workout_id}")
def delete_workout_endpoint(
    workout_id: str,
    workouts: ManageWorkoutsUseCase = Depends(get_manage_workouts),
):
    try:
        workout = workouts.delete(workout_id)
    except WorkoutNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "id": workout.id, "message": "Workout deleted"}


@router.patch("/{workout_id}/sets/{set_id}", response_model=WorkoutSetResponse)
def update_set_endpoint(
    workout_id: str,
    set_id: str,
    request: UpdateSetRequest,
    workouts: ManageWorkoutsUseCase = Depends(get_manage_workouts),
    preferences: PreferencesUseCase = Depends(get_preferences),
):
    """
    Edit reps and/or values of a saved set.

    Raises:
        404 if the workout or set is unknown, 422 for a measurement the
        exercise does not track or a read-only one
    """
    try:
        exercise_set = workouts.update_set(
            workout_id, set_id, reps=request.reps, values=request.values
        )
    except (WorkoutNotFoundError, SetNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    workout = workouts.get(workout_id)
    workout_exercise, _ = workout.find_set(set_id)
    exercise = workouts.exercise_for(workout_exercise)
    body_weight = preferences.get_or_create().display_body_weight
    return workout_set_response(set_row(exercise, exercise_set, body_weight=body_weight))
