"""
Exercises router.

This router contains endpoints for:
- GET /exercises - Exercise manager rows, sorted by name
- GET /exercises/{exercise_id} - One exercise
- POST /exercises - Create an exercise
- PUT /exercises/{exercise_id} - Edit an exercise in place
- DELETE /exercises/{exercise_id} - Delete an exercise no workout uses
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_manage_exercises
from api.schemas import ExerciseResponse, exercise_response
from application.use_cases import (
    ExerciseForm,
    ExerciseInUseError,
    ExerciseNotFoundError,
    ExerciseValidationError,
    ManageExercisesUseCase,
)
from domain.models import Measurement
from domain.services import CategorySelection

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Request Models
# =============================================================================


class ExerciseRequest(BaseModel):
    """Create/edit form for an exercise."""
    name: str = Field(description="Exercise name; surrounding whitespace is dropped")
    measurements: List[Measurement] = Field(
        default_factory=list, description="Tracked measurements (at least one)"
    )
    category_ids: List[str] = Field(default_factory=list)


def _form(request: ExerciseRequest, exercises: ManageExercisesUseCase) -> ExerciseForm:
    categories = exercises.resolve_categories(request.category_ids)
    return ExerciseForm(
        name=request.name,
        measurements=set(request.measurements),
        categories=CategorySelection(categories),
    )


def _validation_error(e: ExerciseValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"message": e.message, "errors": e.errors})


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=List[ExerciseResponse])
def list_exercises_endpoint(
    exercises: ManageExercisesUseCase = Depends(get_manage_exercises),
):
    """
    Exercise manager rows.

    Each row carries the category names joined by ", " and the
    "Measurements: ..." line.
    """
    return [exercise_response(e, exercises.categories_for(e)) for e in exercises.list()]


@router.get("/{exercise_id}", response_model=ExerciseResponse)
def get_exercise_endpoint(
    exercise_id: str,
    exercises: ManageExercisesUseCase = Depends(get_manage_exercises),
):
    try:
        exercise = exercises.get(exercise_id)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return exercise_response(exercise, exercises.categories_for(exercise))


@router.post("", response_model=ExerciseResponse, status_code=201)
def create_exercise_endpoint(
    request: ExerciseRequest,
    exercises: ManageExercisesUseCase = Depends(get_manage_exercises),
):
    """
    Create an exercise.

    Raises:
        422 if the name is blank, no measurement is selected or a category
        id is unknown
    """
    try:
        exercise = exercises.create(_form(request, exercises))
    except ExerciseValidationError as e:
        raise _validation_error(e)
    return exercise_response(exercise, exercises.categories_for(exercise))


@router.put("/{exercise_id}", response_model=ExerciseResponse)
def update_exercise_endpoint(
    exercise_id: str,
    request: ExerciseRequest,
    exercises: ManageExercisesUseCase = Depends(get_manage_exercises),
):
    try:
        exercise = exercises.edit(exercise_id, _form(request, exercises))
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ExerciseValidationError as e:
        raise _validation_error(e)
    return exercise_response(exercise, exercises.categories_for(exercise))


@router.delete("/{exercise_id}")
def delete_exercise_endpoint(
    exercise_id: str,
    exercises: ManageExercisesUseCase = Depends(get_manage_exercises),
):
    """
    Delete an exercise.

    Raises:
        404 if unknown, 409 while a saved workout references it
    """
    try:
        exercise = exercises.delete(exercise_id)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ExerciseInUseError as e:
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "workout_ids": e.workout_ids},
        )
    return {"success": True, "id": exercise.id, "message": "Exercise deleted"}
