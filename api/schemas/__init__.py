"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- tracker: categories, exercises, saved workouts and compose sessions
"""

from api.schemas.tracker import (
    CategoryResponse,
    ComposeSessionResponse,
    DraftExerciseResponse,
    DraftSetResponse,
    ExerciseResponse,
    FiniteFloat,
    MeasurementValues,
    ValueRowResponse,
    WorkoutExerciseResponse,
    WorkoutResponse,
    WorkoutSetResponse,
    WorkoutSummaryResponse,
    category_response,
    compose_session_response,
    exercise_response,
    value_row_response,
    workout_set_response,
    workout_summary_response,
)

__all__ = [
    "FiniteFloat",
    "MeasurementValues",
    "CategoryResponse",
    "ExerciseResponse",
    "ValueRowResponse",
    "WorkoutSetResponse",
    "WorkoutExerciseResponse",
    "WorkoutSummaryResponse",
    "WorkoutResponse",
    "DraftSetResponse",
    "DraftExerciseResponse",
    "ComposeSessionResponse",
    "category_response",
    "exercise_response",
    "value_row_response",
    "workout_set_response",
    "workout_summary_response",
    "compose_session_response",
]
