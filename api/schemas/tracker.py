"""
Tracker Schemas.

Response models shared by the exercise, workout and draft routers, plus the
builders that turn domain records and use-case rows into them.
"""

from typing import Annotated, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from application.use_cases import ComposeWorkoutSession, MeasurementRow, SetValueRow, WorkoutSetRow
from domain.models import Exercise, ExerciseCategory, Measurement, Workout

# NaN and infinity are valid JSON for Python's parser but never valid input
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]

MeasurementValues = Dict[Measurement, FiniteFloat]


# =============================================================================
# Categories and exercises
# =============================================================================


class CategoryResponse(BaseModel):
    """An exercise category."""
    id: str
    name: str


class ExerciseResponse(BaseModel):
    """An exercise as listed by the exercise manager."""
    id: str
    name: str
    category_ids: List[str] = Field(default_factory=list)
    measurements: List[Measurement] = Field(default_factory=list)
    categories_text: str = Field(
        default="", description="Category names joined by ', '"
    )
    measurements_text: str = Field(
        default="", description="'Measurements: ' followed by the measurement names"
    )


def category_response(category: ExerciseCategory) -> CategoryResponse:
    return CategoryResponse(id=category.id, name=category.name)


def exercise_response(exercise: Exercise, categories: List[ExerciseCategory]) -> ExerciseResponse:
    return ExerciseResponse(
        id=exercise.id,
        name=exercise.name,
        category_ids=list(exercise.category_ids),
        measurements=list(exercise.measurements),
        categories_text=", ".join(c.name for c in categories),
        measurements_text="Measurements: " + ", ".join(m.value for m in exercise.measurements),
    )


# =============================================================================
# Set rows (saved and draft)
# =============================================================================


class ValueRowResponse(BaseModel):
    """One measurement row of a set."""
    measurement: Measurement
    label: str
    value: float
    display_value: str = Field(description="Value with one decimal place")
    editable: bool = True


def value_row_response(row: Union[SetValueRow, MeasurementRow]) -> ValueRowResponse:
    return ValueRowResponse(
        measurement=row.measurement,
        label=row.label,
        value=row.value,
        display_value=f"{row.value:.1f}",
        editable=row.editable,
    )


# =============================================================================
# Saved workouts
# =============================================================================


class WorkoutSetResponse(BaseModel):
    """A saved set as the workout manager shows it."""
    set_id: str
    show_reps: bool = Field(description="Reps stepper shown (exercise tracks Weight)")
    reps: int
    values: List[ValueRowResponse] = Field(default_factory=list)


class WorkoutExerciseResponse(BaseModel):
    id: str
    exercise_id: str
    exercise_name: Optional[str] = None
    sets: List[WorkoutSetResponse] = Field(default_factory=list)


class WorkoutSummaryResponse(BaseModel):
    """A row of the saved-workout list."""
    id: str
    name: str
    exercise_count: int
    total_sets: int
    duration_minutes: Optional[float] = None
    progressive_overload: bool = False


class WorkoutResponse(WorkoutSummaryResponse):
    """A saved workout with its entries and sets."""
    duration_seconds: Optional[float] = None
    exercises: List[WorkoutExerciseResponse] = Field(default_factory=list)


def workout_set_response(row: WorkoutSetRow) -> WorkoutSetResponse:
    return WorkoutSetResponse(
        set_id=row.set_id,
        show_reps=row.show_reps,
        reps=row.reps,
        values=[value_row_response(v) for v in row.values],
    )


def workout_summary_response(workout: Workout) -> WorkoutSummaryResponse:
    return WorkoutSummaryResponse(
        id=workout.id,
        name=workout.name,
        exercise_count=workout.exercise_count,
        total_sets=workout.total_sets,
        duration_minutes=workout.duration_minutes,
        progressive_overload=workout.progressive_overload,
    )


# =============================================================================
# Compose sessions
# =============================================================================


class DraftSetResponse(BaseModel):
    id: str
    index: int
    reps: int
    values: List[ValueRowResponse] = Field(default_factory=list)


class DraftExerciseResponse(BaseModel):
    id: str
    exercise_id: str
    exercise_name: str
    sets: List[DraftSetResponse] = Field(default_factory=list)


class ComposeSessionResponse(BaseModel):
    """State of an open workout composer."""
    id: str
    name: str
    has_duration: bool
    duration_minutes: int
    progressive_overload: bool
    progressive_overload_hint: Optional[str] = None
    selected_exercise_ids: List[str] = Field(default_factory=list)
    drafts: List[DraftExerciseResponse] = Field(default_factory=list)
    is_save_disabled: bool
    validation_errors: List[str] = Field(default_factory=list)


def compose_session_response(session: ComposeWorkoutSession) -> ComposeSessionResponse:
    drafts = []
    for draft in session.drafts:
        sets = []
        for index, draft_set in enumerate(draft.sets):
            rows: List[MeasurementRow] = session.measurement_rows(draft.exercise_id, index)
            sets.append(
                DraftSetResponse(
                    id=draft_set.id,
                    index=index,
                    reps=draft_set.reps,
                    values=[value_row_response(r) for r in rows],
                )
            )
        drafts.append(
            DraftExerciseResponse(
                id=draft.id,
                exercise_id=draft.exercise_id,
                exercise_name=draft.exercise.name,
                sets=sets,
            )
        )

    return ComposeSessionResponse(
        id=session.id,
        name=session.name,
        has_duration=session.has_duration,
        duration_minutes=session.duration_minutes,
        progressive_overload=session.progressive_overload,
        progressive_overload_hint=session.progressive_overload_hint,
        selected_exercise_ids=session.selection.ids,
        drafts=drafts,
        is_save_disabled=session.is_save_disabled,
        validation_errors=session.validation_errors,
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
