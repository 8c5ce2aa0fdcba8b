"""
Domain models for the workout tracker.

Pure records independent of storage and transport:
- Entity: base class carrying the persistent identifier
- ExerciseCategory, Exercise: the user's exercise library
- Workout, WorkoutExercise, ExerciseSet: a saved workout and what it owns
- UserPreferences: body weight and display unit system
- WorkoutExerciseDraft, ExerciseSetDraft: transient composer state

Usage:
    >>> from domain.models import Exercise, Measurement, WorkoutExerciseDraft

    >>> squat = Exercise(name="Squat", measurements=[Measurement.WEIGHT])
    >>> draft = WorkoutExerciseDraft.for_exercise(squat)
    >>> draft.sets[0].reps
    10
"""

from domain.models.category import ExerciseCategory, normalize_category_name
from domain.models.draft import DEFAULT_REPS, ExerciseSetDraft, WorkoutExerciseDraft
from domain.models.entity import Entity, new_id
from domain.models.exercise import Exercise
from domain.models.measurement import (
    Measurement,
    UnitSystem,
    measurement_label,
    ordered_measurements,
)
from domain.models.preferences import UserPreferences
from domain.models.workout import (
    MAX_REPS,
    MIN_REPS,
    ExerciseSet,
    Workout,
    WorkoutExercise,
    clamp_reps,
)

__all__ = [
    # Base
    "Entity",
    "new_id",
    # Records
    "ExerciseCategory",
    "Exercise",
    "ExerciseSet",
    "WorkoutExercise",
    "Workout",
    "UserPreferences",
    # Drafts
    "WorkoutExerciseDraft",
    "ExerciseSetDraft",
    "DEFAULT_REPS",
    # Enums and helpers
    "Measurement",
    "UnitSystem",
    "measurement_label",
    "ordered_measurements",
    "normalize_category_name",
    "clamp_reps",
    "MIN_REPS",
    "MAX_REPS",
]
