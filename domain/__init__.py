"""
Domain layer for the workout tracker.

This package contains pure domain models and services that are independent
of infrastructure concerns (storage, HTTP, settings).
"""

from domain.models import (
    Exercise,
    ExerciseCategory,
    ExerciseSet,
    ExerciseSetDraft,
    Measurement,
    UnitSystem,
    UserPreferences,
    Workout,
    WorkoutExercise,
    WorkoutExerciseDraft,
)

__all__ = [
    "Exercise",
    "ExerciseCategory",
    "ExerciseSet",
    "ExerciseSetDraft",
    "Measurement",
    "UnitSystem",
    "UserPreferences",
    "Workout",
    "WorkoutExercise",
    "WorkoutExerciseDraft",
]
