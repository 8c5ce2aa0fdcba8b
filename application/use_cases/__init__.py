"""
Application use cases for the workout tracker.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and the object store port
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import (
        ComposeWorkoutSession,
        ManageCategoriesUseCase,
        SaveWorkoutUseCase,
    )

    categories = ManageCategoriesUseCase(store)
    legs = categories.add("Legs")

    session = ComposeWorkoutSession(store)
    session.select_exercises([squat.id])
    session.sync_drafts_to_selection()
    session.name = "Leg Day"
    result = session.save()
"""

from application.use_cases.compose_workout import (
    NO_EXERCISES_MESSAGE,
    PROGRESSIVE_OVERLOAD_HINT,
    ComposeWorkoutSession,
    DraftNotFoundError,
    ExerciseOption,
    MeasurementRow,
    SessionClosedError,
    clamp_duration_minutes,
)
from application.use_cases.dashboard import (
    DashboardSummary,
    DashboardUseCase,
    workout_count_text,
)
from application.use_cases.manage_categories import (
    CategoryNotFoundError,
    CategoryValidationError,
    DuplicateCategoryError,
    ManageCategoriesUseCase,
)
from application.use_cases.manage_exercises import (
    ExerciseForm,
    ExerciseInUseError,
    ExerciseNotFoundError,
    ExerciseValidationError,
    ManageExercisesUseCase,
)
from application.use_cases.manage_workouts import (
    ManageWorkoutsUseCase,
    SetNotFoundError,
    SetValueRow,
    WorkoutNotFoundError,
    WorkoutSetRow,
    set_row,
)
from application.use_cases.preferences import PreferencesUseCase
from application.use_cases.save_workout import (
    SaveWorkoutResult,
    SaveWorkoutUseCase,
    WorkoutDetails,
    WorkoutValidationError,
    validate_workout_form,
)

__all__ = [
    # Composer
    "ComposeWorkoutSession",
    "SessionClosedError",
    "DraftNotFoundError",
    "ExerciseOption",
    "MeasurementRow",
    "clamp_duration_minutes",
    "PROGRESSIVE_OVERLOAD_HINT",
    "NO_EXERCISES_MESSAGE",
    # Commit
    "SaveWorkoutUseCase",
    "SaveWorkoutResult",
    "WorkoutDetails",
    "WorkoutValidationError",
    "validate_workout_form",
    # Categories
    "ManageCategoriesUseCase",
    "CategoryValidationError",
    "DuplicateCategoryError",
    "CategoryNotFoundError",
    # Exercises
    "ManageExercisesUseCase",
    "ExerciseForm",
    "ExerciseValidationError",
    "ExerciseNotFoundError",
    "ExerciseInUseError",
    # Workouts
    "ManageWorkoutsUseCase",
    "WorkoutNotFoundError",
    "SetNotFoundError",
    "SetValueRow",
    "WorkoutSetRow",
    "set_row",
    # Dashboard
    "DashboardUseCase",
    "DashboardSummary",
    "workout_count_text",
    "PreferencesUseCase",
]
