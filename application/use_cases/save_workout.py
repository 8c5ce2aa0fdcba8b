"""
SaveWorkout Use Case.

Commits composer drafts: validates the form, converts the drafts into a
Workout record tree and inserts it into the store in one call.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import ObjectStore
from domain.converters import drafts_to_workout
from domain.models import Exercise, Workout, WorkoutExerciseDraft

logger = logging.getLogger(__name__)


class WorkoutValidationError(Exception):
    """Raised when workout validation fails."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


@dataclass
class WorkoutDetails:
    """The composer's workout-level fields."""

    name: str = ""
    has_duration: bool = False
    duration_minutes: float = 0
    progressive_overload: bool = False

    @property
    def trimmed_name(self) -> str:
        return self.name.strip()

    @property
    def effective_duration_minutes(self) -> Optional[float]:
        """Duration in minutes when the toggle is on, otherwise None."""
        return self.duration_minutes if self.has_duration else None


@dataclass
class SaveWorkoutResult:
    """Result of the SaveWorkout use case execution."""

    success: bool
    workout: Optional[Workout] = None
    workout_id: Optional[str] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


def validate_workout_form(details: WorkoutDetails, drafts: List[WorkoutExerciseDraft]) -> List[str]:
    """
    Check the rules that keep the Save button disabled.

    Returns:
        List of validation error messages (empty if the form can be saved)
    """
    errors: List[str] = []
    if not details.trimmed_name:
        errors.append("Workout name is required")
    if not drafts:
        errors.append("Workout must contain at least one exercise")
    return errors


class SaveWorkoutUseCase:
    """
    Use case for committing a composed workout.

    Orchestrates the following workflow:
    1. Validate name and draft list, and that every drafted exercise still
       exists (nothing is written when invalid)
    2. Convert drafts to a Workout with its owned entries and sets
    3. Insert the Workout into the store as one unit
    4. Return the saved workout

    Usage:
        >>> use_case = SaveWorkoutUseCase(store=store)
        >>> result = use_case.execute(
        ...     WorkoutDetails(name="Leg Day", has_duration=True, duration_minutes=30),
        ...     drafts,
        ... )
        >>> if result.success:
        ...     print(f"Saved workout: {result.workout_id}")
    """

    def __init__(self, store: ObjectStore) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            store: Object store the workout is inserted into
        """
        self._store = store

    def execute(
        self,
        details: WorkoutDetails,
        drafts: List[WorkoutExerciseDraft],
    ) -> SaveWorkoutResult:
        """
        Execute the save workout workflow.

        Args:
            details: Name, duration toggle and minutes, progressive overload
            drafts: Configured exercise drafts in display order

        Returns:
            SaveWorkoutResult with success status and the saved workout
        """
        try:
            validation_errors = validate_workout_form(details, drafts)
            if validation_errors:
                raise WorkoutValidationError("Workout validation failed", validation_errors)

            with self._store.transaction():
                missing = self._missing_exercises(drafts)
                if missing:
                    raise WorkoutValidationError(
                        "Workout references deleted exercises",
                        [f"Exercise '{draft.exercise.name}' no longer exists" for draft in missing],
                    )

                workout = drafts_to_workout(
                    drafts,
                    name=details.trimmed_name,
                    duration_minutes=details.effective_duration_minutes,
                    progressive_overload=details.progressive_overload,
                )
                self._store.insert(workout)

            logger.info(
                f"Workout saved: {workout.id} ('{workout.name}', "
                f"{workout.exercise_count} exercises, {workout.total_sets} sets)"
            )
            return SaveWorkoutResult(
                success=True,
                workout=workout,
                workout_id=workout.id,
            )

        except WorkoutValidationError as e:
            logger.warning(f"Workout validation failed: {e.errors}")
            return SaveWorkoutResult(
                success=False,
                error=e.message,
                validation_errors=e.errors,
            )

    def _missing_exercises(self, drafts: List[WorkoutExerciseDraft]) -> List[WorkoutExerciseDraft]:
        """Drafts whose exercise was deleted while the composer was open."""
        return [d for d in drafts if self._store.get(Exercise, d.exercise_id) is None]
