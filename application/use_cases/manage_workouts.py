"""
ManageWorkouts Use Case.

Backs the workout manager: listing saved workouts, deleting them, and
editing reps/values of saved sets in place.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from application.ports import ObjectStore
from domain.models import (
    Exercise,
    ExerciseSet,
    Measurement,
    Workout,
    WorkoutExercise,
    clamp_reps,
)

logger = logging.getLogger(__name__)


class WorkoutNotFoundError(LookupError):
    """Raised when a workout id is unknown."""


class SetNotFoundError(LookupError):
    """Raised when a set id is not part of the workout."""


@dataclass
class SetValueRow:
    """One measurement row of a saved set."""

    measurement: Measurement
    label: str
    value: float
    editable: bool = True


@dataclass
class WorkoutSetRow:
    """A saved set as the workout manager shows it."""

    set_id: str
    show_reps: bool
    reps: int
    values: List[SetValueRow]


def set_row(
    exercise: Optional[Exercise],
    exercise_set: ExerciseSet,
    *,
    body_weight: float = 0.0,
) -> WorkoutSetRow:
    """
    Build the editor row for a saved set.

    The reps stepper is shown only for exercises that track weight. The body
    weight row is read-only and shows the current preference value. A
    missing exercise (deleted before deletes were guarded) shows reps and no
    value rows.
    """
    if exercise is None:
        return WorkoutSetRow(
            set_id=exercise_set.id,
            show_reps=True,
            reps=exercise_set.reps or 0,
            values=[],
        )
    return WorkoutSetRow(
        set_id=exercise_set.id,
        show_reps=exercise.tracks(Measurement.WEIGHT),
        reps=exercise_set.reps or 0,
        values=[
            SetValueRow(
                measurement=m,
                label=label,
                value=exercise_set.value_for(m) if m.is_editable else body_weight,
                editable=m.is_editable,
            )
            for m, label in exercise.labelled_measurements()
        ],
    )


class ManageWorkoutsUseCase:
    """Use case for the saved-workout list."""

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def list(self) -> List[Workout]:
        """Saved workouts in the order they were created."""
        return self._store.query(Workout)

    def count(self) -> int:
        return len(self._store.query(Workout))

    def get(self, workout_id: str) -> Workout:
        """
        Raises:
            WorkoutNotFoundError: If no workout has this id
        """
        workout = self._store.get(Workout, workout_id)
        if workout is None:
            raise WorkoutNotFoundError(f"Workout '{workout_id}' not found")
        return workout

    def exercise_for(self, workout_exercise: WorkoutExercise) -> Optional[Exercise]:
        """Resolve the shared Exercise a workout entry points at."""
        return self._store.get(Exercise, workout_exercise.exercise_id)

    def delete(self, workout_id: str) -> Workout:
        workout = self.get(workout_id)
        self._store.delete(workout)
        logger.info(f"Deleted workout '{workout.name}' ({workout.id})")
        return workout

    def delete_at_offsets(self, offsets: List[int]) -> List[Workout]:
        """Delete the workouts at the given positions of `list()`."""
        workouts = self.list()
        doomed = [workouts[i] for i in sorted(set(offsets))]
        return [self.delete(workout.id) for workout in doomed]

    def delete_all(self) -> int:
        """
        Remove every saved workout.

        Returns:
            Number of workouts removed
        """
        workouts = self.list()
        for workout in workouts:
            self._store.delete(workout)
        logger.info(f"Removed all workouts ({len(workouts)})")
        return len(workouts)

    def update_set(
        self,
        workout_id: str,
        set_id: str,
        *,
        reps: Optional[int] = None,
        values: Optional[Dict[Measurement, float]] = None,
    ) -> ExerciseSet:
        """
        Edit a saved set in place.

        Args:
            workout_id: Owning workout
            set_id: Set to edit
            reps: New reps (clamped to 0-100), unchanged when None
            values: Measurement values to overwrite, unchanged when None

        Returns:
            The updated set

        Raises:
            WorkoutNotFoundError: If no workout has this id
            SetNotFoundError: If the set is not part of the workout
            ValueError: If a value is given for a measurement the exercise
                does not track
        """
        with self._store.transaction():
            workout = self.get(workout_id)
            found = workout.find_set(set_id)
            if found is None:
                raise SetNotFoundError(f"Set '{set_id}' not found in workout '{workout_id}'")
            workout_exercise, exercise_set = found

            if values:
                exercise = self.exercise_for(workout_exercise)
                tracked = exercise.measurements if exercise else []
                untracked = [m.value for m in values if m not in tracked]
                if untracked:
                    raise ValueError(f"Measurements not tracked by this exercise: {untracked}")
                read_only = [m.value for m in values if not m.is_editable]
                if read_only:
                    raise ValueError(f"Measurements are read-only: {read_only}")
                exercise_set.values = {
                    **exercise_set.values,
                    **{m: float(v) for m, v in values.items()},
                }

            if reps is not None:
                exercise_set.reps = clamp_reps(reps)

            self._store.save()
        return exercise_set
