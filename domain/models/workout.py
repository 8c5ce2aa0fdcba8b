"""
Workout aggregate and the records it owns.

A Workout owns its WorkoutExercise entries and each of those owns its
ExerciseSet entries; the store keeps the whole tree as one document. A
WorkoutExercise only references its Exercise (shared) by id.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import Field

from domain.models.entity import Entity
from domain.models.measurement import Measurement

MIN_REPS = 0
MAX_REPS = 100


def clamp_reps(reps: int) -> int:
    """Clamp a rep count to the stepper range."""
    return max(MIN_REPS, min(MAX_REPS, int(reps)))


class ExerciseSet(Entity):
    """
    One performed set.

    `values` is keyed by measurement kind. Editing the owning exercise's
    measurement list later cannot misalign values: a measurement without a
    stored value reads as 0.0.
    """

    reps: Optional[int] = Field(default=None, description="Repetitions in the set")
    values: Dict[Measurement, float] = Field(
        default_factory=dict,
        description="One value per tracked measurement",
    )

    def value_for(self, measurement: Measurement) -> float:
        """Stored value for `measurement`, 0.0 when absent."""
        return self.values.get(measurement, 0.0)


class WorkoutExercise(Entity):
    """An exercise within a workout, with its sets."""

    exercise_id: str = Field(..., description="Id of the referenced Exercise")
    sets: List[ExerciseSet] = Field(default_factory=list)


class Workout(Entity):
    """
    Aggregate root for a saved workout.

    Examples:
        >>> workout = Workout(
        ...     name="Leg Day",
        ...     exercises=[WorkoutExercise(exercise_id="squat", sets=[ExerciseSet(reps=5)])],
        ...     duration=1800,
        ... )
        >>> workout.duration_minutes
        30.0
    """

    name: str = Field(..., description="Workout name")
    exercises: List[WorkoutExercise] = Field(default_factory=list)
    duration: Optional[float] = Field(
        default=None, ge=0, description="Planned duration in seconds"
    )
    progressive_overload: bool = Field(
        default=False, description="Whether reps progress automatically"
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(1 for _ in self.iter_sets())

    @property
    def duration_minutes(self) -> Optional[float]:
        """Duration converted back to minutes, None when unset."""
        if self.duration is None:
            return None
        return self.duration / 60

    def references(self, exercise_id: str) -> bool:
        """Check whether any entry references the given exercise."""
        return any(we.exercise_id == exercise_id for we in self.exercises)

    def iter_sets(self) -> Iterator[Tuple[WorkoutExercise, ExerciseSet]]:
        """Yield (owning entry, set) pairs in display order."""
        for workout_exercise in self.exercises:
            for exercise_set in workout_exercise.sets:
                yield workout_exercise, exercise_set

    def find_set(self, set_id: str) -> Optional[Tuple[WorkoutExercise, ExerciseSet]]:
        """Locate a set by id together with its owning entry."""
        for workout_exercise, exercise_set in self.iter_sets():
            if exercise_set.id == set_id:
                return workout_exercise, exercise_set
        return None

    def __str__(self) -> str:
        return f'Workout("{self.name}", {self.exercise_count} exercises, {self.total_sets} sets)'
