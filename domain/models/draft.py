"""
Transient builder records used while composing a workout.

Drafts are never persisted. They hold the reps and values the user is
editing until the workout is saved (converted into records) or the
composer is cancelled (discarded).
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from domain.models.exercise import Exercise
from domain.models.measurement import Measurement
from domain.models.workout import clamp_reps

DEFAULT_REPS = 10


def _draft_id() -> str:
    return str(uuid.uuid4())


@dataclass
class ExerciseSetDraft:
    """A set being configured: reps plus one value per tracked measurement."""

    reps: int = DEFAULT_REPS
    values: Dict[Measurement, float] = field(default_factory=dict)
    id: str = field(default_factory=_draft_id)

    @classmethod
    def for_exercise(cls, exercise: Exercise) -> "ExerciseSetDraft":
        """Default set for `exercise`: 10 reps, every value 0.0."""
        return cls(
            reps=DEFAULT_REPS,
            values={measurement: 0.0 for measurement in exercise.measurements},
        )

    def value_for(self, measurement: Measurement) -> float:
        return self.values.get(measurement, 0.0)


@dataclass
class WorkoutExerciseDraft:
    """
    An exercise being added to a workout, with its draft sets.

    `exercise` is the persisted Exercise record itself; drafts are matched to
    the selection by its id.
    """

    exercise: Exercise
    sets: List[ExerciseSetDraft] = field(default_factory=list)
    id: str = field(default_factory=_draft_id)

    @classmethod
    def for_exercise(cls, exercise: Exercise) -> "WorkoutExerciseDraft":
        """New draft starting with one default set."""
        return cls(exercise=exercise, sets=[ExerciseSetDraft.for_exercise(exercise)])

    @property
    def exercise_id(self) -> str:
        return self.exercise.id

    def add_set(self) -> ExerciseSetDraft:
        """Append a default set and return it."""
        new_set = ExerciseSetDraft.for_exercise(self.exercise)
        self.sets.append(new_set)
        return new_set

    def remove_set(self, index: int) -> ExerciseSetDraft:
        """
        Remove the set at `index`.

        Raises:
            IndexError: If there is no set at `index`
        """
        if not 0 <= index < len(self.sets):
            raise IndexError(f"No set at position {index} for '{self.exercise.name}'")
        return self.sets.pop(index)

    def remove_sets(self, offsets: Iterable[int]) -> None:
        """Remove several sets at once (swipe-to-delete offsets)."""
        doomed = sorted(set(offsets), reverse=True)
        for index in doomed:
            if not 0 <= index < len(self.sets):
                raise IndexError(f"No set at position {index} for '{self.exercise.name}'")
        for index in doomed:
            self.sets.pop(index)

    def set_reps(self, index: int, reps: int) -> None:
        """Update reps of the set at `index`, clamped to 0-100."""
        self._set_at(index).reps = clamp_reps(reps)

    def set_value(self, index: int, measurement: Measurement, value: float) -> None:
        """
        Update one measurement value of the set at `index`.

        Raises:
            IndexError: If there is no set at `index`
            ValueError: If the exercise does not track `measurement`, or it is
                body weight (read from preferences, never edited per set)
        """
        target = self._set_at(index)
        self._check_editable(measurement)
        target.values[measurement] = float(value)

    def update_set(
        self,
        index: int,
        *,
        reps: Optional[int] = None,
        values: Optional[Dict[Measurement, float]] = None,
    ) -> None:
        """
        Apply reps and values to the set at `index` as one edit.

        Every measurement is checked before anything changes, so a rejected
        edit leaves the set as it was.

        Raises:
            IndexError: If there is no set at `index`
            ValueError: As for `set_value`
        """
        target = self._set_at(index)
        values = values or {}
        for measurement in values:
            self._check_editable(measurement)
        if reps is not None:
            target.reps = clamp_reps(reps)
        for measurement, value in values.items():
            target.values[measurement] = float(value)

    def _check_editable(self, measurement: Measurement) -> None:
        if not self.exercise.tracks(measurement):
            raise ValueError(
                f"'{self.exercise.name}' does not track {measurement.value}"
            )
        if not measurement.is_editable:
            raise ValueError(f"{measurement.value} is read-only")

    def _set_at(self, index: int) -> ExerciseSetDraft:
        if not 0 <= index < len(self.sets):
            raise IndexError(f"No set at position {index} for '{self.exercise.name}'")
        return self.sets[index]
