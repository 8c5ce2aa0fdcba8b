"""
ManageExercises Use Case.

Backs the exercise manager and the create/edit exercise forms.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from application.ports import ObjectStore
from domain.models import Exercise, ExerciseCategory, Measurement, Workout, ordered_measurements
from domain.services import CategorySelection

logger = logging.getLogger(__name__)


class ExerciseValidationError(ValueError):
    """Raised when the exercise form cannot be saved."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ExerciseNotFoundError(LookupError):
    """Raised when an exercise id is unknown."""


class ExerciseInUseError(Exception):
    """Raised when deleting an exercise that saved workouts still reference."""

    def __init__(self, exercise: Exercise, workout_ids: List[str]):
        super().__init__(
            f"Exercise '{exercise.name}' is used by {len(workout_ids)} workout(s)"
        )
        self.exercise = exercise
        self.workout_ids = workout_ids


@dataclass
class ExerciseForm:
    """
    State of the create/edit exercise form.

    Measurements are ticked as a set; categories through an id-keyed
    selection.
    """

    name: str = ""
    measurements: Set[Measurement] = field(default_factory=set)
    categories: CategorySelection = field(default_factory=CategorySelection)

    @classmethod
    def from_exercise(
        cls, exercise: Exercise, categories: Iterable[ExerciseCategory]
    ) -> "ExerciseForm":
        """Pre-fill the form with an existing exercise."""
        return cls(
            name=exercise.name,
            measurements=set(exercise.measurements),
            categories=CategorySelection(categories),
        )

    def toggle_measurement(self, measurement: Measurement) -> bool:
        """Flip a measurement; returns True if it is selected afterwards."""
        if measurement in self.measurements:
            self.measurements.discard(measurement)
            return False
        self.measurements.add(measurement)
        return True

    def toggle_category(self, category: ExerciseCategory) -> bool:
        return self.categories.toggle(category)

    def validation_errors(self) -> List[str]:
        errors: List[str] = []
        if not self.name.strip():
            errors.append("Exercise name is required")
        if not self.measurements:
            errors.append("Select at least one measurement")
        return errors

    @property
    def is_done_disabled(self) -> bool:
        """Whether Save/Done stays disabled."""
        return bool(self.validation_errors())


class ManageExercisesUseCase:
    """
    Use case for creating, editing, listing and deleting exercises.

    Usage:
        >>> exercises = ManageExercisesUseCase(store)
        >>> form = ExerciseForm(name="Squat", measurements={Measurement.WEIGHT})
        >>> squat = exercises.create(form)
    """

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def list(self) -> List[Exercise]:
        """All exercises sorted by name."""
        return self._store.query(Exercise, sort_key="name")

    def get(self, exercise_id: str) -> Exercise:
        """
        Raises:
            ExerciseNotFoundError: If no exercise has this id
        """
        exercise = self._store.get(Exercise, exercise_id)
        if exercise is None:
            raise ExerciseNotFoundError(f"Exercise '{exercise_id}' not found")
        return exercise

    def categories_for(self, exercise: Exercise) -> List[ExerciseCategory]:
        """Resolve the exercise's category ids, skipping any that no longer exist."""
        resolved = []
        for category_id in exercise.category_ids:
            category = self._store.get(ExerciseCategory, category_id)
            if category is not None:
                resolved.append(category)
        return resolved

    def resolve_categories(self, category_ids: Iterable[str]) -> List[ExerciseCategory]:
        """
        Look up categories by id.

        Raises:
            ExerciseValidationError: If an id is unknown
        """
        categories = []
        missing = []
        for category_id in category_ids:
            category = self._store.get(ExerciseCategory, category_id)
            if category is None:
                missing.append(category_id)
            else:
                categories.append(category)
        if missing:
            raise ExerciseValidationError(
                "Unknown categories", [f"Category '{cid}' not found" for cid in missing]
            )
        return categories

    def form_for(self, exercise_id: str) -> ExerciseForm:
        """Edit form pre-filled from a stored exercise."""
        exercise = self.get(exercise_id)
        return ExerciseForm.from_exercise(exercise, self.categories_for(exercise))

    def create(self, form: ExerciseForm) -> Exercise:
        """
        Insert a new exercise from the form.

        Raises:
            ExerciseValidationError: If the name is blank or no measurement is selected
        """
        self._check(form)
        exercise = Exercise(
            name=form.name.strip(),
            category_ids=form.categories.ids,
            measurements=ordered_measurements(form.measurements),
        )
        self._store.insert(exercise)
        logger.info(f"Created exercise '{exercise.name}' ({exercise.id})")
        return exercise

    def edit(self, exercise_id: str, form: ExerciseForm) -> Exercise:
        """
        Apply the form to an existing exercise in place.

        Sets already saved keep their values; values are keyed by measurement
        so a changed measurement list cannot shift them.

        Raises:
            ExerciseNotFoundError: If no exercise has this id
            ExerciseValidationError: If the name is blank or no measurement is selected
        """
        exercise = self.get(exercise_id)
        self._check(form)

        exercise.name = form.name.strip()
        exercise.measurements = ordered_measurements(form.measurements)
        exercise.category_ids = form.categories.ids
        self._store.save()
        logger.info(f"Updated exercise '{exercise.name}' ({exercise.id})")
        return exercise

    def workouts_using(self, exercise_id: str) -> List[Workout]:
        return self._store.query(Workout, where=lambda w: w.references(exercise_id))

    def delete(self, exercise_id: str) -> Exercise:
        """
        Delete an exercise no saved workout references.

        Raises:
            ExerciseNotFoundError: If no exercise has this id
            ExerciseInUseError: If a saved workout references it
        """
        with self._store.transaction():
            exercise = self.get(exercise_id)
            users = self.workouts_using(exercise_id)
            if users:
                logger.warning(
                    "Refusing to delete exercise '%s': used by %d workouts",
                    exercise.name,
                    len(users),
                )
                raise ExerciseInUseError(exercise, [w.id for w in users])

            self._store.delete(exercise)
        logger.info(f"Deleted exercise '{exercise.name}' ({exercise.id})")
        return exercise

    def _check(self, form: ExerciseForm) -> None:
        errors = form.validation_errors()
        if errors:
            logger.warning(f"Exercise form rejected: {errors}")
            raise ExerciseValidationError("Exercise validation failed", errors)
