"""
ComposeWorkout Use Case.

A compose session is the workout composer's local state between user
actions: the workout-level fields, the exercise selection and the draft
list. Nothing here is persisted until `save()`, which hands the drafts to
SaveWorkoutUseCase.
"""

import logging
import math
import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from application.ports import ObjectStore
from application.use_cases.preferences import PreferencesUseCase
from application.use_cases.save_workout import (
    SaveWorkoutResult,
    SaveWorkoutUseCase,
    WorkoutDetails,
    validate_workout_form,
)
from domain.models import Exercise, Measurement, WorkoutExerciseDraft
from domain.services import ExerciseSelection, reconcile_drafts

logger = logging.getLogger(__name__)

PROGRESSIVE_OVERLOAD_HINT = "We will automatically increase your reps as you get stronger."
NO_EXERCISES_MESSAGE = "No exercises available. Create an exercise first."

MIN_DURATION_MINUTES = 0
MAX_DURATION_MINUTES = 180
DURATION_STEP_MINUTES = 5


class SessionClosedError(Exception):
    """Raised when a saved or cancelled session is edited."""


class DraftNotFoundError(LookupError):
    """Raised when no draft exists for an exercise id."""


@dataclass
class ExerciseOption:
    """One row of the exercise selection sheet."""

    exercise_id: str
    title: str
    is_selected: bool


@dataclass
class MeasurementRow:
    """One value row of a draft set."""

    measurement: Measurement
    label: str
    value: float
    editable: bool

    @property
    def display_value(self) -> str:
        """Value formatted with one decimal place."""
        return f"{self.value:.1f}"


def clamp_duration_minutes(minutes: float) -> int:
    """
    Clamp to 0-180 and snap to the nearest 5-minute step.

    Raises:
        ValueError: If `minutes` is NaN or infinite
    """
    if not math.isfinite(minutes):
        raise ValueError(f"Duration must be a finite number of minutes, got {minutes}")
    bounded = min(max(minutes, MIN_DURATION_MINUTES), MAX_DURATION_MINUTES)
    return int(round(bounded / DURATION_STEP_MINUTES)) * DURATION_STEP_MINUTES


class ComposeWorkoutSession:
    """
    State and operations of one open workout composer.

    Edits are serialised by a per-session lock, so two requests against the
    same composer cannot interleave.

    Usage:
        >>> session = ComposeWorkoutSession(store)
        >>> session.toggle_exercise(squat.id)
        True
        >>> session.sync_drafts_to_selection()
        >>> session.name = "Leg Day"
        >>> result = session.save()
    """

    def __init__(self, store: ObjectStore, session_id: Optional[str] = None) -> None:
        self._store = store
        self._lock = threading.RLock()
        self.id = session_id or str(uuid.uuid4())
        self.name = ""
        self.has_duration = False
        self.duration_minutes = 0
        self.progressive_overload = False
        self.selection = ExerciseSelection()
        self.drafts: List[WorkoutExerciseDraft] = []
        self.closed = False

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def exercise_options(self) -> List[ExerciseOption]:
        """Exercises sorted by name, flagged when selected."""
        return [
            ExerciseOption(
                exercise_id=exercise.id,
                title=exercise.name,
                is_selected=exercise in self.selection,
            )
            for exercise in self._store.query(Exercise, sort_key="name")
        ]

    def toggle_exercise(self, exercise_id: str) -> bool:
        """
        Flip selection of an exercise.

        Returns:
            True if the exercise is selected afterwards

        Raises:
            SessionClosedError: If the session was saved or cancelled
            LookupError: If no exercise has this id
        """
        with self._lock:
            self._ensure_open()
            return self.selection.toggle(self._exercise(exercise_id))

    def select_exercises(self, exercise_ids: Iterable[str]) -> None:
        """Replace the whole selection (selection sheet confirmed at once)."""
        with self._lock:
            self._ensure_open()
            self.selection.replace([self._exercise(eid) for eid in exercise_ids])

    def sync_drafts_to_selection(self) -> None:
        """Reconcile drafts with the selection; run when the sheet is dismissed."""
        with self._lock:
            self._ensure_open()
            self.drafts = reconcile_drafts(self.selection, self.drafts)

    # ------------------------------------------------------------------
    # Draft editing
    # ------------------------------------------------------------------

    def draft_for(self, exercise_id: str) -> WorkoutExerciseDraft:
        for draft in self.drafts:
            if draft.exercise_id == exercise_id:
                return draft
        raise DraftNotFoundError(f"No draft for exercise '{exercise_id}'")

    def add_set(self, exercise_id: str) -> int:
        """Append a default set; returns its index."""
        with self._lock:
            self._ensure_open()
            draft = self.draft_for(exercise_id)
            draft.add_set()
            return len(draft.sets) - 1

    def remove_set(self, exercise_id: str, index: int) -> None:
        with self._lock:
            self._ensure_open()
            self.draft_for(exercise_id).remove_set(index)

    def update_reps(self, exercise_id: str, index: int, reps: int) -> None:
        with self._lock:
            self._ensure_open()
            self.draft_for(exercise_id).set_reps(index, reps)

    def update_value(
        self, exercise_id: str, index: int, measurement: Measurement, value: float
    ) -> None:
        with self._lock:
            self._ensure_open()
            self.draft_for(exercise_id).set_value(index, measurement, value)

    def update_set(
        self,
        exercise_id: str,
        index: int,
        *,
        reps: Optional[int] = None,
        values: Optional[Dict[Measurement, float]] = None,
    ) -> None:
        """Edit reps and values of one draft set; nothing changes if any value is rejected."""
        with self._lock:
            self._ensure_open()
            self.draft_for(exercise_id).update_set(index, reps=reps, values=values)

    def measurement_rows(self, exercise_id: str, index: int) -> List[MeasurementRow]:
        """
        Value rows for one draft set.

        BodyWeight is read-only and shows the preferences body weight (0 when
        unset); Weight reads "Extra Weight" next to it.
        """
        draft = self.draft_for(exercise_id)
        if not 0 <= index < len(draft.sets):
            raise IndexError(f"No set at position {index} for '{draft.exercise.name}'")
        draft_set = draft.sets[index]

        body_weight = None
        rows = []
        for measurement, label in draft.exercise.labelled_measurements():
            if measurement.is_editable:
                value = draft_set.value_for(measurement)
            else:
                if body_weight is None:
                    body_weight = self._preferences().display_body_weight
                value = body_weight
            rows.append(
                MeasurementRow(
                    measurement=measurement,
                    label=label,
                    value=value,
                    editable=measurement.is_editable,
                )
            )
        return rows

    # ------------------------------------------------------------------
    # Workout fields
    # ------------------------------------------------------------------

    def set_duration_minutes(self, minutes: float) -> int:
        with self._lock:
            self._ensure_open()
            self.duration_minutes = clamp_duration_minutes(minutes)
            return self.duration_minutes

    def update_details(
        self,
        *,
        name: Optional[str] = None,
        has_duration: Optional[bool] = None,
        duration_minutes: Optional[float] = None,
        progressive_overload: Optional[bool] = None,
    ) -> None:
        """
        Change workout-level fields; None leaves a field unchanged.

        The duration is checked first, so a rejected value changes nothing.
        """
        with self._lock:
            self._ensure_open()
            if duration_minutes is not None:
                self.duration_minutes = clamp_duration_minutes(duration_minutes)
            if name is not None:
                self.name = name
            if has_duration is not None:
                self.has_duration = has_duration
            if progressive_overload is not None:
                self.progressive_overload = progressive_overload

    @property
    def progressive_overload_hint(self) -> Optional[str]:
        return PROGRESSIVE_OVERLOAD_HINT if self.progressive_overload else None

    @property
    def details(self) -> WorkoutDetails:
        return WorkoutDetails(
            name=self.name,
            has_duration=self.has_duration,
            duration_minutes=self.duration_minutes,
            progressive_overload=self.progressive_overload,
        )

    @property
    def validation_errors(self) -> List[str]:
        return validate_workout_form(self.details, self.drafts)

    @property
    def is_save_disabled(self) -> bool:
        return bool(self.validation_errors)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def save(self) -> SaveWorkoutResult:
        """
        Commit the drafts as a Workout.

        The session closes only when the save succeeds; a refused save
        leaves it open for correction.
        """
        with self._lock:
            self._ensure_open()
            result = SaveWorkoutUseCase(self._store).execute(self.details, self.drafts)
            if result.success:
                self.closed = True
                self.drafts = []
                self.selection.clear()
            return result

    def cancel(self) -> None:
        """Discard all drafts."""
        with self._lock:
            self._ensure_open()
            logger.debug(f"Compose session {self.id} cancelled ({len(self.drafts)} drafts dropped)")
            self.drafts = []
            self.selection.clear()
            self.closed = True

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosedError(f"Compose session '{self.id}' is closed")

    def _exercise(self, exercise_id: str) -> Exercise:
        exercise = self._store.get(Exercise, exercise_id)
        if exercise is None:
            raise LookupError(f"Exercise '{exercise_id}' not found")
        return exercise

    def _preferences(self):
        return PreferencesUseCase(self._store).get_or_create()
