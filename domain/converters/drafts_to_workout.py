"""
Converter: composer drafts to a Workout record tree.

Pure function; persisting the result is the caller's job.
"""

import logging
from typing import List, Optional

from domain.models import ExerciseSet, Workout, WorkoutExercise, WorkoutExerciseDraft

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60


def minutes_to_seconds(minutes: Optional[float]) -> Optional[float]:
    """Convert a duration in minutes to seconds, passing None through."""
    if minutes is None:
        return None
    return float(minutes) * SECONDS_PER_MINUTE


def drafts_to_workout(
    drafts: List[WorkoutExerciseDraft],
    *,
    name: str,
    duration_minutes: Optional[float] = None,
    progressive_overload: bool = False,
) -> Workout:
    """
    Build a Workout from composer drafts.

    Each draft set becomes an ExerciseSet with reps and values copied as
    entered; each draft becomes a WorkoutExercise referencing the draft's
    (already persisted) exercise.

    Args:
        drafts: Drafts in display order
        name: Workout name (trimmed here)
        duration_minutes: Duration in minutes, or None when not set
        progressive_overload: Whether auto-progression is enabled

    Returns:
        New, unsaved Workout
    """
    workout_exercises = [
        WorkoutExercise(
            exercise_id=draft.exercise_id,
            sets=[
                ExerciseSet(reps=set_draft.reps, values=dict(set_draft.values))
                for set_draft in draft.sets
            ],
        )
        for draft in drafts
    ]

    workout = Workout(
        name=name.strip(),
        exercises=workout_exercises,
        duration=minutes_to_seconds(duration_minutes),
        progressive_overload=progressive_overload,
    )
    logger.debug("Converted %d drafts into %s", len(drafts), workout)
    return workout
