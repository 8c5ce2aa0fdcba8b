"""
Keeps the composer's draft list in step with the exercise selection.
"""

import logging
from typing import List

from domain.models import WorkoutExerciseDraft
from domain.services.selection import ExerciseSelection

logger = logging.getLogger(__name__)


def reconcile_drafts(
    selection: ExerciseSelection,
    drafts: List[WorkoutExerciseDraft],
) -> List[WorkoutExerciseDraft]:
    """
    Synchronize `drafts` with `selection`.

    - Drafts whose exercise left the selection are dropped.
    - Remaining drafts keep their relative order and are returned as the
      same objects, so sets the user already configured survive.
    - Every selected exercise without a draft gets a new one with a single
      default set, appended in selection order.

    Running it again with the same selection returns an equal list.

    Args:
        selection: Exercises currently selected
        drafts: Current draft list (not modified)

    Returns:
        New draft list
    """
    retained = [draft for draft in drafts if draft.exercise_id in selection]
    drafted_ids = {draft.exercise_id for draft in retained}

    added = [
        WorkoutExerciseDraft.for_exercise(exercise)
        for exercise in selection
        if exercise.id not in drafted_ids
    ]

    removed = len(drafts) - len(retained)
    if added or removed:
        logger.debug(
            "Reconciled drafts: %d kept, %d added, %d removed",
            len(retained),
            len(added),
            removed,
        )
    return retained + added
