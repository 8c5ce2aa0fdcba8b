"""
Unit tests for selection sets and draft reconciliation.
"""

import pytest

from domain.models import Exercise, Measurement, WorkoutExerciseDraft
from domain.services import ExerciseSelection, Selection, reconcile_drafts

pytestmark = pytest.mark.unit


@pytest.fixture
def squat() -> Exercise:
    return Exercise(id="ex-squat", name="Squat", measurements=[Measurement.WEIGHT])


@pytest.fixture
def pullup() -> Exercise:
    return Exercise(
        id="ex-pullup",
        name="Pull-up",
        measurements=[Measurement.BODY_WEIGHT, Measurement.WEIGHT],
    )


@pytest.fixture
def run() -> Exercise:
    return Exercise(id="ex-run", name="Run", measurements=[Measurement.TIME, Measurement.DISTANCE])


class TestSelection:
    def test_toggle(self, squat):
        selection = Selection()
        assert selection.toggle(squat) is True
        assert squat in selection
        assert squat.id in selection
        assert selection.toggle(squat) is False
        assert squat not in selection

    def test_membership_is_by_id(self, squat):
        selection = Selection([squat])
        renamed = squat.model_copy(update={"name": "Back Squat"})
        assert renamed in selection

    def test_insertion_order(self, squat, pullup, run):
        selection = ExerciseSelection([run, squat])
        selection.add(pullup)
        assert selection.ids == ["ex-run", "ex-squat", "ex-pullup"]
        assert [e.name for e in selection] == ["Run", "Squat", "Pull-up"]

    def test_replace_and_clear(self, squat, run):
        selection = ExerciseSelection([squat])
        selection.replace([run])
        assert selection.ids == ["ex-run"]
        selection.clear()
        assert not selection
        assert len(selection) == 0

    def test_remove_absent_is_ignored(self, squat):
        selection = Selection()
        selection.remove(squat)
        selection.remove("nope")
        assert len(selection) == 0

    def test_non_entity_is_not_member(self, squat):
        assert 42 not in Selection([squat])


class TestReconcileDrafts:
    def test_new_selection_gets_default_drafts(self, squat, pullup):
        drafts = reconcile_drafts(ExerciseSelection([squat, pullup]), [])

        assert [d.exercise_id for d in drafts] == ["ex-squat", "ex-pullup"]
        for draft in drafts:
            assert len(draft.sets) == 1
            assert draft.sets[0].reps == 10
        assert drafts[1].sets[0].values == {
            Measurement.BODY_WEIGHT: 0.0,
            Measurement.WEIGHT: 0.0,
        }

    def test_retained_drafts_are_same_objects(self, squat, pullup, run):
        existing = reconcile_drafts(ExerciseSelection([squat, pullup]), [])
        existing[0].add_set()
        existing[0].set_reps(1, 5)

        drafts = reconcile_drafts(ExerciseSelection([squat, pullup, run]), existing)

        assert drafts[0] is existing[0]
        assert drafts[1] is existing[1]
        assert drafts[0].sets[1].reps == 5
        assert drafts[2].exercise_id == "ex-run"

    def test_deselected_drafts_are_removed(self, squat, pullup, run):
        existing = reconcile_drafts(ExerciseSelection([squat, pullup, run]), [])

        drafts = reconcile_drafts(ExerciseSelection([run, squat]), existing)

        # relative order of the survivors is kept
        assert [d.exercise_id for d in drafts] == ["ex-squat", "ex-run"]

    def test_input_list_is_not_modified(self, squat):
        existing = [WorkoutExerciseDraft.for_exercise(squat)]
        reconcile_drafts(ExerciseSelection(), existing)
        assert len(existing) == 1

    def test_empty_selection_clears(self, squat):
        existing = [WorkoutExerciseDraft.for_exercise(squat)]
        assert reconcile_drafts(ExerciseSelection(), existing) == []

    def test_idempotent(self, squat, pullup, run):
        selection = ExerciseSelection([pullup, run])
        once = reconcile_drafts(selection, [WorkoutExerciseDraft.for_exercise(squat)])
        twice = reconcile_drafts(selection, once)
        assert len(twice) == len(once)
        assert all(a is b for a, b in zip(once, twice))

    def test_new_draft_appended_after_retained_one(self, squat, pullup):
        pullup_draft = WorkoutExerciseDraft.for_exercise(pullup)

        drafts = reconcile_drafts(ExerciseSelection([squat, pullup]), [pullup_draft])

        assert [d.exercise_id for d in drafts] == ["ex-pullup", "ex-squat"]
        assert drafts[0] is pullup_draft
        assert len(drafts[1].sets) == 1
