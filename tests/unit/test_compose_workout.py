"""
Unit tests for ComposeWorkoutSession.

Tests for:
- Selection sheet options and reconciliation on dismiss
- Draft editing by exercise id
- Measurement rows (Extra Weight label, read-only body weight)
- Duration stepper, save/cancel lifecycle
"""

import pytest

from application.use_cases import (
    PROGRESSIVE_OVERLOAD_HINT,
    ComposeWorkoutSession,
    DraftNotFoundError,
    ManageExercisesUseCase,
    SessionClosedError,
    clamp_duration_minutes,
)
from domain.models import Measurement, UserPreferences, Workout
from tests.fakes import create_object_store

pytestmark = pytest.mark.unit


@pytest.fixture
def object_store():
    return create_object_store(with_library=True, body_weight=72.5)


@pytest.fixture
def session(object_store) -> ComposeWorkoutSession:
    return ComposeWorkoutSession(object_store)


class TestExerciseOptions:
    def test_sorted_by_name_case_insensitive(self, session):
        titles = [o.title for o in session.exercise_options()]
        assert titles == ["Pull-up", "run", "Squat"]

    def test_selected_flag(self, session):
        session.toggle_exercise("ex-squat")
        flags = {o.exercise_id: o.is_selected for o in session.exercise_options()}
        assert flags == {"ex-pullup": False, "ex-run": False, "ex-squat": True}

    def test_empty_library(self):
        assert ComposeWorkoutSession(create_object_store()).exercise_options() == []

    def test_toggle_unknown_exercise(self, session):
        with pytest.raises(LookupError):
            session.toggle_exercise("nope")


class TestSync:
    def test_drafts_follow_selection_on_sync(self, session):
        session.toggle_exercise("ex-squat")
        assert session.drafts == []

        session.sync_drafts_to_selection()
        assert [d.exercise_id for d in session.drafts] == ["ex-squat"]

    def test_configured_sets_survive_reselection(self, session):
        session.select_exercises(["ex-squat", "ex-run"])
        session.sync_drafts_to_selection()
        session.add_set("ex-squat")
        session.update_reps("ex-squat", 1, 6)

        session.select_exercises(["ex-squat", "ex-pullup"])
        session.sync_drafts_to_selection()

        assert [d.exercise_id for d in session.drafts] == ["ex-squat", "ex-pullup"]
        assert [s.reps for s in session.draft_for("ex-squat").sets] == [10, 6]


class TestDraftEditing:
    @pytest.fixture(autouse=True)
    def _select(self, session):
        session.select_exercises(["ex-pullup", "ex-squat"])
        session.sync_drafts_to_selection()

    def test_add_set_returns_index(self, session):
        assert session.add_set("ex-squat") == 1

    def test_remove_set(self, session):
        session.add_set("ex-squat")
        session.remove_set("ex-squat", 0)
        assert len(session.draft_for("ex-squat").sets) == 1

    def test_update_value(self, session):
        session.update_value("ex-squat", 0, Measurement.WEIGHT, 60)
        assert session.draft_for("ex-squat").sets[0].values[Measurement.WEIGHT] == 60.0

    def test_update_body_weight_rejected(self, session):
        with pytest.raises(ValueError):
            session.update_value("ex-pullup", 0, Measurement.BODY_WEIGHT, 90)

    def test_update_set_is_all_or_nothing(self, session):
        with pytest.raises(ValueError):
            session.update_set("ex-squat", 0, reps=3, values={Measurement.DISTANCE: 5})
        assert session.draft_for("ex-squat").sets[0].reps == 10

        session.update_set("ex-squat", 0, reps=3, values={Measurement.WEIGHT: 80})
        draft_set = session.draft_for("ex-squat").sets[0]
        assert (draft_set.reps, draft_set.values[Measurement.WEIGHT]) == (3, 80.0)

    def test_unknown_draft(self, session):
        with pytest.raises(DraftNotFoundError):
            session.add_set("ex-run")

    def test_measurement_rows(self, session):
        session.update_value("ex-pullup", 0, Measurement.WEIGHT, 10)
        rows = session.measurement_rows("ex-pullup", 0)

        assert [(r.label, r.value, r.editable) for r in rows] == [
            ("BodyWeight", 72.5, False),
            ("Extra Weight", 10.0, True),
        ]
        assert rows[0].display_value == "72.5"

    def test_measurement_rows_without_body_weight(self):
        object_store = create_object_store(with_library=True)
        session = ComposeWorkoutSession(object_store)
        session.select_exercises(["ex-pullup"])
        session.sync_drafts_to_selection()

        rows = session.measurement_rows("ex-pullup", 0)

        assert rows[0].display_value == "0.0"
        assert len(object_store.get_all(UserPreferences)) == 1

    def test_measurement_rows_bad_index(self, session):
        with pytest.raises(IndexError):
            session.measurement_rows("ex-squat", 4)


class TestWorkoutFields:
    @pytest.mark.parametrize(
        "minutes,expected",
        [(-10, 0), (0, 0), (7, 5), (8, 10), (45, 45), (179, 180), (500, 180)],
    )
    def test_clamp_duration(self, minutes, expected):
        assert clamp_duration_minutes(minutes) == expected

    @pytest.mark.parametrize("minutes", [float("nan"), float("inf"), float("-inf")])
    def test_clamp_duration_rejects_non_finite(self, minutes):
        with pytest.raises(ValueError):
            clamp_duration_minutes(minutes)

    def test_set_duration_minutes(self, session):
        assert session.set_duration_minutes(33) == 35
        assert session.duration_minutes == 35

    def test_update_details(self, session):
        session.update_details(name="Legs", has_duration=True, duration_minutes=43)
        assert (session.name, session.has_duration, session.duration_minutes) == ("Legs", True, 45)

    def test_rejected_update_details_changes_nothing(self, session):
        with pytest.raises(ValueError):
            session.update_details(name="Legs", duration_minutes=float("nan"))
        assert session.name == ""
        assert session.duration_minutes == 0

    def test_hint(self, session):
        assert session.progressive_overload_hint is None
        session.progressive_overload = True
        assert session.progressive_overload_hint == PROGRESSIVE_OVERLOAD_HINT

    def test_save_disabled_until_valid(self, session):
        assert session.is_save_disabled
        session.name = "Legs"
        assert session.is_save_disabled
        session.select_exercises(["ex-squat"])
        session.sync_drafts_to_selection()
        assert not session.is_save_disabled


class TestLifecycle:
    def test_save(self, session, object_store):
        session.name = "Leg Day"
        session.has_duration = True
        session.set_duration_minutes(30)
        session.select_exercises(["ex-squat"])
        session.sync_drafts_to_selection()

        result = session.save()

        assert result.success
        assert session.closed
        assert session.drafts == []
        workout = object_store.get(Workout, result.workout_id)
        assert workout.duration == 1800
        with pytest.raises(SessionClosedError):
            session.add_set("ex-squat")

    def test_refused_save_keeps_session_open(self, session, object_store):
        result = session.save()
        assert not result.success
        assert not session.closed
        assert object_store.get_all(Workout) == []

    def test_cancel_discards(self, session, object_store):
        session.select_exercises(["ex-squat"])
        session.sync_drafts_to_selection()

        session.cancel()

        assert session.closed
        assert session.drafts == []
        assert object_store.inserted == []
        with pytest.raises(SessionClosedError):
            session.toggle_exercise("ex-run")

    def test_save_refused_when_exercise_deleted_meanwhile(self, session, object_store):
        session.name = "Leg Day"
        session.select_exercises(["ex-squat"])
        session.sync_drafts_to_selection()
        ManageExercisesUseCase(object_store).delete("ex-squat")

        result = session.save()

        assert not result.success
        assert result.validation_errors == ["Exercise 'Squat' no longer exists"]
        assert not session.closed
        assert object_store.get_all(Workout) == []
