"""
Tests for InMemoryObjectStore.
"""

import pytest

from application.ports import CHANGE_DELETE, CHANGE_INSERT, CHANGE_UPDATE
from domain.models import Exercise, ExerciseCategory, Measurement
from infrastructure.db import InMemoryObjectStore

pytestmark = pytest.mark.unit


@pytest.fixture
def store() -> InMemoryObjectStore:
    return InMemoryObjectStore()


class TestInsertGetDelete:
    def test_insert_and_get_returns_same_instance(self, store):
        legs = ExerciseCategory(name="Legs")
        store.insert(legs)
        assert store.get(ExerciseCategory, legs.id) is legs

    def test_get_is_per_type(self, store):
        legs = ExerciseCategory(name="Legs")
        store.insert(legs)
        assert store.get(Exercise, legs.id) is None

    def test_reinsert_replaces(self, store):
        legs = ExerciseCategory(id="c1", name="Legs")
        store.insert(legs)
        store.insert(ExerciseCategory(id="c1", name="Legs 2"))
        assert [c.name for c in store.query(ExerciseCategory)] == ["Legs 2"]

    def test_delete(self, store):
        legs = ExerciseCategory(name="Legs")
        store.insert(legs)
        assert store.delete(legs) is True
        assert store.get(ExerciseCategory, legs.id) is None
        assert store.delete(legs) is False


class TestQuery:
    @pytest.fixture(autouse=True)
    def _seed(self, store):
        for name in ["squat", "Bench", "deadlift"]:
            store.insert(Exercise(name=name, measurements=[Measurement.WEIGHT]))

    def test_insertion_order(self, store):
        assert [e.name for e in store.query(Exercise)] == ["squat", "Bench", "deadlift"]

    def test_sort_key_is_case_insensitive(self, store):
        assert [e.name for e in store.query(Exercise, sort_key="name")] == [
            "Bench",
            "deadlift",
            "squat",
        ]

    def test_where(self, store):
        found = store.query(Exercise, where=lambda e: e.name.startswith("s"))
        assert [e.name for e in found] == ["squat"]

    def test_unknown_type_is_empty(self, store):
        assert store.query(ExerciseCategory) == []


class TestObservers:
    def test_notified_for_each_mutation(self, store):
        changes = []
        store.subscribe(changes.append)
        legs = ExerciseCategory(name="Legs")

        store.insert(legs)
        legs.name = "Lower body"
        store.save()
        store.delete(legs)

        assert [c.kind for c in changes] == [CHANGE_INSERT, CHANGE_UPDATE, CHANGE_DELETE]
        assert changes[0].entity_type == "ExerciseCategory"
        assert changes[0].entity_id == legs.id
        assert changes[1].entity_id is None

    def test_unsubscribe(self, store):
        changes = []
        unsubscribe = store.subscribe(changes.append)
        unsubscribe()
        unsubscribe()
        store.insert(ExerciseCategory(name="Legs"))
        assert changes == []

    def test_failed_delete_does_not_notify(self, store):
        changes = []
        store.subscribe(changes.append)
        store.delete(ExerciseCategory(name="never stored"))
        assert changes == []


class _FailingWriteStore(InMemoryObjectStore):
    fail = False

    def _persist(self) -> None:
        if self.fail:
            raise OSError("disk full")


class TestTransaction:
    def test_reentrant(self, store):
        with store.transaction():
            store.insert(ExerciseCategory(name="Legs"))
            with store.transaction():
                assert len(store.query(ExerciseCategory)) == 1

    def test_failed_write_keeps_order(self):
        store = _FailingWriteStore()
        names = ["Arms", "Back", "Legs"]
        categories = [ExerciseCategory(name=n) for n in names]
        for category in categories:
            store.insert(category)

        store.fail = True
        with pytest.raises(OSError):
            store.delete(categories[0])

        assert [c.name for c in store.query(ExerciseCategory)] == names
