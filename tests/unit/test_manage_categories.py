"""
Unit tests for ManageCategoriesUseCase.
"""

import threading
import time

import pytest

from application.use_cases import (
    CategoryNotFoundError,
    CategoryValidationError,
    DuplicateCategoryError,
    ManageCategoriesUseCase,
)
from domain.models import Exercise, ExerciseCategory
from infrastructure.db import InMemoryObjectStore
from tests.fakes import create_object_store

pytestmark = pytest.mark.unit


class _SlowQueryStore(InMemoryObjectStore):
    """Widens the gap between the duplicate check and the insert."""

    def query(self, entity_type, **kwargs):
        results = super().query(entity_type, **kwargs)
        time.sleep(0.01)
        return results


@pytest.fixture
def object_store():
    return create_object_store(with_library=True)


@pytest.fixture
def categories(object_store) -> ManageCategoriesUseCase:
    return ManageCategoriesUseCase(object_store)


class TestAdd:
    def test_add_trims(self, categories, object_store):
        category = categories.add("  Core  ")
        assert category.name == "Core"
        assert object_store.inserted == [category]

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_rejected(self, categories, object_store, name):
        assert not categories.can_add(name)
        with pytest.raises(CategoryValidationError):
            categories.add(name)
        assert object_store.inserted == []

    @pytest.mark.parametrize("name", ["Legs", "legs", "  LEGS "])
    def test_duplicate_rejected(self, categories, object_store, name):
        assert not categories.can_add(name)
        with pytest.raises(DuplicateCategoryError):
            categories.add(name)
        assert object_store.inserted == []

    def test_can_add_new_name(self, categories):
        assert categories.can_add("Arms")

    def test_check_and_insert_share_a_transaction(self, categories, object_store):
        categories.add("Arms")
        assert object_store.transaction_count == 1

    def test_concurrent_adds_insert_once(self):
        store = _SlowQueryStore()
        categories = ManageCategoriesUseCase(store)
        barrier = threading.Barrier(4)
        errors = []

        def add_back():
            barrier.wait()
            try:
                categories.add("Back")
            except DuplicateCategoryError as e:
                errors.append(e)

        threads = [threading.Thread(target=add_back) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert [c.name for c in store.query(ExerciseCategory)] == ["Back"]
        assert len(errors) == 3


class TestList:
    def test_sorted_by_name(self, categories):
        categories.add("arms")
        assert [c.name for c in categories.list()] == ["arms", "Back", "Legs"]

    def test_find_by_name(self, categories):
        assert [c.id for c in categories.find_by_name(" legs")] == ["cat-legs"]


class TestDelete:
    def test_delete_detaches_from_exercises(self, categories, object_store):
        categories.delete("cat-legs")

        assert object_store.get(ExerciseCategory, "cat-legs") is None
        assert object_store.get(Exercise, "ex-squat").category_ids == []
        assert object_store.get(Exercise, "ex-pullup").category_ids == ["cat-back"]
        assert object_store.save_count == 1

    def test_delete_unused_category_does_not_save(self, categories, object_store):
        unused = categories.add("Arms")
        categories.delete(unused.id)
        assert object_store.save_count == 0
        assert object_store.deleted == [unused]

    def test_delete_unknown(self, categories):
        with pytest.raises(CategoryNotFoundError):
            categories.delete("missing")

    def test_delete_at_offsets(self, categories, object_store):
        deleted = categories.delete_at_offsets([0])
        assert [c.name for c in deleted] == ["Back"]
        assert [c.name for c in categories.list()] == ["Legs"]
