"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No file system access required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeObjectStore, create_object_store

    # Direct instantiation
    store = FakeObjectStore()
    store.seed([ExerciseCategory(name="Legs")])

    # Factory function with a small exercise library
    store = create_object_store(with_library=True)
"""
from typing import List, Optional

from domain.models import Exercise, ExerciseCategory, Measurement, UserPreferences
from tests.fakes.object_store import FakeObjectStore


# =============================================================================
# Factory Functions
# =============================================================================


def sample_library() -> List:
    """Two categories and three exercises covering the measurement label rules."""
    legs = ExerciseCategory(id="cat-legs", name="Legs")
    back = ExerciseCategory(id="cat-back", name="Back")
    return [
        legs,
        back,
        Exercise(
            id="ex-squat",
            name="Squat",
            category_ids=[legs.id],
            measurements=[Measurement.WEIGHT],
        ),
        Exercise(
            id="ex-pullup",
            name="Pull-up",
            category_ids=[back.id],
            measurements=[Measurement.BODY_WEIGHT, Measurement.WEIGHT],
        ),
        Exercise(
            id="ex-run",
            name="run",
            measurements=[Measurement.TIME, Measurement.DISTANCE],
        ),
    ]


def create_object_store(
    *,
    with_library: bool = False,
    body_weight: Optional[float] = None,
) -> FakeObjectStore:
    """
    Create a FakeObjectStore with optional pre-populated records.

    Args:
        with_library: Seed the sample categories and exercises
        body_weight: Seed a preferences record with this body weight

    Returns:
        Pre-populated FakeObjectStore
    """
    store = FakeObjectStore()
    if with_library:
        store.seed(sample_library())
    if body_weight is not None:
        store.seed([UserPreferences(body_weight=body_weight)])
    return store


__all__ = [
    "FakeObjectStore",
    "create_object_store",
    "sample_library",
]
