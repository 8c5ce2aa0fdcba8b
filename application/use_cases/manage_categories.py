"""
ManageCategories Use Case.

Adds and removes exercise categories. Deleting a category also detaches it
from every exercise that listed it, so no exercise is left pointing at a
record that no longer exists.
"""

import logging
from typing import List

from application.ports import ObjectStore
from domain.models import Exercise, ExerciseCategory, normalize_category_name

logger = logging.getLogger(__name__)


class CategoryValidationError(ValueError):
    """Raised when a category name is blank."""


class DuplicateCategoryError(ValueError):
    """Raised when a category with the same name (ignoring case) exists."""


class CategoryNotFoundError(LookupError):
    """Raised when a category id is unknown."""


class ManageCategoriesUseCase:
    """
    Use case behind the category manager.

    Usage:
        >>> categories = ManageCategoriesUseCase(store)
        >>> categories.can_add(" back ")
        True
        >>> categories.add(" back ").name
        'back'
    """

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def list(self) -> List[ExerciseCategory]:
        """All categories sorted by name."""
        return self._store.query(ExerciseCategory, sort_key="name")

    def find_by_name(self, name: str) -> List[ExerciseCategory]:
        """Categories whose name matches `name` ignoring case and surrounding spaces."""
        return [c for c in self._store.query(ExerciseCategory) if c.same_name_as(name)]

    def can_add(self, name: str) -> bool:
        """Whether the Add button is enabled for `name`."""
        trimmed = normalize_category_name(name)
        return bool(trimmed) and not self.find_by_name(trimmed)

    def add(self, name: str) -> ExerciseCategory:
        """
        Insert a new category.

        Args:
            name: Category name as typed; surrounding whitespace is dropped

        Returns:
            The new category

        Raises:
            CategoryValidationError: If the name is blank
            DuplicateCategoryError: If the name is already used
        """
        trimmed = normalize_category_name(name)
        if not trimmed:
            raise CategoryValidationError("Category name is required")

        with self._store.transaction():
            if self.find_by_name(trimmed):
                raise DuplicateCategoryError(f"Category '{trimmed}' already exists")
            category = ExerciseCategory(name=trimmed)
            self._store.insert(category)
        logger.info(f"Added category '{category.name}' ({category.id})")
        return category

    def delete(self, category_id: str) -> ExerciseCategory:
        """
        Delete a category and detach it from exercises.

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        with self._store.transaction():
            category = self._store.get(ExerciseCategory, category_id)
            if category is None:
                raise CategoryNotFoundError(f"Category '{category_id}' not found")

            detached = 0
            for exercise in self._store.query(Exercise):
                if category.id in exercise.category_ids:
                    exercise.category_ids = [
                        cid for cid in exercise.category_ids if cid != category.id
                    ]
                    detached += 1

            self._store.delete(category)
            if detached:
                self._store.save()
        logger.info(
            "Deleted category '%s' (%s), detached from %d exercises",
            category.name,
            category.id,
            detached,
        )
        return category

    def delete_at_offsets(self, offsets: List[int]) -> List[ExerciseCategory]:
        """Delete the categories at the given positions of `list()`."""
        categories = self.list()
        doomed = [categories[i] for i in sorted(set(offsets))]
        return [self.delete(category.id) for category in doomed]
