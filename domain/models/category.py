"""
ExerciseCategory record.
"""

from pydantic import Field

from domain.models.entity import Entity


def normalize_category_name(name: str) -> str:
    """Trim surrounding whitespace from a category name."""
    return name.strip()


class ExerciseCategory(Entity):
    """
    A user-defined grouping of exercises (e.g. "Back", "Core").

    Names are unique by convention, compared case-insensitively after
    trimming. The store does not enforce it; the add operation does.
    """

    name: str = Field(..., description="Category name")

    def same_name_as(self, name: str) -> bool:
        """Check whether `name` collides with this category's name."""
        return self.name.strip().casefold() == normalize_category_name(name).casefold()

    def __str__(self) -> str:
        return self.name
