"""
Exercise record.
"""

from typing import List, Tuple

from pydantic import Field, field_validator

from domain.models.entity import Entity
from domain.models.measurement import Measurement, measurement_label


class Exercise(Entity):
    """
    An exercise the user can add to workouts.

    Categories are shared records referenced by id. Measurements decide
    which value rows every set of this exercise carries.

    Examples:
        >>> pull_up = Exercise(
        ...     name="Weighted Pull-up",
        ...     measurements=[Measurement.BODY_WEIGHT, Measurement.WEIGHT],
        ... )
        >>> pull_up.labelled_measurements()
        [(<Measurement.BODY_WEIGHT: 'BodyWeight'>, 'BodyWeight'), (<Measurement.WEIGHT: 'Weight'>, 'Extra Weight')]
    """

    name: str = Field(..., description="Exercise name")
    category_ids: List[str] = Field(
        default_factory=list,
        description="Ids of the ExerciseCategory records this exercise belongs to",
    )
    measurements: List[Measurement] = Field(
        default_factory=list,
        description="Quantities tracked for every set, in display order",
    )

    @field_validator("category_ids")
    @classmethod
    def dedupe_category_ids(cls, v: List[str]) -> List[str]:
        """Drop repeated category ids while preserving order."""
        seen = set()
        unique = []
        for category_id in v:
            if category_id not in seen:
                seen.add(category_id)
                unique.append(category_id)
        return unique

    @field_validator("measurements")
    @classmethod
    def dedupe_measurements(cls, v: List[Measurement]) -> List[Measurement]:
        """A measurement is tracked at most once."""
        seen = set()
        unique = []
        for measurement in v:
            if measurement not in seen:
                seen.add(measurement)
                unique.append(measurement)
        return unique

    def tracks(self, measurement: Measurement) -> bool:
        """Check whether this exercise tracks `measurement`."""
        return measurement in self.measurements

    def labelled_measurements(self) -> List[Tuple[Measurement, str]]:
        """Measurements paired with their display labels."""
        return [(m, measurement_label(m, self.measurements)) for m in self.measurements]

    def __str__(self) -> str:
        return self.name
