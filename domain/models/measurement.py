"""
Measurement and unit-system vocabularies.

A Measurement is a quantity kind an exercise tracks. It decides which input
rows appear for every set of that exercise. UnitSystem only changes labels;
stored numbers are never converted.
"""

from enum import Enum
from typing import Iterable, List


class Measurement(str, Enum):
    """
    Quantity kinds an exercise can track.

    - BODY_WEIGHT: the user's body weight, read from preferences (never edited per set)
    - WEIGHT: external load (shown as "Extra Weight" alongside BODY_WEIGHT)
    - TIME: duration of the set
    - DISTANCE: distance covered in the set
    """

    BODY_WEIGHT = "BodyWeight"
    WEIGHT = "Weight"
    TIME = "Time"
    DISTANCE = "Distance"

    @property
    def is_editable(self) -> bool:
        """Body weight comes from preferences; every other kind is typed per set."""
        return self is not Measurement.BODY_WEIGHT


class UnitSystem(str, Enum):
    """Display unit system chosen by the user."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def label(self) -> str:
        """Picker label for this unit system."""
        if self is UnitSystem.IMPERIAL:
            return "Imperial (lbs)"
        return "Metric (kg)"

    @property
    def weight_unit(self) -> str:
        """Short weight unit used in field labels."""
        if self is UnitSystem.IMPERIAL:
            return "lbs"
        return "kg"


def ordered_measurements(measurements: Iterable[Measurement]) -> List[Measurement]:
    """
    Return the given measurements deduplicated, in declaration order.

    The editor collects measurements as a set; storing them in a fixed order
    keeps the persisted list deterministic.
    """
    chosen = set(measurements)
    return [m for m in Measurement if m in chosen]


def measurement_label(measurement: Measurement, context: Iterable[Measurement]) -> str:
    """
    Display label for a measurement within an exercise's measurement list.

    When the exercise tracks body weight as well, "Weight" is the load added
    on top of it and is shown as "Extra Weight".

    Examples:
        >>> measurement_label(Measurement.WEIGHT, [Measurement.BODY_WEIGHT, Measurement.WEIGHT])
        'Extra Weight'
        >>> measurement_label(Measurement.WEIGHT, [Measurement.WEIGHT])
        'Weight'
    """
    if measurement is Measurement.WEIGHT and Measurement.BODY_WEIGHT in set(context):
        return "Extra Weight"
    return measurement.value
