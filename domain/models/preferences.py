"""
UserPreferences record (one per installation).
"""

from typing import Optional

from pydantic import Field

from domain.models.entity import Entity
from domain.models.measurement import UnitSystem


class UserPreferences(Entity):
    """
    The user's profile settings.

    Exactly one instance is expected; it is created on application start by
    the get-or-create operation when the store has none.
    """

    body_weight: Optional[float] = Field(
        default=None, ge=0, description="Body weight in the preferred unit"
    )
    preferred_unit_system: Optional[UnitSystem] = Field(
        default=UnitSystem.METRIC, description="Display unit system"
    )

    @property
    def unit_system(self) -> UnitSystem:
        """Preferred unit system, metric when none was chosen."""
        return self.preferred_unit_system or UnitSystem.METRIC

    @property
    def display_body_weight(self) -> float:
        """Body weight for read-only rows, 0 when unset."""
        return self.body_weight if self.body_weight is not None else 0.0

    @property
    def body_weight_label(self) -> str:
        return f"Bodyweight ({self.unit_system.weight_unit})"
