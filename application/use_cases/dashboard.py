"""
Dashboard Use Case.

Workout count, profile section and the "Remove all workouts" action.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from application.ports import ObjectStore
from application.use_cases.manage_workouts import ManageWorkoutsUseCase
from application.use_cases.preferences import PreferencesUseCase
from domain.models import UnitSystem, UserPreferences


def workout_count_text(count: int) -> str:
    if count == 0:
        return "You have no workouts"
    return f"You have {count} workouts"


@dataclass
class DashboardSummary:
    workout_count: int
    workout_count_text: str
    body_weight_label: str
    preferences: UserPreferences
    unit_system_options: List[Tuple[UnitSystem, str]] = field(default_factory=list)


class DashboardUseCase:
    """Use case behind the dashboard screen."""

    def __init__(self, store: ObjectStore) -> None:
        self._workouts = ManageWorkoutsUseCase(store)
        self._preferences = PreferencesUseCase(store)

    def summary(self) -> DashboardSummary:
        count = self._workouts.count()
        preferences = self._preferences.get_or_create()
        return DashboardSummary(
            workout_count=count,
            workout_count_text=workout_count_text(count),
            body_weight_label=preferences.body_weight_label,
            preferences=preferences,
            unit_system_options=[(unit, unit.label) for unit in UnitSystem],
        )

    def remove_all_workouts(self) -> int:
        return self._workouts.delete_all()
