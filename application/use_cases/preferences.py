"""
Preferences Use Case.

Owns the single UserPreferences record: get-or-create on start-up and
in-place updates from the profile section of the dashboard.
"""

import logging
from typing import Optional

from application.ports import ObjectStore
from domain.models import UnitSystem, UserPreferences

logger = logging.getLogger(__name__)

_UNSET = object()


class PreferencesUseCase:
    """
    Use case for reading and updating user preferences.

    Usage:
        >>> prefs = PreferencesUseCase(store).get_or_create()
        >>> prefs.unit_system
        <UnitSystem.METRIC: 'metric'>
    """

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def get_or_create(self) -> UserPreferences:
        """
        Return the preferences record, creating the default one if none exists.

        When more than one record is found (an older data file), the first
        is used and the others are left alone.
        """
        with self._store.transaction():
            existing = self._store.query(UserPreferences)
            if existing:
                if len(existing) > 1:
                    logger.warning(
                        "Found %d preference records, using %s", len(existing), existing[0].id
                    )
                return existing[0]

            preferences = UserPreferences()
            self._store.insert(preferences)
        logger.info(f"Created default preferences: {preferences.id}")
        return preferences

    def update(
        self,
        *,
        body_weight=_UNSET,
        preferred_unit_system=_UNSET,
    ) -> UserPreferences:
        """
        Update preference fields in place.

        Only the fields passed are changed; pass None to clear body weight.

        Args:
            body_weight: New body weight (Optional[float])
            preferred_unit_system: New unit system (Optional[UnitSystem])

        Returns:
            The updated preferences record
        """
        preferences = self.get_or_create()
        if body_weight is not _UNSET:
            preferences.body_weight = body_weight
        if preferred_unit_system is not _UNSET:
            preferences.preferred_unit_system = _coerce_unit_system(preferred_unit_system)
        self._store.save()
        return preferences


def _coerce_unit_system(value: Optional[object]) -> Optional[UnitSystem]:
    if value is None or isinstance(value, UnitSystem):
        return value
    return UnitSystem(value)
