"""
Dashboard router.

This router contains endpoints for:
- GET /dashboard - Workout count and profile section
- GET /preferences - Current user preferences
- PUT /preferences - Update body weight and/or unit system
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.deps import get_dashboard, get_preferences
from application.use_cases import DashboardUseCase, PreferencesUseCase
from domain.models import UnitSystem, UserPreferences

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Dashboard"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class PreferencesResponse(BaseModel):
    id: str
    body_weight: Optional[float] = None
    display_body_weight: str = Field(description="Body weight with one decimal place")
    preferred_unit_system: UnitSystem
    body_weight_label: str


class UnitSystemOption(BaseModel):
    value: UnitSystem
    label: str


class DashboardResponse(BaseModel):
    workout_count: int
    workout_count_text: str
    body_weight_label: str
    unit_system_options: List[UnitSystemOption]
    preferences: PreferencesResponse


class UpdatePreferencesRequest(BaseModel):
    """Only the fields present in the body are changed; null clears body weight."""
    body_weight: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    preferred_unit_system: Optional[UnitSystem] = None


def _preferences_response(preferences: UserPreferences) -> PreferencesResponse:
    return PreferencesResponse(
        id=preferences.id,
        body_weight=preferences.body_weight,
        display_body_weight=f"{preferences.display_body_weight:.1f}",
        preferred_unit_system=preferences.unit_system,
        body_weight_label=preferences.body_weight_label,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard_endpoint(
    dashboard: DashboardUseCase = Depends(get_dashboard),
):
    """
    Dashboard summary.

    Returns:
        Workout count text ("You have N workouts" / "You have no workouts"),
        the body weight label and the unit system picker options
    """
    summary = dashboard.summary()
    return DashboardResponse(
        workout_count=summary.workout_count,
        workout_count_text=summary.workout_count_text,
        body_weight_label=summary.body_weight_label,
        unit_system_options=[
            UnitSystemOption(value=unit, label=label)
            for unit, label in summary.unit_system_options
        ],
        preferences=_preferences_response(summary.preferences),
    )


@router.get("/preferences", response_model=PreferencesResponse)
def get_preferences_endpoint(
    preferences: PreferencesUseCase = Depends(get_preferences),
):
    return _preferences_response(preferences.get_or_create())


@router.put("/preferences", response_model=PreferencesResponse)
def update_preferences_endpoint(
    request: UpdatePreferencesRequest,
    preferences: PreferencesUseCase = Depends(get_preferences),
):
    """
    Update preferences in place.

    Args:
        request: body_weight and/or preferred_unit_system
    """
    changes = request.model_dump(exclude_unset=True)
    updated = preferences.update(**changes)
    logger.info(f"Preferences updated: {sorted(changes)}")
    return _preferences_response(updated)
