"""
API package for the workout tracker.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: response models shared between routers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_compose_session_repo,
    get_dashboard,
    get_manage_categories,
    get_manage_exercises,
    get_manage_workouts,
    get_object_store,
    get_preferences,
    get_settings,
)

__all__ = [
    # Settings
    "get_settings",
    # Stores
    "get_object_store",
    "get_compose_session_repo",
    # Use cases
    "get_manage_categories",
    "get_manage_exercises",
    "get_manage_workouts",
    "get_preferences",
    "get_dashboard",
]
