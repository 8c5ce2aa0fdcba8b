"""
FastAPI Dependency Providers for the workout tracker.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache)
- The object store and compose session repository live on app.state,
  created once by create_app()
- Use case providers create new instances per-request

Usage in routers:
    from api.deps import get_manage_categories
    from application.use_cases import ManageCategoriesUseCase

    @router.get("/categories")
    def list_categories(
        categories: ManageCategoriesUseCase = Depends(get_manage_categories),
    ):
        return categories.list()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_object_store] = lambda: FakeObjectStore()
"""

from fastapi import Depends, Request

# Protocol types (interfaces)
from application.ports import ComposeSessionRepository, ObjectStore

# Use cases
from application.use_cases import (
    DashboardUseCase,
    ManageCategoriesUseCase,
    ManageExercisesUseCase,
    ManageWorkoutsUseCase,
    PreferencesUseCase,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Store Providers
# =============================================================================


def get_object_store(request: Request) -> ObjectStore:
    """
    Get the application's ObjectStore.

    The store is created once in create_app() and shared by all requests.
    The return type is the Protocol to enable easy faking.
    """
    return request.app.state.object_store


def get_compose_session_repo(request: Request) -> ComposeSessionRepository:
    """Get the repository of open workout composer sessions."""
    return request.app.state.compose_sessions


# =============================================================================
# Use Case Providers
# =============================================================================


def get_manage_categories(
    store: ObjectStore = Depends(get_object_store),
) -> ManageCategoriesUseCase:
    return ManageCategoriesUseCase(store)


def get_manage_exercises(
    store: ObjectStore = Depends(get_object_store),
) -> ManageExercisesUseCase:
    return ManageExercisesUseCase(store)


def get_manage_workouts(
    store: ObjectStore = Depends(get_object_store),
) -> ManageWorkoutsUseCase:
    return ManageWorkoutsUseCase(store)


def get_preferences(
    store: ObjectStore = Depends(get_object_store),
) -> PreferencesUseCase:
    return PreferencesUseCase(store)


def get_dashboard(
    store: ObjectStore = Depends(get_object_store),
) -> DashboardUseCase:
    return DashboardUseCase(store)
