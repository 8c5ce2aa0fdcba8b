"""
Router package for the workout tracker.

This package contains all API routers organized by domain:
- health: Health check endpoint
- dashboard: Workout count, profile section and preferences
- categories: Exercise category management
- exercises: Exercise manager and editor
- workouts: Saved workout list, deletion and set editing
- drafts: Workout composer sessions
"""

from api.routers.health import router as health_router
from api.routers.dashboard import router as dashboard_router
from api.routers.categories import router as categories_router
from api.routers.exercises import router as exercises_router
from api.routers.workouts import router as workouts_router
from api.routers.drafts import router as drafts_router

__all__ = [
    "health_router",
    "dashboard_router",
    "categories_router",
    "exercises_router",
    "workouts_router",
    "drafts_router",
]
