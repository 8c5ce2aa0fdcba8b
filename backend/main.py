"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings and an injected object store
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings and an in-memory store
    test_settings = Settings(environment="test", store_backend="memory", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
import math
from typing import Any, Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from application.ports import ObjectStore
from application.use_cases import PreferencesUseCase
from backend.settings import Settings, get_settings
from infrastructure.db import (
    InMemoryComposeSessionRepository,
    InMemoryObjectStore,
    StoreInitializationError,
    YamlFileObjectStore,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ObjectStore] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional object store. If not provided, one is built from
               `settings.store_backend`.

    Returns:
        Configured FastAPI application instance.

    Raises:
        StoreInitializationError: If the data file cannot be loaded
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    if store is None:
        store = _build_store(settings)

    # Exactly one preferences record exists once the app is up
    PreferencesUseCase(store).get_or_create()

    app = FastAPI(
        title="LiftLog API",
        description="Workout composition and tracking API",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.object_store = store
    app.state.compose_sessions = InMemoryComposeSessionRepository()

    _configure_cors(app, settings)
    _configure_exception_handlers(app)
    _include_routers(app)

    logger.info(f"App created (environment={settings.environment}, store={type(store).__name__})")
    return app


def _build_store(settings: Settings) -> ObjectStore:
    """Create the configured object store; fatal on load failure."""
    if settings.store_backend == "memory":
        return InMemoryObjectStore()
    try:
        return YamlFileObjectStore(settings.data_file)
    except StoreInitializationError as e:
        logger.critical(f"Cannot open object store: {e}")
        raise


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for liftlog")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinity, which strict JSON cannot encode, with their names."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 for invalid request bodies, echoing rejected inputs such as NaN as text."""
    logger.warning(f"Rejected request to {request.method} {request.url.path}")
    return JSONResponse(
        status_code=422,
        content={"detail": _json_safe(jsonable_encoder(exc.errors()))},
    )


def _configure_exception_handlers(app: FastAPI) -> None:
    """Register handlers that keep error responses valid JSON."""
    app.add_exception_handler(RequestValidationError, _request_validation_handler)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        categories_router,
        dashboard_router,
        drafts_router,
        exercises_router,
        health_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(dashboard_router)
    app.include_router(categories_router)
    app.include_router(exercises_router)
    app.include_router(workouts_router)
    app.include_router(drafts_router)
