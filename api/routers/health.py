"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_object_store, get_settings
from application.ports import ObjectStore
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(
    settings: Settings = Depends(get_settings),
    store: ObjectStore = Depends(get_object_store),
):
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator, environment and store backend
    """
    return {
        "status": "ok",
        "environment": settings.environment,
        "store": type(store).__name__,
    }
