"""
Infrastructure Database Layer.

This package provides the object store implementations of the interfaces
defined in application.ports. They can be injected into use cases and
routers for clean separation of concerns and testability.

Usage:
    from infrastructure.db import YamlFileObjectStore, InMemoryComposeSessionRepository

    store = YamlFileObjectStore("data/liftlog.yaml")
    sessions = InMemoryComposeSessionRepository()
"""

from infrastructure.db.memory_store import InMemoryObjectStore
from infrastructure.db.yaml_store import (
    FILE_FORMAT_VERSION,
    StoreInitializationError,
    YamlFileObjectStore,
)
from infrastructure.db.compose_session_repository import InMemoryComposeSessionRepository

__all__ = [
    # Object stores
    "InMemoryObjectStore",
    "YamlFileObjectStore",
    "StoreInitializationError",
    "FILE_FORMAT_VERSION",

    # Composer sessions
    "InMemoryComposeSessionRepository",
]
