"""
Infrastructure Layer for the workout tracker.

This package contains concrete implementations of the application ports:
- db/: in-memory and YAML-file object stores, compose session storage
"""

from infrastructure.db import (
    InMemoryComposeSessionRepository,
    InMemoryObjectStore,
    StoreInitializationError,
    YamlFileObjectStore,
)

__all__ = [
    "InMemoryObjectStore",
    "YamlFileObjectStore",
    "StoreInitializationError",
    "InMemoryComposeSessionRepository",
]
