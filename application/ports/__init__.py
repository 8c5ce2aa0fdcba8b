"""
Ports for the workout tracker.

This package defines abstract interfaces that decouple use cases from
infrastructure. Implementations are provided in infrastructure/.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ObjectStore

    class CategoryService:
        def __init__(self, store: ObjectStore):
            self._store = store

        def names(self):
            return [c.name for c in self._store.query(ExerciseCategory)]
"""

# Record persistence
from application.ports.object_store import (
    CHANGE_DELETE,
    CHANGE_INSERT,
    CHANGE_UPDATE,
    ObjectStore,
    StoreChange,
    StoreObserver,
)

# Composer sessions
from application.ports.compose_session_repository import ComposeSessionRepository

__all__ = [
    # Store
    "ObjectStore",
    "StoreChange",
    "StoreObserver",
    "CHANGE_INSERT",
    "CHANGE_DELETE",
    "CHANGE_UPDATE",
    # Sessions
    "ComposeSessionRepository",
]
