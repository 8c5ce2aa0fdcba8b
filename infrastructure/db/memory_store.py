"""
In-Memory Object Store Implementation.

This module implements the ObjectStore protocol with a per-type identity map.
Records are kept by reference, so `get` and `query` hand out the stored
instances and in-place edits are visible immediately.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Type, TypeVar

from application.ports.object_store import (
    CHANGE_DELETE,
    CHANGE_INSERT,
    CHANGE_UPDATE,
    StoreChange,
    StoreObserver,
)
from domain.models import Entity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


def _sort_value(entity: Entity, sort_key: str):
    value = getattr(entity, sort_key)
    if isinstance(value, str):
        return value.casefold()
    return value


class InMemoryObjectStore:
    """
    Object store that lives for the lifetime of the process.

    Used for tests and for the `memory` store backend.
    """

    def __init__(self) -> None:
        self._records: Dict[type, Dict[str, Entity]] = {}
        self._observers: List[StoreObserver] = []
        self._lock = threading.RLock()

    # =========================================================================
    # Mutations
    # =========================================================================

    def insert(self, entity: Entity) -> None:
        with self._lock:
            bucket = self._records.setdefault(type(entity), {})
            previous = dict(bucket)
            bucket[entity.id] = entity
            self._persist_or_restore(bucket, previous)
        logger.debug(f"Inserted {type(entity).__name__} {entity.id}")
        self._notify(StoreChange(CHANGE_INSERT, type(entity).__name__, entity.id))

    def delete(self, entity: Entity) -> bool:
        with self._lock:
            bucket = self._records.get(type(entity), {})
            if entity.id not in bucket:
                return False
            previous = dict(bucket)
            del bucket[entity.id]
            self._persist_or_restore(bucket, previous)
        logger.debug(f"Deleted {type(entity).__name__} {entity.id}")
        self._notify(StoreChange(CHANGE_DELETE, type(entity).__name__, entity.id))
        return True

    def save(self) -> None:
        with self._lock:
            self._persist()
        self._notify(StoreChange(CHANGE_UPDATE))

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock across a read-check-write sequence."""
        with self._lock:
            yield

    # =========================================================================
    # Queries
    # =========================================================================

    def get(self, entity_type: Type[E], entity_id: str) -> Optional[E]:
        with self._lock:
            return self._records.get(entity_type, {}).get(entity_id)

    def query(
        self,
        entity_type: Type[E],
        *,
        sort_key: Optional[str] = None,
        where: Optional[Callable[[E], bool]] = None,
    ) -> List[E]:
        with self._lock:
            results = list(self._records.get(entity_type, {}).values())
        if where is not None:
            results = [r for r in results if where(r)]
        if sort_key is not None:
            results.sort(key=lambda r: _sort_value(r, sort_key))
        return results

    # =========================================================================
    # Observers
    # =========================================================================

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, change: StoreChange) -> None:
        for observer in list(self._observers):
            observer(change)

    def _persist(self) -> None:
        """Hook for file-backed subclasses; called with the lock held."""

    def _persist_or_restore(self, bucket: Dict[str, Entity], previous: Dict[str, Entity]) -> None:
        """Persist a bucket change; put the bucket back as it was if the write fails."""
        try:
            self._persist()
        except Exception:
            bucket.clear()
            bucket.update(previous)
            raise
