"""
Fake Object Store for testing.

This module provides an in-memory implementation of ObjectStore that records
every insert, delete and save so tests can assert on store traffic.
"""
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Type, TypeVar

from application.ports import (
    CHANGE_DELETE,
    CHANGE_INSERT,
    CHANGE_UPDATE,
    StoreChange,
    StoreObserver,
)
from domain.models import Entity

E = TypeVar("E", bound=Entity)


class FakeObjectStore:
    """
    In-memory fake implementation of ObjectStore for testing.

    Usage:
        store = FakeObjectStore()
        store.seed([ExerciseCategory(name="Legs")])
        ...
        assert len(store.inserted) == 1
        assert store.save_count == 1
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._records: Dict[type, Dict[str, Entity]] = {}
        self._observers: List[StoreObserver] = []
        self.inserted: List[Entity] = []
        self.deleted: List[Entity] = []
        self.save_count = 0
        self.transaction_count = 0
        self._lock = threading.RLock()

    def reset(self) -> None:
        """Clear stored records and recorded calls."""
        self._records.clear()
        self.inserted.clear()
        self.deleted.clear()
        self.save_count = 0
        self.transaction_count = 0

    def seed(self, entities: Iterable[Entity]) -> None:
        """Store records without recording them as inserts."""
        for entity in entities:
            self._records.setdefault(type(entity), {})[entity.id] = entity

    def get_all(self, entity_type: Type[E]) -> List[E]:
        """All stored records of a type (test helper)."""
        return list(self._records.get(entity_type, {}).values())

    # =========================================================================
    # ObjectStore Protocol Methods
    # =========================================================================

    def insert(self, entity: Entity) -> None:
        self._records.setdefault(type(entity), {})[entity.id] = entity
        self.inserted.append(entity)
        self._notify(StoreChange(CHANGE_INSERT, type(entity).__name__, entity.id))

    def delete(self, entity: Entity) -> bool:
        bucket = self._records.get(type(entity), {})
        if bucket.pop(entity.id, None) is None:
            return False
        self.deleted.append(entity)
        self._notify(StoreChange(CHANGE_DELETE, type(entity).__name__, entity.id))
        return True

    def get(self, entity_type: Type[E], entity_id: str) -> Optional[E]:
        return self._records.get(entity_type, {}).get(entity_id)

    def query(
        self,
        entity_type: Type[E],
        *,
        sort_key: Optional[str] = None,
        where: Optional[Callable[[E], bool]] = None,
    ) -> List[E]:
        results = self.get_all(entity_type)
        if where is not None:
            results = [r for r in results if where(r)]
        if sort_key is not None:
            results.sort(key=lambda r: str(getattr(r, sort_key)).casefold())
        return results

    def save(self) -> None:
        self.save_count += 1
        self._notify(StoreChange(CHANGE_UPDATE))

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self.transaction_count += 1
        with self._lock:
            yield

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        self._observers.append(observer)
        return lambda: self._observers.remove(observer) if observer in self._observers else None

    def _notify(self, change: StoreChange) -> None:
        for observer in list(self._observers):
            observer(change)
