"""
Object Store Interface (Port).

This module defines the abstract interface for record persistence.
Implementations may keep records in memory, in a local file, or elsewhere.
"""
from dataclasses import dataclass
from typing import Callable, ContextManager, List, Optional, Protocol, Type, TypeVar

from domain.models import Entity

E = TypeVar("E", bound=Entity)

CHANGE_INSERT = "insert"
CHANGE_DELETE = "delete"
CHANGE_UPDATE = "update"


@dataclass(frozen=True)
class StoreChange:
    """
    Notification delivered to store observers.

    Attributes:
        kind: "insert", "delete" or "update"
        entity_type: Class name of the affected record ("Workout", ...),
            None for a store-wide update
        entity_id: Id of the affected record, None for a store-wide update
    """

    kind: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None


StoreObserver = Callable[[StoreChange], None]


class ObjectStore(Protocol):
    """
    Abstract interface for the local object store.

    Records are retained by reference: `get` and `query` return the stored
    instances, so in-place field changes are visible immediately and are
    written through by `save()`. Every call is synchronous and either
    succeeds or raises; there is no partial result.
    """

    def insert(self, entity: Entity) -> None:
        """
        Add a record (with everything it owns) to the store.

        Re-inserting a record with an id already present replaces it.

        Args:
            entity: Record to store
        """
        ...

    def delete(self, entity: Entity) -> bool:
        """
        Remove a record.

        Args:
            entity: Record to remove

        Returns:
            True if removed, False if it was not stored
        """
        ...

    def get(self, entity_type: Type[E], entity_id: str) -> Optional[E]:
        """
        Get a single record by id.

        Args:
            entity_type: Record class
            entity_id: Record id

        Returns:
            The stored record or None if not found
        """
        ...

    def query(
        self,
        entity_type: Type[E],
        *,
        sort_key: Optional[str] = None,
        where: Optional[Callable[[E], bool]] = None,
    ) -> List[E]:
        """
        List records of one type.

        Args:
            entity_type: Record class
            sort_key: Attribute to sort by (text compares case-insensitively);
                insertion order when None
            where: Optional filter predicate

        Returns:
            Matching records
        """
        ...

    def save(self) -> None:
        """Write through in-place changes to retained records and notify observers."""
        ...

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """
        Register a change observer.

        Args:
            observer: Called synchronously after every insert, delete and save

        Returns:
            A callable that removes the observer
        """
        ...

    def transaction(self) -> ContextManager[None]:
        """
        Serialise a read-check-write sequence against other writers.

        Use cases that check a condition before inserting or deleting (name
        uniqueness, references) run both steps inside this context. The
        context is re-entrant, so single store calls may be made inside it.
        """
        ...
