"""
Identity-keyed selection sets.

Records are pydantic models and compare by value, so they are not used as
set elements directly. A Selection keys membership by the record's id and
keeps a side mapping back to the record itself.
"""

from typing import Dict, Generic, Iterable, Iterator, List, TypeVar, Union

from domain.models import Entity, Exercise, ExerciseCategory

E = TypeVar("E", bound=Entity)


class Selection(Generic[E]):
    """
    An insertion-ordered set of records, keyed by id.

    Examples:
        >>> selection = Selection()
        >>> selection.toggle(squat)
        True
        >>> squat in selection, squat.id in selection
        (True, True)
        >>> selection.toggle(squat)
        False
    """

    def __init__(self, items: Iterable[E] = ()) -> None:
        self._items: Dict[str, E] = {}
        for item in items:
            self.add(item)

    def add(self, item: E) -> None:
        self._items[item.id] = item

    def remove(self, item: Union[E, str]) -> None:
        """Remove a record (or id); absent members are ignored."""
        self._items.pop(self._key(item), None)

    def toggle(self, item: E) -> bool:
        """
        Flip membership of `item`.

        Returns:
            True if the item is selected after the call
        """
        if item.id in self._items:
            del self._items[item.id]
            return False
        self._items[item.id] = item
        return True

    def replace(self, items: Iterable[E]) -> None:
        """Make `items` the whole selection."""
        self._items = {}
        for item in items:
            self.add(item)

    def clear(self) -> None:
        self._items.clear()

    @property
    def ids(self) -> List[str]:
        return list(self._items)

    @property
    def items(self) -> List[E]:
        return list(self._items.values())

    def _key(self, item: Union[E, str]) -> str:
        return item if isinstance(item, str) else item.id

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._items
        if isinstance(item, Entity):
            return item.id in self._items
        return False

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ids!r})"


class ExerciseSelection(Selection[Exercise]):
    """Exercises picked in the composer's selection sheet."""


class CategorySelection(Selection[ExerciseCategory]):
    """Categories ticked in the exercise editor."""
