"""
Chainable in-memory collections for weather records.

Subclasses add domain filters (active advisories, critical stations, ...) on
top of the generic filtering, grouping and set operations defined here.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering records in memory.

    Every filtering method returns a new collection of the same class, so
    domain filters can be chained freely.

    Examples:
        # Predicate filtering
        pireps.filter(lambda p: p.altitude > 10000).all()

        # Attribute matching
        sigmets.where(hazard=HazardType.ICE).first()

        # Grouping
        stations.group_by(lambda s: s.operational_status.value)
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Args:
            items: List or iterable of records to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def _new_collection(self, items: List[T]) -> 'QueryableCollection[T]':
        """Create a collection of the same class."""
        return self.__class__(items)

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter records using a predicate function.

        Args:
            predicate: Function returning True for records to keep

        Returns:
            New collection with the matching records
        """
        return self._new_collection([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter records by attribute equality. All conditions must match.

        Examples:
            pireps.where(icao='KJFK', turbulence=TurbulenceIntensity.SEVERE)
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first record or None if the collection is empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[T]:
        """Return the last record or None if the collection is empty."""
        return self._items[-1] if self._items else None

    def all(self) -> List[T]:
        """Return the records as a list."""
        return self._items

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if at least one record satisfies the predicate."""
        return any(predicate(item) for item in self._items)

    def group_by(self, key_func: Callable[[T], str]) -> Dict[str, List[T]]:
        """
        Group records by a key.

        Args:
            key_func: Function returning the grouping key of a record

        Returns:
            Dict mapping each key to the records sharing it, in original order
        """
        result: Dict[str, List[T]] = {}
        for item in self._items:
            result.setdefault(key_func(item), []).append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """Return a new collection sorted by key_func."""
        return self._new_collection(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        """Return a new collection with the first n records."""
        return self._new_collection(self._items[:n])

    # Make the collection behave like a list
    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._new_collection(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        class_name = self.__class__.__name__
        count = len(self._items)
        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'id'):
                preview_items.append(repr(item.id))
            elif hasattr(item, 'icao'):
                preview_items.append(repr(item.icao))
            else:
                preview_items.append(f"<{type(item).__name__}>")
        if count > 3:
            preview_items.append('...')

        return f"{class_name}([{', '.join(preview_items)}], count={count})"

    # Set operations, by identity

    def __or__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """Union (|): records from both collections, without duplicates."""
        seen = set()
        result = []
        for item in self._items + other._items:
            if id(item) not in seen:
                seen.add(id(item))
                result.append(item)
        return self._new_collection(result)

    def __and__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """Intersection (&): records present in both collections."""
        other_ids = {id(item) for item in other._items}
        return self._new_collection([item for item in self._items if id(item) in other_ids])

    def __sub__(self, other: 'QueryableCollection[T]') -> 'QueryableCollection[T]':
        """Difference (-): records of this collection absent from other."""
        other_ids = {id(item) for item in other._items}
        return self._new_collection([item for item in self._items if id(item) not in other_ids])
