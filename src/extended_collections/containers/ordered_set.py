"""An insertion-ordered set with functional helpers and set algebra."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, MutableSet, Set
from itertools import islice
from typing import Any, Callable, Optional, TypeVar

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

from ..error import EmptyReductionError
from ..pyutils import Absent
from .hooks import NormalizationHooks
from .weak_value_set import check_set_hooks, is_weak_set

__all__ = ["OrderedSet", "is_set"]

T = TypeVar("T")
U = TypeVar("U")


def is_set(value: Any) -> TypeGuard[Set]:
    """Check if value is a set, but not one that holds its elements weakly."""
    return isinstance(value, Set) and not is_weak_set(value)


class OrderedSet(MutableSet[T]):
    """A set like object that keeps the insertion order of its elements.

    An optional ``coerce_value`` hook canonicalizes every value before it is looked
    up, added or removed.

    Callbacks passed to the transforming methods receive the value and the set
    itself. Lookups that find nothing return ``Absent``.
    """

    _map: dict[T, None]
    _hooks: NormalizationHooks

    is_set = staticmethod(is_set)

    def __init__(
        self,
        values: Optional[Iterable[T]] = None,
        hooks: Optional[NormalizationHooks] = None,
    ) -> None:
        super().__init__()
        self._map = {}
        self._hooks = check_set_hooks(hooks)
        if values is not None:
            self.update(values)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[Any],
        map_fn: Optional[Callable[[Any, int], T]] = None,
    ) -> OrderedSet[T]:
        """Create a set from an iterable, optionally mapping every item first.

        The mapping function gets every item of the iterable and its index.
        """
        if map_fn is None:
            return cls(iterable)
        return cls(map_fn(item, index) for index, item in enumerate(iterable))

    @classmethod
    def of(cls, *values: T) -> OrderedSet[T]:
        """Create a set from the given values."""
        return cls(values)

    @property
    def hooks(self) -> NormalizationHooks:
        return self._hooks

    @property
    def size(self) -> int:
        return len(self._map)

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._map)!r})"

    def __copy__(self) -> OrderedSet[T]:
        return self.copy()

    def __or__(self, other: Any) -> Any:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Any) -> Any:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: Any) -> Any:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self.symmetric_difference(other)

    def _from_iterable(self, values: Iterable[T]) -> OrderedSet[T]:
        set_ = self._derive()
        set_.update(values)
        return set_

    def _derive(self) -> OrderedSet[T]:
        """Create an empty set of the same kind with the same hooks."""
        return self.__class__(hooks=self._hooks)

    def copy(self) -> OrderedSet[T]:
        """Return a shallow copy of the set."""
        set_ = self._derive()
        set_._map.update(self._map)
        return set_

    def add(self, value: T) -> OrderedSet[T]:  # type: ignore
        """Add the given value to the set."""
        self._map[self._hooks.value(value)] = None
        return self

    def add_all(self, *values: T) -> OrderedSet[T]:
        """Add all given values to the set."""
        for value in values:
            self.add(value)
        return self

    def update(self, values: Optional[Iterable[T]] = None) -> None:
        """Update the set with the given values."""
        if values is not None:
            for value in values:
                self.add(value)

    def has(self, value: Any) -> bool:
        """Check whether the given value is in the set."""
        return self._hooks.value(value) in self._map

    def discard(self, value: T) -> None:
        """Remove the given value from the set if it exists."""
        self._map.pop(self._hooks.value(value), None)

    def delete(self, value: T) -> bool:
        """Remove the given value and report whether it was in the set."""
        value = self._hooks.value(value)
        if value not in self._map:
            return False
        del self._map[value]
        return True

    def delete_all(self, *values: T) -> bool:
        """Remove all given values or all values if none is given.

        Every given value is deleted even if some of them are missing. Return True
        only if every given value was in the set.
        """
        if not values:
            self._map.clear()
            return True
        deleted = [self.delete(value) for value in values]
        return all(deleted)

    def clear(self) -> None:
        self._map.clear()

    def for_each(self, callback: Callable[[T, OrderedSet[T]], Any]) -> None:
        """Call the function for every value of the set."""
        for value in self._map:
            callback(value, self)

    def map(self, callback: Callable[[T, OrderedSet[T]], U]) -> OrderedSet[U]:
        """Create a new set with the transformed values.

        Values that are transformed to the same value are merged.
        """
        set_: OrderedSet[U] = OrderedSet()
        for value in self._map:
            set_.add(callback(value, self))
        return set_

    def filter(self, predicate: Callable[[T, OrderedSet[T]], Any]) -> OrderedSet[T]:
        """Create a new set with the values that satisfy the predicate."""
        set_ = self._derive()
        for value in self._map:
            if predicate(value, self):
                set_._map[value] = None
        return set_

    def filter_out(
        self, predicate: Callable[[T, OrderedSet[T]], Any]
    ) -> OrderedSet[T]:
        """Create a new set with the values that do not satisfy the predicate."""
        set_ = self._derive()
        for value in self._map:
            if not predicate(value, self):
                set_._map[value] = None
        return set_

    def partition(
        self, predicate: Callable[[T, OrderedSet[T]], Any]
    ) -> tuple[OrderedSet[T], OrderedSet[T]]:
        """Split the set into the values that satisfy the predicate and the rest."""
        passed, failed = self._derive(), self._derive()
        for value in self._map:
            (passed if predicate(value, self) else failed)._map[value] = None
        return passed, failed

    def find(self, predicate: Callable[[T, OrderedSet[T]], Any]) -> Any:
        """Return the first value satisfying the predicate or ``Absent``."""
        for value in self._map:
            if predicate(value, self):
                return value
        return Absent

    def every(self, predicate: Callable[[T, OrderedSet[T]], Any]) -> bool:
        """Check whether all values satisfy the predicate."""
        return all(predicate(value, self) for value in self._map)

    def some(self, predicate: Callable[[T, OrderedSet[T]], Any]) -> bool:
        """Check whether any value satisfies the predicate."""
        return any(predicate(value, self) for value in self._map)

    def reduce(
        self,
        callback: Callable[[Any, T, OrderedSet[T]], Any],
        initial: Any = Absent,
    ) -> Any:
        """Fold the values from left to right.

        The callback gets the accumulator, the value and the set. Without an initial
        value, the first value is used as initial value.
        """
        values = iter(self._map)
        if initial is Absent:
            try:
                accumulator = next(values)
            except StopIteration:
                raise EmptyReductionError("set") from None
        else:
            accumulator = initial
        for value in values:
            accumulator = callback(accumulator, value, self)
        return accumulator

    def at(self, index: int) -> Any:
        """Return the value at the given position or ``Absent``.

        Negative indices count from the end.
        """
        index = int(index)
        size = len(self._map)
        if index < 0:
            index += size
        if not 0 <= index < size:
            return Absent
        return next(islice(self._map, index, None))

    @property
    def first(self) -> Any:
        """The first value or ``Absent``"""
        return next(iter(self._map), Absent)

    @property
    def last(self) -> Any:
        """The last value or ``Absent``"""
        return next(reversed(self._map), Absent)

    def sample_one(self) -> Any:
        """Return a random value or ``Absent`` if the set is empty."""
        values = self.to_list()
        return random.choice(values) if values else Absent

    def sample_many(self, count: int) -> list[T]:
        """Return the given number of values sampled with replacement."""
        if count < 0:
            raise ValueError(f"Sample count must not be negative, got {count}.")
        values = self.to_list()
        return random.choices(values, k=count) if values else []

    def to_list(self) -> list[T]:
        """Return a list of the values."""
        return list(self._map)

    def join(self, separator: str = ",") -> str:
        """Join the string representations of the values."""
        return separator.join(map(str, self._map))

    def union(self, iterable: Iterable[T]) -> OrderedSet[T]:
        """Create a new set with the values of this set and the given ones."""
        set_ = self.copy()
        set_.update(iterable)
        return set_

    def intersection(self, iterable: Iterable[Any]) -> OrderedSet[T]:
        """Create a new set with the given values that are also in this set.

        The values are in the order of the given iterable.
        """
        set_ = self._derive()
        for value in iterable:
            if self.has(value):
                set_.add(value)
        return set_

    def difference(self, iterable: Iterable[Any]) -> OrderedSet[T]:
        """Create a new set with the values of this set that are not given."""
        set_ = self.copy()
        for value in iterable:
            set_.discard(value)
        return set_

    def symmetric_difference(self, iterable: Iterable[T]) -> OrderedSet[T]:
        """Create a new set with the values that are in exactly one of both sets."""
        set_ = self.copy()
        for value in self._from_iterable(iterable):
            if not set_.delete(value):
                set_.add(value)
        return set_

    def is_subset_of(self, iterable: Iterable[Any]) -> bool:
        """Check whether every value of this set is also given."""
        other = self._from_iterable(iterable)
        return all(value in other._map for value in self._map)

    def is_superset_of(self, iterable: Iterable[Any]) -> bool:
        """Check whether every given value is also in this set."""
        return all(self.has(value) for value in iterable)

    def is_disjoint_from(self, iterable: Iterable[Any]) -> bool:
        """Check whether none of the given values is in this set."""
        return not any(self.has(value) for value in iterable)
