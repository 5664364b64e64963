"""An insertion-ordered map with functional helpers."""

from __future__ import annotations

import random
from collections.abc import (
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from functools import cmp_to_key, partial
from itertools import islice
from typing import Any, Callable, Optional, Tuple, TypeVar, Union

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

from ..error import EmptyReductionError
from ..pyutils import (
    Absent,
    default_compare,
    inspect,
    is_iterable,
    ref_key,
    resolve_value,
)
from ..pyutils.resolve_value import ValueResolver
from .emplace_handler import EmplaceHandler
from .hooks import NormalizationHooks, no_hooks
from .weak_key_map import is_weak_map

__all__ = ["OrderedMap", "is_map"]

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")
U = TypeVar("U")

Entries = Union[Iterable[Tuple[K, V]], Mapping[K, V]]


def is_map(value: Any) -> TypeGuard[Mapping]:
    """Check if value is a map, but not one that holds its keys weakly."""
    return isinstance(value, Mapping) and not is_weak_map(value)


def new_group(item: T, *_args: Any) -> list[T]:
    return [item]


def add_to_group(item: T, group: list[T], *_args: Any) -> list[T]:
    group.append(item)
    return group


def first_entry(entry: tuple[K, V], *_args: Any) -> tuple[K, V]:
    return entry


class OrderedMap(MutableMapping[K, V]):
    """A dictionary like object with a richer, JavaScript inspired interface.

    The map keeps the insertion order of its keys. Overwriting the value of a key
    does not change its position, but deleting and adding it again moves it to the
    end.

    Optional normalization hooks canonicalize keys before every lookup and keys and
    values before they are stored.

    Callbacks passed to the transforming methods receive the value, the key and the
    map itself, in that order. Lookups that find nothing return ``Absent``.
    """

    _map: dict[K, V]
    _hooks: NormalizationHooks

    is_map = staticmethod(is_map)

    def __init__(
        self,
        entries: Optional[Entries] = None,
        hooks: Optional[NormalizationHooks] = None,
    ) -> None:
        super().__init__()
        self._map = {}
        self._hooks = hooks or no_hooks
        if entries is not None:
            self.merge(entries)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[Any],
        map_fn: Optional[Callable[[Any, int], tuple[K, V]]] = None,
    ) -> OrderedMap[K, V]:
        """Create a map from an iterable of pairs or of items mapped to pairs.

        The mapping function gets every item of the iterable and its index.
        """
        if map_fn is None:
            return cls(iterable)
        return cls(map_fn(item, index) for index, item in enumerate(iterable))

    @classmethod
    def of(cls, *entries: tuple[K, V]) -> OrderedMap[K, V]:
        """Create a map from the given pairs."""
        return cls(entries)

    @classmethod
    def group_by(
        cls, iterable: Iterable[T], key_fn: Callable[[T], K]
    ) -> OrderedMap[K, list[T]]:
        """Group items by a key derived via a function.

        Keys are in the order in which they were first derived, and the items of
        every group are in the order of the iterable.
        """
        groups: OrderedMap[K, list[T]] = cls()
        for item in iterable:
            groups.emplace(
                key_fn(item),
                insert=partial(new_group, item),
                update=partial(add_to_group, item),
            )
        return groups

    @classmethod
    def key_by(
        cls, iterable: Iterable[T], key_fn: Callable[[T], K]
    ) -> OrderedMap[K, T]:
        """Map keys derived via a function to the last item producing that key."""
        keyed: OrderedMap[K, T] = cls()
        for item in iterable:
            keyed.set(key_fn(item), item)
        return keyed

    @property
    def hooks(self) -> NormalizationHooks:
        return self._hooks

    @property
    def size(self) -> int:
        return len(self._map)

    def __getitem__(self, key: K) -> V:
        return self._map[self._hooks.key(key)]

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        del self._map[self._hooks.key(key)]

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._map.items())!r})"

    def __copy__(self) -> OrderedMap[K, V]:
        return self.copy()

    def _derive(self) -> OrderedMap[K, V]:
        """Create an empty map of the same kind with the same hooks."""
        return self.__class__(hooks=self._hooks)

    def copy(self) -> OrderedMap[K, V]:
        """Return a shallow copy of the map."""
        map_ = self._derive()
        map_._map.update(self._map)
        return map_

    def keys(self) -> KeysView[K]:
        return self._map.keys()

    def values(self) -> ValuesView[V]:
        return self._map.values()

    def items(self) -> ItemsView[K, V]:
        return self._map.items()

    def clear(self) -> None:
        self._map.clear()

    def get(self, key: K, default: Any = Absent) -> Any:
        """Get the value for the given key or the default value."""
        return self._map.get(self._hooks.key(key), default)

    def has(self, key: Any) -> bool:
        """Check whether there is an entry for the given key."""
        return self._hooks.key(key) in self._map

    def set(self, key: K, value: V) -> OrderedMap[K, V]:
        """Insert or overwrite the value for the given key.

        Both hooks are applied before the map is touched, so a failing hook leaves
        the map unchanged.
        """
        hooks = self._hooks
        key, value = hooks.key(key), hooks.value(value)
        self._map[key] = value
        return self

    def delete(self, key: K) -> bool:
        """Remove the entry for the given key and report whether there was one."""
        key = self._hooks.key(key)
        if key not in self._map:
            return False
        del self._map[key]
        return True

    def delete_all(self, *keys: K) -> bool:
        """Remove the entries for all given keys or for all keys if none is given.

        Every given key is deleted even if some of them are missing. Return True
        only if there was an entry for every given key.
        """
        if not keys:
            self._map.clear()
            return True
        deleted = [self.delete(key) for key in keys]
        return all(deleted)

    def emplace(
        self,
        key: K,
        insert: Optional[Callable[[K, OrderedMap[K, V]], V]] = None,
        update: Optional[Callable[[V, K, OrderedMap[K, V]], V]] = None,
    ) -> V:
        """Insert a value for a missing key or update the value of a present key.

        If the key is present and an ``update`` function is given, the stored value
        becomes ``update(value, key, map)``, otherwise it becomes
        ``insert(key, map)``. The functions get the normalized key. Return the value
        that has been stored.
        """
        handler = EmplaceHandler(insert, update)
        handler.check(key)
        hooks = self._hooks
        key = hooks.key(key)
        present = key in self._map
        current = self._map[key] if present else Absent
        value = hooks.value(handler.resolve(present, current, key, self))
        self._map[key] = value
        return value

    def merge(self, *iterables: Entries) -> OrderedMap[K, V]:
        """Set all pairs of the given iterables or mappings, in order."""
        for entries in iterables:
            if isinstance(entries, Mapping):
                entries = entries.items()
            elif not is_iterable(entries):
                raise TypeError(
                    "Expected a mapping or an iterable of pairs,"
                    f" but got: {inspect(entries)}."
                )
            for key, value in entries:
                self.set(key, value)
        return self

    def for_each(self, callback: Callable[[V, K, OrderedMap[K, V]], Any]) -> None:
        """Call the function for every entry of the map."""
        for key, value in self._map.items():
            callback(value, key, self)

    def map(self, callback: Callable[[V, K, OrderedMap[K, V]], U]) -> OrderedMap[K, U]:
        """Create a new map with the same keys and transformed values."""
        map_: OrderedMap[K, U] = OrderedMap()
        for key, value in self._map.items():
            map_.set(key, callback(value, key, self))
        return map_

    def map_keys(
        self, callback: Callable[[V, K, OrderedMap[K, V]], U]
    ) -> OrderedMap[U, V]:
        """Create a new map with transformed keys and the same values.

        If several keys are transformed to the same key, the last entry wins.
        """
        map_: OrderedMap[U, V] = OrderedMap()
        for key, value in self._map.items():
            map_.set(callback(value, key, self), value)
        return map_

    def filter(
        self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]
    ) -> OrderedMap[K, V]:
        """Create a new map with the entries that satisfy the predicate."""
        map_ = self._derive()
        for key, value in self._map.items():
            if predicate(value, key, self):
                map_._map[key] = value
        return map_

    def filter_out(
        self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]
    ) -> OrderedMap[K, V]:
        """Create a new map with the entries that do not satisfy the predicate."""
        map_ = self._derive()
        for key, value in self._map.items():
            if not predicate(value, key, self):
                map_._map[key] = value
        return map_

    def partition(
        self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]
    ) -> tuple[OrderedMap[K, V], OrderedMap[K, V]]:
        """Split the map into the entries that satisfy the predicate and the rest."""
        passed, failed = self._derive(), self._derive()
        for key, value in self._map.items():
            (passed if predicate(value, key, self) else failed)._map[key] = value
        return passed, failed

    def find(self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]) -> Any:
        """Return the first value satisfying the predicate or ``Absent``."""
        for key, value in self._map.items():
            if predicate(value, key, self):
                return value
        return Absent

    def find_key(self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]) -> Any:
        """Return the first key whose entry satisfies the predicate or ``Absent``."""
        for key, value in self._map.items():
            if predicate(value, key, self):
                return key
        return Absent

    def includes(self, search_value: Any) -> bool:
        """Check whether the map contains the given value."""
        return any(
            value is search_value or value == search_value
            for value in self._map.values()
        )

    def key_of(self, search_value: Any) -> Any:
        """Return the first key with the given value or ``Absent``."""
        for key, value in self._map.items():
            if value is search_value or value == search_value:
                return key
        return Absent

    def every(self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]) -> bool:
        """Check whether all entries satisfy the predicate."""
        return all(predicate(value, key, self) for key, value in self._map.items())

    def some(self, predicate: Callable[[V, K, OrderedMap[K, V]], Any]) -> bool:
        """Check whether any entry satisfies the predicate."""
        return any(predicate(value, key, self) for key, value in self._map.items())

    def reduce(
        self,
        callback: Callable[[Any, V, K, OrderedMap[K, V]], Any],
        initial: Any = Absent,
    ) -> Any:
        """Fold the entries from left to right.

        The callback gets the accumulator, the value, the key and the map. Without an
        initial value, the first value is used as initial value and the callback is
        only called for the remaining entries.
        """
        entries = iter(self._map.items())
        if initial is Absent:
            try:
                _key, accumulator = next(entries)
            except StopIteration:
                raise EmptyReductionError("map") from None
        else:
            accumulator = initial
        for key, value in entries:
            accumulator = callback(accumulator, value, key, self)
        return accumulator

    def sort(
        self, comparator: Optional[Callable[[V, V, K, K], int]] = None
    ) -> OrderedMap[K, V]:
        """Sort the entries in place.

        The comparator gets two values and their keys and returns a negative number,
        zero or a positive number like ``cmp()`` did in Python 2. By default, the
        entries are sorted by value in ascending order. The sort is stable.
        """
        compare = comparator or default_compare
        entries = sorted(
            self._map.items(),
            key=cmp_to_key(lambda a, b: compare(a[1], b[1], a[0], b[0])),
        )
        self._map.clear()
        self._map.update(entries)
        return self

    def unique_by(self, resolver: ValueResolver = None) -> OrderedMap[K, V]:
        """Create a new map with only the first entry for every resolved value.

        The resolver can be a function of the value or the name of a field of the
        value. Without resolver, entries with equal values are considered duplicates.
        Values that cannot be hashed are compared by identity.
        """
        resolve = resolve_value(resolver)
        first_entries: OrderedMap[Any, tuple[K, V]] = OrderedMap(
            hooks=NormalizationHooks(coerce_key=ref_key)
        )
        for key, value in self._map.items():
            first_entries.emplace(
                resolve(value), insert=partial(first_entry, (key, value))
            )
        map_ = self._derive()
        map_._map.update(first_entries.values())
        return map_

    def at(self, index: int) -> Any:
        """Return the pair at the given position or ``Absent``.

        Negative indices count from the end.
        """
        index = int(index)
        size = len(self._map)
        if index < 0:
            index += size
        if not 0 <= index < size:
            return Absent
        return next(islice(self._map.items(), index, None))

    @property
    def first(self) -> Any:
        """The first value or ``Absent``"""
        return next(iter(self._map.values()), Absent)

    @property
    def first_key(self) -> Any:
        """The first key or ``Absent``"""
        return next(iter(self._map), Absent)

    @property
    def last(self) -> Any:
        """The last value or ``Absent``"""
        return next(reversed(self._map.values()), Absent)

    @property
    def last_key(self) -> Any:
        """The last key or ``Absent``"""
        return next(reversed(self._map), Absent)

    def sample_one(self) -> Any:
        """Return a random value or ``Absent`` if the map is empty."""
        values = self.to_list()
        return random.choice(values) if values else Absent

    def sample_many(self, count: int) -> list[V]:
        """Return the given number of values sampled with replacement."""
        if count < 0:
            raise ValueError(f"Sample count must not be negative, got {count}.")
        values = self.to_list()
        return random.choices(values, k=count) if values else []

    def sample_key(self) -> Any:
        """Return a random key or ``Absent`` if the map is empty."""
        keys = self.to_key_list()
        return random.choice(keys) if keys else Absent

    def sample_keys(self, count: int) -> list[K]:
        """Return the given number of keys sampled with replacement."""
        if count < 0:
            raise ValueError(f"Sample count must not be negative, got {count}.")
        keys = self.to_key_list()
        return random.choices(keys, k=count) if keys else []

    def to_list(self) -> list[V]:
        """Return a list of the values."""
        return list(self._map.values())

    def to_key_list(self) -> list[K]:
        """Return a list of the keys."""
        return list(self._map)
