"""A map that holds its keys weakly."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Generic, Optional, TypeVar
from weakref import WeakKeyDictionary, WeakValueDictionary

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

from ..pyutils import Absent
from .emplace_handler import EmplaceHandler
from .hooks import NormalizationHooks, no_hooks

__all__ = ["WeakKeyMap", "is_weak_map"]

K = TypeVar("K")
V = TypeVar("V")


def is_weak_map(value: Any) -> TypeGuard[Any]:
    """Check if value is a map with weakly referenced keys or values."""
    return isinstance(value, (WeakKeyMap, WeakKeyDictionary, WeakValueDictionary))


class WeakKeyMap(Generic[K, V]):
    """A map with weakly referenced keys.

    An entry disappears once nothing else references its key. Since entries can
    vanish at any time, the map cannot be iterated and has no size.

    Keys must support weak references. Objects like ints, strings, tuples, lists and
    dicts do not. They are never found by lookups, but storing a value for them
    raises a ``TypeError``.
    """

    _map: WeakKeyDictionary
    _hooks: NormalizationHooks

    is_weak_map = staticmethod(is_weak_map)

    # entries can vanish at any time, so no sequence fallback for iter()
    __iter__ = None

    def __init__(
        self,
        entries: Iterable[tuple[K, V]] | Mapping[K, V] | None = None,
        hooks: Optional[NormalizationHooks] = None,
    ) -> None:
        self._map = WeakKeyDictionary()
        self._hooks = hooks or no_hooks
        if entries is not None:
            if isinstance(entries, Mapping):
                entries = entries.items()
            for key, value in entries:
                self.set(key, value)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[Any],
        map_fn: Optional[Callable[[Any, int], tuple[K, V]]] = None,
    ) -> WeakKeyMap[K, V]:
        """Create a map from an iterable of pairs or of items mapped to pairs."""
        if map_fn is None:
            return cls(iterable)
        return cls(map_fn(item, index) for index, item in enumerate(iterable))

    @classmethod
    def of(cls, *entries: tuple[K, V]) -> WeakKeyMap[K, V]:
        """Create a map from the given pairs."""
        return cls(entries)

    @property
    def hooks(self) -> NormalizationHooks:
        return self._hooks

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __getitem__(self, key: K) -> V:
        key = self._hooks.key(key)
        if key not in self._map:
            raise KeyError(key)
        return self._map[key]

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} at {id(self):#x}>"

    def get(self, key: K, default: Any = Absent) -> Any:
        """Get the value for the given key or the default value."""
        key = self._hooks.key(key)
        try:
            return self._map.get(key, default)
        except TypeError:  # cannot be weakly referenced
            return default

    def has(self, key: Any) -> bool:
        """Check whether there is an entry for the given key."""
        return self._hooks.key(key) in self._map

    def set(self, key: K, value: V) -> WeakKeyMap[K, V]:
        """Insert or overwrite the value for the given key."""
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

        Return True only if there was an entry for every given key.
        """
        if not keys:
            self._map.clear()
            return True
        deleted = [self.delete(key) for key in keys]
        return all(deleted)

    def emplace(
        self,
        key: K,
        insert: Optional[Callable[[K, WeakKeyMap[K, V]], V]] = None,
        update: Optional[Callable[[V, K, WeakKeyMap[K, V]], V]] = None,
    ) -> V:
        """Insert a value for a missing key or update the value of a present key."""
        handler = EmplaceHandler(insert, update)
        handler.check(key)
        hooks = self._hooks
        key = hooks.key(key)
        present = key in self._map
        current = self._map[key] if present else Absent
        value = hooks.value(handler.resolve(present, current, key, self))
        self._map[key] = value
        return value
