"""A set that holds its elements weakly."""

from __future__ import annotations

import warnings
from collections.abc import Iterable
from typing import Any, Callable, Generic, Optional, TypeVar
from weakref import WeakSet

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

from .hooks import NormalizationHooks, no_hooks

__all__ = ["WeakValueSet", "is_weak_set"]

T = TypeVar("T")


def is_weak_set(value: Any) -> TypeGuard[Any]:
    """Check if value is a set with weakly referenced elements."""
    return isinstance(value, (WeakValueSet, WeakSet))


def check_set_hooks(hooks: Optional[NormalizationHooks]) -> NormalizationHooks:
    """Return the hooks to be used by a set, warning about an unused key hook."""
    if not hooks:
        return no_hooks
    if hooks.coerce_key is not None:
        warnings.warn(
            "Sets do not have keys, the 'coerce_key' hook will be ignored.",
            RuntimeWarning,
            stacklevel=3,
        )
        return hooks._replace(coerce_key=None)
    return hooks


class WeakValueSet(Generic[T]):
    """A set with weakly referenced elements.

    An element disappears once nothing else references it. Since elements can
    vanish at any time, the set cannot be iterated and has no size.
    """

    _set: WeakSet
    _hooks: NormalizationHooks

    is_weak_set = staticmethod(is_weak_set)

    def __init__(
        self,
        values: Optional[Iterable[T]] = None,
        hooks: Optional[NormalizationHooks] = None,
    ) -> None:
        self._set = WeakSet()
        self._hooks = check_set_hooks(hooks)
        if values is not None:
            for value in values:
                self.add(value)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[Any],
        map_fn: Optional[Callable[[Any, int], T]] = None,
    ) -> WeakValueSet[T]:
        """Create a set from an iterable, optionally mapping every item first."""
        if map_fn is None:
            return cls(iterable)
        return cls(map_fn(item, index) for index, item in enumerate(iterable))

    @classmethod
    def of(cls, *values: T) -> WeakValueSet[T]:
        """Create a set from the given values."""
        return cls(values)

    @property
    def hooks(self) -> NormalizationHooks:
        return self._hooks

    def __contains__(self, value: Any) -> bool:
        return self.has(value)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} at {id(self):#x}>"

    def add(self, value: T) -> WeakValueSet[T]:
        """Add the given value to the set."""
        self._set.add(self._hooks.value(value))
        return self

    def add_all(self, *values: T) -> WeakValueSet[T]:
        """Add all given values to the set."""
        for value in values:
            self.add(value)
        return self

    def has(self, value: Any) -> bool:
        """Check whether the given value is in the set."""
        return self._hooks.value(value) in self._set

    def delete(self, value: T) -> bool:
        """Remove the given value and report whether it was in the set."""
        value = self._hooks.value(value)
        if value not in self._set:
            return False
        self._set.discard(value)
        return True

    def delete_all(self, *values: T) -> bool:
        """Remove all given values or all values if none is given.

        Return True only if every given value was in the set.
        """
        if not values:
            self._set.clear()
            return True
        deleted = [self.delete(value) for value in values]
        return all(deleted)
