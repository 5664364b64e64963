"""Identity keys for values that cannot be hashed."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

__all__ = ["RefKey", "ref_key"]


class RefKey:
    """Wrapper that makes any object usable as a dictionary key.

    Two wrappers are equal only if they wrap the very same object.
    """

    __slots__ = ("value",)

    value: Any

    def __init__(self, value: Any) -> None:
        self.value = value

    def __hash__(self) -> int:
        return id(self.value)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, RefKey) and other.value is self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


def ref_key(value: Any) -> Any:
    """Return a dictionary key for the given value.

    Hashable values are their own key, so equal values share a key. Other values
    (such as lists or dicts) are wrapped so that they are keyed by identity.
    """
    if isinstance(value, Hashable):
        try:
            hash(value)
        except TypeError:  # e.g. a tuple containing a list
            return RefKey(value)
        return value
    return RefKey(value)
