from __future__ import annotations

from typing import Any, Callable, NamedTuple, Optional

from ..error import InvalidHandlerError

__all__ = ["EmplaceHandler"]


class EmplaceHandler(NamedTuple):
    """The pair of functions used by ``emplace`` to insert or update an entry.

    ``insert(key, container)`` computes the value for a missing key and
    ``update(value, key, container)`` computes the new value for a present key.
    At least one of them must be given.
    """

    insert: Optional[Callable[..., Any]] = None
    update: Optional[Callable[..., Any]] = None

    def check(self, key: Any) -> None:
        """Make sure that the handler can be used at all."""
        if self.insert is None and self.update is None:
            raise InvalidHandlerError(
                key, "At least one of 'insert' or 'update' must be provided."
            )

    def resolve(self, present: bool, current: Any, key: Any, container: Any) -> Any:
        """Compute the value to be stored under the given (coerced) key."""
        if present and self.update is not None:
            return self.update(current, key, container)
        if self.insert is None:
            raise InvalidHandlerError(
                key, "The key is not present and no 'insert' function was provided."
            )
        return self.insert(key, container)
