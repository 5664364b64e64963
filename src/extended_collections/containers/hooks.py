from __future__ import annotations

from typing import Any, Callable, NamedTuple, Optional

__all__ = ["NormalizationHooks", "no_hooks"]


class NormalizationHooks(NamedTuple):
    """Functions that canonicalize keys and values before they reach the storage.

    The key hook is applied whenever a key is looked up, stored or deleted, the value
    hook whenever a value is stored. Hooks should be idempotent and free of side
    effects. Errors raised by a hook are propagated to the caller unchanged.
    """

    coerce_key: Optional[Callable[[Any], Any]] = None
    coerce_value: Optional[Callable[[Any], Any]] = None

    def key(self, key: Any) -> Any:
        """Return the canonical form of the given key."""
        coerce_key = self.coerce_key
        return key if coerce_key is None else coerce_key(key)

    def value(self, value: Any) -> Any:
        """Return the canonical form of the given value."""
        coerce_value = self.coerce_value
        return value if coerce_value is None else coerce_value(value)


no_hooks = NormalizationHooks()
