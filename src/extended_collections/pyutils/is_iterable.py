from collections.abc import Iterable, Mapping
from typing import Any

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard


__all__ = ["is_iterable"]

iterable_types: Any = Iterable
not_iterable_types: Any = (bytes, bytearray, memoryview, Mapping, str)


def is_iterable(value: Any) -> TypeGuard[Iterable]:
    """Check if value is an iterable, but not a string or a mapping."""
    return isinstance(value, iterable_types) and not isinstance(
        value, not_iterable_types
    )
