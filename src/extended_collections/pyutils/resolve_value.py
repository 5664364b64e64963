from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Union

from .absent import Absent
from .identity_func import identity_func

__all__ = ["resolve_value", "ValueResolver"]

ValueResolver = Union[Callable[[Any], Any], str, int, None]


def resolve_value(resolver: ValueResolver = None) -> Callable[[Any], Any]:
    """Turn a value resolver into a function of one argument.

    The resolver can be a function, which is returned as is, or the name of a field
    (a mapping key, a sequence index or an attribute name). A field resolver falls
    back to the value itself when the field is missing or ``None``. Without a
    resolver, values resolve to themselves.
    """
    if resolver is None:
        return identity_func
    if callable(resolver):
        return resolver
    field = resolver

    def resolve_field(value: Any) -> Any:
        if isinstance(value, Mapping):
            resolved = value.get(field, Absent)
        elif (
            isinstance(field, int)
            and isinstance(value, Sequence)
            and not isinstance(value, str)
        ):
            resolved = value[field] if -len(value) <= field < len(value) else Absent
        elif isinstance(field, str):
            resolved = getattr(value, field, Absent)
        else:
            resolved = Absent
        return value if resolved is None or resolved is Absent else resolved

    return resolve_field
