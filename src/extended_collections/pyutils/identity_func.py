from typing import Any, TypeVar

__all__ = ["identity_func"]

T = TypeVar("T")


def identity_func(value: T, *_args: Any) -> T:
    """Return the given value, ignoring all further arguments.

    Used as the resolver when no resolver has been given.
    """
    return value
