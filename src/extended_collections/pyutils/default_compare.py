from typing import Any

__all__ = ["default_compare"]


def default_compare(a: Any, b: Any, *_args: Any) -> int:
    """Compare two values in ascending order.

    Return a negative number if ``a`` sorts before ``b``, a positive number if it
    sorts after it and zero if both are equal. Extra arguments (such as the keys of
    the compared map entries) are ignored.
    """
    return (a > b) - (a < b)
