"""Python Utils

This package contains dependency-free Python utility functions used throughout the
containers.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .absent import Absent, AbsentType
from .default_compare import default_compare
from .identity_func import identity_func
from .inspect import inspect
from .is_iterable import is_iterable
from .ref_key import RefKey, ref_key
from .resolve_value import resolve_value

__all__ = [
    "Absent",
    "AbsentType",
    "default_compare",
    "identity_func",
    "inspect",
    "is_iterable",
    "RefKey",
    "ref_key",
    "resolve_value",
]
