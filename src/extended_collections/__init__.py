"""Extended Collections

Insertion-ordered maps and sets, and weakly referencing maps and sets, that extend
the built-in Python containers with insert-or-update (``emplace``), bulk mutation,
functional transforms, set algebra, positional access and random sampling.

The public API is re-exported here:

- :class:`OrderedMap`, :class:`OrderedSet`
- :class:`WeakKeyMap`, :class:`WeakValueSet`
- :class:`NormalizationHooks`, :class:`EmplaceHandler`
- the predicates :func:`is_map`, :func:`is_set`, :func:`is_weak_map` and
  :func:`is_weak_set`
- the errors :class:`CollectionError`, :class:`InvalidHandlerError` and
  :class:`EmptyReductionError`
- the :data:`Absent` sentinel returned by lookups that find nothing
"""

# The extended-collections version info

from .version import version, version_info

# Errors

from .error import CollectionError, EmptyReductionError, InvalidHandlerError

# Sentinel for results that were not found

from .pyutils import Absent, AbsentType

# Containers

from .containers import (
    EmplaceHandler,
    NormalizationHooks,
    OrderedMap,
    OrderedSet,
    WeakKeyMap,
    WeakValueSet,
    is_map,
    is_set,
    is_weak_map,
    is_weak_set,
)

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "CollectionError",
    "EmptyReductionError",
    "InvalidHandlerError",
    "Absent",
    "AbsentType",
    "EmplaceHandler",
    "NormalizationHooks",
    "OrderedMap",
    "OrderedSet",
    "WeakKeyMap",
    "WeakValueSet",
    "is_map",
    "is_set",
    "is_weak_map",
    "is_weak_set",
]
