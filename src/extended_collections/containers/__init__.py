"""Extended Containers

The :mod:`extended_collections.containers` package contains the container types
and the structural predicates recognizing maps and sets of any origin.
"""

from .hooks import NormalizationHooks
from .emplace_handler import EmplaceHandler
from .weak_key_map import WeakKeyMap, is_weak_map
from .weak_value_set import WeakValueSet, is_weak_set
from .ordered_map import OrderedMap, is_map
from .ordered_set import OrderedSet, is_set

__all__ = [
    "NormalizationHooks",
    "EmplaceHandler",
    "OrderedMap",
    "OrderedSet",
    "WeakKeyMap",
    "WeakValueSet",
    "is_map",
    "is_set",
    "is_weak_map",
    "is_weak_set",
]
