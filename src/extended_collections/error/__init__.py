"""Collection Errors

The :mod:`extended_collections.error` package contains the exceptions raised when
a container is used against its contract.

Lookups that find nothing are not errors; they return the ``Absent`` sentinel.
"""

from .collection_error import CollectionError
from .invalid_handler_error import InvalidHandlerError
from .empty_reduction_error import EmptyReductionError

__all__ = ["CollectionError", "InvalidHandlerError", "EmptyReductionError"]
