from typing import Any

from ..pyutils import inspect
from .collection_error import CollectionError

__all__ = ["InvalidHandlerError"]


class InvalidHandlerError(CollectionError, TypeError):
    """Error raised when ``emplace`` cannot use the supplied handler functions."""

    key: Any
    """The key that was passed to ``emplace``"""

    def __init__(self, key: Any, message: str) -> None:
        super().__init__(f"Cannot emplace {inspect(key)}: {message}")
        self.key = key
