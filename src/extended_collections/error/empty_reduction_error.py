from .collection_error import CollectionError

__all__ = ["EmptyReductionError"]


class EmptyReductionError(CollectionError, TypeError):
    """Error raised when reducing an empty container without an initial value."""

    def __init__(self, container_name: str) -> None:
        super().__init__(f"Reduce of empty {container_name} with no initial value.")
