__all__ = ["CollectionError"]


class CollectionError(Exception):
    """Collection Error

    Base class of all errors raised by the extended containers themselves.

    Errors raised by user supplied callbacks or normalization hooks are never
    wrapped and reach the caller unchanged.
    """

    message: str
    """A message describing the error for debugging purposes"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __str__(self) -> str:
        return self.message
