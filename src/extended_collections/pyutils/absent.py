"""The sentinel returned by lookups that find nothing."""

import warnings
from typing import Any, Optional

__all__ = ["Absent", "AbsentType"]


class AbsentType:
    """Type of the ``Absent`` singleton.

    ``Absent`` is returned by lookups such as ``get``, ``find`` or ``at`` when there
    is nothing to return. Since ``None`` can be a stored value, results should be
    tested with ``is Absent``.

    The sentinel is a plain object and not an exception instance, so it can not be
    raised by mistake. It is falsy, equal only to itself, and keeps its identity
    when copied or pickled. Instantiating the type again returns the singleton.
    """

    _instance: Optional["AbsentType"] = None

    def __new__(cls) -> "AbsentType":
        instance = cls._instance
        if instance is None:
            instance = cls._instance = super().__new__(cls)
        else:
            warnings.warn("Redefinition of 'Absent'", RuntimeWarning, stacklevel=2)
        return instance

    def __reduce__(self) -> str:
        # pickled and copied as a reference to the module level singleton
        return "Absent"

    def __repr__(self) -> str:
        return "Absent"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __ne__(self, other: Any) -> bool:
        return self is not other

    def __hash__(self) -> int:
        return hash(AbsentType)


Absent = AbsentType()
